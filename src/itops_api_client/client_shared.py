"""Shared helpers for sync/async client bootstrap."""

from __future__ import annotations

from .config import InvokerConfig
from .core.errors import InvalidArgumentError
from .core.session import SessionContext

WEM_DEFAULT_BASE_URL = "https://api.wem.cloud.com"
MIJNHOST_DEFAULT_BASE_URL = "https://mijn.host/api/v2"


def validate_client_config(config: InvokerConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise InvalidArgumentError(str(exc)) from exc


def validate_session(session: SessionContext) -> None:
    try:
        session.validate()
    except ValueError as exc:
        raise InvalidArgumentError(str(exc)) from exc


__all__ = [
    "WEM_DEFAULT_BASE_URL",
    "MIJNHOST_DEFAULT_BASE_URL",
    "validate_client_config",
    "validate_session",
]
