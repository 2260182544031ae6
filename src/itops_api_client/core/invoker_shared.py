"""Shared helpers for sync/async invoker implementations."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import httpx

from ..config import InvokerConfig
from .errors import InvalidArgumentError
from .models import HttpMethod, RequestDescriptor
from .response_parsing import (
    JsonPayloadResponse,
    build_http_error,
    parse_json_payload,
    unwrap_payload,
)
from .serialization import encode_body
from .session import SessionContext, is_absolute_http_url

if TYPE_CHECKING:
    from ..profiles import ApiProfile

logger = logging.getLogger("itops_api_client")


@dataclass(slots=True, frozen=True)
class PreparedRequest:
    method: HttpMethod
    url: str
    headers: Mapping[str, str]
    content: bytes | None


def _is_header_safe(value: str) -> bool:
    return value.isascii() and value.isprintable()


def build_client_kwargs(config: InvokerConfig) -> dict[str, Any]:
    kwargs: dict[str, Any] = {}
    if config.transport.timeout_seconds is not None:
        kwargs["timeout"] = httpx.Timeout(config.transport.timeout_seconds)
    return kwargs


def prepare_request(
    descriptor: RequestDescriptor,
    *,
    profile: "ApiProfile",
    config: InvokerConfig,
    session: SessionContext | None,
) -> PreparedRequest:
    """Validate a descriptor and build the wire request; no network access."""

    method = HttpMethod.parse(descriptor.method)
    if not isinstance(descriptor.credential, str) or not descriptor.credential.strip():
        raise InvalidArgumentError("credential must not be empty")
    if not _is_header_safe(descriptor.credential):
        raise InvalidArgumentError("credential must be printable ASCII without line breaks")
    if session is not None and session.customer_id and not _is_header_safe(session.customer_id):
        raise InvalidArgumentError("customer_id must be printable ASCII without line breaks")
    if not isinstance(descriptor.target, str) or not is_absolute_http_url(descriptor.target):
        raise InvalidArgumentError(f"target must be an absolute http(s) URL: {descriptor.target!r}")

    headers = profile.build_headers(
        descriptor.credential,
        user_agent=config.user_agent,
        session=session,
    )
    content = None
    if descriptor.has_body:
        content = encode_body(descriptor.body, max_depth=profile.max_body_depth)
    return PreparedRequest(method=method, url=descriptor.target, headers=headers, content=content)


def log_request_start(
    prepared: PreparedRequest,
    *,
    profile: "ApiProfile",
    config: InvokerConfig,
) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return
    headers = prepared.headers if config.log_credentials else profile.redact_headers(prepared.headers)
    logger.debug(
        "request start api=%s method=%s target=%s headers=%s body_bytes=%s",
        profile.name,
        prepared.method.value,
        prepared.url,
        headers,
        len(prepared.content) if prepared.content is not None else None,
    )


def evaluate_response(
    response: JsonPayloadResponse,
    *,
    profile: "ApiProfile",
) -> object:
    """Map a received response to the caller payload or raise a classified error."""

    http_status = response.status_code
    if not 200 <= http_status < 300:
        raise build_http_error(response, hints=profile.hints)
    payload = parse_json_payload(response, http_status=http_status)
    return unwrap_payload(payload, shape=profile.shape, http_status=http_status)


__all__ = [
    "PreparedRequest",
    "build_client_kwargs",
    "prepare_request",
    "log_request_start",
    "evaluate_response",
]
