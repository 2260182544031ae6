"""Invoker configuration."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings.

    ``timeout_seconds=None`` keeps the HTTP library's default timeout.
    """

    timeout_seconds: float | None = None

    def validate(self) -> None:
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ValueError("transport.timeout_seconds must be > 0")


@dataclass(slots=True, frozen=True)
class InvokerConfig:
    """Runtime configuration for request invokers."""

    user_agent: str = "itops-api-client/0.1.0"
    log_credentials: bool = False

    transport: TransportConfig = field(default_factory=TransportConfig)

    def validate(self) -> None:
        if not self.user_agent:
            raise ValueError("user_agent must not be empty")
        if not isinstance(self.log_credentials, bool):
            raise ValueError("log_credentials must be bool")
        self.transport.validate()


__all__ = [
    "TransportConfig",
    "InvokerConfig",
]
