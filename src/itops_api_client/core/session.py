"""Explicit connection context passed into each invocation."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit

from .models import NO_BODY, HttpMethod, RequestDescriptor


def is_absolute_http_url(value: str) -> bool:
    parts = urlsplit(value)
    return parts.scheme in {"http", "https"} and bool(parts.netloc)


def join_url(base_url: str, path: str) -> str:
    if not path:
        return base_url.rstrip("/")
    return base_url.rstrip("/") + "/" + path.lstrip("/")


@dataclass(slots=True, frozen=True)
class SessionContext:
    """Base URL and credentials established by an external connect step.

    The context is read-only; invocations never mutate it, so one instance
    can be shared by concurrent callers.
    """

    base_url: str
    credential: str
    customer_id: str | None = None

    def validate(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if not is_absolute_http_url(self.base_url):
            raise ValueError("base_url must be an absolute http(s) URL")
        if not self.credential:
            raise ValueError("credential must not be empty")

    def build_target(self, path: str) -> str:
        return join_url(self.base_url, path)

    def describe(
        self,
        method: HttpMethod | str,
        path: str,
        *,
        body: object = NO_BODY,
        credential: str | None = None,
    ) -> RequestDescriptor:
        return RequestDescriptor(
            method=method,
            target=self.build_target(path),
            credential=credential if credential is not None else self.credential,
            body=body,
        )

    def __repr__(self) -> str:
        return (
            f"SessionContext(base_url={self.base_url!r}, credential='***', "
            f"customer_id={self.customer_id!r})"
        )


__all__ = [
    "SessionContext",
    "is_absolute_http_url",
    "join_url",
]
