"""Core request/response models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

from .errors import ApiInvokerError, InvalidArgumentError, MalformedResponseError

T = TypeVar("T")


class _NoBody:
    __slots__ = ()

    def __repr__(self) -> str:
        return "NO_BODY"

    def __bool__(self) -> bool:
        return False


NO_BODY = _NoBody()


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"

    @classmethod
    def parse(cls, value: "HttpMethod | str") -> "HttpMethod":
        if isinstance(value, HttpMethod):
            return value
        if not isinstance(value, str):
            raise InvalidArgumentError(f"unsupported HTTP method: {value!r}")
        try:
            return cls(value.strip().upper())
        except ValueError as exc:
            raise InvalidArgumentError(f"unsupported HTTP method: {value!r}") from exc


class ResponseShape(str, Enum):
    BARE = "bare"
    ENVELOPED = "enveloped"


@dataclass(slots=True, frozen=True)
class RequestDescriptor:
    """One logical API call. Built fresh per call and never persisted."""

    method: HttpMethod | str
    target: str
    credential: str
    body: object = NO_BODY

    @property
    def has_body(self) -> bool:
        return self.body is not NO_BODY

    def __repr__(self) -> str:
        return (
            f"RequestDescriptor(method={self.method!r}, target={self.target!r}, "
            f"credential='***', has_body={self.has_body})"
        )


def _to_int(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text.isdigit():
            return int(text)
    return None


@dataclass(slots=True, frozen=True)
class Envelope:
    status: int
    status_description: str | None
    data: object

    @classmethod
    def from_payload(
        cls,
        payload: object,
        *,
        http_status: int | None = None,
    ) -> "Envelope":
        if not isinstance(payload, Mapping):
            raise MalformedResponseError(
                "response envelope must be a JSON object",
                http_status=http_status,
            )
        if "status" not in payload:
            raise MalformedResponseError(
                "response envelope is missing 'status'",
                http_status=http_status,
            )
        status = _to_int(payload.get("status"))
        if status is None:
            raise MalformedResponseError(
                f"response envelope 'status' is not an integer: {payload.get('status')!r}",
                http_status=http_status,
            )
        description = payload.get("status_description")
        return cls(
            status=status,
            status_description=str(description) if description is not None else None,
            data=payload.get("data"),
        )


@dataclass(slots=True, frozen=True)
class Success(Generic[T]):
    value: T | None

    @property
    def ok(self) -> bool:
        return True

    @property
    def error(self) -> None:
        return None

    def unwrap(self) -> T | None:
        return self.value


@dataclass(slots=True, frozen=True)
class Failure:
    error: ApiInvokerError

    @property
    def ok(self) -> bool:
        return False

    @property
    def value(self) -> None:
        return None

    def unwrap(self) -> None:
        raise self.error


InvocationResult = Union[Success[object], Failure]


__all__ = [
    "NO_BODY",
    "HttpMethod",
    "ResponseShape",
    "RequestDescriptor",
    "Envelope",
    "Success",
    "Failure",
    "InvocationResult",
]
