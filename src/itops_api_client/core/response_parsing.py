"""Shared response parsing helpers for sync/async invokers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

from .errors import (
    ErrorCategory,
    EnvelopeStatusError,
    HttpStatusError,
    MalformedResponseError,
    classify_http_status,
    format_error_message,
)
from .models import Envelope, ResponseShape


class JsonPayloadResponse(Protocol):
    status_code: int
    reason_phrase: str
    content: bytes

    def json(self) -> object: ...


def parse_json_payload(
    response: JsonPayloadResponse,
    *,
    http_status: int | None,
) -> object:
    """Parse the response body; an empty body is ``None``, not an error."""

    if not response.content:
        return None
    try:
        return response.json()
    except ValueError as exc:
        raise MalformedResponseError(
            "response body is not valid JSON",
            http_status=http_status,
            cause="json_decode",
        ) from exc


def _is_empty(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, (Mapping, list, tuple, str)):
        return len(value) == 0
    return False


def unwrap_payload(
    payload: object,
    *,
    shape: ResponseShape,
    http_status: int | None,
) -> object:
    """Turn a parsed body into the caller's payload per response shape."""

    if shape is ResponseShape.BARE:
        return payload

    if payload is None:
        raise MalformedResponseError(
            "response body is empty; expected an envelope",
            http_status=http_status,
        )
    envelope = Envelope.from_payload(payload, http_status=http_status)
    if envelope.status != 200:
        raise EnvelopeStatusError(
            f"Unexpected response format: status={envelope.status} "
            f"description={envelope.status_description!r} response={payload!r}",
            status=envelope.status,
            response=payload,
            http_status=http_status,
            status_description=envelope.status_description,
        )
    if _is_empty(envelope.data):
        return None
    return envelope.data


def describe_error_body(response: JsonPayloadResponse) -> str | None:
    """Server-supplied status description, falling back to the reason phrase."""

    if response.content:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, Mapping):
            for key in ("status_description", "message", "Message", "detail"):
                value = body.get(key)
                if value:
                    return str(value)
    reason = getattr(response, "reason_phrase", None)
    return str(reason) if reason else None


def build_http_error(
    response: JsonPayloadResponse,
    *,
    hints: Mapping[ErrorCategory, str] | None = None,
) -> HttpStatusError:
    http_status = response.status_code
    category = classify_http_status(http_status)
    hint = hints.get(category) if hints else None
    description = describe_error_body(response)
    return HttpStatusError(
        format_error_message(
            category,
            http_status=http_status,
            status_description=description,
            hint=hint,
        ),
        category=category,
        http_status=http_status,
        status_description=description,
        cause="http_status",
    )


__all__ = [
    "JsonPayloadResponse",
    "parse_json_payload",
    "unwrap_payload",
    "describe_error_body",
    "build_http_error",
]
