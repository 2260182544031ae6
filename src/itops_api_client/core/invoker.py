"""Synchronous request invoker: one HTTP call per descriptor, classified outcome."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Protocol

import httpx

from ..config import InvokerConfig
from .errors import ApiInvokerError, InvokerClosedError, TransportFailureError
from .invoker_shared import (
    build_client_kwargs,
    evaluate_response,
    log_request_start,
    prepare_request,
)
from .models import Failure, InvocationResult, RequestDescriptor, Success
from .session import SessionContext

if TYPE_CHECKING:
    from ..profiles import ApiProfile

logger = logging.getLogger("itops_api_client")


class SyncHttpClient(Protocol):
    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        content: bytes | None = None,
    ) -> object: ...

    def close(self) -> None: ...


class ApiRequestInvoker:
    """Synchronous invoker for one target API profile.

    ``invoke`` never raises for a per-call failure: every call returns either
    ``Success`` or ``Failure`` so that batch callers can keep going.
    """

    def __init__(
        self,
        profile: "ApiProfile",
        config: InvokerConfig | None = None,
        *,
        client: SyncHttpClient | None = None,
    ) -> None:
        self._profile = profile
        self._config = config or InvokerConfig()
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.Client(**build_client_kwargs(self._config))

    @property
    def profile(self) -> "ApiProfile":
        return self._profile

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client:
            self._client.close()

    def invoke(
        self,
        descriptor: RequestDescriptor,
        *,
        session: SessionContext | None = None,
    ) -> InvocationResult:
        if self._closed:
            raise InvokerClosedError("invoker is already closed")

        try:
            prepared = prepare_request(
                descriptor,
                profile=self._profile,
                config=self._config,
                session=session,
            )
        except ApiInvokerError as exc:
            logger.error("request rejected api=%s error=%s", self._profile.name, exc)
            return Failure(exc)

        log_request_start(prepared, profile=self._profile, config=self._config)
        try:
            response = self._client.request(
                prepared.method.value,
                prepared.url,
                headers=prepared.headers,
                content=prepared.content,
            )
        except Exception as exc:
            logger.error(
                "request transport failure api=%s method=%s target=%s error=%s",
                self._profile.name,
                prepared.method.value,
                prepared.url,
                exc.__class__.__name__,
            )
            error = TransportFailureError(
                f"Unknown Error: no response from {prepared.url} ({exc.__class__.__name__}: {exc})",
                cause="network",
            )
            error.__cause__ = exc
            return Failure(error)

        http_status = getattr(response, "status_code", None)
        logger.debug(
            "response received api=%s target=%s http_status=%s",
            self._profile.name,
            prepared.url,
            http_status,
        )
        try:
            payload = evaluate_response(response, profile=self._profile)
        except ApiInvokerError as exc:
            logger.error(
                "request failed api=%s method=%s target=%s http_status=%s category=%s",
                self._profile.name,
                prepared.method.value,
                prepared.url,
                http_status,
                exc.category.value,
            )
            return Failure(exc)

        logger.info(
            "request success api=%s method=%s target=%s",
            self._profile.name,
            prepared.method.value,
            prepared.url,
        )
        return Success(payload)

    def invoke_all(
        self,
        descriptors: Iterable[RequestDescriptor],
        *,
        session: SessionContext | None = None,
    ) -> list[InvocationResult]:
        """Invoke each descriptor in order; a failure does not stop the batch."""

        return [self.invoke(descriptor, session=session) for descriptor in descriptors]


__all__ = [
    "SyncHttpClient",
    "ApiRequestInvoker",
]
