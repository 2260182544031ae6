"""Public client entrypoint."""

from __future__ import annotations

from collections.abc import Iterable
from types import TracebackType

from .client_shared import (
    MIJNHOST_DEFAULT_BASE_URL,
    WEM_DEFAULT_BASE_URL,
    validate_client_config,
    validate_session,
)
from .config import InvokerConfig
from .core.errors import InvalidArgumentError, InvokerClosedError
from .core.invoker import ApiRequestInvoker
from .core.models import NO_BODY, HttpMethod, InvocationResult, RequestDescriptor
from .core.session import SessionContext
from .profiles import MIJNHOST_PROFILE, WEM_PROFILE, ApiProfile


class ApiClient:
    """Binds a session context to a request invoker for one target API."""

    def __init__(
        self,
        session: SessionContext,
        profile: ApiProfile,
        *,
        config: InvokerConfig | None = None,
        invoker: ApiRequestInvoker | None = None,
    ) -> None:
        self._config = config or InvokerConfig()
        validate_client_config(self._config)
        validate_session(session)
        if invoker is not None and invoker.profile is not profile:
            raise InvalidArgumentError(
                f"invoker profile {invoker.profile.name!r} does not match {profile.name!r}"
            )

        self.session = session
        self._invoker = invoker or ApiRequestInvoker(profile, self._config)
        self._closed = False

    def _ensure_open(self) -> None:
        if self._closed:
            raise InvokerClosedError(f"{type(self).__name__} is already closed")

    def request(
        self,
        method: HttpMethod | str,
        path: str,
        *,
        body: object = NO_BODY,
        credential: str | None = None,
    ) -> InvocationResult:
        self._ensure_open()
        descriptor = self.session.describe(method, path, body=body, credential=credential)
        return self._invoker.invoke(descriptor, session=self.session)

    def request_all(self, descriptors: Iterable[RequestDescriptor]) -> list[InvocationResult]:
        self._ensure_open()
        return self._invoker.invoke_all(descriptors, session=self.session)

    def get(self, path: str) -> InvocationResult:
        return self.request(HttpMethod.GET, path)

    def post(self, path: str, body: object = NO_BODY) -> InvocationResult:
        return self.request(HttpMethod.POST, path, body=body)

    def put(self, path: str, body: object = NO_BODY) -> InvocationResult:
        return self.request(HttpMethod.PUT, path, body=body)

    def patch(self, path: str, body: object = NO_BODY) -> InvocationResult:
        return self.request(HttpMethod.PATCH, path, body=body)

    def delete(self, path: str, body: object = NO_BODY) -> InvocationResult:
        return self.request(HttpMethod.DELETE, path, body=body)

    def close(self) -> None:
        if self._closed:
            return
        self._invoker.close()
        self._closed = True

    def __enter__(self) -> "ApiClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


class WemClient(ApiClient):
    """Citrix WEM REST client (bare JSON responses, bearer token auth)."""

    def __init__(
        self,
        bearer_token: str,
        *,
        customer_id: str | None = None,
        base_url: str = WEM_DEFAULT_BASE_URL,
        config: InvokerConfig | None = None,
        invoker: ApiRequestInvoker | None = None,
    ) -> None:
        super().__init__(
            SessionContext(base_url=base_url, credential=bearer_token, customer_id=customer_id),
            WEM_PROFILE,
            config=config,
            invoker=invoker,
        )


class MijnHostClient(ApiClient):
    """mijn.host REST client (enveloped responses, API key auth)."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = MIJNHOST_DEFAULT_BASE_URL,
        config: InvokerConfig | None = None,
        invoker: ApiRequestInvoker | None = None,
    ) -> None:
        super().__init__(
            SessionContext(base_url=base_url, credential=api_key),
            MIJNHOST_PROFILE,
            config=config,
            invoker=invoker,
        )


__all__ = [
    "ApiClient",
    "WemClient",
    "MijnHostClient",
]
