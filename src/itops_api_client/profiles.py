"""Per-API request profiles: credential header, response shape, hints."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from .core.errors import ErrorCategory
from .core.models import ResponseShape
from .core.session import SessionContext

CredentialHeaders = Callable[[str, "SessionContext | None"], Mapping[str, str]]


def _wem_credential_headers(
    credential: str,
    session: SessionContext | None,
) -> Mapping[str, str]:
    headers = {"Authorization": f"CwsAuth Bearer={credential}"}
    if session is not None and session.customer_id:
        headers["Citrix-CustomerId"] = session.customer_id
    return headers


def _api_key_headers(
    credential: str,
    session: SessionContext | None,
) -> Mapping[str, str]:
    return {"API-Key": credential}


@dataclass(slots=True, frozen=True)
class ApiProfile:
    """How requests to one target API are built and how its responses read."""

    name: str
    shape: ResponseShape
    max_body_depth: int
    credential_headers: CredentialHeaders
    secret_headers: frozenset[str]
    hints: Mapping[ErrorCategory, str] = field(default_factory=dict)

    def build_headers(
        self,
        credential: str,
        *,
        user_agent: str,
        session: SessionContext | None = None,
    ) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": user_agent,
        }
        headers.update(self.credential_headers(credential, session))
        return headers

    def redact_headers(self, headers: Mapping[str, str]) -> dict[str, str]:
        secret = {name.lower() for name in self.secret_headers}
        return {
            name: "***" if name.lower() in secret else value
            for name, value in headers.items()
        }


WEM_PROFILE = ApiProfile(
    name="wem",
    shape=ResponseShape.BARE,
    max_body_depth=10,
    credential_headers=_wem_credential_headers,
    secret_headers=frozenset({"Authorization"}),
    hints={
        ErrorCategory.UNAUTHORIZED: "Ensure your bearer token is valid and not expired",
        ErrorCategory.FORBIDDEN: "Ensure the account has WEM administrator rights",
        ErrorCategory.NOT_FOUND: "Ensure the resource id and customer id are correct",
    },
)

MIJNHOST_PROFILE = ApiProfile(
    name="mijnhost",
    shape=ResponseShape.ENVELOPED,
    max_body_depth=5,
    credential_headers=_api_key_headers,
    secret_headers=frozenset({"API-Key"}),
    hints={
        ErrorCategory.UNAUTHORIZED: "Ensure your API-Key is correct",
        ErrorCategory.RATE_LIMITED: "Too many requests; slow down and retry later",
    },
)


__all__ = [
    "ApiProfile",
    "WEM_PROFILE",
    "MIJNHOST_PROFILE",
]
