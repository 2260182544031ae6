"""Public package exports for the IT operations REST API client."""

from .async_client import AsyncApiClient, AsyncMijnHostClient, AsyncWemClient
from .client import ApiClient, MijnHostClient, WemClient
from .config import InvokerConfig, TransportConfig
from .core.async_invoker import AsyncApiRequestInvoker
from .core.errors import (
    ApiInvokerError,
    EnvelopeStatusError,
    ErrorCategory,
    HttpStatusError,
    InvalidArgumentError,
    InvokerClosedError,
    MalformedResponseError,
    TransportFailureError,
)
from .core.invoker import ApiRequestInvoker
from .core.models import NO_BODY, Failure, HttpMethod, RequestDescriptor, Success
from .core.session import SessionContext
from .profiles import MIJNHOST_PROFILE, WEM_PROFILE, ApiProfile

__all__ = [
    "ApiClient",
    "WemClient",
    "MijnHostClient",
    "AsyncApiClient",
    "AsyncWemClient",
    "AsyncMijnHostClient",
    "ApiRequestInvoker",
    "AsyncApiRequestInvoker",
    "InvokerConfig",
    "TransportConfig",
    "SessionContext",
    "RequestDescriptor",
    "HttpMethod",
    "NO_BODY",
    "Success",
    "Failure",
    "ApiProfile",
    "WEM_PROFILE",
    "MIJNHOST_PROFILE",
    "ErrorCategory",
    "ApiInvokerError",
    "InvalidArgumentError",
    "InvokerClosedError",
    "TransportFailureError",
    "HttpStatusError",
    "MalformedResponseError",
    "EnvelopeStatusError",
]
