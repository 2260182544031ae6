from __future__ import annotations

import json
import threading
from collections.abc import Callable, Sequence
from http import HTTPStatus

from itops_api_client.config import InvokerConfig
from itops_api_client.core.session import SessionContext

_EMPTY = object()


def _phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ""


class Response:
    def __init__(
        self,
        status_code: int,
        payload: object = _EMPTY,
        *,
        text: str | None = None,
        reason_phrase: str | None = None,
    ):
        self.status_code = status_code
        self.reason_phrase = _phrase(status_code) if reason_phrase is None else reason_phrase
        if text is not None:
            self.content = text.encode("utf-8")
        elif payload is _EMPTY:
            self.content = b""
        else:
            self.content = json.dumps(payload).encode("utf-8")

    def json(self) -> object:
        return json.loads(self.content)


Step = Response | Exception


class RecordedCall:
    def __init__(self, method: str, url: str, headers: dict[str, str], content: bytes | None):
        self.method = method
        self.url = url
        self.headers = headers
        self.content = content

    def body(self) -> object:
        return json.loads(self.content) if self.content is not None else None


class SyncSequencedClient:
    def __init__(self, steps: Sequence[Step]):
        self.steps = list(steps)
        self.calls: list[RecordedCall] = []
        self.closed = False

    def request(self, method, url, *, headers, content=None):
        self.calls.append(RecordedCall(method, url, dict(headers), content))
        step = self.steps.pop(0)
        if isinstance(step, Exception):
            raise step
        return step

    def close(self):
        self.closed = True


class AsyncSequencedClient:
    def __init__(self, steps: Sequence[Step]):
        self.steps = list(steps)
        self.calls: list[RecordedCall] = []
        self.closed = False

    async def request(self, method, url, *, headers, content=None):
        self.calls.append(RecordedCall(method, url, dict(headers), content))
        step = self.steps.pop(0)
        if isinstance(step, Exception):
            raise step
        return step

    async def aclose(self):
        self.closed = True


def echo_response(method: str, url: str, content: bytes | None) -> Response:
    return Response(
        200,
        {
            "method": method,
            "url": url,
            "body": json.loads(content) if content is not None else None,
        },
    )


class SyncEchoClient:
    """Answers every request with its own method, URL and decoded body."""

    def __init__(self, responder: Callable[[str, str, bytes | None], Response] = echo_response):
        self._responder = responder
        self._lock = threading.Lock()
        self.calls = 0

    def request(self, method, url, *, headers, content=None):
        with self._lock:
            self.calls += 1
        return self._responder(method, url, content)

    def close(self):
        return None


class AsyncEchoClient:
    def __init__(self, responder: Callable[[str, str, bytes | None], Response] = echo_response):
        self._responder = responder
        self.calls = 0

    async def request(self, method, url, *, headers, content=None):
        self.calls += 1
        return self._responder(method, url, content)

    async def aclose(self):
        return None


def build_config(*, log_credentials: bool = False) -> InvokerConfig:
    cfg = InvokerConfig(user_agent="itops-api-client-tests/1.0", log_credentials=log_credentials)
    cfg.validate()
    return cfg


def build_session(
    *,
    base_url: str = "https://api.example.test/v1",
    credential: str = "secret-token",
    customer_id: str | None = None,
) -> SessionContext:
    session = SessionContext(base_url=base_url, credential=credential, customer_id=customer_id)
    session.validate()
    return session
