from __future__ import annotations

import pytest

from itops_api_client.core.models import NO_BODY, HttpMethod
from itops_api_client.core.session import SessionContext, join_url


@pytest.mark.parametrize(
    ("base_url", "path", "expected"),
    [
        ("https://api.test/v1", "users", "https://api.test/v1/users"),
        ("https://api.test/v1/", "/users", "https://api.test/v1/users"),
        ("https://api.test/v1//", "//users/1", "https://api.test/v1/users/1"),
        ("https://api.test/v1/", "", "https://api.test/v1"),
    ],
)
def test_join_url_uses_single_separator(base_url, path, expected):
    assert join_url(base_url, path) == expected


@pytest.mark.parametrize(
    ("base_url", "credential"),
    [
        ("", "k"),
        ("api.test/v1", "k"),
        ("ftp://api.test", "k"),
        ("https://api.test", ""),
    ],
)
def test_session_validate_rejects_bad_values(base_url, credential):
    with pytest.raises(ValueError):
        SessionContext(base_url=base_url, credential=credential).validate()


def test_describe_defaults_credential_from_session():
    session = SessionContext(base_url="https://api.test", credential="session-key")
    descriptor = session.describe(HttpMethod.GET, "domains")
    assert descriptor.target == "https://api.test/domains"
    assert descriptor.credential == "session-key"
    assert descriptor.body is NO_BODY


def test_describe_allows_credential_override_and_body():
    session = SessionContext(base_url="https://api.test", credential="session-key")
    descriptor = session.describe("POST", "domains", body={"a": 1}, credential="other")
    assert descriptor.credential == "other"
    assert descriptor.body == {"a": 1}


def test_session_repr_hides_credential():
    session = SessionContext(base_url="https://api.test", credential="session-key")
    assert "session-key" not in repr(session)
