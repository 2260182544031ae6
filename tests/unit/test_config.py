from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from itops_api_client.config import InvokerConfig, TransportConfig


def test_config_validate_rejects_empty_user_agent():
    cfg = InvokerConfig(user_agent="")
    with pytest.raises(ValueError):
        cfg.validate()


def test_config_is_immutable():
    cfg = InvokerConfig()
    with pytest.raises(FrozenInstanceError):
        cfg.user_agent = "other"


def test_config_defaults_keep_credentials_out_of_logs():
    cfg = InvokerConfig()
    assert cfg.log_credentials is False
    assert cfg.transport.timeout_seconds is None


@pytest.mark.parametrize("timeout", [0.0, -1.0])
def test_config_validate_rejects_non_positive_timeout(timeout):
    cfg = InvokerConfig(transport=TransportConfig(timeout_seconds=timeout))
    with pytest.raises(ValueError, match="transport.timeout_seconds must be > 0"):
        cfg.validate()


def test_config_validate_rejects_non_bool_log_credentials():
    cfg = InvokerConfig(log_credentials="yes")  # type: ignore[arg-type]
    with pytest.raises(ValueError, match="log_credentials must be bool"):
        cfg.validate()
