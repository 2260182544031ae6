from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def session():
    from tests.shared.transport import build_session

    return build_session(customer_id="cust-1")


@pytest.fixture
def config():
    from tests.shared.transport import build_config

    return build_config()
