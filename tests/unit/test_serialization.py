from __future__ import annotations

import json

import pytest

from itops_api_client.core.errors import InvalidArgumentError
from itops_api_client.core.serialization import encode_body, measure_depth


def _nested(depth: int) -> object:
    value: object = "leaf"
    for index in range(depth):
        value = {f"level{index}": value} if index % 2 == 0 else [value]
    return value


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("x", 0),
        (1, 0),
        ({}, 1),
        ([], 1),
        ({"a": [1, 2]}, 2),
        ({"a": {"b": {"c": 1}}, "d": 1}, 3),
    ],
)
def test_measure_depth(value, expected):
    assert measure_depth(value) == expected


def test_encode_body_at_max_depth_is_lossless():
    body = _nested(10)
    encoded = encode_body(body, max_depth=10)
    assert json.loads(encoded) == body


def test_encode_body_rejects_excess_depth():
    with pytest.raises(InvalidArgumentError, match="exceeds the maximum depth of 5"):
        encode_body(_nested(6), max_depth=5)


def test_encode_body_rejects_unserializable_value():
    with pytest.raises(InvalidArgumentError):
        encode_body({"when": object()}, max_depth=5)


def test_encode_body_keeps_empty_and_unicode_values():
    assert encode_body({}, max_depth=5) == b"{}"
    assert json.loads(encode_body({"name": "Zoë"}, max_depth=5)) == {"name": "Zoë"}


def test_measure_depth_stops_past_limit_on_very_deep_values():
    assert measure_depth(_nested(5000), limit=10) == 11


def test_measure_depth_accepts_shared_but_acyclic_containers():
    shared = {"leaf": 1}
    assert measure_depth({"a": shared, "b": [shared]}) == 3


def test_encode_body_rejects_self_referencing_body():
    body: dict[str, object] = {}
    body["self"] = body
    with pytest.raises(InvalidArgumentError, match="reference to itself"):
        encode_body(body, max_depth=10)
