from collections import OrderedDict

import numpy as np
import pytest

from unitcheck.core.values import ValueKind, classify, describe, is_number, is_record, is_sequence


@pytest.mark.parametrize(
    "value, kind",
    [
        (None, ValueKind.MISSING),
        (True, ValueKind.BOOLEAN),
        (np.bool_(False), ValueKind.BOOLEAN),
        (3, ValueKind.NUMBER),
        (2.5, ValueKind.NUMBER),
        (np.float32(1.5), ValueKind.NUMBER),
        ("ACGT", ValueKind.TEXT),
        ([1, 2], ValueKind.SEQUENCE),
        ((1, 2), ValueKind.SEQUENCE),
        (np.zeros((1, 2)), ValueKind.ARRAY),
        ({"x": 1.0, "y": 2.0}, ValueKind.RECORD),
        (OrderedDict(x=1), ValueKind.RECORD),
        (object(), ValueKind.OTHER),
    ],
)
def test_classify_assigns_exactly_one_kind(value, kind) -> None:
    assert classify(value) is kind


def test_capability_queries() -> None:
    assert is_number(1.0)
    assert not is_number(True)
    assert is_sequence([1]) and is_sequence(np.arange(2))
    assert not is_sequence("text")
    assert is_record({"x": 1})


def test_describe_truncates_long_values() -> None:
    text = describe(list(range(200)))
    assert text.endswith("...")
    assert len(text) == 120
    assert "shape=(3,)" in describe(np.arange(3))
