"""Closed set of value kinds used to dispatch comparisons and conversions."""
from __future__ import annotations

import enum
import numbers
from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np


class ValueKind(enum.Enum):
    """Every value handled by unitcheck falls in exactly one kind."""

    MISSING = "missing"
    BOOLEAN = "boolean"
    NUMBER = "number"
    TEXT = "text"
    SEQUENCE = "sequence"
    ARRAY = "array"
    RECORD = "record"
    OTHER = "other"


def classify(value: Any) -> ValueKind:
    if value is None:
        return ValueKind.MISSING
    # bool is a numbers.Number subclass, test it first
    if isinstance(value, (bool, np.bool_)):
        return ValueKind.BOOLEAN
    if isinstance(value, numbers.Number):
        return ValueKind.NUMBER
    if isinstance(value, (str, bytes)):
        return ValueKind.TEXT
    if isinstance(value, np.ndarray):
        return ValueKind.ARRAY
    if isinstance(value, Mapping):
        return ValueKind.RECORD
    if isinstance(value, Sequence):
        return ValueKind.SEQUENCE
    return ValueKind.OTHER


def is_number(value: Any) -> bool:
    return classify(value) is ValueKind.NUMBER


def is_sequence(value: Any) -> bool:
    return classify(value) in (ValueKind.SEQUENCE, ValueKind.ARRAY)


def is_record(value: Any) -> bool:
    return classify(value) is ValueKind.RECORD


def describe(value: Any) -> str:
    """Short human-readable rendering used in failure messages."""

    kind = classify(value)
    if kind is ValueKind.ARRAY:
        return f"array(shape={value.shape}, dtype={value.dtype}) {np.array2string(value, threshold=20)}"
    text = repr(value)
    if len(text) > 120:
        text = text[:117] + "..."
    return text
