"""Runtime value classification."""

import enum
import numbers
from collections.abc import Mapping, Sequence
from typing import Any


class _UndefinedType:
    """Marker for an explicitly passed "undefined" argument.

    Distinct from ``None``: ``None`` is an explicit null, ``Undefined`` is a
    value that was supplied positionally but carries nothing.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Undefined"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_UndefinedType, ())


Undefined = _UndefinedType()


class ValueKind(enum.Enum):
    """Closed set of runtime value categories."""

    MISSING = "missing"
    NULL = "null"
    TEXTUAL = "textual"
    NUMERIC = "numeric"
    BOOLEAN = "boolean"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    FUNCTION = "function"
    INSTANCE = "instance"


def classify(value: Any) -> ValueKind:
    """Return the category of ``value``.

    Order matters: ``bool`` is checked before numbers, ``str`` before
    sequences, and classes count as instances even though they are callable.
    """
    if value is Undefined:
        return ValueKind.MISSING
    if value is None:
        return ValueKind.NULL
    if isinstance(value, str):
        return ValueKind.TEXTUAL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, numbers.Number):
        return ValueKind.NUMERIC
    if isinstance(value, (bytes, bytearray)):
        return ValueKind.INSTANCE
    if isinstance(value, Sequence):
        return ValueKind.SEQUENCE
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, type):
        return ValueKind.INSTANCE
    if callable(value):
        return ValueKind.FUNCTION
    return ValueKind.INSTANCE


def is_absent(value: Any) -> bool:
    """True for explicit null and the undefined marker."""
    return value is None or value is Undefined
