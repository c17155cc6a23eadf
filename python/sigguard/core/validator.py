"""Validation utilities."""

from typing import Any

from .constraints import build_constraint


def validate(value: Any, descriptor: Any) -> bool:
    """
    Validate a single value against a type descriptor.

    Example:
        validate("a", str)                       # True
        validate(["a", None], {"array": {"nullable": str}})  # True
        validate(5, {"regex": "^a"})             # False

    Raises:
        InvalidSpecification: If the descriptor is malformed (``rest`` included,
            since it only makes sense inside a signature)
    """
    return build_constraint(descriptor).check(value)
