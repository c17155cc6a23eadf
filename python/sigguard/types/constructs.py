"""Modifier constructs: subscriptable spellings of the keyed modifier objects.

``Nullable[str]`` declares exactly what ``{"nullable": str}`` declares.
"""

from typing import Any


class Modifier:
    """Base for modifier constructs; ``key`` names the modifier."""

    key: str = ""

    def __init__(self, value: Any):
        self.value = value

    def __repr__(self) -> str:
        return f"{type(self).__name__}[{self.value!r}]"

    @classmethod
    def __class_getitem__(cls, param):
        """Make modifiers subscriptable: Nullable[str]"""
        return cls(param)


class Nullable(Modifier):
    """Nullable[T]: T, None, or Undefined."""
    key = "nullable"


class Array(Modifier):
    """Array[T]: a list or tuple whose every element is T."""
    key = "array"


class Regex(Modifier):
    """Regex[pattern]: a str the pattern finds a match in."""
    key = "regex"


class Custom(Modifier):
    """Custom[predicate]: any value the predicate accepts."""
    key = "custom"


class Rest(Modifier):
    """Rest[T]: zero or more trailing arguments, each T. Top level only."""
    key = "rest"
