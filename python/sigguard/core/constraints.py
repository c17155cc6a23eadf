"""Constraint model: the per-argument rules a signature is built from.

A constraint is a small immutable tree. Leaves test a value directly
(``Builtin``, ``Nominal``, ``Pattern``, ``Predicate``); inner nodes wrap a
child constraint (``Sentinel``, ``Nullable``, ``ArrayOf``, ``Rest``).

``build_constraint`` turns what a user writes at a declaration site into
that tree:

    str                          -> Builtin(TEXTUAL)
    MyClass                      -> Nominal(MyClass)
    NullableTokenless(str)       -> Sentinel("NullableTokenless", Builtin)
    {"array": {"nullable": str}} -> ArrayOf(Nullable(Builtin))
    Rest[float]                  -> Rest(Builtin(NUMERIC))
"""

import numbers
import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Optional

from .classify import Undefined, ValueKind, classify, is_absent
from .errors import InvalidSpecification
from ..types.constructs import Modifier
from ..types.sentinels import DEFINED, NULLABLE, SentinelToken

MODIFIER_KEYS = ("nullable", "array", "regex", "custom", "rest")

# Type references with a fixed meaning; every other class is nominal.
BUILTIN_TYPES = {
    str: ("str", ValueKind.TEXTUAL),
    float: ("float", ValueKind.NUMERIC),
    numbers.Number: ("Number", ValueKind.NUMERIC),
    bool: ("bool", ValueKind.BOOLEAN),
    Sequence: ("Sequence", ValueKind.SEQUENCE),
    Mapping: ("Mapping", ValueKind.MAPPING),
    Callable: ("Callable", ValueKind.FUNCTION),
    callable: ("callable", ValueKind.FUNCTION),
}


class Constraint:
    """Base class for all constraints."""

    def check(self, value: Any) -> bool:
        raise NotImplementedError


@dataclass(frozen=True, repr=False)
class Builtin(Constraint):
    kind: ValueKind
    name: str

    def check(self, value: Any) -> bool:
        return classify(value) is self.kind

    def __repr__(self) -> str:
        return self.name


@dataclass(frozen=True, repr=False)
class Nominal(Constraint):
    cls: type

    def check(self, value: Any) -> bool:
        if value is Undefined:
            return False
        # bool subclasses int, but True is not a number here.
        if isinstance(value, bool) and self.cls is not bool and issubclass(self.cls, numbers.Number):
            return False
        return isinstance(value, self.cls)

    def __repr__(self) -> str:
        return getattr(self.cls, "__qualname__", None) or object.__repr__(self.cls)


@dataclass(frozen=True, repr=False)
class Sentinel(Constraint):
    """Presence rule wrapped around an optional base constraint.

    Without a base, any value other than the ``Undefined`` marker passes the
    base test, which keeps the three tokens strictly ordered:
    AnyDefined < NullableTokenless < UndefinedToken.
    """

    token: str
    base: Optional[Constraint] = None

    def check(self, value: Any) -> bool:
        if self.token == DEFINED:
            if is_absent(value):
                return False
        elif self.token == NULLABLE:
            if value is None:
                return True
        elif is_absent(value):
            return True
        if self.base is None:
            return value is not Undefined
        return self.base.check(value)

    def __repr__(self) -> str:
        if self.base is None:
            return self.token
        return f"{self.token}({self.base!r})"


@dataclass(frozen=True, repr=False)
class Nullable(Constraint):
    inner: Constraint

    def check(self, value: Any) -> bool:
        return is_absent(value) or self.inner.check(value)

    def __repr__(self) -> str:
        return f"{{nullable: {self.inner!r}}}"


@dataclass(frozen=True, repr=False)
class ArrayOf(Constraint):
    inner: Constraint

    def check(self, value: Any) -> bool:
        if classify(value) is not ValueKind.SEQUENCE:
            return False
        return all(self.inner.check(item) for item in value)

    def __repr__(self) -> str:
        return f"{{array: {self.inner!r}}}"


@dataclass(frozen=True, repr=False)
class Pattern(Constraint):
    pattern: "re.Pattern[str]"

    def check(self, value: Any) -> bool:
        return isinstance(value, str) and self.pattern.search(value) is not None

    def __repr__(self) -> str:
        return f"{{regex: {self.pattern.pattern!r}}}"


@dataclass(frozen=True, repr=False)
class Predicate(Constraint):
    func: Callable

    def check(self, value: Any) -> bool:
        try:
            return bool(self.func(value))
        except Exception as e:
            raise InvalidSpecification(
                f"custom predicate {self.name} raised {type(e).__name__}: {e}"
            ) from e

    @property
    def name(self) -> str:
        return getattr(self.func, "__name__", None) or type(self.func).__name__

    def __repr__(self) -> str:
        return f"{{custom: {self.name}}}"


@dataclass(frozen=True, repr=False)
class Rest(Constraint):
    """Variable-arity slot; each consumed argument is checked against inner."""

    inner: Constraint

    def check(self, value: Any) -> bool:
        return self.inner.check(value)

    def __repr__(self) -> str:
        return f"{{rest: {self.inner!r}}}"


def build_constraint(descriptor: Any, *, top_level: bool = False) -> Constraint:
    """
    Convert a declaration-site type descriptor into a Constraint.

    Args:
        descriptor: A type reference, a sentinel token, a single-key modifier
            dict, a modifier construct, or an already built Constraint
        top_level: True when the descriptor is a direct signature entry,
            the only place ``rest`` is allowed

    Raises:
        InvalidSpecification: If the descriptor is malformed
    """
    if isinstance(descriptor, Constraint):
        if isinstance(descriptor, Rest) and not top_level:
            raise InvalidSpecification("'rest' is only allowed as a top-level signature entry")
        return descriptor

    if isinstance(descriptor, SentinelToken):
        base = None if descriptor.base is None else build_constraint(descriptor.base)
        return Sentinel(descriptor.name, base)

    if isinstance(descriptor, Modifier):
        return _build_modifier(descriptor.key, descriptor.value, top_level)

    if isinstance(descriptor, dict):
        if len(descriptor) != 1:
            raise InvalidSpecification(
                f"Modifier object must have exactly one key, got {len(descriptor)}: {descriptor!r}"
            )
        (key, value), = descriptor.items()
        return _build_modifier(key, value, top_level)

    try:
        builtin = BUILTIN_TYPES.get(descriptor)
    except TypeError:
        builtin = None
    if builtin is not None:
        name, kind = builtin
        return Builtin(kind, name)

    if isinstance(descriptor, type):
        return Nominal(descriptor)

    raise InvalidSpecification(f"Unsupported type descriptor: {descriptor!r}")


def _build_modifier(key: Any, value: Any, top_level: bool) -> Constraint:
    """Build the constraint for one ``{key: value}`` modifier."""
    if key not in MODIFIER_KEYS:
        raise InvalidSpecification(
            f"Unknown modifier {key!r}; expected one of {', '.join(MODIFIER_KEYS)}"
        )

    if key == "rest":
        if not top_level:
            raise InvalidSpecification("'rest' is only allowed as a top-level signature entry")
        return Rest(build_constraint(value))

    if key == "nullable":
        return Nullable(build_constraint(value))

    if key == "array":
        return ArrayOf(build_constraint(value))

    if key == "regex":
        return Pattern(_compile_pattern(value))

    if not callable(value):
        raise InvalidSpecification(f"'custom' expects a callable predicate, got {value!r}")
    return Predicate(value)


def _compile_pattern(value: Any) -> "re.Pattern[str]":
    if isinstance(value, re.Pattern):
        if not isinstance(value.pattern, str):
            raise InvalidSpecification(f"'regex' expects a text pattern, got {value!r}")
        return value
    if not isinstance(value, str):
        raise InvalidSpecification(f"'regex' expects a pattern string, got {value!r}")
    try:
        return re.compile(value)
    except re.error as e:
        raise InvalidSpecification(f"Invalid regex {value!r}: {e}") from e
