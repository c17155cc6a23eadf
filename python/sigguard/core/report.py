"""Mismatch reports: declared signatures next to the actual call."""

from typing import Any, Iterable, Optional, Set

from .classify import Undefined, ValueKind, classify
from .constraints import Rest

_UNKNOWN = "<?>"
_ELIDED = "..."

# Sequences are sampled, never walked in full.
MAX_ITEMS = 10
MAX_DEPTH = 3


def describe_value(value: Any, _active: Optional[Set[int]] = None) -> str:
    """
    Render a runtime value in declaration notation.

    Only the first ``MAX_ITEMS`` elements of a sequence are looked at, nesting
    stops at ``MAX_DEPTH``, and a sequence that contains itself renders as
    ``...`` at the point it repeats.

    Example:
        describe_value("a")          # 'str'
        describe_value(None)         # 'None'
        describe_value([1, "a", 2])  # 'list[int | str]'
    """
    try:
        if value is Undefined:
            return "Undefined"
        if value is None:
            return "None"
        if isinstance(value, type):
            return f"type[{value.__qualname__}]"
        name = type(value).__name__
        if classify(value) is not ValueKind.SEQUENCE:
            return name

        active = set() if _active is None else _active
        if id(value) in active or len(active) >= MAX_DEPTH:
            return _ELIDED
        active.add(id(value))
        try:
            item_names = []
            for count, item in enumerate(value):
                if count == MAX_ITEMS:
                    item_names.append(_ELIDED)
                    break
                item_name = describe_value(item, active)
                if item_name not in item_names:
                    item_names.append(item_name)
        finally:
            active.discard(id(value))
        if not item_names:
            return name
        return f"{name}[{' | '.join(item_names)}]"
    except Exception:
        return _UNKNOWN


def describe_call(args: Iterable[Any]) -> str:
    return f"({', '.join(describe_value(arg) for arg in args)})"


def explain_mismatch(signature: Any, args: tuple) -> str:
    """Say why ``args`` fails ``signature``: arity, or the first bad position.

    Returns an empty string when no reason can be given.
    """
    try:
        constraints = signature.constraints
        rest_index = signature.rest_index
        fixed_count = signature.fixed_count
        if rest_index is None:
            if len(args) != fixed_count:
                return f"expects {fixed_count} argument(s), got {len(args)}"
            positions = list(constraints)
        else:
            surplus = len(args) - fixed_count
            if surplus < 0:
                return f"expects at least {fixed_count} argument(s), got {len(args)}"
            positions = (
                list(constraints[:rest_index])
                + [constraints[rest_index]] * surplus
                + list(constraints[rest_index + 1:])
            )
        for i, (constraint, arg) in enumerate(zip(positions, args)):
            if not constraint.check(arg):
                if isinstance(constraint, Rest):
                    constraint = constraint.inner
                return f"argument {i} is not {constraint!r}"
        return ""
    except Exception:
        return ""


def _describe_signature(signature: Any, args: tuple) -> str:
    try:
        text = repr(signature)
    except Exception:
        return _UNKNOWN
    note = explain_mismatch(signature, args)
    return f"{text}  <- {note}" if note else text


def format_mismatch(signatures: Iterable[Any], args: Iterable[Any], name: Optional[str] = None) -> str:
    """
    Build the message for a call that matched no signature.

    Lists every declared signature in declaration order, each with the reason
    the call failed it, then the call's argument types. Never raises.
    """
    target = f"{name}()" if name else "function"
    lines = [f"No signature of {target} matches the call.", "Accepted signatures:"]
    try:
        args = tuple(args)
    except Exception:
        args = ()
    try:
        declared = [_describe_signature(s, args) for s in signatures]
    except Exception:
        declared = [_UNKNOWN]
    lines.extend(f"  {line}" for line in declared or ["(none declared)"])
    lines.append("Called with:")
    lines.append(f"  {describe_call(args)}")
    return "\n".join(lines)
