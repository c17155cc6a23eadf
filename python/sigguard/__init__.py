"""Sigguard: declared call signatures checked at runtime."""

from sigguard.decorators import SignatureBuilder, declare, signatures_of
from sigguard.core import (
    # Values
    Undefined, ValueKind, classify,
    # Errors
    SigguardError, InvalidSpecification, SignatureMismatch,
    # Model
    Constraint, Signature, SignatureSet, build_constraint, build_signature,
    # Matching
    Match, NoMatch, matches, resolve, validate,
    # Reports
    describe_value, format_mismatch,
    # Runtime
    Runtime, configure,
)
from sigguard.types import (
    # Sentinels
    AnyDefined, NullableTokenless, UndefinedToken,
    # Modifiers
    Nullable, Array, Regex, Custom, Rest,
)

__version__ = "0.1.0"

__all__ = [
    # Core decorators
    "declare",
    "SignatureBuilder",
    "signatures_of",
    "validate",
    # Values
    "Undefined",
    "ValueKind",
    "classify",
    # Errors
    "SigguardError",
    "InvalidSpecification",
    "SignatureMismatch",
    # Model
    "Constraint",
    "Signature",
    "SignatureSet",
    "build_constraint",
    "build_signature",
    # Matching
    "Match",
    "NoMatch",
    "matches",
    "resolve",
    # Reports
    "describe_value",
    "format_mismatch",
    # Runtime
    "Runtime",
    "configure",
    # Sentinels
    "AnyDefined",
    "NullableTokenless",
    "UndefinedToken",
    # Modifiers
    "Nullable",
    "Array",
    "Regex",
    "Custom",
    "Rest",
]
