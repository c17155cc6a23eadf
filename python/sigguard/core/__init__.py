"""Core runtime functionality."""

from .classify import Undefined, ValueKind, classify
from .constraints import Constraint, build_constraint
from .errors import SigguardError, InvalidSpecification, SignatureMismatch
from .matcher import Match, NoMatch, matches, resolve
from .report import describe_value, format_mismatch
from .runtime import Runtime, configure, _runtime
from .signatures import Signature, SignatureSet, build_signature
from .validator import validate

__all__ = [
    "Undefined", "ValueKind", "classify",
    "Constraint", "build_constraint",
    "SigguardError", "InvalidSpecification", "SignatureMismatch",
    "Match", "NoMatch", "matches", "resolve",
    "describe_value", "format_mismatch",
    "Runtime", "configure", "_runtime",
    "Signature", "SignatureSet", "build_signature",
    "validate",
]
