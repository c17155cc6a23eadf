"""Declaration vocabulary: sentinels and modifier constructs."""

from .constructs import Modifier, Nullable, Array, Regex, Custom, Rest
from .sentinels import SentinelToken, AnyDefined, NullableTokenless, UndefinedToken

__all__ = [
    # Sentinels
    "SentinelToken",
    "AnyDefined",
    "NullableTokenless",
    "UndefinedToken",
    # Modifiers
    "Modifier",
    "Nullable",
    "Array",
    "Regex",
    "Custom",
    "Rest",
]
