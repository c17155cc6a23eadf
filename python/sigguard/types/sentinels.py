"""Presence sentinels: tokens that control null/undefined acceptance."""

from typing import Any, Optional

DEFINED = "AnyDefined"
NULLABLE = "NullableTokenless"
UNDEFINED = "UndefinedToken"


class SentinelToken:
    """A presence token usable in a signature declaration.

    Used bare, a token accepts any defined value plus whatever its presence
    rule admits. Called with a descriptor it narrows the accepted values to
    that descriptor:

        AnyDefined           # anything except None / Undefined
        NullableTokenless    # anything defined, or None
        UndefinedToken       # anything, including None / Undefined
        NullableTokenless(str)
    """

    def __init__(self, name: str, base: Optional[Any] = None):
        self.name = name
        self.base = base

    def __call__(self, base: Any) -> "SentinelToken":
        return SentinelToken(self.name, base)

    def __repr__(self) -> str:
        if self.base is None:
            return self.name
        return f"{self.name}({self.base!r})"


AnyDefined = SentinelToken(DEFINED)
NullableTokenless = SentinelToken(NULLABLE)
UndefinedToken = SentinelToken(UNDEFINED)
