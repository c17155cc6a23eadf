"""Exception types raised by sigguard."""

from typing import Any, Optional


class SigguardError(TypeError):
    """Base class for every error raised by sigguard."""
    pass


class InvalidSpecification(SigguardError):
    """Raised when a signature declaration is structurally invalid.

    This is an authoring bug: unknown modifier keys, multi-key modifier
    objects, a misplaced or duplicated ``rest`` entry, or a custom predicate
    that raised while being evaluated.
    """
    pass


class SignatureMismatch(SigguardError):
    """Raised when a call matches none of the declared signatures."""

    def __init__(
        self,
        report: str,
        *,
        signatures: Any = None,
        arguments: tuple = (),
        function_name: Optional[str] = None,
    ):
        super().__init__(report)
        self.report = report
        self.signatures = signatures
        self.arguments = arguments
        self.function_name = function_name
