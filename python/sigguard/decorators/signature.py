"""Signature declaration decorator."""

import warnings
from typing import Any, Callable, Optional, TypeVar, cast

from ..core.dispatch import SIGNATURES_ATTR
from ..core.errors import InvalidSpecification
from ..core.runtime import Runtime, _runtime
from ..core.signatures import SignatureSet, build_signature

F = TypeVar('F', bound=Callable[..., Any])


class SignatureBuilder:
    """
    Accumulates the signatures declared for one function.

    Builders are immutable: ``declare`` returns a new builder with one more
    signature, so a partially declared builder can be shared safely.

    Example:
        @declare(float).declare(str, str)
        def area(*args):
            ...
    """

    def __init__(self, signatures: SignatureSet = SignatureSet(), *, runtime: Optional[Runtime] = None):
        self.signatures = signatures
        self.runtime = runtime

    def declare(self, *descriptors: Any) -> "SignatureBuilder":
        """Append one signature built from ``descriptors``.

        Raises:
            InvalidSpecification: If a descriptor is malformed or ``rest``
                appears more than once
        """
        signature = build_signature(*descriptors)
        if signature in self.signatures:
            warnings.warn(
                f"Signature {signature!r} is already declared; the duplicate can never be selected",
                stacklevel=2,
            )
        return SignatureBuilder(self.signatures.add(signature), runtime=self.runtime)

    def finalize(self, func: F) -> F:
        """Produce the callable for ``func`` using the active runtime's finalizer."""
        if not callable(func):
            raise InvalidSpecification(f"Cannot finalize non-callable {func!r}")
        if not self.signatures:
            raise InvalidSpecification("No signatures declared")
        runtime = self.runtime or _runtime
        return cast(F, runtime.finalizer.finalize(self.signatures, func))

    __call__ = finalize

    def __repr__(self) -> str:
        return f"SignatureBuilder({self.signatures!r})"


def declare(*descriptors: Any, runtime: Optional[Runtime] = None) -> SignatureBuilder:
    """
    Start a signature declaration.

    Args:
        *descriptors: One constraint descriptor per positional parameter
        runtime: Runtime to finalize with (defaults to the global one)

    Example:
        @declare(float, {"rest": {"nullable": str}}, UndefinedToken)
        def log_values(level, *rest):
            ...
    """
    return SignatureBuilder(runtime=runtime).declare(*descriptors)


def signatures_of(func: Callable) -> Optional[SignatureSet]:
    """Return the signatures a checked function was finalized with, else None."""
    return getattr(func, SIGNATURES_ATTR, None)
