"""Function decorators for signature checking."""

from .signature import SignatureBuilder, declare, signatures_of

__all__ = ["SignatureBuilder", "declare", "signatures_of"]
