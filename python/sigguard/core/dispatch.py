"""Finalizers: the two ways a declared signature set becomes a callable."""

import functools
import logging
from typing import Any, Callable

from .errors import SignatureMismatch
from .matcher import resolve
from .signatures import SignatureSet

logger = logging.getLogger(__name__)

SIGNATURES_ATTR = "__sigguard_signatures__"


def _function_name(func: Callable) -> str:
    return getattr(func, "__qualname__", None) or getattr(func, "__name__", None) or repr(func)


class CheckedFinalizer:
    """Wraps the target so every call is matched before it runs."""

    name = "checked"

    def finalize(self, signatures: SignatureSet, func: Callable) -> Callable:
        name = _function_name(func)

        @functools.wraps(func)
        def wrapper(*args: Any) -> Any:
            result = resolve(signatures, args)
            if not result:
                raise SignatureMismatch(
                    result.report(name),
                    signatures=signatures,
                    arguments=args,
                    function_name=name,
                )
            return func(*args)

        setattr(wrapper, SIGNATURES_ATTR, signatures)
        logger.debug("Checking calls to %s against %d signature(s)", name, len(signatures))
        return wrapper


class PassthroughFinalizer:
    """Returns the target unchanged; no call is ever checked."""

    name = "passthrough"

    def finalize(self, signatures: SignatureSet, func: Callable) -> Callable:
        logger.debug("Signature checks disabled, %s left unwrapped", _function_name(func))
        return func


CHECKED = CheckedFinalizer()
PASSTHROUGH = PassthroughFinalizer()
