"""Matching call arguments against signatures."""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Union

from .report import format_mismatch
from .signatures import Signature, SignatureSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Match:
    """The first signature that accepted a call."""

    index: int
    signature: Signature

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class NoMatch:
    """No declared signature accepted the call."""

    signatures: SignatureSet
    arguments: tuple

    def __bool__(self) -> bool:
        return False

    def report(self, name: Optional[str] = None) -> str:
        return format_mismatch(self.signatures, self.arguments, name=name)


MatchResult = Union[Match, NoMatch]


def matches(signature: Signature, args: Sequence[Any]) -> bool:
    """
    Check whether an argument list satisfies one signature.

    Arity decides the split around the rest slot: with ``n`` arguments and
    ``f`` fixed positions the rest slot consumes exactly ``n - f`` of them,
    so no backtracking is needed.

    Raises:
        InvalidSpecification: If a custom predicate raises
    """
    constraints = signature.constraints
    fixed_count = signature.fixed_count
    surplus = len(args) - fixed_count
    rest_index = signature.rest_index

    if rest_index is None:
        if surplus != 0:
            return False
        return all(c.check(arg) for c, arg in zip(constraints, args))

    if surplus < 0:
        return False

    for i in range(rest_index):
        if not constraints[i].check(args[i]):
            return False

    rest = constraints[rest_index]
    for arg in args[rest_index:rest_index + surplus]:
        if not rest.check(arg):
            return False

    trailing_args = args[rest_index + surplus:]
    return all(c.check(arg) for c, arg in zip(constraints[rest_index + 1:], trailing_args))


def resolve(signatures: SignatureSet, args: Sequence[Any]) -> MatchResult:
    """Return the first signature, in declaration order, that matches ``args``."""
    args = tuple(args)
    for index, signature in enumerate(signatures):
        if matches(signature, args):
            logger.debug("Call matched signature #%d %r", index, signature)
            return Match(index, signature)
    return NoMatch(signatures, args)
