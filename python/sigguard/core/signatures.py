"""Signatures and signature sets."""

from dataclasses import dataclass
from typing import Any, Iterator, Optional, Tuple

from .constraints import Constraint, Rest, build_constraint
from .errors import InvalidSpecification


@dataclass(frozen=True)
class Signature:
    """Ordered constraints describing one acceptable call shape."""

    constraints: Tuple[Constraint, ...]

    def __post_init__(self):
        if sum(isinstance(c, Rest) for c in self.constraints) > 1:
            raise InvalidSpecification(
                f"Duplicate 'rest' entry: a signature may have at most one, got {self!r}"
            )

    @property
    def rest_index(self) -> Optional[int]:
        for i, constraint in enumerate(self.constraints):
            if isinstance(constraint, Rest):
                return i
        return None

    @property
    def fixed_count(self) -> int:
        """Number of positions that consume exactly one argument."""
        if self.rest_index is None:
            return len(self.constraints)
        return len(self.constraints) - 1

    def __len__(self) -> int:
        return len(self.constraints)

    def __iter__(self) -> Iterator[Constraint]:
        return iter(self.constraints)

    def __repr__(self) -> str:
        return f"({', '.join(repr(c) for c in self.constraints)})"


@dataclass(frozen=True)
class SignatureSet:
    """All signatures declared for one function, in declaration order."""

    signatures: Tuple[Signature, ...] = ()

    def add(self, signature: Signature) -> "SignatureSet":
        return SignatureSet(self.signatures + (signature,))

    def __len__(self) -> int:
        return len(self.signatures)

    def __iter__(self) -> Iterator[Signature]:
        return iter(self.signatures)

    def __getitem__(self, index: int) -> Signature:
        return self.signatures[index]

    def __repr__(self) -> str:
        return " | ".join(repr(s) for s in self.signatures)


def build_signature(*descriptors: Any) -> Signature:
    """Build a Signature from declaration-site descriptors.

    Raises:
        InvalidSpecification: If any descriptor is malformed or more than one
            ``rest`` entry is given
    """
    return Signature(tuple(build_constraint(d, top_level=True) for d in descriptors))
