"""
Seed Solids
===========

A closed tagged union over the five Platonic solids.

    SolidKind  - which solid, with its Conway letter
    Seed       - kind + edge length + the precomputed base Polyhedron

Dispatch is a plain mapping lookup; a Seed is an ordinary frozen value.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Union

from ..spec.constants import (
    SEED_TETRAHEDRON,
    SEED_CUBE,
    SEED_OCTAHEDRON,
    SEED_DODECAHEDRON,
    SEED_ICOSAHEDRON,
)
from ..spec.structures import Polyhedron
from .platonic import (
    build_tetrahedron,
    build_cube,
    build_octahedron,
    build_dodecahedron,
    build_icosahedron,
)


class SolidKind(Enum):
    """Platonic solid tag. Value is the Conway seed letter."""
    TETRAHEDRON = SEED_TETRAHEDRON
    CUBE = SEED_CUBE
    OCTAHEDRON = SEED_OCTAHEDRON
    DODECAHEDRON = SEED_DODECAHEDRON
    ICOSAHEDRON = SEED_ICOSAHEDRON

    @property
    def letter(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "SolidKind":
        """Accept 'cube', 'CUBE' or the letter 'C'."""
        key = name.strip()
        if key in {k.value for k in cls}:
            return cls(key)
        try:
            return cls[key.upper()]
        except KeyError:
            valid = ", ".join(k.name.lower() for k in cls)
            raise ValueError(f"Unknown solid {name!r}, expected one of: {valid}") from None


BUILDERS: Dict[SolidKind, Callable[[float], Polyhedron]] = {
    SolidKind.TETRAHEDRON: build_tetrahedron,
    SolidKind.CUBE: build_cube,
    SolidKind.OCTAHEDRON: build_octahedron,
    SolidKind.DODECAHEDRON: build_dodecahedron,
    SolidKind.ICOSAHEDRON: build_icosahedron,
}


@dataclass(frozen=True, eq=False)
class Seed:
    """A seed solid: its kind, edge length and base polyhedron."""
    kind: SolidKind
    edge_length: float
    polyhedron: Polyhedron = field(repr=False)

    @property
    def letter(self) -> str:
        return self.kind.letter


def make_seed(kind: Union[SolidKind, str], edge_length: float = 1.0) -> Seed:
    """
    Build a Seed.

    Args:
        kind: SolidKind, a solid name ('cube') or a seed letter ('C')
        edge_length: positive edge length

    Example:
        >>> make_seed("cube").polyhedron.n_vertices
        8
    """
    if not isinstance(kind, SolidKind):
        kind = SolidKind.from_name(kind)
    return Seed(kind, float(edge_length), BUILDERS[kind](edge_length))
