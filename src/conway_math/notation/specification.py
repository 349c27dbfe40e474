"""
Conway Specification Builder
============================

A polyhedron is described as a seed followed by Conway operators:

    desc = ConwayDescription.seeded(make_seed("cube")).dual().kis()
    spec = desc.emit()
    spec.notation()   → "kdC"
    spec.produce()    → Polyhedron

BUILDER STATES:
    empty  --seed()-->  seeded  --dual()/kis()/truncate()-->  seeded
    empty  --dual()-->  NoSeedSetError
    seeded --seed()-->  AlreadyHasSeedError
    empty  --emit()-->  NoOperationsError

A Specification can only hold a list that starts with exactly one Seed;
its constructor rejects anything else with MissingSeedError, so produce()
never has to check.

NOTATION:
    Letters are prepended in application order, so the seed letter ends
    up last and the most recent operator first: cube, dual, kis → "kdC".
"""

import logging
from enum import Enum
from functools import reduce
from typing import Iterator, List, Sequence, Tuple, Union

from ..spec.constants import (
    OP_DUAL,
    OP_KIS,
    OP_TRUNCATE,
    DEFAULT_CHOP,
    DEFAULT_CENTROID,
)
from ..spec.errors import (
    AlreadyHasSeedError,
    NoSeedSetError,
    NoOperationsError,
    NotationError,
    MissingSeedError,
)
from ..spec.structures import Polyhedron
from ..builders.seeds import Seed, SolidKind, make_seed
from ..operators import dual, kis, truncate

logger = logging.getLogger(__name__)


class Operation(Enum):
    """Conway operator tag. Value is the notation letter."""
    DUAL = OP_DUAL
    KIS = OP_KIS
    TRUNCATE = OP_TRUNCATE

    @property
    def letter(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "Operation":
        """Accept 'dual', 'DUAL' or the letter 'd'."""
        key = name.strip()
        if key in {op.value for op in cls}:
            return cls(key)
        try:
            return cls[key.upper()]
        except KeyError:
            valid = ", ".join(op.name.lower() for op in cls)
            raise ValueError(f"Unknown operation {name!r}, expected one of: {valid}") from None

    def apply(self, poly: Polyhedron,
              chop: float = DEFAULT_CHOP,
              centroid_method: str = DEFAULT_CENTROID) -> Polyhedron:
        if self is Operation.DUAL:
            return dual(poly, centroid_method=centroid_method)
        if self is Operation.KIS:
            return kis(poly, centroid_method=centroid_method)
        return truncate(poly, chop=chop)


Step = Union[Seed, Operation]


def _letter(step: Step) -> str:
    return step.letter


def encode_notation(operations: Sequence[Step]) -> str:
    """Fold the operation list, prepending each letter: [C, d, k] → "kdC"."""
    return reduce(lambda acc, step: _letter(step) + acc, operations, "")


class Specification:
    """
    Immutable seed + operator sequence.

    Args:
        operations: Seed first, then Operation tags in application order
        chop: truncation fraction handed to every truncate step
        centroid_method: face centroid strategy handed to dual and kis

    Raises:
        MissingSeedError: list empty, not starting with a Seed, or with a
            second Seed later on
    """

    def __init__(self, operations: Sequence[Step],
                 chop: float = DEFAULT_CHOP,
                 centroid_method: str = DEFAULT_CENTROID):
        operations = tuple(operations)
        if not operations or not isinstance(operations[0], Seed):
            raise MissingSeedError("Specification must start with a Seed")
        for step in operations[1:]:
            if not isinstance(step, Operation):
                raise MissingSeedError(f"Expected an Operation after the seed, got {step!r}")

        self._operations = operations
        self._notation = encode_notation(operations)
        self.chop = float(chop)
        self.centroid_method = centroid_method

    @property
    def operations(self) -> Tuple[Step, ...]:
        return self._operations

    @property
    def seed(self) -> Seed:
        return self._operations[0]

    @property
    def operators(self) -> Tuple[Operation, ...]:
        return self._operations[1:]

    def notation(self) -> str:
        return self._notation

    def stages(self) -> Iterator[Tuple[str, Polyhedron]]:
        """
        Yield (partial notation, polyhedron) after the seed and after each operator.
        """
        poly = self.seed.polyhedron
        done: List[Step] = [self.seed]
        yield encode_notation(done), poly
        for op in self.operators:
            poly = op.apply(poly, chop=self.chop, centroid_method=self.centroid_method)
            done.append(op)
            yield encode_notation(done), poly

    def produce(self) -> Polyhedron:
        """Fold the operators over the seed polyhedron."""
        logger.info("producing %s", self._notation)
        poly = self.seed.polyhedron
        for op in self.operators:
            poly = op.apply(poly, chop=self.chop, centroid_method=self.centroid_method)
        return poly

    def __repr__(self) -> str:
        return f"Specification({self._notation!r}, edge_length={self.seed.edge_length})"


class ConwayDescription:
    """
    Mutable builder for a Specification.

    Methods return the builder so calls chain.
    """

    def __init__(self):
        self._operations: List[Step] = []

    @classmethod
    def seeded(cls, seed: Seed) -> "ConwayDescription":
        """Start a description that already holds its seed."""
        return cls().seed(seed)

    def seed(self, seed: Seed) -> "ConwayDescription":
        if self._operations:
            raise AlreadyHasSeedError()
        if not isinstance(seed, Seed):
            raise TypeError(f"Expected a Seed, got {type(seed).__name__}")
        self._operations.append(seed)
        return self

    def operation(self, op: Union[Operation, str]) -> "ConwayDescription":
        """Append an operator by tag or name ('dual', 'k', ...)."""
        if not self._operations:
            raise NoSeedSetError()
        if not isinstance(op, Operation):
            op = Operation.from_name(op)
        self._operations.append(op)
        return self

    def dual(self) -> "ConwayDescription":
        return self.operation(Operation.DUAL)

    def kis(self) -> "ConwayDescription":
        return self.operation(Operation.KIS)

    def truncate(self) -> "ConwayDescription":
        return self.operation(Operation.TRUNCATE)

    def emit(self, chop: float = DEFAULT_CHOP,
             centroid_method: str = DEFAULT_CENTROID) -> Specification:
        if not self._operations:
            raise NoOperationsError()
        return Specification(self._operations, chop=chop, centroid_method=centroid_method)


def parse_notation(text: str, edge_length: float = 1.0,
                   chop: float = DEFAULT_CHOP,
                   centroid_method: str = DEFAULT_CENTROID) -> Specification:
    """
    Parse Conway notation such as "ktT" into a Specification.

    The last letter is the seed; the others are operators applied right
    to left.

    Raises:
        NotationError: empty string, unknown letter, or seed not last
    """
    text = text.strip()
    if not text:
        raise NotationError("Empty Conway notation")

    seed_letters = {k.letter for k in SolidKind}
    op_letters = {op.letter for op in Operation}

    if text[-1] not in seed_letters:
        raise NotationError(f"Notation {text!r} must end with a seed letter "
                            f"({''.join(sorted(seed_letters))})")
    for pos, ch in enumerate(text[:-1]):
        if ch in seed_letters:
            raise NotationError(f"Seed letter {ch!r} at position {pos}; only the last letter may be a seed")
        if ch not in op_letters:
            raise NotationError(f"Unknown operator letter {ch!r} at position {pos}")

    desc = ConwayDescription.seeded(make_seed(SolidKind(text[-1]), edge_length))
    for ch in reversed(text[:-1]):
        desc.operation(Operation(ch))
    return desc.emit(chop=chop, centroid_method=centroid_method)
