"""
Edge weight kinds.

A graph is parameterised over one of two weight kinds:

- Unweighted: a payload-free marker; an edge either exists or not.
- Weighted: a non-negative integer edge cost.

Both kinds share the same small interface (``draw`` and ``format_edge``),
which is what the random generator and the text rendering dispatch on.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar, Union

import numpy as np

#: Largest value representable by an unsigned 32-bit integer. Bounds node
#: counts, edge weights and shortest-path distances.
U32_MAX = int(np.iinfo(np.uint32).max)

#: Inclusive range of weights drawn by the random generator.
MIN_WEIGHT = 1
MAX_WEIGHT = 10


@dataclass(frozen=True)
class Unweighted:
    """Marker weight carrying no numeric payload. All instances are equal."""

    @classmethod
    def draw(cls, rng: np.random.Generator) -> "Unweighted":
        """Return the marker. No randomness is consumed."""
        return UNWEIGHTED

    def format_edge(self, source: int, target: int) -> str:
        return f"{source}->{target}"


UNWEIGHTED = Unweighted()


@dataclass(frozen=True, order=True)
class Weighted:
    """
    Non-negative integer edge cost.

    Attributes:
        value: Edge weight in ``[0, U32_MAX]``.

    Raises:
        TypeError: If value is not an integer.
        ValueError: If value is negative or exceeds U32_MAX.
    """

    value: int

    def __post_init__(self) -> None:
        value = self.value
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
            raise TypeError(f"Weight must be an integer, got {type(value).__name__}")
        value = int(value)
        if value < 0 or value > U32_MAX:
            raise ValueError(f"Weight must lie in [0, {U32_MAX}], got {value}")
        # Normalise numpy integers to plain int
        object.__setattr__(self, "value", value)

    @classmethod
    def draw(cls, rng: np.random.Generator) -> "Weighted":
        """Draw a weight uniformly from [MIN_WEIGHT, MAX_WEIGHT]."""
        return cls(int(rng.integers(MIN_WEIGHT, MAX_WEIGHT, endpoint=True)))

    def format_edge(self, source: int, target: int) -> str:
        return f"{source}-({self.value})->{target}"

    def __int__(self) -> int:
        return self.value


Weight = Union[Unweighted, Weighted]
W = TypeVar("W", Unweighted, Weighted)
