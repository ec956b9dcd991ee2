"""Encoding descriptors shared by a problem and all of its solutions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterable

import numpy as np

from .random import RandomSource
from .variable import BinaryVariable, RealVariable, Variable, VariableKind

if TYPE_CHECKING:  # pragma: no cover
    from .problem import Problem

__all__ = ["Encoding", "SolutionType"]


class Encoding(str, Enum):
    """Coarse classification of a decision vector, used for operator allow-lists."""

    EMPTY = "empty"
    REAL = "real"
    BINARY = "binary"
    REAL_AND_BINARY = "real_and_binary"


@dataclass(frozen=True, slots=True)
class SolutionType:
    """Ordered variable kinds of a decision vector; positions are 0-indexed."""

    kinds: tuple[VariableKind, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "kinds", tuple(VariableKind(kind) for kind in self.kinds))

    @classmethod
    def real(cls, number_of_variables: int) -> "SolutionType":
        return cls((VariableKind.REAL,) * number_of_variables)

    @classmethod
    def binary(cls, number_of_variables: int) -> "SolutionType":
        return cls((VariableKind.BINARY,) * number_of_variables)

    @classmethod
    def real_and_binary(cls, number_of_reals: int, number_of_binaries: int) -> "SolutionType":
        """Reals occupy the leading positions, binaries the trailing ones."""
        return cls(
            (VariableKind.REAL,) * number_of_reals
            + (VariableKind.BINARY,) * number_of_binaries
        )

    def __len__(self) -> int:
        return len(self.kinds)

    def __getitem__(self, position: int) -> VariableKind:
        return self.kinds[position]

    def positions(self, kind: VariableKind) -> list[int]:
        return [idx for idx, current in enumerate(self.kinds) if current is kind]

    @property
    def encoding(self) -> Encoding:
        present = set(self.kinds)
        if not present:
            return Encoding.EMPTY
        if present == {VariableKind.REAL}:
            return Encoding.REAL
        if present == {VariableKind.BINARY}:
            return Encoding.BINARY
        return Encoding.REAL_AND_BINARY

    def conforms(self, variables: Iterable[Variable]) -> bool:
        observed = tuple(variable.kind for variable in variables)
        return observed == self.kinds

    def create_variables(self, problem: "Problem", random: RandomSource) -> list[Variable]:
        """Sample a conforming decision vector.

        Real positions are drawn uniformly inside the problem's bounds and each
        bit of a binary position is set when its draw falls below one half.
        """

        variables: list[Variable] = []
        for position, kind in enumerate(self.kinds):
            match kind:
                case VariableKind.REAL:
                    lower, upper = problem.bound(position)
                    value = lower + random.next_uniform() * (upper - lower)
                    variables.append(RealVariable(value))
                case VariableKind.BINARY:
                    length = problem.bit_length(position)
                    bits = np.array(
                        [random.next_uniform() < 0.5 for _ in range(length)], dtype=bool
                    )
                    variables.append(BinaryVariable(bits))
                case _:  # pragma: no cover - exhaustive over VariableKind
                    raise AssertionError(f"unhandled variable kind {kind!r}")
        return variables

    def __str__(self) -> str:
        return f"SolutionType({self.encoding.value}, n={len(self.kinds)})"
