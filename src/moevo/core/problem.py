"""Abstract optimisation problem.

A :class:`Problem` declares the dimensions of the search space and how its
decision vector is encoded. Concrete subclasses configure themselves in
``__init__`` through the ``set_*`` methods and are read-only afterwards, so a
single instance can be shared by every solution and operator of a run.
"""

from __future__ import annotations

import abc
from typing import Sequence

from .errors import InvalidBoundsError
from .random import RandomSource
from .solution import Solution
from .solution_type import SolutionType
from .variable import DEFAULT_BIT_LENGTH

__all__ = ["Problem"]


class Problem(abc.ABC):
    """Base class for multi-objective problems.

    Parameters
    ----------
    name:
        Human-readable identifier.
    number_of_variables:
        Length of the decision vector (``>= 0``).
    number_of_objectives:
        Number of objective values (``>= 1``).
    number_of_constraints:
        Number of side constraints (``>= 0``).
    solution_type:
        Optional encoding; may also be attached later with
        :meth:`set_solution_type`.
    """

    def __init__(
        self,
        *,
        name: str = "",
        number_of_variables: int = 0,
        number_of_objectives: int = 1,
        number_of_constraints: int = 0,
        solution_type: SolutionType | None = None,
    ) -> None:
        if number_of_variables < 0:
            raise ValueError("number_of_variables must be >= 0")
        if number_of_objectives < 1:
            raise ValueError("number_of_objectives must be >= 1")
        if number_of_constraints < 0:
            raise ValueError("number_of_constraints must be >= 0")
        self._name = str(name)
        self._number_of_variables = int(number_of_variables)
        self._number_of_objectives = int(number_of_objectives)
        self._number_of_constraints = int(number_of_constraints)
        self._lower_limit: tuple[float, ...] | None = None
        self._upper_limit: tuple[float, ...] | None = None
        self._length: tuple[int, ...] | None = None
        self._precision: tuple[int, ...] | None = None
        self._solution_type: SolutionType | None = None
        if solution_type is not None:
            self.set_solution_type(solution_type)

    # ------------------------------------------------------------------ dims
    @property
    def name(self) -> str:
        return self._name

    @property
    def number_of_variables(self) -> int:
        return self._number_of_variables

    @property
    def number_of_objectives(self) -> int:
        return self._number_of_objectives

    @property
    def number_of_constraints(self) -> int:
        return self._number_of_constraints

    def variable_count(self) -> int:
        return self._number_of_variables

    # --------------------------------------------------------------- setters
    def set_solution_type(self, solution_type: SolutionType) -> None:
        if len(solution_type) != self._number_of_variables:
            raise ValueError(
                f"solution type has {len(solution_type)} positions, "
                f"problem declares {self._number_of_variables} variables"
            )
        self._solution_type = solution_type

    def set_limits(self, lower: Sequence[float], upper: Sequence[float]) -> None:
        """Store per-position bounds.

        Entries for positions that are not real-coded are ignored by the
        operators and may be ``nan``.
        """

        lower = tuple(float(value) for value in lower)
        upper = tuple(float(value) for value in upper)
        if len(lower) != self._number_of_variables or len(upper) != self._number_of_variables:
            raise ValueError("limits must have one entry per variable")
        for position, (low, high) in enumerate(zip(lower, upper)):
            if low > high:
                raise InvalidBoundsError(position, low, high)
        self._lower_limit = lower
        self._upper_limit = upper

    def set_length(self, length: Sequence[int]) -> None:
        length = tuple(int(value) for value in length)
        if len(length) != self._number_of_variables:
            raise ValueError("length must have one entry per variable")
        if any(value < 0 for value in length):
            raise ValueError("bit lengths must be non-negative")
        self._length = length

    def set_precision(self, precision: Sequence[int]) -> None:
        precision = tuple(int(value) for value in precision)
        if len(precision) != self._number_of_variables:
            raise ValueError("precision must have one entry per variable")
        self._precision = precision

    # --------------------------------------------------------------- getters
    @property
    def solution_type(self) -> SolutionType:
        if self._solution_type is None:
            raise ValueError(f"problem {self._name!r} has no solution type")
        return self._solution_type

    @property
    def lower_limit(self) -> tuple[float, ...] | None:
        return self._lower_limit

    @property
    def upper_limit(self) -> tuple[float, ...] | None:
        return self._upper_limit

    def bound(self, position: int) -> tuple[float, float]:
        if self._lower_limit is None or self._upper_limit is None:
            nan = float("nan")
            raise InvalidBoundsError(position, nan, nan)
        return self._lower_limit[position], self._upper_limit[position]

    def bit_length(self, position: int) -> int:
        if self._length is None:
            return DEFAULT_BIT_LENGTH
        return self._length[position]

    def precision(self, position: int) -> int:
        """Bits used to encode a binary-coded real at ``position``."""
        if self._precision is None:
            return DEFAULT_BIT_LENGTH
        return self._precision[position]

    def number_of_bits(self) -> int:
        return sum(self.bit_length(position) for position in range(self._number_of_variables))

    # ----------------------------------------------------------------- hooks
    def create_solution(self, random: RandomSource) -> Solution:
        """Return a random solution conforming to :attr:`solution_type`."""
        variables = self.solution_type.create_variables(self, random)
        return Solution(self, variables)

    @abc.abstractmethod
    def evaluate(self, solution: Solution) -> None:
        """Compute and store the objective values of ``solution``."""

    def evaluate_constraints(self, solution: Solution) -> None:
        """Store the constraint violation of ``solution``; unconstrained by default."""
        return None

    def __repr__(self) -> str:
        encoding = self._solution_type.encoding.value if self._solution_type else None
        return (
            f"{type(self).__name__}(name={self._name!r}, "
            f"variables={self._number_of_variables}, "
            f"objectives={self._number_of_objectives}, encoding={encoding})"
        )

