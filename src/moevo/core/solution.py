"""Candidate solutions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

import numpy as np

from .solution_type import SolutionType
from .variable import BinaryVariable, RealVariable, Variable

if TYPE_CHECKING:  # pragma: no cover
    from .problem import Problem

__all__ = ["Solution"]


class Solution:
    """One candidate: decision variables plus objective and constraint values.

    The decision vector must conform to the owning problem's
    :class:`~moevo.core.solution_type.SolutionType`. Operators mutate the
    variables in place; objectives and constraint values are only written by
    evaluation.
    """

    __slots__ = (
        "problem",
        "decision_variables",
        "objectives",
        "constraint_violation",
        "number_of_violated_constraints",
    )

    def __init__(self, problem: "Problem", variables: Iterable[Variable]) -> None:
        variables = list(variables)
        solution_type = problem.solution_type
        if not solution_type.conforms(variables):
            observed = [variable.kind.value for variable in variables]
            expected = [kind.value for kind in solution_type.kinds]
            raise ValueError(f"variables {observed} do not match solution type {expected}")
        for position, variable in enumerate(variables):
            if isinstance(variable, BinaryVariable) and variable.length != problem.bit_length(
                position
            ):
                raise ValueError(
                    f"binary variable at position {position} has {variable.length} bits, "
                    f"problem declares {problem.bit_length(position)}"
                )
        self.problem = problem
        self.decision_variables: list[Variable] = variables
        self.objectives = np.zeros(problem.number_of_objectives, dtype=float)
        self.constraint_violation = 0.0
        self.number_of_violated_constraints = 0

    @property
    def type(self) -> SolutionType:
        return self.problem.solution_type

    def __len__(self) -> int:
        return len(self.decision_variables)

    def set_objective(self, index: int, value: float) -> None:
        self.objectives[index] = float(value)

    def get_objective(self, index: int) -> float:
        return float(self.objectives[index])

    def is_feasible(self) -> bool:
        return self.constraint_violation == 0.0

    def copy(self) -> "Solution":
        clone = Solution(self.problem, [variable.copy() for variable in self.decision_variables])
        clone.objectives = self.objectives.copy()
        clone.constraint_violation = self.constraint_violation
        clone.number_of_violated_constraints = self.number_of_violated_constraints
        return clone

    def to_dict(self) -> dict[str, Any]:
        variables: list[Any] = []
        for variable in self.decision_variables:
            match variable:
                case RealVariable(value=value):
                    variables.append(value)
                case BinaryVariable():
                    variables.append(str(variable))
        return {
            "problem": self.problem.name,
            "variables": variables,
            "objectives": self.objectives.tolist(),
            "constraint_violation": self.constraint_violation,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Solution):
            return NotImplemented
        return (
            self.decision_variables == other.decision_variables
            and np.array_equal(self.objectives, other.objectives)
            and self.constraint_violation == other.constraint_violation
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Solution({self.to_dict()['variables']}, objectives={self.objectives.tolist()})"
