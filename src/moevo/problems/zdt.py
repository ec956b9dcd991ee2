"""Zitzler–Deb–Thiele benchmark problems used to exercise the encodings."""

from __future__ import annotations

import numpy as np

from ..core.errors import UnsupportedEncodingError
from ..core.problem import Problem
from ..core.solution import Solution
from ..core.solution_type import SolutionType
from ..core.variable import BinaryVariable, RealVariable

__all__ = ["ZDT4", "ZDT5"]


def _check_solution_type(problem: str, requested: str, allowed: str) -> None:
    if requested.lower() != allowed.lower():
        raise UnsupportedEncodingError(
            f"solution type '{requested}' invalid for {problem} (expected '{allowed}')"
        )


class ZDT4(Problem):
    """Real-coded ZDT4: ``x0`` in ``[0, 1]``, remaining variables in ``[-5, 5]``."""

    def __init__(self, solution_type: str = "Real", number_of_variables: int = 10) -> None:
        _check_solution_type("ZDT4", solution_type, "Real")
        if number_of_variables < 2:
            raise ValueError("ZDT4 needs at least two variables")
        super().__init__(
            name="ZDT4",
            number_of_variables=number_of_variables,
            number_of_objectives=2,
            solution_type=SolutionType.real(number_of_variables),
        )
        lower = [0.0] + [-5.0] * (number_of_variables - 1)
        upper = [1.0] + [5.0] * (number_of_variables - 1)
        self.set_limits(lower, upper)

    def evaluate(self, solution: Solution) -> None:
        x = np.array(
            [
                variable.value
                for variable in solution.decision_variables
                if isinstance(variable, RealVariable)
            ]
        )
        f1 = x[0]
        tail = x[1:]
        g = 1.0 + 10.0 * tail.size + float(np.sum(tail**2 - 10.0 * np.cos(4.0 * np.pi * tail)))
        h = 1.0 - np.sqrt(f1 / g)
        solution.set_objective(0, f1)
        solution.set_objective(1, h * g)


class ZDT5(Problem):
    """Binary-coded ZDT5: a 30-bit first variable followed by 5-bit variables."""

    def __init__(self, solution_type: str = "Binary", number_of_variables: int = 11) -> None:
        _check_solution_type("ZDT5", solution_type, "Binary")
        if number_of_variables < 2:
            raise ValueError("ZDT5 needs at least two variables")
        super().__init__(
            name="ZDT5",
            number_of_variables=number_of_variables,
            number_of_objectives=2,
            solution_type=SolutionType.binary(number_of_variables),
        )
        self.set_length([30] + [5] * (number_of_variables - 1))

    @staticmethod
    def u(variable: BinaryVariable) -> int:
        return variable.cardinality()

    @staticmethod
    def eval_v(value: float) -> float:
        if value < 5.0:
            return 2.0 + value
        return 1.0

    def eval_g(self, variables: list[BinaryVariable]) -> float:
        return sum(self.eval_v(self.u(variable)) for variable in variables[1:])

    @staticmethod
    def eval_h(f: float, g: float) -> float:
        return 1.0 / f

    def evaluate(self, solution: Solution) -> None:
        variables = solution.decision_variables
        f1 = 1.0 + self.u(variables[0])
        g = self.eval_g(variables)
        solution.set_objective(0, f1)
        solution.set_objective(1, self.eval_h(f1, g) * g)
