from __future__ import annotations

from typing import Sequence

import pytest

from moevo.config.settings import reset_settings_cache
from moevo.core.problem import Problem
from moevo.core.solution import Solution
from moevo.core.solution_type import SolutionType
from moevo.core.variable import VariableKind


class ScriptedRandom:
    """Random source replaying a fixed list of draws, counting the calls."""

    def __init__(self, draws: Sequence[float] = ()) -> None:
        self._draws = list(draws)
        self.calls = 0

    def next_uniform(self) -> float:
        if self.calls >= len(self._draws):
            raise AssertionError(f"random source exhausted after {self.calls} draws")
        value = self._draws[self.calls]
        self.calls += 1
        return value


class BoxProblem(Problem):
    """Single-objective problem with an arbitrary encoding, for operator tests."""

    def __init__(
        self,
        kinds: Sequence[VariableKind],
        lower: Sequence[float] | None = None,
        upper: Sequence[float] | None = None,
        length: Sequence[int] | None = None,
    ) -> None:
        super().__init__(
            name="box",
            number_of_variables=len(kinds),
            number_of_objectives=1,
            solution_type=SolutionType(tuple(kinds)),
        )
        if lower is not None and upper is not None:
            self.set_limits(lower, upper)
        if length is not None:
            self.set_length(length)

    def evaluate(self, solution: Solution) -> None:
        solution.set_objective(0, float(len(solution)))


@pytest.fixture
def scripted() -> type[ScriptedRandom]:
    return ScriptedRandom


@pytest.fixture
def box_problem() -> type[BoxProblem]:
    return BoxProblem


@pytest.fixture(autouse=True)
def _fresh_settings():
    reset_settings_cache()
    yield
    reset_settings_cache()
