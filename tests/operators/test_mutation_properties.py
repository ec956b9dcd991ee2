"""Statistical and structural properties of polynomial and bit-flip mutation."""

from __future__ import annotations

import numpy as np
import pytest

from moevo.core.random import random_source
from moevo.core.solution import Solution
from moevo.core.variable import BinaryVariable, RealVariable, VariableKind
from moevo.operators import mutation


def test_perturbation_stays_within_bounds() -> None:
    rng = np.random.default_rng(7)
    for _ in range(5000):
        lower = rng.uniform(-100.0, 100.0)
        upper = lower + rng.uniform(1e-6, 50.0)
        value = rng.uniform(lower, upper)
        eta = rng.choice([0.0, 1.0, 5.0, 20.0, 100.0])
        rnd = rng.random()
        result = mutation.polynomial_perturbation(value, lower, upper, eta, rnd)
        assert lower <= result <= upper


@pytest.mark.parametrize("value", [0.0, 1.0])
@pytest.mark.parametrize("rnd", [0.0, 1e-12, 0.5, 1.0 - 1e-12])
def test_perturbation_at_the_bounds(value: float, rnd: float) -> None:
    result = mutation.polynomial_perturbation(value, 0.0, 1.0, 20.0, rnd)
    assert 0.0 <= result <= 1.0


@pytest.mark.parametrize("rnd", [0.05, 0.3, 0.49, 0.5, 0.51, 0.8, 0.97])
@pytest.mark.parametrize("value", [-4.0, -0.5, 0.0, 1.25, 3.9])
def test_larger_distribution_index_is_more_local(rnd: float, value: float) -> None:
    indices = [0.0, 1.0, 2.0, 5.0, 10.0, 20.0, 50.0, 100.0, 500.0]
    steps = [
        abs(mutation.polynomial_perturbation(value, -5.0, 5.0, eta, rnd) - value)
        for eta in indices
    ]
    for wider, narrower in zip(steps, steps[1:]):
        assert narrower <= wider + 1e-12


def test_step_vanishes_as_distribution_index_grows() -> None:
    result = mutation.polynomial_perturbation(0.5, 0.0, 1.0, 1e6, 0.1)
    assert result == pytest.approx(0.5, abs=1e-5)


def test_real_probability_zero_never_changes_values(box_problem) -> None:
    problem = box_problem([VariableKind.REAL] * 20, lower=[-1.0] * 20, upper=[1.0] * 20)
    operator = mutation.PolynomialMutation({"realMutationProbability": 0.0})
    for seed in range(25):
        solution = problem.create_solution(random_source(seed))
        before = [variable.value for variable in solution.decision_variables]
        operator.execute(solution, random_source(seed + 1000))
        assert [variable.value for variable in solution.decision_variables] == before


def test_real_probability_one_keeps_values_in_bounds(box_problem) -> None:
    problem = box_problem([VariableKind.REAL] * 10, lower=[0.0] * 10, upper=[1e-3] * 10)
    operator = mutation.PolynomialMutation(
        {"realMutationProbability": 1.0, "distributionIndex": 0.0}
    )
    random = random_source(3)
    solution = problem.create_solution(random)
    for _ in range(200):
        operator.execute(solution, random)
        assert all(0.0 <= variable.value <= 1e-3 for variable in solution.decision_variables)


def test_bit_flip_rate_matches_probability(box_problem) -> None:
    problem = box_problem([VariableKind.BINARY], length=[20000])
    solution = Solution(problem, [BinaryVariable.zeros(20000)])
    operator = mutation.BitFlipMutation({"binaryMutationProbability": 0.1})

    operator.execute(solution, random_source(8))

    rate = solution.decision_variables[0].cardinality() / 20000
    assert rate == pytest.approx(0.1, abs=0.01)


def test_real_mutation_rate_matches_probability(box_problem) -> None:
    size = 5000
    problem = box_problem([VariableKind.REAL] * size, lower=[0.0] * size, upper=[1.0] * size)
    solution = Solution(problem, [RealVariable(0.5) for _ in range(size)])
    operator = mutation.PolynomialMutation({"realMutationProbability": 0.2})

    operator.execute(solution, random_source(21))

    changed = sum(variable.value != 0.5 for variable in solution.decision_variables)
    assert changed / size == pytest.approx(0.2, abs=0.03)


def test_perturbation_is_roughly_symmetric_in_the_interior() -> None:
    rng = np.random.default_rng(0)
    steps = np.array(
        [
            mutation.polynomial_perturbation(0.0, -1.0, 1.0, 20.0, rng.random())
            for _ in range(20000)
        ]
    )
    assert abs(float(np.mean(steps))) < 0.005
    assert np.mean(steps > 0) == pytest.approx(0.5, abs=0.02)
