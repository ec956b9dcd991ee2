from __future__ import annotations

import math

import pytest

from moevo.core.errors import InvalidBoundsError
from moevo.core.random import random_source
from moevo.core.solution_type import Encoding, SolutionType
from moevo.core.variable import DEFAULT_BIT_LENGTH, VariableKind


def test_problem_exposes_dimensions(box_problem) -> None:
    problem = box_problem([VariableKind.REAL] * 3, lower=[0, 0, 0], upper=[1, 2, 3])
    assert problem.number_of_variables == 3
    assert problem.variable_count() == 3
    assert problem.number_of_objectives == 1
    assert problem.number_of_constraints == 0
    assert problem.bound(2) == (0.0, 3.0)
    assert problem.solution_type.encoding is Encoding.REAL


def test_bit_length_defaults_to_sixteen(box_problem) -> None:
    problem = box_problem([VariableKind.BINARY] * 2)
    assert problem.bit_length(1) == DEFAULT_BIT_LENGTH
    assert problem.number_of_bits() == 2 * DEFAULT_BIT_LENGTH
    assert problem.precision(0) == DEFAULT_BIT_LENGTH


def test_declared_lengths_are_used(box_problem) -> None:
    problem = box_problem([VariableKind.BINARY] * 2, length=[30, 5])
    assert problem.bit_length(0) == 30
    assert problem.number_of_bits() == 35


def test_set_limits_rejects_inverted_bounds(box_problem) -> None:
    with pytest.raises(InvalidBoundsError) as info:
        box_problem([VariableKind.REAL] * 2, lower=[0.0, 1.0], upper=[1.0, 0.5])
    assert info.value.position == 1


def test_set_limits_checks_length(box_problem) -> None:
    problem = box_problem([VariableKind.REAL] * 2)
    with pytest.raises(ValueError, match="one entry per variable"):
        problem.set_limits([0.0], [1.0])


def test_bound_without_limits_fails(box_problem) -> None:
    problem = box_problem([VariableKind.REAL])
    with pytest.raises(InvalidBoundsError) as info:
        problem.bound(0)
    assert info.value.position == 0
    assert math.isnan(info.value.lower) and math.isnan(info.value.upper)


def test_solution_type_must_match_variable_count(box_problem) -> None:
    problem = box_problem([VariableKind.REAL] * 2)
    with pytest.raises(ValueError):
        problem.set_solution_type(SolutionType.real(3))


@pytest.mark.parametrize(
    "kwargs",
    [
        {"number_of_variables": -1},
        {"number_of_objectives": 0},
        {"number_of_constraints": -2},
    ],
)
def test_invalid_dimensions_are_rejected(kwargs) -> None:
    from moevo.core.problem import Problem

    class Dummy(Problem):
        def evaluate(self, solution) -> None:
            return None

    with pytest.raises(ValueError):
        Dummy(**kwargs)


def test_create_solution_conforms(box_problem) -> None:
    problem = box_problem(
        [VariableKind.REAL, VariableKind.BINARY],
        lower=[1.0, 0.0],
        upper=[2.0, 0.0],
        length=[0, 8],
    )
    solution = problem.create_solution(random_source(3))
    assert problem.solution_type.conforms(solution.decision_variables)
    assert 1.0 <= solution.decision_variables[0].value <= 2.0
    assert solution.decision_variables[1].length == 8


def test_evaluate_constraints_is_a_no_op(box_problem) -> None:
    problem = box_problem([VariableKind.REAL], lower=[0.0], upper=[1.0])
    solution = problem.create_solution(random_source(0))
    assert problem.evaluate_constraints(solution) is None
    assert solution.constraint_violation == 0.0
