from __future__ import annotations

import numpy as np
import pytest

from moevo.core.variable import (
    DEFAULT_BIT_LENGTH,
    BinaryVariable,
    RealVariable,
    VariableKind,
)


def test_real_variable_coerces_to_float() -> None:
    variable = RealVariable(3)
    assert variable.value == 3.0
    assert isinstance(variable.value, float)
    assert variable.kind is VariableKind.REAL


def test_real_variable_copy_is_independent() -> None:
    original = RealVariable(0.25)
    clone = original.copy()
    clone.value = 0.75
    assert original.value == 0.25


def test_binary_variable_from_string_and_flip() -> None:
    variable = BinaryVariable("0101")
    assert variable.kind is VariableKind.BINARY
    assert variable.length == 4
    variable.flip(0)
    variable.flip(3)
    assert str(variable) == "1100"
    assert variable.cardinality() == 2


def test_binary_variable_default_length() -> None:
    assert BinaryVariable.zeros().length == DEFAULT_BIT_LENGTH


def test_binary_variable_int_roundtrip() -> None:
    variable = BinaryVariable.from_int(11, length=6)
    assert str(variable) == "001011"
    assert variable.to_int() == 11


def test_binary_variable_rejects_values_that_do_not_fit() -> None:
    with pytest.raises(ValueError):
        BinaryVariable.from_int(16, length=4)


def test_binary_variable_length_is_fixed() -> None:
    variable = BinaryVariable.zeros(4)
    variable.bits = [1, 1, 0, 0]
    assert str(variable) == "1100"
    with pytest.raises(ValueError, match="bit length"):
        variable.bits = [1, 0, 1]
    assert variable.length == 4


def test_binary_variable_rejects_bad_input() -> None:
    with pytest.raises(ValueError):
        BinaryVariable("01a1")
    with pytest.raises(ValueError):
        BinaryVariable(np.zeros((2, 2), dtype=bool))
    with pytest.raises(ValueError, match="only contain 0 and 1"):
        BinaryVariable([0, 2])
    with pytest.raises(ValueError, match="only contain 0 and 1"):
        BinaryVariable(np.array([1, -1, 0]))
    assert str(BinaryVariable([1, 0, 1])) == "101"
    assert str(BinaryVariable(np.array([0.0, 1.0]))) == "01"


def test_binary_variable_equality_and_copy() -> None:
    variable = BinaryVariable("1010")
    clone = variable.copy()
    assert clone == variable
    clone.flip(1)
    assert clone != variable
    assert str(variable) == "1010"
    assert variable != RealVariable(1.0)
