"""Encoding model shared by problems, solutions and operators."""

from .errors import (
    InvalidBoundsError,
    MissingConfigurationError,
    OutOfBoundsValueError,
    UnsupportedEncodingError,
    VariationError,
)
from .problem import Problem
from .random import NumpyRandomSource, RandomSource, random_source
from .solution import Solution
from .solution_type import Encoding, SolutionType
from .variable import (
    DEFAULT_BIT_LENGTH,
    BinaryVariable,
    RealVariable,
    Variable,
    VariableKind,
)

__all__ = [
    "DEFAULT_BIT_LENGTH",
    "BinaryVariable",
    "Encoding",
    "InvalidBoundsError",
    "MissingConfigurationError",
    "NumpyRandomSource",
    "OutOfBoundsValueError",
    "Problem",
    "RandomSource",
    "RealVariable",
    "Solution",
    "SolutionType",
    "UnsupportedEncodingError",
    "Variable",
    "VariableKind",
    "VariationError",
    "random_source",
]
