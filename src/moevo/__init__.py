"""moevo: encoding model and mutation operators for multi-objective evolutionary optimisation.

The encoding model (problems, solution types, variables and solutions) lets an
operator be written once for real, binary and mixed real+binary decision
vectors. Mutation operators receive their random source explicitly, so a run
is reproducible from its seed.
"""

__version__ = "0.1.0"

from .core import (
    BinaryVariable,
    Encoding,
    InvalidBoundsError,
    MissingConfigurationError,
    NumpyRandomSource,
    OutOfBoundsValueError,
    Problem,
    RandomSource,
    RealVariable,
    Solution,
    SolutionType,
    UnsupportedEncodingError,
    VariableKind,
    VariationError,
    random_source,
)
from .operators import (
    BitFlipMutation,
    MutationOperator,
    PolynomialBitFlipMutation,
    PolynomialMutation,
    mutation_factory,
)

__all__ = [
    "__version__",
    "BinaryVariable",
    "BitFlipMutation",
    "Encoding",
    "InvalidBoundsError",
    "MissingConfigurationError",
    "MutationOperator",
    "NumpyRandomSource",
    "OutOfBoundsValueError",
    "PolynomialBitFlipMutation",
    "PolynomialMutation",
    "Problem",
    "RandomSource",
    "RealVariable",
    "Solution",
    "SolutionType",
    "UnsupportedEncodingError",
    "VariableKind",
    "VariationError",
    "mutation_factory",
    "random_source",
]
