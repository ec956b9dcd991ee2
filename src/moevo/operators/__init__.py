"""Variation operators."""

from .mutation import (
    MUTATION_OPERATORS,
    BitFlipMutation,
    MutationOperator,
    PolynomialBitFlipMutation,
    PolynomialMutation,
    bit_flip_mutation,
    mutation_factory,
    polynomial_mutation,
    polynomial_perturbation,
)

__all__ = [
    "MUTATION_OPERATORS",
    "BitFlipMutation",
    "MutationOperator",
    "PolynomialBitFlipMutation",
    "PolynomialMutation",
    "bit_flip_mutation",
    "mutation_factory",
    "polynomial_mutation",
    "polynomial_perturbation",
]
