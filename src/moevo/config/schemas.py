"""Pydantic schemas for operator and run configuration.

Option names follow the camelCase keys used in experiment files
(``distributionIndex``, ``realMutationProbability``,
``binaryMutationProbability``); the snake_case field names are accepted as
well. Unknown keys are ignored.
"""

from __future__ import annotations

from typing import Any, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "DEFAULT_DISTRIBUTION_INDEX",
    "MutationConfig",
    "VariationRunConfig",
]

DEFAULT_DISTRIBUTION_INDEX = 20.0


class MutationConfig(BaseModel):
    """Options of the mutation operators.

    Attributes
    ----------
    distribution_index : float
        Spread control of polynomial mutation; larger values keep offspring
        closer to the parent.
    real_mutation_probability : float, optional
        Per-variable probability of perturbing a real-coded position.
    binary_mutation_probability : float, optional
        Per-bit probability of flipping a binary-coded position.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    distribution_index: float = Field(
        default=DEFAULT_DISTRIBUTION_INDEX,
        ge=0,
        alias="distributionIndex",
        description="Polynomial mutation distribution index",
    )
    real_mutation_probability: float | None = Field(
        default=None,
        ge=0,
        le=1,
        alias="realMutationProbability",
        description="Probability of mutating each real-coded variable",
    )
    binary_mutation_probability: float | None = Field(
        default=None,
        ge=0,
        le=1,
        alias="binaryMutationProbability",
        description="Probability of flipping each bit",
    )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | None) -> "MutationConfig":
        return cls.model_validate(dict(mapping or {}))


class VariationRunConfig(BaseModel):
    """Experiment file consumed by ``moevo mutate --config``."""

    model_config = ConfigDict(extra="ignore")

    problem: str = Field(default="zdt5", description="Registered problem name")
    operator: Literal["polynomial", "bit_flip", "polynomial_bit_flip"] = Field(
        default="polynomial_bit_flip", description="Registered mutation operator"
    )
    seed: int | None = Field(default=None, description="Seed for the random source")
    problem_options: dict[str, Any] = Field(
        default_factory=dict, description="Keyword arguments for the problem constructor"
    )
    mutation: MutationConfig = Field(default_factory=MutationConfig)
