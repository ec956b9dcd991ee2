"""Mutation operators for real, binary and mixed encodings.

Operators
---------
- :func:`polynomial_perturbation` – closed-form bounded polynomial step for one
  real value given the second uniform draw.
- :func:`polynomial_mutation` – per-variable Bernoulli trial followed by the
  polynomial step and a hard clamp to the bounds.
- :func:`bit_flip_mutation` – independent per-bit inversion.
- :class:`PolynomialMutation`, :class:`BitFlipMutation` and
  :class:`PolynomialBitFlipMutation` – solution-level operators that validate
  the encoding and configuration before touching any variable, then dispatch
  each position by its variable kind.
- :func:`mutation_factory` – builds an operator from a name and an option
  mapping.

Every stochastic decision consumes exactly one ``random.next_uniform()`` draw,
in position order, so replaying a seeded source reproduces the result.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Mapping

from ..config.schemas import MutationConfig
from ..core.errors import (
    InvalidBoundsError,
    MissingConfigurationError,
    OutOfBoundsValueError,
    UnsupportedEncodingError,
)
from ..core.random import RandomSource
from ..core.solution import Solution
from ..core.solution_type import Encoding
from ..core.variable import BinaryVariable, RealVariable, VariableKind

__all__ = [
    "polynomial_perturbation",
    "polynomial_mutation",
    "bit_flip_mutation",
    "MutationOperator",
    "PolynomialMutation",
    "BitFlipMutation",
    "PolynomialBitFlipMutation",
    "MUTATION_OPERATORS",
    "mutation_factory",
]

logger = logging.getLogger(__name__)


def polynomial_perturbation(
    value: float,
    lower: float,
    upper: float,
    distribution_index: float,
    rnd: float,
) -> float:
    """Apply the bounded polynomial step to ``value`` using the draw ``rnd``.

    The result is clamped to ``[lower, upper]`` after the step; the formula
    already keeps it in range except at floating-point edges. ``value`` must
    lie within ``[lower, upper]``; outside it the step has no real solution.
    """

    if not lower <= value <= upper:
        raise ValueError(f"value {value!r} is outside [{lower!r}, {upper!r}]")
    span = upper - lower
    delta1 = (value - lower) / span
    delta2 = (upper - value) / span
    mut_pow = 1.0 / (distribution_index + 1.0)
    if rnd <= 0.5:
        xy = 1.0 - delta1
        val = 2.0 * rnd + (1.0 - 2.0 * rnd) * xy ** (distribution_index + 1.0)
        deltaq = val**mut_pow - 1.0
    else:
        xy = 1.0 - delta2
        val = 2.0 * (1.0 - rnd) + 2.0 * (rnd - 0.5) * xy ** (distribution_index + 1.0)
        deltaq = 1.0 - val**mut_pow
    result = value + deltaq * span
    if result < lower:
        result = lower
    if result > upper:
        result = upper
    return result


def polynomial_mutation(
    variable: RealVariable,
    lower: float,
    upper: float,
    *,
    probability: float,
    distribution_index: float,
    random: RandomSource,
) -> bool:
    """Mutate ``variable`` in place; return ``True`` when it was perturbed."""

    if random.next_uniform() > probability:
        return False
    variable.value = polynomial_perturbation(
        variable.value, lower, upper, distribution_index, random.next_uniform()
    )
    return True


def bit_flip_mutation(
    variable: BinaryVariable, *, probability: float, random: RandomSource
) -> int:
    """Flip each bit of ``variable`` with ``probability``; return the flip count."""

    flipped = 0
    for index in range(variable.length):
        if random.next_uniform() < probability:
            variable.flip(index)
            flipped += 1
    return flipped


class MutationOperator:
    """Solution-level mutation with an encoding allow-list.

    Subclasses declare ``name`` and ``supported_encodings``. :meth:`execute`
    validates the whole solution before mutating anything, so a failing call
    leaves the solution untouched.
    """

    name: ClassVar[str] = "mutation"
    supported_encodings: ClassVar[frozenset[Encoding]] = frozenset()

    def __init__(self, config: MutationConfig | Mapping[str, Any] | None = None) -> None:
        if not isinstance(config, MutationConfig):
            config = MutationConfig.from_mapping(config)
        self._config = config

    @property
    def config(self) -> MutationConfig:
        return self._config

    @property
    def distribution_index(self) -> float:
        return self._config.distribution_index

    @property
    def real_mutation_probability(self) -> float | None:
        return self._config.real_mutation_probability

    @property
    def binary_mutation_probability(self) -> float | None:
        return self._config.binary_mutation_probability

    def validate(self, solution: Solution) -> None:
        """Raise if ``solution`` cannot be mutated by this operator."""

        solution_type = solution.type
        encoding = solution_type.encoding
        if encoding not in self.supported_encodings:
            logger.error(
                "%s: solution type %s is not allowed with this operator",
                type(self).__name__,
                solution_type,
            )
            supported = ", ".join(sorted(item.value for item in self.supported_encodings))
            raise UnsupportedEncodingError(
                f"{type(self).__name__} does not support encoding "
                f"'{encoding.value}' (supported: {supported})"
            )

        real_positions = solution_type.positions(VariableKind.REAL)
        if real_positions and self.real_mutation_probability is None:
            raise MissingConfigurationError(
                f"{type(self).__name__} requires realMutationProbability"
            )
        if solution_type.positions(VariableKind.BINARY) and self.binary_mutation_probability is None:
            raise MissingConfigurationError(
                f"{type(self).__name__} requires binaryMutationProbability"
            )

        problem = solution.problem
        for position in real_positions:
            lower, upper = problem.bound(position)
            if not lower < upper:
                raise InvalidBoundsError(position, lower, upper)
            value = solution.decision_variables[position].value
            if not lower <= value <= upper:
                raise OutOfBoundsValueError(position, value, lower, upper)

        for position in solution_type.positions(VariableKind.BINARY):
            declared = problem.bit_length(position)
            observed = solution.decision_variables[position].length
            if observed != declared:
                raise UnsupportedEncodingError(
                    f"binary variable at position {position} has {observed} bits, "
                    f"problem declares {declared}"
                )

    def execute(self, solution: Solution, random: RandomSource) -> None:
        """Mutate ``solution`` in place.

        Objectives and constraint values are left as they are; the caller is
        responsible for re-evaluating the solution.
        """

        self.validate(solution)
        problem = solution.problem
        mutated = 0
        flipped = 0
        for position, variable in enumerate(solution.decision_variables):
            match variable:
                case RealVariable():
                    lower, upper = problem.bound(position)
                    mutated += polynomial_mutation(
                        variable,
                        lower,
                        upper,
                        probability=self.real_mutation_probability,
                        distribution_index=self.distribution_index,
                        random=random,
                    )
                case BinaryVariable():
                    flipped += bit_flip_mutation(
                        variable,
                        probability=self.binary_mutation_probability,
                        random=random,
                    )
                case _:  # pragma: no cover - exhaustive over Variable
                    raise AssertionError(f"unhandled variable {variable!r}")
        logger.debug(
            "%s: %d real positions perturbed, %d bits flipped",
            self.name,
            mutated,
            flipped,
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(distribution_index={self.distribution_index}, "
            f"real_mutation_probability={self.real_mutation_probability}, "
            f"binary_mutation_probability={self.binary_mutation_probability})"
        )


class PolynomialMutation(MutationOperator):
    name = "polynomial"
    supported_encodings = frozenset({Encoding.REAL})


class BitFlipMutation(MutationOperator):
    name = "bit_flip"
    supported_encodings = frozenset({Encoding.BINARY})


class PolynomialBitFlipMutation(MutationOperator):
    """Polynomial mutation on real positions and bit flips on binary ones."""

    name = "polynomial_bit_flip"
    supported_encodings = frozenset(
        {Encoding.REAL, Encoding.BINARY, Encoding.REAL_AND_BINARY}
    )


MUTATION_OPERATORS: dict[str, type[MutationOperator]] = {
    cls.name: cls for cls in (PolynomialMutation, BitFlipMutation, PolynomialBitFlipMutation)
}


def mutation_factory(
    method: str, options: MutationConfig | Mapping[str, Any] | None = None
) -> MutationOperator:
    key = str(method).lower()
    try:
        operator_cls = MUTATION_OPERATORS[key]
    except KeyError:
        raise ValueError(f"unsupported mutation method '{method}'") from None
    return operator_cls(options)
