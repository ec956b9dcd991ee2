"""Decision-variable values.

A variable is one component of a solution's decision vector. The set of kinds
is closed: :class:`VariableKind` enumerates them and :data:`Variable` is the
union of the concrete classes, so dispatchers can ``match`` exhaustively.
Adding a kind means extending the enum, the union and every ``match``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Sequence, Union

import numpy as np

__all__ = [
    "DEFAULT_BIT_LENGTH",
    "VariableKind",
    "RealVariable",
    "BinaryVariable",
    "Variable",
]

DEFAULT_BIT_LENGTH = 16
"""Bit length used when a binary position does not declare one."""


class VariableKind(str, Enum):
    REAL = "real"
    BINARY = "binary"


def _to_bits(bits: Sequence[bool] | Sequence[int] | np.ndarray | str) -> np.ndarray:
    if isinstance(bits, str):
        if set(bits) - {"0", "1"}:
            raise ValueError(f"bit string may only contain '0' and '1': {bits!r}")
        bits = [char == "1" for char in bits]
    raw = np.asarray(bits)
    if raw.ndim != 1:
        raise ValueError("bits must be 1-dimensional")
    if raw.dtype != bool and not np.isin(raw, (0, 1)).all():
        raise ValueError(f"bits may only contain 0 and 1: {raw.tolist()!r}")
    return raw.astype(bool)


@dataclass(slots=True)
class RealVariable:
    """Real-coded value; its bounds live on the owning problem."""

    value: float

    kind: ClassVar[VariableKind] = VariableKind.REAL

    def __post_init__(self) -> None:
        self.value = float(self.value)

    def copy(self) -> "RealVariable":
        return RealVariable(self.value)


class BinaryVariable:
    """Fixed-length bit string stored as a boolean numpy array.

    The length is set at construction and never changes: bits may be flipped
    or reassigned in place, but assigning an array of another length raises
    :class:`ValueError`.
    """

    __slots__ = ("_bits",)

    kind: ClassVar[VariableKind] = VariableKind.BINARY

    def __init__(self, bits: Sequence[bool] | Sequence[int] | np.ndarray | str) -> None:
        self._bits = _to_bits(bits)

    @classmethod
    def zeros(cls, length: int = DEFAULT_BIT_LENGTH) -> "BinaryVariable":
        if length < 0:
            raise ValueError("length must be non-negative")
        return cls(np.zeros(length, dtype=bool))

    @classmethod
    def from_int(cls, value: int, length: int = DEFAULT_BIT_LENGTH) -> "BinaryVariable":
        """Encode ``value`` big-endian on ``length`` bits."""
        if value < 0 or value >= 2**length:
            raise ValueError(f"{value} does not fit in {length} bits")
        return cls(format(value, f"0{length}b") if length else "")

    @property
    def bits(self) -> np.ndarray:
        return self._bits

    @bits.setter
    def bits(self, value: Sequence[bool] | np.ndarray | str) -> None:
        array = _to_bits(value)
        if array.size != self._bits.size:
            raise ValueError(
                f"cannot change bit length from {self._bits.size} to {array.size}"
            )
        self._bits = array

    @property
    def length(self) -> int:
        return int(self._bits.size)

    def flip(self, index: int) -> None:
        self._bits[index] = not self._bits[index]

    def cardinality(self) -> int:
        """Number of bits set to one."""
        return int(self._bits.sum())

    def to_int(self) -> int:
        result = 0
        for bit in self._bits:
            result = (result << 1) | int(bit)
        return result

    def copy(self) -> "BinaryVariable":
        return BinaryVariable(self._bits.copy())

    def __len__(self) -> int:
        return self.length

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BinaryVariable):
            return NotImplemented
        return np.array_equal(self._bits, other._bits)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "".join("1" if bit else "0" for bit in self._bits)

    def __repr__(self) -> str:
        return f"BinaryVariable('{self}')"


Variable = Union[RealVariable, BinaryVariable]
