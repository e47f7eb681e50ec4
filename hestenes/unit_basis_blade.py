# Hestenes: Exterior Algebra of Basis Blades
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Unscaled, oriented basis blades encoded as bitsets."""

from dataclasses import dataclass
from typing import Iterable, Tuple

from hestenes.dimension import Dimension
from hestenes.validation import check_bitset, check_index


@dataclass(frozen=True)
class UnitBasisBlade:
    """Basis blade with implicit coefficient 1.

    Bit ``i`` of ``bitset`` marks ``e_{i+1}`` as a factor, so ``0b101``
    is ``e_1 ^ e_3``. The factors are always taken in ascending order;
    the orientation of any other ordering lives in the scale of a
    :class:`ScaledBasisBlade`.

    ``bitset == 0`` is the zero sentinel, not the scalar blade.

    Attributes:
        bitset (int): Raw encoding, no bits at or beyond ``dimension.n``.
        dimension (Dimension): Vector space the blade lives in.
    """
    bitset: int
    dimension: Dimension

    def __post_init__(self):
        check_bitset(self.bitset, self.dimension, "UnitBasisBlade")

    @classmethod
    def zero(cls, dimension: Dimension) -> "UnitBasisBlade":
        return cls(0, dimension)

    @classmethod
    def new(cls, bitset: int, dimension: Dimension) -> "UnitBasisBlade":
        return cls(bitset, dimension)

    @classmethod
    def from_indices(cls, indices: Iterable[int], dimension: Dimension) -> "UnitBasisBlade":
        """Builds a blade from 1-based basis vector indices, e.g. ``(1, 3)``.

        A unit blade has no room for a sign, so the indices must be strictly
        ascending. Use :meth:`ScaledBasisBlade.from_indices` for any other
        order or for repeated factors.
        """
        indices = tuple(indices)
        bitset = 0
        previous = 0
        for i in indices:
            check_index(i, dimension, "UnitBasisBlade.from_indices")
            if i <= previous:
                raise ValueError(f"indices must be strictly ascending, got {indices}")
            bitset |= 1 << (i - 1)
            previous = i
        return cls(bitset, dimension)

    @classmethod
    def coerce(cls, value, dimension: Dimension) -> "UnitBasisBlade":
        """Accepts a blade, an int bitset or an ascending sequence of 1-based indices."""
        if isinstance(value, UnitBasisBlade):
            return value
        if isinstance(value, int):
            return cls(value, dimension)
        return cls.from_indices(value, dimension)

    def is_zero(self) -> bool:
        return self.bitset == 0

    def grade(self) -> int:
        """Number of basis vectors in the blade."""
        return self.dimension.count_bits(self.bitset)

    def basis_vectors(self) -> Tuple[bool, ...]:
        """Participation flags for ``e_1 ... e_n`` in ascending order."""
        return tuple(bool(self.bitset >> i & 1) for i in range(self.dimension.n))

    def indices(self) -> Tuple[int, ...]:
        """1-based indices of the participating basis vectors."""
        return tuple(i + 1 for i, present in enumerate(self.basis_vectors()) if present)
