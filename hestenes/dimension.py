# Hestenes: Exterior Algebra of Basis Blades
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Dimension of the underlying vector space.

A blade over ``n`` basis vectors is encoded as an ``n``-bit integer,
bit ``i`` standing for ``e_{i+1}``.
"""

from dataclasses import dataclass

MAX_DIMENSION = 64


@dataclass(frozen=True)
class Dimension:
    """Number of orthonormal basis vectors ``e_1 ... e_n``.

    Attributes:
        n (int): Number of basis vectors.
    """
    n: int

    def __post_init__(self):
        if not 0 <= self.n <= MAX_DIMENSION:
            raise ValueError(f"dimension must be in [0, {MAX_DIMENSION}], got {self.n}")

    @property
    def mask(self) -> int:
        """Bitset with every basis vector set."""
        return (1 << self.n) - 1

    @property
    def num_blades(self) -> int:
        """Number of unit basis blades (2^n), zero sentinel included."""
        return 1 << self.n

    @staticmethod
    def count_bits(bitset: int) -> int:
        return bin(bitset).count('1')

    def contains(self, bitset: int) -> bool:
        """True if ``bitset`` only uses basis vectors of this dimension."""
        return bitset >= 0 and bitset & ~self.mask == 0

    def __str__(self):
        return f"R^{self.n}"
