# Hestenes: Exterior Algebra of Basis Blades
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Outer (wedge) product of scaled basis blades."""

from hestenes.dimension import Dimension
from hestenes.scaled_basis_blade import ScaledBasisBlade
from hestenes.unit_basis_blade import UnitBasisBlade
from hestenes.validation import check_compatible, check_index


def count_swaps(lbs: int, rbs: int) -> int:
    """Counts transpositions needed to sort ``lhs`` factors followed by ``rhs`` factors.

    Every factor ``e_p`` of the left blade has to jump over each factor of
    the right blade with a lower index. Shifting ``lbs`` right one bit at a
    time lines up bit ``p`` of the left blade with lower bits of the right
    one, so each shift contributes ``popcount(shifted & rbs)``.

    Args:
        lbs (int): Bitset of the left blade.
        rbs (int): Bitset of the right blade.

    Returns:
        int: Total number of swaps; only its parity matters.
    """
    total_swaps = 0
    while lbs > 1:
        lbs >>= 1
        total_swaps += Dimension.count_bits(lbs & rbs)
    return total_swaps


def orient_indices(indices, dimension: Dimension):
    """Wedges ``e_{i1} ^ e_{i2} ^ ...`` one factor at a time.

    Args:
        indices (Iterable[int]): 1-based basis vector indices, any order.
        dimension (Dimension): Vector space of the factors.

    Returns:
        Tuple[int, int] | None: ``(bitset, swaps)`` of the sorted blade, or
        ``None`` when an index repeats.
    """
    bitset = 0
    total_swaps = 0
    for i in indices:
        check_index(i, dimension, "orient_indices")
        bit = 1 << (i - 1)
        if bitset & bit:
            return None
        # e_i jumps over every factor already present with a higher index
        total_swaps += count_swaps(bitset, bit)
        bitset |= bit
    return bitset, total_swaps


def outer_product(lhs: ScaledBasisBlade, rhs: ScaledBasisBlade) -> ScaledBasisBlade:
    """Computes the Outer Product A ^ B.

    Args:
        lhs (ScaledBasisBlade): Left operand.
        rhs (ScaledBasisBlade): Right operand.

    Returns:
        ScaledBasisBlade: The wedge, or the canonical zero when the
        operands share a basis vector.
    """
    check_compatible(lhs, rhs, "outer_product")
    field = lhs.field
    dimension = lhs.dimension

    lbs = lhs.unit_basis_blade.bitset
    rbs = rhs.unit_basis_blade.bitset

    # Linearly dependent: e_i ^ e_i = 0
    if lbs & rbs != 0:
        return ScaledBasisBlade.zero(dimension, field)

    scale = field.mul(lhs.scale, rhs.scale)
    if field.is_zero(scale):
        return ScaledBasisBlade.zero(dimension, field)

    resulting_bitset = lbs | rbs

    # Negate the scale if the number of swaps was odd
    if count_swaps(lbs, rbs) % 2 == 1:
        scale = field.neg(scale)

    return ScaledBasisBlade.new(scale, UnitBasisBlade.new(resulting_bitset, dimension), field)
