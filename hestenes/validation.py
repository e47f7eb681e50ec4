# Hestenes: Exterior Algebra of Basis Blades
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Lightweight precondition checks for blades.

All checks use ``assert`` so they are free under ``python -O``.
Set ``VALIDATE = False`` to disable even without the -O flag.
"""

VALIDATE = True


def check_bitset(bitset: int, dimension, name: str = "bitset") -> None:
    """Assert *bitset* only uses basis vectors of *dimension*."""
    if not VALIDATE:
        return
    assert isinstance(bitset, int), (
        f"{name}: expected an int bitset, got {type(bitset).__name__}"
    )
    assert dimension.contains(bitset), (
        f"{name}: {bitset:#b} has bits outside {dimension} "
        f"(mask {dimension.mask:#b})"
    )


def check_index(index: int, dimension, name: str = "index") -> None:
    """Assert *index* names a basis vector ``e_1 ... e_n`` of *dimension*."""
    if not VALIDATE:
        return
    assert isinstance(index, int), (
        f"{name}: expected an int index, got {type(index).__name__}"
    )
    assert 1 <= index <= dimension.n, (
        f"{name}: basis vector e_{index} not in {dimension}"
    )


def check_compatible(lhs, rhs, name: str = "outer") -> None:
    """Assert two blades share a dimension and a scalar field."""
    if not VALIDATE:
        return
    ld = lhs.unit_basis_blade.dimension
    rd = rhs.unit_basis_blade.dimension
    assert ld == rd, f"{name}: dimension mismatch, {ld} vs {rd}"
    assert lhs.field == rhs.field, (
        f"{name}: field mismatch, {lhs.field!r} vs {rhs.field!r}"
    )
