# Hestenes: Exterior Algebra of Basis Blades
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Batched outer-product table over all unit basis blades.

Same shift-and-count parity as :func:`hestenes.ops.count_swaps`, evaluated
for every ``(a, b)`` pair at once with torch bit ops.
"""

import torch

from hestenes.dimension import Dimension
from log import get_logger

logger = get_logger(__name__)

MAX_TABLE_DIMENSION = 12


def _popcount(x: torch.Tensor, n: int) -> torch.Tensor:
    """Count set bits of an integer tensor whose values fit in ``n`` bits."""
    cnt = torch.zeros_like(x)
    for i in range(n):
        cnt += (x >> i) & 1
    return cnt


def outer_product_table(dimension: Dimension, device: str = 'cpu'):
    """Precompute ``e_a ^ e_b`` for every pair of unit blades.

    Args:
        dimension (Dimension): Vector space, ``n <= 12``.
        device (str, optional): Torch device. Defaults to 'cpu'.

    Returns:
        Tuple[torch.Tensor, torch.Tensor]: ``indices`` [2^n, 2^n] (long),
        the resulting bitset ``a | b``, and ``signs`` [2^n, 2^n] (float32)
        in {-1, 0, +1}. Both are 0 where the product vanishes: shared basis
        vectors, or either operand the zero sentinel.
    """
    n = dimension.n
    if n > MAX_TABLE_DIMENSION:
        raise ValueError(f"table dimension must be <= {MAX_TABLE_DIMENSION}, got {n}")
    logger.debug("Building %dx%d outer product table for %s on %s",
                 dimension.num_blades, dimension.num_blades, dimension, device)

    blades = torch.arange(dimension.num_blades, device=device)
    A = blades.unsqueeze(1)  # Row
    B = blades.unsqueeze(0)  # Col

    swap_counts = torch.zeros((dimension.num_blades, dimension.num_blades),
                              dtype=torch.long, device=device)
    shifted = A.expand_as(swap_counts)
    for _ in range(n):
        shifted = shifted >> 1
        swap_counts += _popcount(shifted & B, n)

    signs = 1 - 2 * (swap_counts % 2)
    vanishes = ((A & B) != 0) | (A == 0) | (B == 0)
    signs = signs.masked_fill(vanishes, 0)
    indices = (A | B).masked_fill(vanishes, 0)

    return indices, signs.to(dtype=torch.float32)
