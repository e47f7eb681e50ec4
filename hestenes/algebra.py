# Hestenes: Exterior Algebra of Basis Blades
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

from hestenes.dimension import Dimension
from hestenes.field import Field, get_field
from hestenes.ops import outer_product
from hestenes.scaled_basis_blade import ScaledBasisBlade
from hestenes.table import outer_product_table
from log import get_logger

logger = get_logger(__name__)


class ExteriorAlgebra:
    """Exterior algebra over ``R^n`` with a fixed orthonormal basis.

    Binds a dimension and a scalar field so blades can be built from
    plain literals.

    Attributes:
        n (int): Number of basis vectors.
        dimension (Dimension): The vector space.
        field (Field): Scalar field of the coefficients.
    """
    _CACHED_TABLES = {}

    def __init__(self, n: int, field='float', **field_kwargs):
        """Initialize the algebra.

        Args:
            n (int): Number of basis vectors.
            field (str | Field, optional): Field name or instance. Defaults to 'float'.
            **field_kwargs: Forwarded to :func:`get_field` when ``field`` is a name.
        """
        self.n = n
        self.dimension = Dimension(n)
        self.field = field if isinstance(field, Field) else get_field(field, **field_kwargs)
        logger.debug("ExteriorAlgebra(%s, field=%s)", self.dimension, self.field.name)

    def zero(self) -> ScaledBasisBlade:
        return ScaledBasisBlade.zero(self.dimension, self.field)

    def unit(self, value) -> ScaledBasisBlade:
        """Unit-scale blade from a bitset or a sequence of 1-based indices (any order)."""
        return self.blade(self.field.one(), value)

    def blade(self, scale, value) -> ScaledBasisBlade:
        """Scaled blade from a literal scale and a bitset or index sequence.

        Index sequences carry orientation: ``blade(1, (2, 1))`` is ``-e_1 e_2``.
        """
        return ScaledBasisBlade.from_tuple((scale, value), self.dimension, self.field)

    def basis_vector(self, i: int) -> ScaledBasisBlade:
        """The grade-1 blade ``e_i`` (1-based)."""
        return self.unit((i,))

    def outer(self, a: ScaledBasisBlade, b: ScaledBasisBlade) -> ScaledBasisBlade:
        return outer_product(a, b)

    def outer_product_table(self, device: str = None):
        """Cached ``(indices, signs)`` table, see :func:`hestenes.table.outer_product_table`."""
        device = device or getattr(self.field, 'device', 'cpu')
        cache_key = (self.n, str(device))
        if cache_key not in ExteriorAlgebra._CACHED_TABLES:
            ExteriorAlgebra._CACHED_TABLES[cache_key] = outer_product_table(self.dimension, device)
        return ExteriorAlgebra._CACHED_TABLES[cache_key]

    def __repr__(self):
        return f"ExteriorAlgebra(n={self.n}, field={self.field.name})"
