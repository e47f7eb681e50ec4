# Hestenes: Exterior Algebra of Basis Blades
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Hestenes — outer products of basis blades.

Provides unit and scaled basis blades, the wedge product with swap-parity
orientation, scalar fields, and a batched torch table of blade products.
"""

__version__ = "0.1.0"

from .dimension import Dimension
from .field import Field, FloatField, FractionField, TensorField, get_field, resolve_device
from .unit_basis_blade import UnitBasisBlade
from .scaled_basis_blade import ScaledBasisBlade
from .ops import outer_product, count_swaps
from .table import outer_product_table
from .algebra import ExteriorAlgebra

__all__ = [
    "__version__",
    # blades
    "Dimension",
    "UnitBasisBlade",
    "ScaledBasisBlade",
    # fields
    "Field",
    "FloatField",
    "FractionField",
    "TensorField",
    "get_field",
    "resolve_device",
    # products
    "outer_product",
    "count_swaps",
    "outer_product_table",
    "ExteriorAlgebra",
]
