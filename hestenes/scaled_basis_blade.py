# Hestenes: Exterior Algebra of Basis Blades
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Scaled basis blades: a field coefficient times a unit basis blade."""

from dataclasses import dataclass, field as dc_field

from hestenes.dimension import Dimension
from hestenes.field import Field, FloatField
from hestenes.unit_basis_blade import UnitBasisBlade

_SUBSCRIPTS = str.maketrans("0123456789", "₀₁₂₃₄₅₆₇₈₉")


@dataclass(frozen=True)
class ScaledBasisBlade:
    """Oriented k-vector ``scale * e_I``.

    Always build through :meth:`new` (or the other classmethods, which
    route through it): a zero scale or a zero unit blade collapses to the
    canonical zero, so ``==`` is mathematical equality.

    Attributes:
        scale: Coefficient, an element of ``field``.
        unit_basis_blade (UnitBasisBlade): The unscaled blade.
        field (Field): Scalar field of ``scale``. Not part of equality.
    """
    scale: object
    unit_basis_blade: UnitBasisBlade
    field: Field = dc_field(default_factory=FloatField, compare=False, repr=False)

    @classmethod
    def zero(cls, dimension: Dimension, field: Field = None) -> "ScaledBasisBlade":
        field = field if field is not None else FloatField()
        return cls(field.zero(), UnitBasisBlade.zero(dimension), field)

    @classmethod
    def new(cls, scale, unit_basis_blade: UnitBasisBlade,
            field: Field = None) -> "ScaledBasisBlade":
        field = field if field is not None else FloatField()
        if unit_basis_blade.is_zero() or field.is_zero(scale):
            return cls.zero(unit_basis_blade.dimension, field)
        return cls(scale, unit_basis_blade, field)

    @classmethod
    def from_unit(cls, unit_basis_blade: UnitBasisBlade,
                  field: Field = None) -> "ScaledBasisBlade":
        field = field if field is not None else FloatField()
        return cls.new(field.one(), unit_basis_blade, field)

    @classmethod
    def from_tuple(cls, pair, dimension: Dimension,
                   field: Field = None) -> "ScaledBasisBlade":
        """Builds from ``(scale, blade)``.

        ``blade`` is a :class:`UnitBasisBlade`, an int bitset, or a sequence
        of 1-based indices in any order (see :meth:`from_indices`).
        """
        field = field if field is not None else FloatField()
        scale, unit = pair
        scale = field.coerce(scale)
        if isinstance(unit, (UnitBasisBlade, int)):
            return cls.new(scale, UnitBasisBlade.coerce(unit, dimension), field)
        return cls.from_indices(scale, unit, dimension, field)

    @classmethod
    def from_indices(cls, scale, indices, dimension: Dimension,
                     field: Field = None) -> "ScaledBasisBlade":
        """``scale * e_{i1} ^ e_{i2} ^ ...`` for 1-based indices in any order.

        Reordering into ascending order flips the sign once per swap;
        a repeated index gives the canonical zero.
        """
        from hestenes.ops import orient_indices
        field = field if field is not None else FloatField()
        oriented = orient_indices(indices, dimension)
        if oriented is None:
            return cls.zero(dimension, field)
        bitset, swaps = oriented
        if swaps % 2 == 1:
            scale = field.neg(scale)
        return cls.new(scale, UnitBasisBlade(bitset, dimension), field)

    @property
    def dimension(self) -> Dimension:
        return self.unit_basis_blade.dimension

    def is_zero(self) -> bool:
        return self.field.is_zero(self.scale)

    def grade(self) -> int:
        return self.unit_basis_blade.grade()

    def outer(self, other: "ScaledBasisBlade") -> "ScaledBasisBlade":
        """Outer product (A ^ B)."""
        from hestenes.ops import outer_product
        return outer_product(self, other)

    def __xor__(self, other):
        if not isinstance(other, ScaledBasisBlade):
            return NotImplemented
        return self.outer(other)

    def __hash__(self):
        # tensors hash by identity; hash the plain number so equal blades agree
        return hash((self.field.to_python(self.scale), self.unit_basis_blade))

    def __neg__(self):
        return ScaledBasisBlade.new(self.field.neg(self.scale), self.unit_basis_blade, self.field)

    def __str__(self):
        scale = self.field.to_python(self.scale)
        if self.unit_basis_blade.is_zero():
            return f"{scale}"
        symbols = "".join(f"e{i}".translate(_SUBSCRIPTS) for i in self.unit_basis_blade.indices())
        return f"{scale} {symbols}"

    def to_latex(self) -> str:
        """Renders as ``{scale}\\boldsymbol{e}_1\\boldsymbol{e}_3``."""
        out = f"{self.field.to_python(self.scale)}"
        for i in self.unit_basis_blade.indices():
            out += f"\\boldsymbol{{e}}_{{{i}}}"
        return out
