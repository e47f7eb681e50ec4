# Hestenes: Exterior Algebra of Basis Blades
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Scalar fields for blade coefficients.

A field supplies the five operations the outer product needs
(zero, one, neg, is_zero, mul) plus conversion helpers. Blades never
touch their scale except through these.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction

import torch


def resolve_device(device: str = "auto") -> str:
    """Resolve ``'auto'`` to the best available accelerator.

    Priority: cuda > mps > cpu.
    """
    if device != "auto":
        return device
    if torch.cuda.is_available():
        return "cuda"
    if hasattr(torch.backends, "mps") and torch.backends.mps.is_available():
        return "mps"
    return "cpu"


class Field:
    """Base class for scalar fields."""

    name = "field"

    def zero(self):
        raise NotImplementedError

    def one(self):
        raise NotImplementedError

    def neg(self, x):
        return -x

    def is_zero(self, x) -> bool:
        return x == 0

    def mul(self, x, y):
        return x * y

    def coerce(self, value):
        """Convert a literal (int, float, str) into a field element."""
        raise NotImplementedError

    def to_python(self, x):
        """Plain Python number used for display."""
        return x


@dataclass(frozen=True)
class FloatField(Field):
    """IEEE double precision, the default."""

    name = "float"

    def zero(self):
        return 0.0

    def one(self):
        return 1.0

    def coerce(self, value):
        return float(value)


@dataclass(frozen=True)
class FractionField(Field):
    """Exact rationals via :class:`fractions.Fraction`."""

    name = "fraction"

    def zero(self):
        return Fraction(0)

    def one(self):
        return Fraction(1)

    def coerce(self, value):
        # Fraction(0.1) is the exact binary value, not 1/10
        if isinstance(value, float):
            return Fraction(str(value))
        return Fraction(value)


@dataclass(frozen=True)
class TensorField(Field):
    """0-dim torch tensors on a given dtype / device.

    Attributes:
        dtype (str): Name of a torch dtype, e.g. ``'float32'``.
        device (str): Torch device; ``'auto'`` is resolved on construction.
    """

    name = "tensor"

    dtype: str = "float32"
    device: str = "cpu"

    def __post_init__(self):
        object.__setattr__(self, "device", resolve_device(self.device))
        if not isinstance(getattr(torch, self.dtype, None), torch.dtype):
            raise ValueError(f"Unknown torch dtype: {self.dtype}")

    @property
    def torch_dtype(self) -> torch.dtype:
        return getattr(torch, self.dtype)

    def zero(self):
        return torch.zeros((), dtype=self.torch_dtype, device=self.device)

    def one(self):
        return torch.ones((), dtype=self.torch_dtype, device=self.device)

    def is_zero(self, x) -> bool:
        return bool(x == 0)

    def coerce(self, value):
        return torch.as_tensor(value, dtype=self.torch_dtype, device=self.device)

    def to_python(self, x):
        return x.item()


FIELDS = {
    'float': FloatField,
    'fraction': FractionField,
    'tensor': TensorField,
}


def get_field(name: str = 'float', **kwargs) -> Field:
    """Instantiate a field by name.

    Args:
        name (str): One of ``float``, ``fraction``, ``tensor``.
        **kwargs: Forwarded to the field (``dtype``/``device`` for tensors).

    Returns:
        Field: The field instance.
    """
    if name not in FIELDS:
        raise ValueError(f"Unknown field: {name}. Available: {list(FIELDS.keys())}")
    return FIELDS[name](**kwargs)
