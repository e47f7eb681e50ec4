"""Tests for unit and scaled basis blades.

Covers:
- Bitset encoding, grade, participation flags
- Zero canonicalization of scaled blades
- Conversions from literals, tuples and index sequences
- Display (unicode and LaTeX)
- Dimension bound assertions
"""

import pytest

from hestenes import validation
from hestenes.dimension import Dimension
from hestenes.field import FloatField, FractionField
from hestenes.scaled_basis_blade import ScaledBasisBlade
from hestenes.unit_basis_blade import UnitBasisBlade


R3 = Dimension(3)


# ── Dimension ──────────────────────────────────────────────────────────

class TestDimension:

    def test_mask_and_count(self):
        assert R3.mask == 0b111
        assert R3.num_blades == 8
        assert Dimension.count_bits(0b1011) == 3

    def test_contains(self):
        assert R3.contains(0b101)
        assert not R3.contains(0b1000)
        assert not R3.contains(-1)

    @pytest.mark.parametrize("n", [-1, 65])
    def test_out_of_range(self, n):
        with pytest.raises(ValueError):
            Dimension(n)


# ── UnitBasisBlade ─────────────────────────────────────────────────────

class TestUnitBasisBlade:

    def test_zero(self):
        z = UnitBasisBlade.zero(R3)
        assert z.is_zero()
        assert z.bitset == 0
        assert z.basis_vectors() == (False, False, False)

    def test_basis_vectors_ascending(self):
        blade = UnitBasisBlade.new(0b101, R3)
        assert blade.basis_vectors() == (True, False, True)
        assert blade.indices() == (1, 3)
        assert blade.grade() == 2
        assert not blade.is_zero()

    def test_from_indices(self):
        assert UnitBasisBlade.from_indices((1, 3), R3) == UnitBasisBlade(0b101, R3)
        assert UnitBasisBlade.from_indices((), R3).is_zero()

    @pytest.mark.parametrize("indices", [(3, 1), (1, 1), (2, 3, 3)])
    def test_from_indices_rejects_unsorted(self, indices):
        with pytest.raises(ValueError, match="strictly ascending"):
            UnitBasisBlade.from_indices(indices, R3)

    @pytest.mark.parametrize("value", [0b110, (2, 3), [2, 3]])
    def test_coerce(self, value):
        assert UnitBasisBlade.coerce(value, R3).bitset == 0b110

    def test_coerce_rejects_unsorted(self):
        with pytest.raises(ValueError):
            UnitBasisBlade.coerce([3, 2], R3)

    def test_coerce_passthrough(self):
        blade = UnitBasisBlade(0b010, R3)
        assert UnitBasisBlade.coerce(blade, R3) is blade

    def test_bits_beyond_dimension(self):
        with pytest.raises(AssertionError):
            UnitBasisBlade(0b1000, R3)

    @pytest.mark.parametrize("index", [0, 4, -1])
    def test_index_out_of_range(self, index):
        with pytest.raises(AssertionError, match="not in R\\^3"):
            UnitBasisBlade.from_indices((index,), R3)
        with pytest.raises(AssertionError, match="not in R\\^3"):
            ScaledBasisBlade.from_indices(1.0, (index,), R3)

    def test_index_check_follows_validate_flag(self, monkeypatch):
        monkeypatch.setattr(validation, "VALIDATE", False)
        # unchecked: e_4 lands on bit 3 of a 3-dimensional blade
        assert UnitBasisBlade.from_indices((4,), R3).bitset == 0b1000

    def test_validation_can_be_disabled(self, monkeypatch):
        monkeypatch.setattr(validation, "VALIDATE", False)
        assert UnitBasisBlade(0b1000, R3).bitset == 0b1000

    def test_dimension_part_of_identity(self):
        assert UnitBasisBlade(0b1, R3) != UnitBasisBlade(0b1, Dimension(4))


# ── ScaledBasisBlade ───────────────────────────────────────────────────

class TestScaledBasisBlade:

    @pytest.mark.parametrize("bitset", range(8))
    def test_zero_scale_canonicalizes(self, bitset):
        blade = ScaledBasisBlade.new(0.0, UnitBasisBlade(bitset, R3))
        assert blade == ScaledBasisBlade.zero(R3)
        assert blade.unit_basis_blade.bitset == 0
        assert blade.is_zero()

    @pytest.mark.parametrize("scale", [1.0, -2.5, 1e-300])
    def test_zero_blade_canonicalizes(self, scale):
        blade = ScaledBasisBlade.new(scale, UnitBasisBlade.zero(R3))
        assert blade == ScaledBasisBlade.zero(R3)
        assert blade.scale == 0.0

    def test_nonzero_kept(self):
        blade = ScaledBasisBlade.new(2.0, UnitBasisBlade(0b011, R3))
        assert blade.scale == 2.0
        assert blade.unit_basis_blade == UnitBasisBlade(0b011, R3)
        assert not blade.is_zero()
        assert blade.grade() == 2

    def test_from_unit_has_unit_scale(self):
        blade = ScaledBasisBlade.from_unit(UnitBasisBlade(0b100, R3))
        assert blade.scale == 1.0
        assert ScaledBasisBlade.from_unit(UnitBasisBlade.zero(R3)).is_zero()

    def test_from_tuple(self):
        blade = ScaledBasisBlade.from_tuple((2, 0b110), R3)
        assert blade == ScaledBasisBlade.new(2.0, UnitBasisBlade(0b110, R3))
        assert ScaledBasisBlade.from_tuple((0, (1, 2)), R3).is_zero()

    def test_from_tuple_fraction(self):
        field = FractionField()
        blade = ScaledBasisBlade.from_tuple((0.1, 0b1), R3, field)
        assert str(blade) == "1/10 e₁"

    def test_negation(self):
        blade = ScaledBasisBlade.new(2.0, UnitBasisBlade(0b101, R3))
        assert (-blade).scale == -2.0
        assert -(-blade) == blade
        assert -ScaledBasisBlade.zero(R3) == ScaledBasisBlade.zero(R3)

    def test_field_not_part_of_equality(self):
        a = ScaledBasisBlade.new(2, UnitBasisBlade(0b1, R3), FractionField())
        b = ScaledBasisBlade.new(2.0, UnitBasisBlade(0b1, R3), FloatField())
        assert a == b

    def test_immutable(self):
        blade = ScaledBasisBlade.new(2.0, UnitBasisBlade(0b1, R3))
        with pytest.raises(AttributeError):
            blade.scale = 3.0

    def test_xor_rejects_other_types(self):
        blade = ScaledBasisBlade.new(2.0, UnitBasisBlade(0b1, R3))
        with pytest.raises(TypeError):
            blade ^ 3

    @pytest.mark.parametrize("indices, scale, bitset", [
        ((1, 2), 1.0, 0b011),
        ((2, 1), -1.0, 0b011),
        ((3, 2, 1), -1.0, 0b111),   # three swaps
        ((2, 3, 1), 1.0, 0b111),    # two swaps
        ((3, 1), -1.0, 0b101),
    ])
    def test_from_indices_orientation(self, indices, scale, bitset):
        blade = ScaledBasisBlade.from_indices(1.0, indices, R3)
        assert blade.scale == scale
        assert blade.unit_basis_blade.bitset == bitset

    @pytest.mark.parametrize("indices", [(1, 1), (2, 3, 2), (3, 1, 3)])
    def test_from_indices_repeated_is_zero(self, indices):
        assert ScaledBasisBlade.from_indices(4.0, indices, R3) == ScaledBasisBlade.zero(R3)

    def test_from_tuple_keeps_orientation(self):
        assert ScaledBasisBlade.from_tuple((2, [2, 1]), R3).scale == -2.0
        assert ScaledBasisBlade.from_tuple((2, (1, 1)), R3).is_zero()
        # ints and unit blades are already oriented
        assert ScaledBasisBlade.from_tuple((2, 0b011), R3).scale == 2.0

    def test_from_indices_matches_wedge_of_vectors(self):
        vectors = [ScaledBasisBlade.from_indices(1.0, (i,), R3) for i in (3, 1, 2)]
        assert vectors[0] ^ vectors[1] ^ vectors[2] == ScaledBasisBlade.from_indices(1.0, (3, 1, 2), R3)

    def test_hash_consistent_with_equality(self):
        a = ScaledBasisBlade.new(2.0, UnitBasisBlade(0b101, R3))
        b = ScaledBasisBlade.new(2, UnitBasisBlade(0b101, R3), FractionField())
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b, ScaledBasisBlade.zero(R3)}) == 2

    def test_mixed_fields_rejected(self):
        a = ScaledBasisBlade.new(2.0, UnitBasisBlade(0b001, R3))
        b = ScaledBasisBlade.new(3, UnitBasisBlade(0b010, R3), FractionField())
        with pytest.raises(AssertionError, match="field mismatch"):
            a ^ b

    def test_mixed_dimensions_rejected(self):
        a = ScaledBasisBlade.new(2.0, UnitBasisBlade(0b001, R3))
        b = ScaledBasisBlade.new(3.0, UnitBasisBlade(0b010, Dimension(4)))
        with pytest.raises(AssertionError, match="dimension mismatch"):
            a ^ b


# ── Display ────────────────────────────────────────────────────────────

class TestDisplay:

    def test_unicode(self):
        blade = ScaledBasisBlade.new(6.0, UnitBasisBlade(0b111, R3))
        assert str(blade) == "6.0 e₁e₂e₃"

    def test_unicode_zero(self):
        assert str(ScaledBasisBlade.zero(R3)) == "0.0"

    def test_latex(self):
        blade = ScaledBasisBlade.new(-1.0, UnitBasisBlade(0b101, R3))
        assert blade.to_latex() == "-1.0\\boldsymbol{e}_{1}\\boldsymbol{e}_{3}"

    def test_multi_digit_index(self):
        blade = ScaledBasisBlade.new(1.0, UnitBasisBlade(1 << 11, Dimension(12)))
        assert str(blade) == "1.0 e₁₂"
