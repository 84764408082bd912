"""Tests for SafeInt safe arithmetic wrapper."""

import pytest

from tuna_core.constants import U64_MAX, U128_MAX
from tuna_core.errors import ArithmeticOverflow, ArithmeticUnderflow, DivisionByZero
from tuna_core.safe_int import S, SafeInt, require_uint


class TestSafeIntConstruction:
    """Tests for SafeInt construction."""

    def test_from_int(self):
        """SafeInt can be constructed from int."""
        assert SafeInt(42).value == 42

    def test_from_safeint(self):
        """SafeInt can be constructed from another SafeInt."""
        assert SafeInt(SafeInt(42)).value == 42

    def test_rejects_invalid_types(self):
        """Strings, floats and bools are rejected."""
        with pytest.raises(TypeError):
            SafeInt("42")  # type: ignore
        with pytest.raises(TypeError):
            SafeInt(3.14)  # type: ignore
        with pytest.raises(TypeError):
            SafeInt(True)

    def test_alias_s(self):
        """S is an alias for SafeInt."""
        assert S is SafeInt


class TestSafeIntArithmetic:
    """Tests for the raising operators."""

    def test_sub_underflow_raises(self):
        """Negative differences raise instead of producing a negative amount."""
        with pytest.raises(ArithmeticUnderflow):
            S(3) - 5
        with pytest.raises(ArithmeticUnderflow):
            3 - S(5)

    def test_sub_to_zero(self):
        assert S(5) - 5 == 0

    def test_floordiv_by_zero(self):
        with pytest.raises(DivisionByZero):
            S(10) // 0

    def test_division_by_zero_is_overflow(self):
        """DivisionByZero is reported as an overflow-class error."""
        with pytest.raises(ArithmeticOverflow):
            S(10) // S(0)

    def test_reverse_operators(self):
        assert 2 + S(3) == 5
        assert 2 * S(3) == 6

    def test_shifts_and_mask(self):
        assert (S(1) << 64) == 1 << 64
        assert (S(1 << 64) >> 63) == 2
        assert (S(0xFF) & 0x0F) == 0x0F


class TestSafeIntCheckedOperations:
    """Tests for the non-raising variants."""

    def test_checked_sub(self):
        assert S(5).checked_sub(3) == 2
        assert S(3).checked_sub(5) is None

    def test_checked_shl_within_width(self):
        assert S(1).checked_shl(255) == 1 << 255

    def test_checked_shl_overflow(self):
        """Shifting a set bit past the word width returns None."""
        assert S(2).checked_shl(255) is None
        assert S(1).checked_shl(256) is None

    def test_checked_shl_zero(self):
        """Zero shifts by any amount."""
        assert S(0).checked_shl(1000) == 0

    def test_checked_shl_custom_width(self):
        assert S(1).checked_shl(63, bits=64) == 1 << 63
        assert S(1).checked_shl(64, bits=64) is None


class TestSafeIntNarrowing:
    """Tests for the width checks on conversion."""

    def test_to_u64_at_max(self):
        assert S(U64_MAX).to_u64() == U64_MAX

    def test_to_u64_overflow(self):
        with pytest.raises(ArithmeticOverflow):
            S(U64_MAX + 1).to_u64()

    def test_to_u128_overflow(self):
        with pytest.raises(ArithmeticOverflow):
            S(U128_MAX + 1).to_u128()

    def test_negative_never_narrows(self):
        with pytest.raises(ArithmeticOverflow):
            S(-1).to_uint(256)

    def test_is_checks(self):
        assert S(U64_MAX).is_u64()
        assert not S(U64_MAX + 1).is_u64()
        assert S(U64_MAX + 1).is_u128()
        assert not S(-1).is_u128()

    def test_to_uint_custom_width(self):
        assert S(0xFFFF_FFFF).to_uint(32) == 0xFFFF_FFFF
        with pytest.raises(ArithmeticOverflow):
            S(1 << 32).to_uint(32)


class TestRequireUint:
    """Tests for argument validation."""

    def test_valid(self):
        assert require_uint(7, 64) == 7

    def test_out_of_range(self):
        with pytest.raises(ArithmeticOverflow, match="amount"):
            require_uint(1 << 64, 64, "amount")
        with pytest.raises(ArithmeticOverflow):
            require_uint(-1, 64)

    def test_wrong_type(self):
        with pytest.raises(TypeError):
            require_uint(1.0, 64)  # type: ignore
        with pytest.raises(TypeError):
            require_uint(False, 64)
