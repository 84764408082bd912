"""Tests for concentrated-liquidity amount math.

Reference values follow the standard sqrt-price test vectors over the
range [100/110, 110/100] with 100 token A and 200 token B.
"""

import pytest

from tests.helpers import SQRT_PRICE_ONE, encode_price_sqrt
from tuna_core.errors import ArithmeticOverflow, ZeroPriceRange
from tuna_core.math.liquidity import (
    get_amount_delta_a,
    get_amount_delta_b,
    get_amounts_for_liquidity,
    get_liquidity_for_amounts,
    increasing_price_order,
)

LOWER = encode_price_sqrt(100, 110)
UPPER = encode_price_sqrt(110, 100)


class TestGetLiquidityForAmounts:
    """Tests for the largest liquidity provided by two amounts."""

    def test_price_inside(self):
        assert get_liquidity_for_amounts(SQRT_PRICE_ONE, LOWER, UPPER, 100, 200) == 2148

    def test_price_below(self):
        sqrt_price = encode_price_sqrt(99, 110)
        assert get_liquidity_for_amounts(sqrt_price, LOWER, UPPER, 100, 200) == 1048

    def test_price_above(self):
        sqrt_price = encode_price_sqrt(111, 100)
        assert get_liquidity_for_amounts(sqrt_price, LOWER, UPPER, 100, 200) == 2097

    def test_price_at_lower_bound(self):
        assert get_liquidity_for_amounts(LOWER, LOWER, UPPER, 100, 200) == 1048

    def test_price_at_upper_bound(self):
        assert get_liquidity_for_amounts(UPPER, LOWER, UPPER, 100, 200) == 2097

    def test_bounds_in_either_order(self):
        assert get_liquidity_for_amounts(SQRT_PRICE_ONE, UPPER, LOWER, 100, 200) == 2148

    def test_empty_range(self):
        with pytest.raises(ZeroPriceRange):
            get_liquidity_for_amounts(SQRT_PRICE_ONE, LOWER, LOWER, 100, 200)


class TestGetAmountsForLiquidity:
    """Tests for the token amounts held by a liquidity value."""

    def test_price_inside(self):
        assert get_amounts_for_liquidity(SQRT_PRICE_ONE, LOWER, UPPER, 2148) == (99, 99)

    def test_price_below(self):
        """Below the range the position is all token A."""
        sqrt_price = encode_price_sqrt(99, 110)
        assert get_amounts_for_liquidity(sqrt_price, LOWER, UPPER, 1048) == (99, 0)

    def test_price_above(self):
        """Above the range the position is all token B."""
        sqrt_price = encode_price_sqrt(111, 100)
        assert get_amounts_for_liquidity(sqrt_price, LOWER, UPPER, 2097) == (0, 199)

    def test_price_at_lower_bound(self):
        assert get_amounts_for_liquidity(LOWER, LOWER, UPPER, 1048) == (99, 0)

    def test_price_at_upper_bound(self):
        assert get_amounts_for_liquidity(UPPER, LOWER, UPPER, 2097) == (0, 199)

    def test_zero_liquidity(self):
        assert get_amounts_for_liquidity(SQRT_PRICE_ONE, LOWER, UPPER, 0) == (0, 0)

    def test_empty_range(self):
        with pytest.raises(ZeroPriceRange):
            get_amounts_for_liquidity(SQRT_PRICE_ONE, UPPER, UPPER, 1000)

    def test_amounts_never_exceed_deposit(self):
        """Round-tripping liquidity never yields more than was deposited."""
        liquidity = get_liquidity_for_amounts(SQRT_PRICE_ONE, LOWER, UPPER, 10**9, 10**9)
        amount_a, amount_b = get_amounts_for_liquidity(SQRT_PRICE_ONE, LOWER, UPPER, liquidity)
        assert amount_a <= 10**9
        assert amount_b <= 10**9


class TestAmountDeltas:
    """Tests for the single-token deltas."""

    def test_increasing_price_order(self):
        assert increasing_price_order(5, 3) == (3, 5)
        assert increasing_price_order(3, 5) == (3, 5)

    def test_delta_a(self):
        assert get_amount_delta_a(1 << 64, 1 << 65, 1 << 64) == 1 << 63

    def test_delta_a_overflow(self):
        with pytest.raises(ArithmeticOverflow):
            get_amount_delta_a(1 << 64, 1 << 65, 1 << 66)

    def test_delta_a_zero_price(self):
        with pytest.raises(ArithmeticOverflow):
            get_amount_delta_a(0, 1 << 64, 1000)

    def test_delta_b_exact(self):
        assert get_amount_delta_b(0, 1 << 64, 1) == 1
        assert get_amount_delta_b(0, 1 << 64, 1, round_up=True) == 1

    def test_delta_b_round_up(self):
        assert get_amount_delta_b(0, (1 << 64) + 1, 1) == 1
        assert get_amount_delta_b(0, (1 << 64) + 1, 1, round_up=True) == 2

    def test_delta_b_product_overflow(self):
        with pytest.raises(ArithmeticOverflow):
            get_amount_delta_b(0, 1 << 100, 1 << 30)
