"""Tests for the utilization -> interest multiplier curve."""

from dataclasses import FrozenInstanceError

import pytest

from tuna_core.math.borrow_curve import (
    DEFAULT_BORROW_CURVE,
    BorrowCurve,
    sample,
    sample_fixed,
    sample_float,
)
from tuna_core.math.fixed_point import Fixed128

ONE = Fixed128.one()


class TestSampleFixed:
    """Tests for the Fixed128 evaluation."""

    def test_target_is_one(self):
        """90% utilization maps exactly to a 1.0x multiplier."""
        assert sample_fixed(Fixed128.from_bps(900_000)) == ONE

    def test_full_utilization_is_max(self):
        assert sample_fixed(ONE) == Fixed128.from_num(4)

    def test_capped_above_full_utilization(self):
        assert sample_fixed(Fixed128.from_num(2)) == Fixed128.from_num(4)

    def test_zero_utilization_is_floor(self):
        """Zero falls into the below-target segment and lands on 1/4."""
        floor = Fixed128.from_bps(250_000)
        assert abs(sample_fixed(Fixed128.zero()).bits - floor.bits) <= 2

    def test_midpoint_above_target(self):
        assert sample_fixed(Fixed128.from_bps(950_000)).to_float() == pytest.approx(2.5)

    def test_monotonic(self):
        values = [sample_fixed(Fixed128.from_bps(bps)) for bps in range(0, 1_100_001, 10_000)]
        assert values == sorted(values)


class TestSampleFloat:
    """Tests for the floating-point evaluation."""

    @pytest.mark.parametrize(
        "utilization, expected",
        [
            (-0.5, 0.25),
            (0.0, 0.25),
            (0.9, 1.0),
            (1.0, 4.0),
            (1.5, 4.0),
        ],
    )
    def test_breakpoints(self, utilization, expected):
        assert sample_float(utilization) == expected

    def test_below_target(self):
        assert sample_float(0.45) == pytest.approx(0.625)

    def test_monotonic(self):
        values = [sample_float(bps / 1_000_000) for bps in range(0, 1_100_001, 10_000)]
        assert values == sorted(values)


class TestAdaptersAgree:
    """Both adapters read the same breakpoints."""

    @pytest.mark.parametrize("bps", range(0, 1_200_001, 25_000))
    def test_fixed_matches_float(self, bps):
        fixed = sample_fixed(Fixed128.from_bps(bps)).to_float()
        assert fixed == pytest.approx(sample_float(bps / 1_000_000), abs=1e-9)


class TestSampleDispatch:
    """Tests for domain dispatch in sample()."""

    def test_fixed_argument(self):
        assert sample(ONE) == Fixed128.from_num(4)

    def test_float_argument(self):
        assert sample(0.9) == 1.0
        assert sample(1) == 4.0

    def test_invalid_argument(self):
        with pytest.raises(TypeError):
            sample("0.9")  # type: ignore
        with pytest.raises(TypeError):
            sample(True)


class TestBorrowCurveConfig:
    """Tests for custom curve parameters."""

    def test_defaults(self):
        assert DEFAULT_BORROW_CURVE == BorrowCurve(target_utilization=900_000, max_multiplier=4)

    def test_custom_breakpoints(self):
        curve = BorrowCurve(target_utilization=800_000, max_multiplier=2)
        assert curve.sample_fixed(Fixed128.from_bps(800_000)) == ONE
        assert curve.sample_fixed(ONE) == Fixed128.from_num(2)
        assert curve.sample_float(0.8) == 1.0
        assert curve.sample_float(1.0) == 2.0
        assert curve.sample_float(0.0) == 0.5

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"target_utilization": 0},
            {"target_utilization": 1_000_000},
            {"max_multiplier": 0},
        ],
    )
    def test_invalid_parameters(self, kwargs):
        with pytest.raises(ValueError):
            BorrowCurve(**kwargs)

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_BORROW_CURVE.max_multiplier = 8  # type: ignore
