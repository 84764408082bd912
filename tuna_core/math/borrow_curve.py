"""Borrow-rate curve: utilization -> interest-rate multiplier.

The curve is piecewise linear through three breakpoints:

    utilization 0%       -> 1 / max_multiplier   (0.25 by default)
    target utilization   -> 1.0                  (90% by default)
    utilization 100%     -> max_multiplier       (4.0 by default)

and is capped at max_multiplier above 100%. A single BorrowCurve holds the
parameters; sample_fixed() evaluates it in Fixed128 arithmetic (the
authoritative path) and sample_float() in floating point (informational
interest estimates). Both read the breakpoints from the same instance.
"""

from __future__ import annotations

from dataclasses import dataclass

from tuna_core.constants import (
    DEFAULT_MAX_BORROW_MULTIPLIER,
    DEFAULT_TARGET_UTILIZATION,
    HUNDRED_PERCENT,
)
from tuna_core.math.fixed_point import Fixed128

__all__ = [
    "BorrowCurve",
    "DEFAULT_BORROW_CURVE",
    "sample",
    "sample_fixed",
    "sample_float",
]


@dataclass(frozen=True)
class BorrowCurve:
    """Parameters of the borrow-rate curve.

    Attributes:
        target_utilization: Utilization where the multiplier is 1.0, in
            hundredths of a basis point (default: 900_000 = 90%)
        max_multiplier: Multiplier at and above 100% utilization; its
            reciprocal is the multiplier at 0% (default: 4)
    """

    target_utilization: int = DEFAULT_TARGET_UTILIZATION
    max_multiplier: int = DEFAULT_MAX_BORROW_MULTIPLIER

    def __post_init__(self) -> None:
        if not 0 < self.target_utilization < HUNDRED_PERCENT:
            raise ValueError(
                f"target_utilization must be in (0, {HUNDRED_PERCENT}), got {self.target_utilization}"
            )
        if self.max_multiplier < 1:
            raise ValueError(f"max_multiplier must be >= 1, got {self.max_multiplier}")

    def sample_fixed(self, utilization: Fixed128) -> Fixed128:
        """Multiplier for a Fixed128 utilization (Fixed128.one() == 100%).

        Unsigned utilization cannot be negative, so zero takes the
        below-target branch.
        """
        one = Fixed128.one()
        target = one.mul_int(self.target_utilization).div_int(HUNDRED_PERCENT)
        k = Fixed128.from_num(self.max_multiplier)

        if utilization > one:
            return k
        if utilization > target:
            return (utilization - target) * (k - one) / (one - target) + one
        return one - (target - utilization) * (one - one / k) / target

    def sample_float(self, utilization: float) -> float:
        """Multiplier for a float utilization (1.0 == 100%)."""
        target = self.target_utilization / HUNDRED_PERCENT
        k = float(self.max_multiplier)

        if utilization > 1.0:
            return k
        if utilization <= 0.0:
            return 1.0 / k
        if utilization > target:
            return (utilization - target) * (k - 1.0) / (1.0 - target) + 1.0
        return 1.0 - (target - utilization) * (1.0 - 1.0 / k) / target


DEFAULT_BORROW_CURVE = BorrowCurve()


def sample_fixed(utilization: Fixed128) -> Fixed128:
    return DEFAULT_BORROW_CURVE.sample_fixed(utilization)


def sample_float(utilization: float) -> float:
    return DEFAULT_BORROW_CURVE.sample_float(utilization)


def sample(utilization: Fixed128 | float) -> Fixed128 | float:
    """Sample the default curve in the domain of the argument."""
    if isinstance(utilization, Fixed128):
        return sample_fixed(utilization)
    if isinstance(utilization, (int, float)) and not isinstance(utilization, bool):
        return sample_float(float(utilization))
    raise TypeError(f"utilization must be Fixed128 or float, got {type(utilization).__name__}")
