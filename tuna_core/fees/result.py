"""Fee calculation result types."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TokenPair:
    """Amounts of a pool's token A and token B.

    Attributes:
        a: Amount in token A units
        b: Amount in token B units
    """

    a: int
    b: int
