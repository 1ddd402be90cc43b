"""Enums and value types shared by layouts, curve math and results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from aldrin.constants import STABLE_CURVE_AMP


class CurveType(IntEnum):
    """Pricing curve of a v2 pool; the value is the on-chain ``curve_type`` byte."""

    CONSTANT_PRODUCT = 0
    STABLE = 1


class Side(IntEnum):
    """Order side; the value is the on-chain variant tag.

    BID buys the base token with quote tokens, ASK sells base for quote.
    """

    BID = 0
    ASK = 1


@dataclass(frozen=True)
class PoolReserves:
    """Vault balances of a pool and the curve that prices them.

    Attributes:
        base_reserve: Base token vault amount
        quote_reserve: Quote token vault amount
        curve: Pricing curve
        amp: Amplification coefficient, only meaningful for stable pools
    """

    base_reserve: int
    quote_reserve: int
    curve: CurveType = CurveType.CONSTANT_PRODUCT
    amp: int = STABLE_CURVE_AMP

    def __post_init__(self) -> None:
        if self.base_reserve < 0 or self.quote_reserve < 0:
            raise ValueError(
                f"Reserves must be non-negative, got {self.base_reserve}/{self.quote_reserve}"
            )

    def oriented(self, side: Side) -> tuple[int, int]:
        """Reserves ordered as (reserve_in, reserve_out) for a trade on ``side``.

        A BID pays quote tokens in and takes base tokens out.
        """
        if side == Side.BID:
            return self.quote_reserve, self.base_reserve
        return self.base_reserve, self.quote_reserve
