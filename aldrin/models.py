"""Pydantic models for results handed to transaction assembly.

Amounts are Python ints; in JSON they serialize as decimal strings so that
values above 2^53 survive JavaScript consumers.
"""

from typing import Annotated

from pydantic import BaseModel, Field, PlainSerializer

from aldrin.constants import BPS_DENOMINATOR
from aldrin.types import CurveType

# Non-negative token amount, decimal string in JSON
Amount = Annotated[
    int,
    Field(ge=0, description="Token amount in base units"),
    PlainSerializer(lambda v: str(v), return_type=str, when_used="json"),
]


class SwapQuote(BaseModel):
    """Fee-less quote for a single-pool swap."""

    curve: CurveType = Field(description="Curve that priced the swap.")
    amount_in: Amount = Field(alias="amountIn")
    amount_out: Amount = Field(alias="amountOut")
    converged: bool = Field(
        default=True,
        description="False if a stable-curve Newton solve hit its iteration cap.",
    )

    model_config = {"populate_by_name": True, "frozen": True}

    def minimum_out(self, slippage_bps: int) -> int:
        """``amount_out`` reduced by a slippage tolerance, for ``min_tokens``.

        Args:
            slippage_bps: Tolerance in basis points (50 = 0.5%)
        """
        if not 0 <= slippage_bps <= BPS_DENOMINATOR:
            raise ValueError(f"slippage_bps must be in [0, {BPS_DENOMINATOR}], got {slippage_bps}")
        return self.amount_out * (BPS_DENOMINATOR - slippage_bps) // BPS_DENOMINATOR


class FarmingReward(BaseModel):
    """Farming tokens a ticket can currently claim from one farming state.

    The amount is a lower bound pending on-chain confirmation: the program
    recomputes it when the claim executes.
    """

    unclaimed_tokens: Amount = Field(alias="unclaimedTokens")
    unclaimed_snapshots: int = Field(ge=0, alias="unclaimedSnapshots")
    immediate_tokens: Amount = Field(
        default=0,
        alias="immediateTokens",
        description="Pre-vesting share, claimable as soon as the period closes.",
    )
    vested_tokens: Amount = Field(
        default=0,
        alias="vestedTokens",
        description="Remainder, claimable once the vesting period has elapsed.",
    )

    model_config = {"populate_by_name": True, "frozen": True}

    @classmethod
    def zero(cls) -> "FarmingReward":
        return cls(unclaimed_tokens=0, unclaimed_snapshots=0)
