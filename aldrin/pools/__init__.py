"""Aldrin AMM pools: account layouts and swap pricing.

Curve families:
- Constant product (x * y = k)
- Stable swap (two-coin curve.fi invariant, A = 85)
"""

from .amm import pool_reserves, quote_swap, quote_swap_exact_out, spot_price
from .curve import (
    NewtonResult,
    StableSwapResult,
    compute_d,
    compute_new_destination_amount,
    constant_product_amount_in,
    constant_product_amount_out,
    stable_amount_in,
    stable_amount_out,
    stable_swap_amounts,
    stable_swap_amounts_exact_out,
)
from .layout import (
    DEPOSIT_LIQUIDITY_INSTRUCTION,
    FEES,
    POOL,
    POOL_V2,
    SWAP_INSTRUCTION,
    WITHDRAW_LIQUIDITY_INSTRUCTION,
    DepositLiquidityInstruction,
    Pool,
    PoolFees,
    PoolV2,
    SwapInstruction,
    WithdrawLiquidityInstruction,
)

__all__ = [
    # Quoting
    "pool_reserves",
    "quote_swap",
    "quote_swap_exact_out",
    "spot_price",
    # Curve math
    "NewtonResult",
    "StableSwapResult",
    "constant_product_amount_out",
    "constant_product_amount_in",
    "compute_d",
    "compute_new_destination_amount",
    "stable_swap_amounts",
    "stable_swap_amounts_exact_out",
    "stable_amount_out",
    "stable_amount_in",
    # Layouts
    "POOL",
    "POOL_V2",
    "FEES",
    "SWAP_INSTRUCTION",
    "DEPOSIT_LIQUIDITY_INSTRUCTION",
    "WITHDRAW_LIQUIDITY_INSTRUCTION",
    "Pool",
    "PoolV2",
    "PoolFees",
    "SwapInstruction",
    "DepositLiquidityInstruction",
    "WithdrawLiquidityInstruction",
]
