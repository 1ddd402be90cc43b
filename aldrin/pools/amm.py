"""Swap quoting for Aldrin pools.

Selects the curve math for a pool and wraps the result in a SwapQuote.
Reserves are read by the caller from the pool's vault token accounts.
"""

from __future__ import annotations

from decimal import Decimal

import structlog

from aldrin.config import DEFAULT_CURVE_CONFIG, CurveConfig
from aldrin.errors import EmptyPool
from aldrin.layout.token import TokenAccount
from aldrin.models import SwapQuote
from aldrin.pools.curve import (
    constant_product_amount_in,
    constant_product_amount_out,
    stable_swap_amounts,
    stable_swap_amounts_exact_out,
)
from aldrin.pools.layout import Pool
from aldrin.types import CurveType, PoolReserves, Side

logger = structlog.get_logger()


def pool_reserves(
    pool: Pool,
    base_vault: TokenAccount,
    quote_vault: TokenAccount,
    *,
    config: CurveConfig = DEFAULT_CURVE_CONFIG,
) -> PoolReserves:
    """Build PoolReserves from a decoded pool and its two vault accounts.

    Raises:
        ValueError: If a vault account does not hold the pool's mint
    """
    if base_vault.mint != pool.base_token_mint:
        raise ValueError(f"Base vault holds {base_vault.mint}, pool expects {pool.base_token_mint}")
    if quote_vault.mint != pool.quote_token_mint:
        raise ValueError(
            f"Quote vault holds {quote_vault.mint}, pool expects {pool.quote_token_mint}"
        )
    return PoolReserves(
        base_reserve=base_vault.amount,
        quote_reserve=quote_vault.amount,
        curve=pool.curve,
        amp=config.amp,
    )


def _curve_config(reserves: PoolReserves, config: CurveConfig) -> CurveConfig:
    if reserves.amp == config.amp:
        return config
    return CurveConfig(
        amp=reserves.amp, max_iterations=config.max_iterations, tolerance=config.tolerance
    )


def quote_swap(
    reserves: PoolReserves,
    side: Side,
    amount_in: int,
    *,
    config: CurveConfig = DEFAULT_CURVE_CONFIG,
) -> SwapQuote:
    """Quote an exact-input swap ("I give this much").

    Args:
        reserves: Pool reserves and curve
        side: BID pays quote tokens for base, ASK pays base for quote
        amount_in: Tokens paid in

    Returns:
        SwapQuote with the output amount for the pool's curve
    """
    reserve_in, reserve_out = reserves.oriented(side)

    if reserves.curve == CurveType.STABLE:
        result = stable_swap_amounts(
            amount_in, reserve_in, reserve_out, config=_curve_config(reserves, config)
        )
        if not result.converged:
            logger.debug("stable_quote_not_converged", side=side.name, amount_in=amount_in)
        return SwapQuote(
            curve=reserves.curve,
            amount_in=amount_in,
            amount_out=result.destination_amount_swapped,
            converged=result.converged,
        )

    amount_out = constant_product_amount_out(amount_in, reserve_in, reserve_out)
    return SwapQuote(curve=reserves.curve, amount_in=amount_in, amount_out=amount_out)


def quote_swap_exact_out(
    reserves: PoolReserves,
    side: Side,
    amount_out: int,
    *,
    config: CurveConfig = DEFAULT_CURVE_CONFIG,
) -> SwapQuote:
    """Quote an exact-output swap ("I want this much").

    Args:
        reserves: Pool reserves and curve
        side: BID pays quote tokens for base, ASK pays base for quote
        amount_out: Tokens wanted out

    Returns:
        SwapQuote with the input amount required for the pool's curve
    """
    reserve_in, reserve_out = reserves.oriented(side)

    if reserves.curve == CurveType.STABLE:
        result = stable_swap_amounts_exact_out(
            amount_out, reserve_in, reserve_out, config=_curve_config(reserves, config)
        )
        return SwapQuote(
            curve=reserves.curve,
            amount_in=result.source_amount_swapped,
            amount_out=amount_out,
            converged=result.converged,
        )

    amount_in = constant_product_amount_in(amount_out, reserve_in, reserve_out)
    return SwapQuote(curve=reserves.curve, amount_in=amount_in, amount_out=amount_out)


def spot_price(
    reserves: PoolReserves,
    base_decimals: int,
    quote_decimals: int,
    *,
    config: CurveConfig = DEFAULT_CURVE_CONFIG,
) -> Decimal:
    """Price of one base token in quote tokens, scaled by mint decimals.

    Constant product pools price at the reserve ratio. Stable pools are
    priced by actually swapping half of the quote reserve into base, which
    reflects the curve's flat region instead of the raw ratio.

    Raises:
        EmptyPool: If either reserve is zero, or a stable pool is too
            small to swap against
    """
    decimal_adjust = Decimal(10) ** (base_decimals - quote_decimals)

    if reserves.curve == CurveType.STABLE:
        amount_to_swap = reserves.quote_reserve // 2
        if amount_to_swap == 0 or reserves.base_reserve <= 0:
            raise EmptyPool(f"Pool reserves too small to price, got {reserves}")
        result = stable_swap_amounts(
            amount_to_swap,
            reserves.quote_reserve,
            reserves.base_reserve,
            config=_curve_config(reserves, config),
        )
        if result.destination_amount_swapped == 0:
            raise EmptyPool(f"Pool reserves too small to price, got {reserves}")
        return (
            Decimal(result.source_amount_swapped)
            / Decimal(result.destination_amount_swapped)
            * decimal_adjust
        )

    if reserves.base_reserve <= 0 or reserves.quote_reserve <= 0:
        raise EmptyPool(f"Pool reserves must be positive, got {reserves}")
    return Decimal(reserves.quote_reserve) / Decimal(reserves.base_reserve) * decimal_adjust
