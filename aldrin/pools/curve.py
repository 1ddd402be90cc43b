"""Invariant calculator for Aldrin pools.

Two curve families price swaps against a pool's vault reserves:

- Constant product (x * y = k), used by every v1 pool and by v2 pools with
  ``curve_type == CONSTANT_PRODUCT``.
- Stable swap, the two-coin curve.fi invariant with a fixed amplification
  coefficient, used by v2 pools with ``curve_type == STABLE``.

All arithmetic is integer floor division on SafeInt; floats never enter a
quote. Quotes exclude fees and are advisory: the program settles the trade.

Both Newton solvers run at most ``max_iterations`` steps and stop once two
successive estimates differ by at most ``tolerance``. Running out of steps is
not an error: the last estimate is returned with ``converged=False``.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from aldrin.config import DEFAULT_CURVE_CONFIG, CurveConfig
from aldrin.constants import STABLE_CURVE_N_COINS
from aldrin.errors import EmptyPool, InsufficientLiquidity, InvalidAmount
from aldrin.safe_int import S, SafeInt

logger = structlog.get_logger()

_N = S(STABLE_CURVE_N_COINS)


@dataclass(frozen=True)
class NewtonResult:
    """Outcome of a bounded Newton iteration.

    Attributes:
        value: Last estimate
        converged: True if two successive estimates came within tolerance
        iterations: Steps taken
    """

    value: int
    converged: bool
    iterations: int


@dataclass(frozen=True)
class StableSwapResult:
    """Amounts moved by a fee-less stable swap."""

    source_amount_swapped: int
    destination_amount_swapped: int
    invariant: NewtonResult
    new_destination: NewtonResult

    @property
    def converged(self) -> bool:
        return self.invariant.converged and self.new_destination.converged


def _check_reserves(*reserves: int) -> None:
    for reserve in reserves:
        if reserve <= 0:
            raise EmptyPool(f"Pool reserves must be positive, got {reserves}")


def _check_amount(amount: int, name: str) -> None:
    if amount <= 0:
        raise InvalidAmount(f"{name} must be positive, got {amount}")


# --- Constant product ---


def constant_product_amount_out(amount_in: int, reserve_in: int, reserve_out: int) -> int:
    """Output received for ``amount_in`` on a constant product curve.

    With X = reserve_out, Y = reserve_in and B = amount_in, the invariant
    X * Y = (X - A) * (Y + B) gives A = X - X * Y / (Y + B).

    Args:
        amount_in: Tokens paid into the pool (B)
        reserve_in: Pool reserve of the token paid in (Y)
        reserve_out: Pool reserve of the token taken out (X)

    Returns:
        Tokens taken out (A), never more than reserve_out

    Raises:
        EmptyPool: If either reserve is zero
        InvalidAmount: If amount_in is not positive
    """
    _check_reserves(reserve_in, reserve_out)
    _check_amount(amount_in, "amount_in")

    x, y, b = S(reserve_out), S(reserve_in), S(amount_in)
    return (x - (x * y) // (y + b)).value


def constant_product_amount_in(amount_out: int, reserve_in: int, reserve_out: int) -> int:
    """Input required to take ``amount_out`` from a constant product curve.

    Solving X * Y = (X - A) * (Y + B) for B gives B = X * Y / (X - A) - Y.

    Args:
        amount_out: Tokens wanted out of the pool (A)
        reserve_in: Pool reserve of the token paid in (Y)
        reserve_out: Pool reserve of the token taken out (X)

    Returns:
        Tokens to pay in (B)

    Raises:
        EmptyPool: If either reserve is zero
        InvalidAmount: If amount_out is not positive
        InsufficientLiquidity: If amount_out would drain the output reserve
    """
    _check_reserves(reserve_in, reserve_out)
    _check_amount(amount_out, "amount_out")
    if amount_out >= reserve_out:
        raise InsufficientLiquidity(
            f"Cannot take {amount_out} out of a reserve of {reserve_out}"
        )

    x, y, a = S(reserve_out), S(reserve_in), S(amount_out)
    return ((x * y) // (x - a) - y).value


# --- Stable swap ---


def _converged(current: SafeInt, previous: SafeInt, tolerance: int) -> bool:
    return current.abs_diff(previous) <= tolerance


def compute_d(
    amount_a: int,
    amount_b: int,
    *,
    config: CurveConfig = DEFAULT_CURVE_CONFIG,
) -> NewtonResult:
    """Stable swap invariant D for two reserves.

    Solves A * n^n * sum(x) + D = A * n^n * D + D^(n+1) / (n^n * prod(x))
    by Newton's method starting from D = sum(x):

        d_prod = D^2 / (a * n) * D / (b * n)
        D' = (leverage * sum + d_prod * n) * D / ((leverage - 1) * D + (n + 1) * d_prod)

    Raises:
        EmptyPool: If exactly one reserve is zero
    """
    a, b = S(amount_a), S(amount_b)
    sum_x = a + b
    if sum_x == 0:
        return NewtonResult(0, True, 0)
    _check_reserves(amount_a, amount_b)

    leverage = S(config.leverage)
    a_times_coins = a * _N
    b_times_coins = b * _N

    d = sum_x
    for iteration in range(1, config.max_iterations + 1):
        d_prod = d * d // a_times_coins * d // b_times_coins
        d_prev = d
        numerator = (leverage * sum_x + d_prod * _N) * d
        denominator = (leverage - 1) * d + (_N + 1) * d_prod
        d = numerator // denominator
        if _converged(d, d_prev, config.tolerance):
            return NewtonResult(d.value, True, iteration)

    logger.debug(
        "stable_invariant_not_converged",
        amount_a=amount_a,
        amount_b=amount_b,
        estimate=d.value,
        iterations=config.max_iterations,
    )
    return NewtonResult(d.value, False, config.max_iterations)


def compute_new_destination_amount(
    new_source_amount: int,
    d: int,
    *,
    config: CurveConfig = DEFAULT_CURVE_CONFIG,
) -> NewtonResult:
    """Reserve y on the other side of the curve once one side holds x'.

    With x' = new_source_amount, the invariant reduces to y^2 + b*y = c where

        c = D^(n+1) / (x' * n^2 * leverage)
        b = x' + D / leverage

    iterated as y' = (y^2 + c) / (2y + b - D) from y = D.

    Raises:
        EmptyPool: If new_source_amount is zero
    """
    _check_reserves(new_source_amount)
    x = S(new_source_amount)
    invariant = S(d)
    leverage = S(config.leverage)

    c = invariant ** (STABLE_CURVE_N_COINS + 1) // (x * _N * _N * leverage)
    b = x + invariant // leverage

    y = invariant
    for iteration in range(1, config.max_iterations + 1):
        y_prev = y
        y = (y * y + c) // (S(2) * y + b - invariant)
        if _converged(y, y_prev, config.tolerance):
            return NewtonResult(y.value, True, iteration)

    logger.debug(
        "stable_destination_not_converged",
        new_source_amount=new_source_amount,
        invariant=d,
        estimate=y.value,
        iterations=config.max_iterations,
    )
    return NewtonResult(y.value, False, config.max_iterations)


def stable_swap_amounts(
    amount_in: int,
    reserve_in: int,
    reserve_out: int,
    *,
    config: CurveConfig = DEFAULT_CURVE_CONFIG,
) -> StableSwapResult:
    """Swap ``amount_in`` through a stable pool without fees.

    Algorithm:
        1. D from the current reserves
        2. New output reserve y from reserve_in + amount_in and D
        3. Output = reserve_out - y, floored at zero

    Raises:
        EmptyPool: If either reserve is zero
        InvalidAmount: If amount_in is not positive
    """
    _check_reserves(reserve_in, reserve_out)
    _check_amount(amount_in, "amount_in")

    invariant = compute_d(reserve_in, reserve_out, config=config)
    new_destination = compute_new_destination_amount(
        reserve_in + amount_in, invariant.value, config=config
    )
    swapped = S(reserve_out).saturating_sub(new_destination.value)

    return StableSwapResult(
        source_amount_swapped=amount_in,
        destination_amount_swapped=swapped.value,
        invariant=invariant,
        new_destination=new_destination,
    )


def stable_amount_out(
    amount_in: int,
    reserve_in: int,
    reserve_out: int,
    *,
    config: CurveConfig = DEFAULT_CURVE_CONFIG,
) -> int:
    """Output received for ``amount_in`` on the stable curve."""
    return stable_swap_amounts(
        amount_in, reserve_in, reserve_out, config=config
    ).destination_amount_swapped


def stable_swap_amounts_exact_out(
    amount_out: int,
    reserve_in: int,
    reserve_out: int,
    *,
    config: CurveConfig = DEFAULT_CURVE_CONFIG,
) -> StableSwapResult:
    """Input required to take ``amount_out`` from a stable pool.

    The two-coin invariant is symmetric, so the input-side reserve is solved
    with the same y-equation after fixing the output side at
    reserve_out - amount_out. One unit is added to the input so the rounding
    favors the pool.

    Raises:
        EmptyPool: If either reserve is zero
        InvalidAmount: If amount_out is not positive
        InsufficientLiquidity: If amount_out would drain the output reserve
    """
    _check_reserves(reserve_in, reserve_out)
    _check_amount(amount_out, "amount_out")

    invariant = compute_d(reserve_in, reserve_out, config=config)
    if amount_out >= reserve_out:
        raise InsufficientLiquidity(
            f"Cannot take {amount_out} out of a reserve of {reserve_out}"
        )

    new_source = compute_new_destination_amount(
        reserve_out - amount_out, invariant.value, config=config
    )
    required = S(new_source.value).saturating_sub(reserve_in) + 1

    return StableSwapResult(
        source_amount_swapped=required.value,
        destination_amount_swapped=amount_out,
        invariant=invariant,
        new_destination=new_source,
    )


def stable_amount_in(
    amount_out: int,
    reserve_in: int,
    reserve_out: int,
    *,
    config: CurveConfig = DEFAULT_CURVE_CONFIG,
) -> int:
    """Input required to take ``amount_out`` from the stable curve."""
    return stable_swap_amounts_exact_out(
        amount_out, reserve_in, reserve_out, config=config
    ).source_amount_swapped
