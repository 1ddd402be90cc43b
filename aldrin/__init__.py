"""Client-side calculations for the Aldrin Solana programs.

Decodes pool, farming, staking and DTWAP accounts from raw bytes, quotes
swaps on constant product and stable curves, and estimates unclaimed
farming rewards from a farm's snapshot ring.
"""

from aldrin.config import DEFAULT_CURVE_CONFIG, DEFAULT_FARMING_CONFIG, CurveConfig, FarmingConfig
from aldrin.errors import (
    AldrinError,
    ConfigError,
    CurveError,
    EmptyPool,
    FormatError,
    InsufficientLiquidity,
    InvalidAmount,
    LayoutError,
)
from aldrin.farming import calculate_farming_rewards, compute_reward
from aldrin.logging import configure_logging
from aldrin.models import FarmingReward, SwapQuote
from aldrin.pools import pool_reserves, quote_swap, quote_swap_exact_out, spot_price
from aldrin.types import CurveType, PoolReserves, Side

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "configure_logging",
    # Configuration
    "CurveConfig",
    "FarmingConfig",
    "DEFAULT_CURVE_CONFIG",
    "DEFAULT_FARMING_CONFIG",
    # Errors
    "AldrinError",
    "LayoutError",
    "FormatError",
    "ConfigError",
    "CurveError",
    "EmptyPool",
    "InvalidAmount",
    "InsufficientLiquidity",
    # Types and results
    "CurveType",
    "Side",
    "PoolReserves",
    "SwapQuote",
    "FarmingReward",
    # Operations
    "pool_reserves",
    "quote_swap",
    "quote_swap_exact_out",
    "spot_price",
    "compute_reward",
    "calculate_farming_rewards",
]
