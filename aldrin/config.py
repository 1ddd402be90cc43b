"""Calculation configuration for curve pricing and reward accrual."""

from dataclasses import dataclass

from aldrin.constants import (
    NEWTON_MAX_ITERATIONS,
    NEWTON_TOLERANCE,
    PRE_VESTING_DENOMINATOR,
    STABLE_CURVE_AMP,
    STABLE_CURVE_N_COINS,
)


@dataclass(frozen=True)
class CurveConfig:
    """Parameters of the stable-swap Newton solvers.

    The defaults reproduce the deployed program's quotes exactly; override
    them only in tests or for what-if analysis.

    Attributes:
        amp: Amplification coefficient A (default: 85)
        max_iterations: Newton iteration cap for both D and y (default: 32)
        tolerance: Convergence threshold in integer units (default: 1)
    """

    amp: int = STABLE_CURVE_AMP
    max_iterations: int = NEWTON_MAX_ITERATIONS
    tolerance: int = NEWTON_TOLERANCE

    def __post_init__(self) -> None:
        if self.amp <= 0:
            raise ValueError(f"amp must be positive, got {self.amp}")
        if self.max_iterations <= 0:
            raise ValueError(f"max_iterations must be positive, got {self.max_iterations}")
        if self.tolerance < 0:
            raise ValueError(f"tolerance must be non-negative, got {self.tolerance}")

    @property
    def leverage(self) -> int:
        """A * n^2, the leverage term of the two-coin invariant."""
        return self.amp * STABLE_CURVE_N_COINS * STABLE_CURVE_N_COINS


@dataclass(frozen=True)
class FarmingConfig:
    """Parameters of farming reward accrual.

    Attributes:
        pre_vesting_denominator: A period reward is split into 1/d claimable
            immediately and the rest after the vesting period (default: 3)
    """

    pre_vesting_denominator: int = PRE_VESTING_DENOMINATOR

    def __post_init__(self) -> None:
        if self.pre_vesting_denominator <= 0:
            raise ValueError(
                f"pre_vesting_denominator must be positive, got {self.pre_vesting_denominator}"
            )


# Default configuration instances
DEFAULT_CURVE_CONFIG = CurveConfig()
DEFAULT_FARMING_CONFIG = FarmingConfig()
