"""Pytest configuration and fixtures."""

import pytest

from aldrin.config import CurveConfig, FarmingConfig
from aldrin.farming import FarmingState
from tests.helpers.factories import make_farming_state


@pytest.fixture
def curve_config() -> CurveConfig:
    """Default stable-curve configuration (A = 85)."""
    return CurveConfig()


@pytest.fixture
def farming_config() -> FarmingConfig:
    """Default farming configuration (1/3 pre-vesting)."""
    return FarmingConfig()


@pytest.fixture
def farming_state() -> FarmingState:
    """Farm paying 1000 tokens per period, clock at t=1000, no vesting delay."""
    return make_farming_state()
