"""Tests for Pydantic result models."""

import pytest
from pydantic import ValidationError

from aldrin.models import FarmingReward, SwapQuote
from aldrin.types import CurveType


class TestSwapQuote:
    """Tests for SwapQuote model."""

    def test_parse_aliases(self):
        quote = SwapQuote.model_validate({"curve": 1, "amountIn": "1000", "amountOut": "998"})
        assert quote.curve == CurveType.STABLE
        assert quote.amount_in == 1000
        assert quote.amount_out == 998
        assert quote.converged is True

    def test_populate_by_name(self):
        quote = SwapQuote(curve=CurveType.CONSTANT_PRODUCT, amount_in=10, amount_out=9)
        assert quote.amount_out == 9

    def test_json_amounts_are_strings(self):
        """Amounts above 2^53 survive as decimal strings."""
        quote = SwapQuote(curve=CurveType.CONSTANT_PRODUCT, amount_in=2**60, amount_out=1)
        data = quote.model_dump(mode="json", by_alias=True)
        assert data["amountIn"] == str(2**60)
        assert data["amountOut"] == "1"
        assert data["curve"] == 0

    def test_python_dump_keeps_ints(self):
        quote = SwapQuote(curve=CurveType.CONSTANT_PRODUCT, amount_in=10, amount_out=9)
        assert quote.model_dump()["amount_in"] == 10

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError):
            SwapQuote(curve=CurveType.CONSTANT_PRODUCT, amount_in=-1, amount_out=0)

    def test_frozen(self):
        quote = SwapQuote(curve=CurveType.CONSTANT_PRODUCT, amount_in=10, amount_out=9)
        with pytest.raises(ValidationError):
            quote.amount_out = 100

    def test_minimum_out(self):
        quote = SwapQuote(curve=CurveType.CONSTANT_PRODUCT, amount_in=1, amount_out=10_000)
        assert quote.minimum_out(50) == 9_950
        assert quote.minimum_out(0) == 10_000

    def test_minimum_out_out_of_range(self):
        quote = SwapQuote(curve=CurveType.CONSTANT_PRODUCT, amount_in=1, amount_out=10_000)
        with pytest.raises(ValueError):
            quote.minimum_out(10_001)


class TestFarmingReward:
    """Tests for FarmingReward model."""

    def test_zero(self):
        zero = FarmingReward.zero()
        assert zero.unclaimed_tokens == 0
        assert zero.unclaimed_snapshots == 0
        assert zero.immediate_tokens == 0
        assert zero.vested_tokens == 0

    def test_json(self):
        reward = FarmingReward(
            unclaimed_tokens=300, unclaimed_snapshots=3, immediate_tokens=99, vested_tokens=201
        )
        assert reward.model_dump(mode="json", by_alias=True) == {
            "unclaimedTokens": "300",
            "unclaimedSnapshots": 3,
            "immediateTokens": "99",
            "vestedTokens": "201",
        }

    def test_round_trip_json(self):
        reward = FarmingReward(unclaimed_tokens=2**63, unclaimed_snapshots=1)
        restored = FarmingReward.model_validate_json(reward.model_dump_json(by_alias=True))
        assert restored == reward
