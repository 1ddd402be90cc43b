"""Tests for the program account and instruction layouts."""

import random

import pytest

from aldrin.constants import SNAPSHOT_QUEUE_CAPACITY, TICKET_ATTACHED_STATES
from aldrin.dtwap import (
    DTWAP_AVAILABLE_TOKENS,
    DTWAP_ORDER,
    DTWAP_ORDER_ARRAY,
    DTWAP_PAIR_SETTINGS,
    GET_AVAILABLE_TOKENS_INSTRUCTION,
    DtwapOrderArray,
)
from aldrin.errors import FormatError
from aldrin.farming import (
    FARMING_CALC,
    FARMING_STATE,
    FARMING_TICKET,
    SNAPSHOT,
    SNAPSHOT_QUEUE,
    START_FARMING_INSTRUCTION,
    StartFarmingInstruction,
)
from aldrin.layout import SPL_ACCOUNT, SPL_MINT, anchor_discriminator
from aldrin.pools import (
    DEPOSIT_LIQUIDITY_INSTRUCTION,
    POOL,
    POOL_V2,
    SWAP_INSTRUCTION,
    WITHDRAW_LIQUIDITY_INSTRUCTION,
    PoolFees,
    SwapInstruction,
)
from aldrin.staking import STAKING_TICKET, UNSTAKING_INSTRUCTION, UnstakingInstruction
from aldrin.types import CurveType, Side
from tests.helpers import (
    make_attached_state,
    make_farming_state,
    make_pool,
    make_queue,
    make_snapshot,
    make_ticket,
    make_token_account,
)
from tests.helpers.factories import BASE_MINT


def random_bytes(size: int, seed: int = 7) -> bytes:
    return random.Random(seed).randbytes(size)


class TestSpans:
    """Account sizes match what the programs allocate."""

    @pytest.mark.parametrize(
        "schema,span",
        [
            (SPL_ACCOUNT, 165),
            (SPL_MINT, 82),
            (POOL, 441),
            (POOL_V2, 474),
            (SNAPSHOT, 25),
            (SNAPSHOT_QUEUE, 8 + 8 + 25 * SNAPSHOT_QUEUE_CAPACITY),
            (FARMING_TICKET, 8 + 8 * 3 + 32 * 2 + 8 + 48 * TICKET_ATTACHED_STATES),
            (DTWAP_ORDER, 113),
            (DTWAP_AVAILABLE_TOKENS, 20),
            (SWAP_INSTRUCTION, 25),
        ],
    )
    def test_span(self, schema, span):
        assert schema.span == span

    def test_staking_ticket_matches_farming_ticket(self):
        assert STAKING_TICKET.span == FARMING_TICKET.span


class TestTokenLayouts:
    def test_token_account_amount_offset(self):
        """SPL token accounts hold the amount right after mint and owner."""
        assert SPL_ACCOUNT.offset_of("amount") == 64
        data = bytearray(SPL_ACCOUNT.span)
        data[64:72] = (1_234_567).to_bytes(8, "little")
        assert SPL_ACCOUNT.decode(bytes(data)).amount == 1_234_567

    def test_token_account_round_trip(self):
        account = make_token_account(BASE_MINT, 42)
        assert SPL_ACCOUNT.decode(SPL_ACCOUNT.to_bytes(account)) == account

    def test_mint_decimals(self):
        data = bytearray(SPL_MINT.span)
        data[SPL_MINT.offset_of("decimals")] = 6
        data[SPL_MINT.offset_of("is_initialized")] = 1
        mint = SPL_MINT.decode(bytes(data))
        assert mint.decimals == 6
        assert mint.is_initialized is True
        assert mint.decimal_denominator == 1_000_000


class TestPoolLayouts:
    def test_pool_bytes_round_trip(self):
        """Every field of a v1 pool accepts any byte pattern."""
        data = random_bytes(POOL.span)
        assert POOL.to_bytes(POOL.decode(data)) == data

    def test_pool_fees_nested(self):
        pool = make_pool(trade_fee_numerator=25, trade_fee_denominator=10_000)
        decoded = POOL.decode(POOL.to_bytes(pool))
        assert isinstance(decoded.fees, PoolFees)
        assert decoded.fees.trade_fee_numerator == 25
        assert decoded.curve == CurveType.CONSTANT_PRODUCT

    def test_fees_signed(self):
        """Fee fields are declared signed by the program."""
        data = bytearray(POOL.span)
        offset = POOL.offset_of("fees")
        data[offset : offset + 8] = (-1).to_bytes(8, "little", signed=True)
        assert POOL.decode(bytes(data)).fees.trade_fee_numerator == -1

    def test_pool_v2_curve_type(self):
        data = bytearray(random_bytes(POOL_V2.span))
        data[POOL_V2.offset_of("curve_type")] = 1
        pool = POOL_V2.decode(bytes(data))
        assert pool.curve_type == CurveType.STABLE
        assert pool.curve == CurveType.STABLE
        assert POOL_V2.to_bytes(pool) == bytes(data)

    def test_pool_v2_unknown_curve_raises(self):
        data = bytearray(POOL_V2.span)
        data[POOL_V2.offset_of("curve_type")] = 9
        with pytest.raises(FormatError):
            POOL_V2.decode(bytes(data))

    def test_pool_v2_shares_v1_prefix(self):
        """A v2 pool decodes its leading bytes exactly like a v1 pool."""
        data = bytearray(random_bytes(POOL_V2.span))
        data[POOL_V2.offset_of("curve_type")] = 0
        v1 = POOL.decode(bytes(data))
        v2 = POOL_V2.decode(bytes(data))
        assert v1.fees == v2.fees
        assert v1.quote_token_vault == v2.quote_token_vault


class TestPoolInstructions:
    def test_swap_instruction_bytes(self):
        instruction = SwapInstruction(tokens=1_000, min_tokens=990, side=Side.ASK)
        data = SWAP_INSTRUCTION.to_bytes(instruction)
        assert data[:8] == anchor_discriminator("global", "swap")
        assert data[8:16] == (1_000).to_bytes(8, "little")
        assert data[16:24] == (990).to_bytes(8, "little")
        assert data[24] == 1

    def test_liquidity_discriminators(self):
        assert DEPOSIT_LIQUIDITY_INSTRUCTION.span == WITHDRAW_LIQUIDITY_INSTRUCTION.span == 32
        deposit = DEPOSIT_LIQUIDITY_INSTRUCTION.to_bytes(
            {
                "instruction": anchor_discriminator("global", "create_basket"),
                "creation_size": 1,
                "max_base_token_amount": 2,
                "max_quote_token_amount": 3,
            }
        )
        assert deposit[:8] == anchor_discriminator("global", "create_basket")


class TestFarmingLayouts:
    def test_farming_state_round_trip(self):
        state = make_farming_state(tokens_per_period=500, vesting_period=-1)
        assert FARMING_STATE.decode(FARMING_STATE.to_bytes(state)) == state

    def test_farming_ticket_round_trip(self):
        ticket = make_ticket(attached=[make_attached_state(last_withdraw_time=300)])
        decoded = FARMING_TICKET.decode(FARMING_TICKET.to_bytes(ticket))
        assert decoded == ticket
        assert len(decoded.states_attached) == TICKET_ATTACHED_STATES
        assert decoded.is_open

    def test_farming_calc_bytes_round_trip(self):
        data = random_bytes(FARMING_CALC.span)
        assert FARMING_CALC.to_bytes(FARMING_CALC.decode(data)) == data

    def test_snapshot_queue_round_trip(self):
        queue = make_queue([make_snapshot(100), make_snapshot(200, tokens_frozen=5)])
        data = SNAPSHOT_QUEUE.to_bytes(queue)
        decoded = SNAPSHOT_QUEUE.decode(data)
        assert decoded.next_index == 2
        assert decoded.snapshots[1].tokens_frozen == 5
        assert SNAPSHOT_QUEUE.to_bytes(decoded) == data

    def test_padding_kept(self):
        """Discriminator bytes survive a decode/encode cycle untouched."""
        data = bytearray(FARMING_STATE.to_bytes(make_farming_state()))
        data[:8] = b"\x01\x02\x03\x04\x05\x06\x07\x08"
        state = FARMING_STATE.decode(bytes(data))
        assert state.padding == b"\x01\x02\x03\x04\x05\x06\x07\x08"
        assert FARMING_STATE.to_bytes(state) == bytes(data)

    def test_start_farming_instruction(self):
        data = START_FARMING_INSTRUCTION.to_bytes(StartFarmingInstruction(pool_token_amount=77))
        assert data[:8] == anchor_discriminator("global", "start_farming")
        assert int.from_bytes(data[8:], "little") == 77


class TestStakingLayouts:
    def test_staking_ticket_reads_farming_ticket_bytes(self):
        ticket = make_ticket(attached=[make_attached_state(last_vested_withdraw_time=50)])
        staked = STAKING_TICKET.decode(FARMING_TICKET.to_bytes(ticket))
        assert staked == ticket

    def test_unstaking_instruction(self):
        data = UNSTAKING_INSTRUCTION.to_bytes(UnstakingInstruction())
        assert data == anchor_discriminator("global", "end_farming")


class TestDtwapLayouts:
    def test_order_array_side(self):
        data = bytearray(DTWAP_ORDER_ARRAY.span)
        data[DTWAP_ORDER_ARRAY.offset_of("side")] = 0
        orders = DTWAP_ORDER_ARRAY.decode(bytes(data))
        assert isinstance(orders, DtwapOrderArray)
        assert orders.side == Side.BID
        assert orders.active_orders() == []

    def test_pair_settings_round_trip(self):
        data = random_bytes(DTWAP_PAIR_SETTINGS.span, seed=11)
        settings = DTWAP_PAIR_SETTINGS.decode(data)
        assert DTWAP_PAIR_SETTINGS.to_bytes(settings) == data
        assert settings.base_mint_decimals == data[-2]

    def test_available_tokens(self):
        data = (2).to_bytes(4, "little") + (10).to_bytes(8, "little") + (-1).to_bytes(
            8, "little", signed=True
        )
        available = DTWAP_AVAILABLE_TOKENS.decode(data)
        assert (available.length, available.amount_to, available.amount_from) == (2, 10, -1)

    def test_get_available_tokens_instruction(self):
        data = GET_AVAILABLE_TOKENS_INSTRUCTION.to_bytes({"instruction": b"\x00" * 8})
        assert data == b"\x00" * 8
