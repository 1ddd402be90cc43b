"""Factory functions for creating test account records.

Usage:
    from tests.helpers import make_ticket, make_queue

    ticket = make_ticket(tokens_frozen=100, start_time=0)
"""

from collections.abc import Iterable

from solders.pubkey import Pubkey

from aldrin.constants import DEFAULT_FARMING_TICKET_END_TIME, TICKET_ATTACHED_STATES
from aldrin.farming import (
    AttachedFarmingState,
    FarmingState,
    FarmingTicket,
    Snapshot,
    SnapshotQueue,
    empty_queue,
    push_snapshot,
)
from aldrin.layout import TokenAccount
from aldrin.pools import Pool, PoolFees


def make_pubkey(seed: int) -> Pubkey:
    """Deterministic, distinct public key for a small integer seed."""
    return Pubkey.from_bytes(bytes([seed % 256]) * 32)


FARMING_STATE_KEY = make_pubkey(1)
SNAPSHOTS_KEY = make_pubkey(2)
POOL_KEY = make_pubkey(3)
USER_KEY = make_pubkey(4)
BASE_MINT = make_pubkey(5)
QUOTE_MINT = make_pubkey(6)


def make_pool(
    base_token_mint: Pubkey = BASE_MINT,
    quote_token_mint: Pubkey = QUOTE_MINT,
    trade_fee_numerator: int = 25,
    trade_fee_denominator: int = 10_000,
) -> Pool:
    fees = PoolFees(
        trade_fee_numerator=trade_fee_numerator,
        trade_fee_denominator=trade_fee_denominator,
        owner_trade_fee_numerator=5,
        owner_trade_fee_denominator=10_000,
        owner_withdraw_fee_numerator=0,
        owner_withdraw_fee_denominator=1,
    )
    return Pool(
        lp_token_freeze_vault=make_pubkey(10),
        pool_mint=make_pubkey(11),
        base_token_vault=make_pubkey(12),
        base_token_mint=base_token_mint,
        quote_token_vault=make_pubkey(13),
        quote_token_mint=quote_token_mint,
        pool_signer=make_pubkey(14),
        pool_signer_nonce=254,
        authority=make_pubkey(15),
        initializer_account=make_pubkey(16),
        fee_base_account=make_pubkey(17),
        fee_quote_account=make_pubkey(18),
        fee_pool_token_account=make_pubkey(19),
        fees=fees,
    )


def make_token_account(mint: Pubkey, amount: int, owner: Pubkey = USER_KEY) -> TokenAccount:
    return TokenAccount(
        mint=mint,
        owner=owner,
        amount=amount,
        delegate_option=0,
        delegate=Pubkey.default(),
        state=1,
        is_native_option=0,
        is_native=0,
        delegated_amount=0,
        close_authority_option=0,
        close_authority=Pubkey.default(),
    )


def make_farming_state(
    tokens_per_period: int = 1_000,
    current_time: int = 1_000,
    vesting_period: int = 0,
    no_withdrawal_time: int = 0,
    period_length: int = 100,
) -> FarmingState:
    """Create a farming state with sensible defaults.

    Args:
        tokens_per_period: Reward tokens unlocked each period (default: 1000)
        current_time: The program clock used as "now" (default: 1000)
        vesting_period: Delay before the vested tranche unlocks (default: 0)
        no_withdrawal_time: Delay after ticket start before it earns (default: 0)
        period_length: Seconds between snapshots (default: 100)
    """
    return FarmingState(
        tokens_unlocked=0,
        tokens_per_period=tokens_per_period,
        tokens_total=tokens_per_period * 100,
        period_length=period_length,
        no_withdrawal_time=no_withdrawal_time,
        vesting_type=1,
        vesting_period=vesting_period,
        start_time=0,
        current_time=current_time,
        pool=POOL_KEY,
        farming_token_vault=make_pubkey(7),
        farming_snapshots=SNAPSHOTS_KEY,
    )


def make_attached_state(
    farming_state: Pubkey = FARMING_STATE_KEY,
    last_withdraw_time: int = 0,
    last_vested_withdraw_time: int = 0,
) -> AttachedFarmingState:
    return AttachedFarmingState(
        farming_state=farming_state,
        last_withdraw_time=last_withdraw_time,
        last_vested_withdraw_time=last_vested_withdraw_time,
    )


def make_ticket(
    tokens_frozen: int = 100,
    start_time: int = 0,
    end_time: int = DEFAULT_FARMING_TICKET_END_TIME,
    attached: Iterable[AttachedFarmingState] = (),
) -> FarmingTicket:
    """Create a farming ticket; unused attached slots are zeroed."""
    states = list(attached)
    filler = make_attached_state(farming_state=Pubkey.default())
    padded = states + [filler] * (TICKET_ATTACHED_STATES - len(states))
    return FarmingTicket(
        tokens_frozen=tokens_frozen,
        start_time=start_time,
        end_time=end_time,
        user_key=USER_KEY,
        pool=POOL_KEY,
        next_attached=len(states),
        states_attached=tuple(padded),
    )


def make_snapshot(time: int, tokens_frozen: int = 1_000, farming_tokens: int = 0) -> Snapshot:
    return Snapshot(
        is_initialized=True,
        tokens_frozen=tokens_frozen,
        farming_tokens=farming_tokens,
        time=time,
    )


def make_queue(snapshots: Iterable[Snapshot], capacity: int | None = None) -> SnapshotQueue:
    """Queue holding ``snapshots`` pushed in order, as the program writes them."""
    queue = empty_queue() if capacity is None else empty_queue(capacity)
    for snapshot in snapshots:
        queue = push_snapshot(queue, snapshot)
    return queue
