"""Farming reward accrual.

A farming state unlocks ``tokens_per_period`` reward tokens every period and
records a snapshot of the total pool tokens frozen at that moment. A ticket
earns, per snapshot, its pro-rata share:

    period_reward = tokens_per_period * ticket.tokens_frozen // snapshot.tokens_frozen

Each period reward vests in two tranches. ``period_reward // 3`` is claimable
as soon as the snapshot exists; the remaining two thirds only once
``vesting_period`` has elapsed since the snapshot. The ticket's attached
state keeps one checkpoint per tranche (``last_withdraw_time`` and
``last_vested_withdraw_time``); a snapshot at or before a checkpoint has had
that tranche paid out already.

Everything here is a pure function of the three decoded accounts. "Now" is
the farming state's ``current_time``, never the local clock, and the result
is a lower bound: the program recomputes it when the claim executes.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

import structlog
from solders.pubkey import Pubkey

from aldrin.config import DEFAULT_FARMING_CONFIG, FarmingConfig
from aldrin.farming.layout import FarmingState, FarmingTicket, Snapshot, SnapshotQueue
from aldrin.farming.snapshots import SnapshotRing
from aldrin.models import FarmingReward
from aldrin.safe_int import S

logger = structlog.get_logger()


@dataclass(frozen=True)
class RewardWindow:
    """Snapshot times a ticket can still earn from, and its checkpoints.

    Attributes:
        start: Earliest snapshot time (ticket start delayed by the farm's
            no-withdrawal time)
        end: Latest snapshot time (current time, or the ticket's end if it
            ended earlier)
        last_withdraw_time: Checkpoint of the immediate tranche
        last_vested_withdraw_time: Checkpoint of the vested tranche
    """

    start: int
    end: int
    last_withdraw_time: int
    last_vested_withdraw_time: int

    @classmethod
    def for_ticket(
        cls,
        ticket: FarmingTicket,
        state: FarmingState,
        state_key: Pubkey,
    ) -> RewardWindow:
        attached = ticket.attached_state(state_key)
        last_withdraw = attached.last_withdraw_time if attached else 0
        last_vested = attached.last_vested_withdraw_time if attached else 0

        end = state.current_time if ticket.is_open else min(state.current_time, ticket.end_time)
        return cls(
            start=ticket.start_time + state.no_withdrawal_time,
            end=end,
            last_withdraw_time=last_withdraw,
            last_vested_withdraw_time=last_vested,
        )

    @property
    def settled(self) -> bool:
        return self.start > self.end


def period_reward(state: FarmingState, ticket: FarmingTicket, snapshot: Snapshot) -> int:
    """Ticket's share of one period's unlocked tokens, floored.

    Multiplies before dividing so small stakes keep their precision.
    Snapshots with nothing frozen pay nothing.
    """
    if snapshot.tokens_frozen == 0:
        return 0
    share = S(state.tokens_per_period) * S(ticket.tokens_frozen) // S(snapshot.tokens_frozen)
    return share.value


def compute_reward(
    ticket: FarmingTicket,
    state: FarmingState,
    queue: SnapshotQueue | None,
    state_key: Pubkey,
    *,
    config: FarmingConfig = DEFAULT_FARMING_CONFIG,
) -> FarmingReward:
    """Unclaimed reward of ``ticket`` in the farming state at ``state_key``.

    Args:
        ticket: Decoded farming (or staking) ticket
        state: Decoded farming state
        queue: The state's snapshot queue, or None if it was not found
        state_key: Address of the farming state, used to find the ticket's
            attached checkpoints

    Returns:
        FarmingReward; zero when the queue is missing or the ticket has
        already claimed everything up to the state's current time
    """
    if queue is None:
        logger.debug("farming_rewards_no_queue", farming_state=str(state_key))
        return FarmingReward.zero()

    window = RewardWindow.for_ticket(ticket, state, state_key)
    if window.last_vested_withdraw_time >= state.current_time:
        return FarmingReward.zero()
    if window.settled:
        return FarmingReward.zero()

    immediate_total = S(0)
    vested_total = S(0)
    unclaimed_snapshots = 0

    for snapshot in SnapshotRing(queue).between(window.start, window.end):
        reward = period_reward(state, ticket, snapshot)
        immediate = S(reward) // config.pre_vesting_denominator
        counted = False

        if snapshot.time > window.last_withdraw_time:
            immediate_total = immediate_total + immediate
            counted = True

        vested_at = snapshot.time + state.vesting_period
        if snapshot.time > window.last_vested_withdraw_time and state.current_time >= vested_at:
            vested_total = vested_total + (S(reward) - immediate)
            counted = True

        if counted:
            unclaimed_snapshots += 1

    total = immediate_total + vested_total
    logger.debug(
        "farming_rewards_calculated",
        farming_state=str(state_key),
        window_start=window.start,
        window_end=window.end,
        snapshots=unclaimed_snapshots,
        immediate=immediate_total.value,
        vested=vested_total.value,
    )
    return FarmingReward(
        unclaimed_tokens=total.value,
        unclaimed_snapshots=unclaimed_snapshots,
        immediate_tokens=immediate_total.value,
        vested_tokens=vested_total.value,
    )


def calculate_farming_rewards(
    ticket: FarmingTicket,
    state: FarmingState,
    state_key: Pubkey,
    queues: Mapping[Pubkey, SnapshotQueue],
    *,
    config: FarmingConfig = DEFAULT_FARMING_CONFIG,
) -> FarmingReward:
    """Unclaimed reward of ``ticket``, looking up the state's queue by address.

    Args:
        ticket: Decoded farming (or staking) ticket
        state: Decoded farming state
        state_key: Address of the farming state
        queues: Decoded snapshot queues keyed by account address
    """
    return compute_reward(
        ticket, state, queues.get(state.farming_snapshots), state_key, config=config
    )
