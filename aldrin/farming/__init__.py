"""Aldrin farming: account layouts, snapshot ring and reward accrual."""

from .layout import (
    ATTACHED_FARMING_STATE,
    CALCULATE_FARMED_INSTRUCTION,
    FARMING_CALC,
    FARMING_STATE,
    FARMING_TICKET,
    SNAPSHOT,
    SNAPSHOT_QUEUE,
    START_FARMING_INSTRUCTION,
    AttachedFarmingState,
    CalculateFarmedInstruction,
    FarmingCalc,
    FarmingState,
    FarmingTicket,
    Snapshot,
    SnapshotQueue,
    StartFarmingInstruction,
)
from .rewards import RewardWindow, calculate_farming_rewards, compute_reward, period_reward
from .snapshots import SnapshotRing, empty_queue, empty_snapshot, push_snapshot

__all__ = [
    # Reward accrual
    "RewardWindow",
    "calculate_farming_rewards",
    "compute_reward",
    "period_reward",
    # Snapshot ring
    "SnapshotRing",
    "empty_queue",
    "empty_snapshot",
    "push_snapshot",
    # Layouts
    "FARMING_STATE",
    "FARMING_TICKET",
    "ATTACHED_FARMING_STATE",
    "FARMING_CALC",
    "SNAPSHOT",
    "SNAPSHOT_QUEUE",
    "START_FARMING_INSTRUCTION",
    "CALCULATE_FARMED_INSTRUCTION",
    # Records
    "FarmingState",
    "FarmingTicket",
    "AttachedFarmingState",
    "FarmingCalc",
    "Snapshot",
    "SnapshotQueue",
    "StartFarmingInstruction",
    "CalculateFarmedInstruction",
]
