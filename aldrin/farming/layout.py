"""Account and instruction layouts of the Aldrin farming program."""

from __future__ import annotations

from dataclasses import dataclass, field

from solders.pubkey import Pubkey

from aldrin.constants import (
    DEFAULT_FARMING_TICKET_END_TIME,
    DISCRIMINATOR_SIZE,
    SNAPSHOT_QUEUE_CAPACITY,
    TICKET_ATTACHED_STATES,
)
from aldrin.layout.codec import (
    Schema,
    anchor_discriminator,
    boolean,
    discriminator,
    i64,
    public_key,
    seq,
    u8,
    u64,
)

_ZERO_DISCRIMINATOR = bytes(DISCRIMINATOR_SIZE)


@dataclass(frozen=True, kw_only=True)
class FarmingState:
    """Reward schedule of one farm: how many tokens unlock per period.

    ``current_time`` is the program's clock at the last snapshot, not the
    wall clock; reward accrual uses it as "now".
    """

    padding: bytes = field(default=_ZERO_DISCRIMINATOR, repr=False)
    tokens_unlocked: int
    tokens_per_period: int
    tokens_total: int
    period_length: int
    no_withdrawal_time: int
    vesting_type: int
    vesting_period: int
    start_time: int
    current_time: int
    pool: Pubkey
    farming_token_vault: Pubkey
    farming_snapshots: Pubkey


@dataclass(frozen=True, kw_only=True)
class AttachedFarmingState:
    """Claim checkpoints of a ticket for one farming state."""

    farming_state: Pubkey
    last_withdraw_time: int
    last_vested_withdraw_time: int


@dataclass(frozen=True, kw_only=True)
class FarmingTicket:
    """One user's locked pool tokens and their per-farm claim checkpoints."""

    padding: bytes = field(default=_ZERO_DISCRIMINATOR, repr=False)
    tokens_frozen: int
    start_time: int
    end_time: int
    user_key: Pubkey
    pool: Pubkey
    next_attached: int
    states_attached: tuple[AttachedFarmingState, ...]

    @property
    def is_open(self) -> bool:
        """True while the ticket has not been ended."""
        return self.end_time == DEFAULT_FARMING_TICKET_END_TIME

    def attached_state(self, farming_state: Pubkey) -> AttachedFarmingState | None:
        for attached in self.states_attached:
            if attached.farming_state == farming_state:
                return attached
        return None


@dataclass(frozen=True, kw_only=True)
class FarmingCalc:
    """Farmed-but-unclaimed amount the program computed for a user."""

    padding: bytes = field(default=_ZERO_DISCRIMINATOR, repr=False)
    farming_state: Pubkey
    user_key: Pubkey
    initializer: Pubkey
    token_amount: int


@dataclass(frozen=True, kw_only=True)
class Snapshot:
    """Total pool tokens frozen in a farm at one snapshot time."""

    is_initialized: bool
    tokens_frozen: int
    farming_tokens: int
    time: int


@dataclass(frozen=True, kw_only=True)
class SnapshotQueue:
    """Fixed-capacity ring of snapshots; ``next_index`` is the write cursor."""

    padding: bytes = field(default=_ZERO_DISCRIMINATOR, repr=False)
    next_index: int
    snapshots: tuple[Snapshot, ...]


@dataclass(frozen=True, kw_only=True)
class StartFarmingInstruction:
    instruction: bytes = field(
        default_factory=lambda: anchor_discriminator("global", "start_farming")
    )
    pool_token_amount: int


@dataclass(frozen=True, kw_only=True)
class CalculateFarmedInstruction:
    instruction: bytes = field(
        default_factory=lambda: anchor_discriminator("global", "calculate_farmed")
    )
    max_snapshots: int


FARMING_STATE: Schema[FarmingState] = Schema(
    "farming_state",
    FarmingState,
    "padding" / discriminator,
    "tokens_unlocked" / u64,
    "tokens_per_period" / u64,
    "tokens_total" / u64,
    "period_length" / i64,
    "no_withdrawal_time" / i64,
    "vesting_type" / u8,
    "vesting_period" / i64,
    "start_time" / i64,
    "current_time" / i64,
    "pool" / public_key,
    "farming_token_vault" / public_key,
    "farming_snapshots" / public_key,
)

ATTACHED_FARMING_STATE: Schema[AttachedFarmingState] = Schema(
    "attached_farming_state",
    AttachedFarmingState,
    "farming_state" / public_key,
    "last_withdraw_time" / i64,
    "last_vested_withdraw_time" / i64,
)

FARMING_TICKET: Schema[FarmingTicket] = Schema(
    "farming_ticket",
    FarmingTicket,
    "padding" / discriminator,
    "tokens_frozen" / u64,
    "start_time" / u64,
    "end_time" / u64,
    "user_key" / public_key,
    "pool" / public_key,
    "next_attached" / u64,
    "states_attached" / seq(ATTACHED_FARMING_STATE, TICKET_ATTACHED_STATES),
)

FARMING_CALC: Schema[FarmingCalc] = Schema(
    "farming_calc",
    FarmingCalc,
    "padding" / discriminator,
    "farming_state" / public_key,
    "user_key" / public_key,
    "initializer" / public_key,
    "token_amount" / u64,
)

SNAPSHOT: Schema[Snapshot] = Schema(
    "snapshot",
    Snapshot,
    "is_initialized" / boolean,
    "tokens_frozen" / u64,
    "farming_tokens" / u64,
    "time" / i64,
)

SNAPSHOT_QUEUE: Schema[SnapshotQueue] = Schema(
    "snapshot_queue",
    SnapshotQueue,
    "padding" / discriminator,
    "next_index" / u64,
    "snapshots" / seq(SNAPSHOT, SNAPSHOT_QUEUE_CAPACITY),
)

START_FARMING_INSTRUCTION: Schema[StartFarmingInstruction] = Schema(
    "start_farming_instruction",
    StartFarmingInstruction,
    "instruction" / discriminator,
    "pool_token_amount" / u64,
)

CALCULATE_FARMED_INSTRUCTION: Schema[CalculateFarmedInstruction] = Schema(
    "calculate_farmed_instruction",
    CalculateFarmedInstruction,
    "instruction" / discriminator,
    "max_snapshots" / u64,
)
