"""Account and instruction layouts of the Aldrin staking program.

Staking tickets share the farming ticket's shape and feed the same reward
accrual; only the checkpoint times are declared unsigned.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from aldrin.constants import TICKET_ATTACHED_STATES
from aldrin.farming.layout import AttachedFarmingState, FarmingTicket
from aldrin.layout.codec import Schema, anchor_discriminator, discriminator, public_key, seq, u64


@dataclass(frozen=True, kw_only=True)
class StakingInstruction:
    instruction: bytes = field(
        default_factory=lambda: anchor_discriminator("global", "start_farming")
    )
    token_amount: int


@dataclass(frozen=True, kw_only=True)
class UnstakingInstruction:
    instruction: bytes = field(
        default_factory=lambda: anchor_discriminator("global", "end_farming")
    )


STAKING_ATTACHED_STATE: Schema[AttachedFarmingState] = Schema(
    "staking_attached_state",
    AttachedFarmingState,
    "farming_state" / public_key,
    "last_withdraw_time" / u64,
    "last_vested_withdraw_time" / u64,
)

STAKING_TICKET: Schema[FarmingTicket] = Schema(
    "staking_ticket",
    FarmingTicket,
    "padding" / discriminator,
    "tokens_frozen" / u64,
    "start_time" / u64,
    "end_time" / u64,
    "user_key" / public_key,
    "pool" / public_key,
    "next_attached" / u64,
    "states_attached" / seq(STAKING_ATTACHED_STATE, TICKET_ATTACHED_STATES),
)

STAKING_INSTRUCTION: Schema[StakingInstruction] = Schema(
    "staking_instruction",
    StakingInstruction,
    "instruction" / discriminator,
    "token_amount" / u64,
)

UNSTAKING_INSTRUCTION: Schema[UnstakingInstruction] = Schema(
    "unstaking_instruction",
    UnstakingInstruction,
    "instruction" / discriminator,
)
