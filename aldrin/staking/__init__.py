"""Aldrin staking account layouts."""

from .layout import (
    STAKING_ATTACHED_STATE,
    STAKING_INSTRUCTION,
    STAKING_TICKET,
    UNSTAKING_INSTRUCTION,
    StakingInstruction,
    UnstakingInstruction,
)

__all__ = [
    "STAKING_TICKET",
    "STAKING_ATTACHED_STATE",
    "STAKING_INSTRUCTION",
    "UNSTAKING_INSTRUCTION",
    "StakingInstruction",
    "UnstakingInstruction",
]
