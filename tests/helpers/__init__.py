"""Test helpers module for shared test utilities.

- factories: account record factory functions
"""

from tests.helpers.factories import (
    make_attached_state,
    make_farming_state,
    make_pool,
    make_pubkey,
    make_queue,
    make_snapshot,
    make_ticket,
    make_token_account,
)

__all__ = [
    "make_pubkey",
    "make_pool",
    "make_token_account",
    "make_farming_state",
    "make_attached_state",
    "make_ticket",
    "make_snapshot",
    "make_queue",
]
