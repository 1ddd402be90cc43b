"""Account layouts of the Aldrin DTWAP (time-weighted order) program."""

from __future__ import annotations

from dataclasses import dataclass, field

from solders.pubkey import Pubkey

from aldrin.constants import DISCRIMINATOR_SIZE, DTWAP_ORDERS_PER_ARRAY
from aldrin.layout.codec import (
    Schema,
    TaggedVariant,
    anchor_discriminator,
    boolean,
    discriminator,
    i64,
    public_key,
    seq,
    u8,
    u32,
    u64,
)
from aldrin.types import Side

_ZERO_DISCRIMINATOR = bytes(DISCRIMINATOR_SIZE)


@dataclass(frozen=True, kw_only=True)
class DtwapOrder:
    """One order slot; a partially filled order advances ``steps_filled``."""

    is_initialized: bool
    amount: int
    start_time: int
    end_time: int
    time_horizon: int
    average_transaction: int
    amount_filled: int
    amount_to_fill: int
    steps_filled: int
    steps_to_fill: int
    tokens_swapped: int
    authority: Pubkey

    @property
    def is_filled(self) -> bool:
        return self.amount_to_fill == 0 or self.steps_filled >= self.steps_to_fill


@dataclass(frozen=True, kw_only=True)
class DtwapOrderArray:
    padding: bytes = field(default=_ZERO_DISCRIMINATOR, repr=False)
    twamm_from_token_vault: Pubkey
    twamm_to_token_vault: Pubkey
    signer: Pubkey
    signer_nonce: int
    fee_account: Pubkey
    pair_settings: Pubkey
    side: Side
    orders: tuple[DtwapOrder, ...]

    def active_orders(self) -> list[DtwapOrder]:
        return [order for order in self.orders if order.is_initialized and not order.is_filled]


@dataclass(frozen=True, kw_only=True)
class DtwapFees:
    placing_fee_numerator: int
    placing_fee_denominator: int
    cancelling_fee_numerator: int
    cancelling_fee_denominator: int


@dataclass(frozen=True, kw_only=True)
class DtwapPairSettings:
    padding: bytes = field(default=_ZERO_DISCRIMINATOR, repr=False)
    base_token_mint: Pubkey
    quote_token_mint: Pubkey
    authority: Pubkey
    base_token_fee_account: Pubkey
    quote_token_fee_account: Pubkey
    initializer_account: Pubkey
    pyth: Pubkey
    discount_numerator: int
    discount_denominator: int
    fees: DtwapFees
    minimum_tokens: int
    base_mint_decimals: int
    quote_mint_decimals: int


@dataclass(frozen=True, kw_only=True)
class DtwapAvailableTokens:
    """Return data of ``get_available_tokens_for_sale``."""

    length: int
    amount_to: int
    amount_from: int


@dataclass(frozen=True, kw_only=True)
class GetAvailableTokensInstruction:
    instruction: bytes = field(
        default_factory=lambda: anchor_discriminator("global", "get_available_tokens_for_sale")
    )


DTWAP_ORDER: Schema[DtwapOrder] = Schema(
    "dtwap_order",
    DtwapOrder,
    "is_initialized" / boolean,
    "amount" / u64,
    "start_time" / i64,
    "end_time" / i64,
    "time_horizon" / i64,
    "average_transaction" / u64,
    "amount_filled" / u64,
    "amount_to_fill" / u64,
    "steps_filled" / u64,
    "steps_to_fill" / u64,
    "tokens_swapped" / u64,
    "authority" / public_key,
)

DTWAP_ORDER_ARRAY: Schema[DtwapOrderArray] = Schema(
    "dtwap_order_array",
    DtwapOrderArray,
    "padding" / discriminator,
    "twamm_from_token_vault" / public_key,
    "twamm_to_token_vault" / public_key,
    "signer" / public_key,
    "signer_nonce" / u8,
    "fee_account" / public_key,
    "pair_settings" / public_key,
    "side" / TaggedVariant(Side),
    "orders" / seq(DTWAP_ORDER, DTWAP_ORDERS_PER_ARRAY),
)

DTWAP_FEES: Schema[DtwapFees] = Schema(
    "dtwap_fees",
    DtwapFees,
    "placing_fee_numerator" / u64,
    "placing_fee_denominator" / u64,
    "cancelling_fee_numerator" / u64,
    "cancelling_fee_denominator" / u64,
)

DTWAP_PAIR_SETTINGS: Schema[DtwapPairSettings] = Schema(
    "dtwap_pair_settings",
    DtwapPairSettings,
    "padding" / discriminator,
    "base_token_mint" / public_key,
    "quote_token_mint" / public_key,
    "authority" / public_key,
    "base_token_fee_account" / public_key,
    "quote_token_fee_account" / public_key,
    "initializer_account" / public_key,
    "pyth" / public_key,
    "discount_numerator" / u64,
    "discount_denominator" / u64,
    "fees" / DTWAP_FEES,
    "minimum_tokens" / u64,
    "base_mint_decimals" / u8,
    "quote_mint_decimals" / u8,
)

DTWAP_AVAILABLE_TOKENS: Schema[DtwapAvailableTokens] = Schema(
    "dtwap_available_tokens",
    DtwapAvailableTokens,
    "length" / u32,
    "amount_to" / i64,
    "amount_from" / i64,
)

GET_AVAILABLE_TOKENS_INSTRUCTION: Schema[GetAvailableTokensInstruction] = Schema(
    "get_available_tokens_instruction",
    GetAvailableTokensInstruction,
    "instruction" / discriminator,
)
