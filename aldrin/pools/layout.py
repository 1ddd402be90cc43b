"""Account and instruction layouts of the Aldrin AMM program."""

from __future__ import annotations

from dataclasses import dataclass, field

from solders.pubkey import Pubkey

from aldrin.constants import DISCRIMINATOR_SIZE
from aldrin.layout.codec import (
    Schema,
    TaggedVariant,
    anchor_discriminator,
    discriminator,
    i64,
    public_key,
    u8,
    u64,
)
from aldrin.types import CurveType, Side

_ZERO_DISCRIMINATOR = bytes(DISCRIMINATOR_SIZE)


@dataclass(frozen=True, kw_only=True)
class PoolFees:
    """Fee fractions charged by a pool (numerator / denominator pairs)."""

    trade_fee_numerator: int
    trade_fee_denominator: int
    owner_trade_fee_numerator: int
    owner_trade_fee_denominator: int
    owner_withdraw_fee_numerator: int
    owner_withdraw_fee_denominator: int


@dataclass(frozen=True, kw_only=True)
class Pool:
    """Pool account (v1, constant product only)."""

    padding: bytes = field(default=_ZERO_DISCRIMINATOR, repr=False)
    lp_token_freeze_vault: Pubkey
    pool_mint: Pubkey
    base_token_vault: Pubkey
    base_token_mint: Pubkey
    quote_token_vault: Pubkey
    quote_token_mint: Pubkey
    pool_signer: Pubkey
    pool_signer_nonce: int
    authority: Pubkey
    initializer_account: Pubkey
    fee_base_account: Pubkey
    fee_quote_account: Pubkey
    fee_pool_token_account: Pubkey
    fees: PoolFees

    @property
    def curve(self) -> CurveType:
        return CurveType.CONSTANT_PRODUCT


@dataclass(frozen=True, kw_only=True)
class PoolV2(Pool):
    """Pool account (v2) with a selectable curve."""

    curve_type: CurveType
    curve_account: Pubkey

    @property
    def curve(self) -> CurveType:
        return self.curve_type


@dataclass(frozen=True, kw_only=True)
class SwapInstruction:
    instruction: bytes = field(default_factory=lambda: anchor_discriminator("global", "swap"))
    tokens: int
    min_tokens: int
    side: Side


@dataclass(frozen=True, kw_only=True)
class DepositLiquidityInstruction:
    instruction: bytes = field(
        default_factory=lambda: anchor_discriminator("global", "create_basket")
    )
    creation_size: int
    max_base_token_amount: int
    max_quote_token_amount: int


@dataclass(frozen=True, kw_only=True)
class WithdrawLiquidityInstruction:
    instruction: bytes = field(
        default_factory=lambda: anchor_discriminator("global", "redeem_basket")
    )
    redemption_size: int
    base_token_returned_min: int
    quote_token_returned_min: int


FEES: Schema[PoolFees] = Schema(
    "fees",
    PoolFees,
    "trade_fee_numerator" / i64,
    "trade_fee_denominator" / i64,
    "owner_trade_fee_numerator" / i64,
    "owner_trade_fee_denominator" / i64,
    "owner_withdraw_fee_numerator" / i64,
    "owner_withdraw_fee_denominator" / i64,
)

_POOL_FIELDS_COMMON = (
    "padding" / discriminator,
    "lp_token_freeze_vault" / public_key,
    "pool_mint" / public_key,
    "base_token_vault" / public_key,
    "base_token_mint" / public_key,
    "quote_token_vault" / public_key,
    "quote_token_mint" / public_key,
    "pool_signer" / public_key,
    "pool_signer_nonce" / u8,
    "authority" / public_key,
    "initializer_account" / public_key,
    "fee_base_account" / public_key,
    "fee_quote_account" / public_key,
    "fee_pool_token_account" / public_key,
    "fees" / FEES,
)

POOL: Schema[Pool] = Schema("pool", Pool, *_POOL_FIELDS_COMMON)

POOL_V2: Schema[PoolV2] = Schema(
    "pool_v2",
    PoolV2,
    *_POOL_FIELDS_COMMON,
    "curve_type" / TaggedVariant(CurveType),
    "curve_account" / public_key,
)

SWAP_INSTRUCTION: Schema[SwapInstruction] = Schema(
    "swap_instruction",
    SwapInstruction,
    "instruction" / discriminator,
    "tokens" / u64,
    "min_tokens" / u64,
    "side" / TaggedVariant(Side),
)

DEPOSIT_LIQUIDITY_INSTRUCTION: Schema[DepositLiquidityInstruction] = Schema(
    "deposit_liquidity_instruction",
    DepositLiquidityInstruction,
    "instruction" / discriminator,
    "creation_size" / u64,
    "max_base_token_amount" / u64,
    "max_quote_token_amount" / u64,
)

WITHDRAW_LIQUIDITY_INSTRUCTION: Schema[WithdrawLiquidityInstruction] = Schema(
    "withdraw_liquidity_instruction",
    WithdrawLiquidityInstruction,
    "instruction" / discriminator,
    "redemption_size" / u64,
    "base_token_returned_min" / u64,
    "quote_token_returned_min" / u64,
)
