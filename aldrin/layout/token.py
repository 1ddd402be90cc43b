"""SPL Token program account layouts.

Pool reserves are the ``amount`` of the pool's base and quote vault token
accounts; mint decimals scale prices for display.
"""

from dataclasses import dataclass

from solders.pubkey import Pubkey

from aldrin.layout.codec import Schema, boolean, public_key, u8, u32, u64


@dataclass(frozen=True, kw_only=True)
class TokenAccount:
    """SPL token account (165 bytes)."""

    mint: Pubkey
    owner: Pubkey
    amount: int
    delegate_option: int
    delegate: Pubkey
    state: int
    is_native_option: int
    is_native: int
    delegated_amount: int
    close_authority_option: int
    close_authority: Pubkey


@dataclass(frozen=True, kw_only=True)
class Mint:
    """SPL mint (82 bytes)."""

    mint_authority_option: int
    mint_authority: Pubkey
    supply: int
    decimals: int
    is_initialized: bool
    freeze_authority_option: int
    freeze_authority: Pubkey

    @property
    def decimal_denominator(self) -> int:
        return 10**self.decimals


SPL_ACCOUNT: Schema[TokenAccount] = Schema(
    "spl_account",
    TokenAccount,
    "mint" / public_key,
    "owner" / public_key,
    "amount" / u64,
    "delegate_option" / u32,
    "delegate" / public_key,
    "state" / u8,
    "is_native_option" / u32,
    "is_native" / u64,
    "delegated_amount" / u64,
    "close_authority_option" / u32,
    "close_authority" / public_key,
)

SPL_MINT: Schema[Mint] = Schema(
    "spl_mint",
    Mint,
    "mint_authority_option" / u32,
    "mint_authority" / public_key,
    "supply" / u64,
    "decimals" / u8,
    "is_initialized" / boolean,
    "freeze_authority_option" / u32,
    "freeze_authority" / public_key,
)
