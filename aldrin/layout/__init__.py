"""Binary layout codec and shared account layouts."""

from .codec import (
    Schema,
    TaggedVariant,
    anchor_discriminator,
    blob,
    boolean,
    decode,
    discriminator,
    encode,
    i64,
    public_key,
    seq,
    u8,
    u32,
    u64,
)
from .token import SPL_ACCOUNT, SPL_MINT, Mint, TokenAccount

__all__ = [
    # Schema machinery
    "Schema",
    "TaggedVariant",
    "decode",
    "encode",
    "anchor_discriminator",
    # Field codecs
    "u8",
    "u32",
    "u64",
    "i64",
    "boolean",
    "public_key",
    "blob",
    "discriminator",
    "seq",
    # SPL token layouts
    "SPL_ACCOUNT",
    "SPL_MINT",
    "TokenAccount",
    "Mint",
]
