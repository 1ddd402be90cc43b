"""Fixed-width binary layouts for Aldrin program accounts.

A Schema is a ``construct.Struct`` of named fields bound to a frozen record
dataclass. Schemas are built once at import time; decoding materializes the
record type, encoding accepts it back. Schemas nest: a Schema is itself a
construct, so ``"fees" / FEES`` embeds one record inside another.

Field declaration order fixes every offset and must match the program's
account layout byte for byte. There is no checksum, so a wrong order or
width decodes silently into garbage.
"""

from __future__ import annotations

import dataclasses
import hashlib
from collections.abc import Mapping
from enum import IntEnum
from typing import Any, Generic, TypeVar

from construct import (
    Adapter,
    Array,
    Bytes,
    Construct,
    ConstructError,
    Flag,
    Int8ul,
    Int32ul,
    Int64sl,
    Int64ul,
    Struct,
)
from solders.pubkey import Pubkey

from aldrin.constants import DISCRIMINATOR_SIZE, PUBLIC_KEY_SIZE
from aldrin.errors import ConfigError, FormatError

R = TypeVar("R")

# Little-endian integers, decoded to Python int
u8 = Int8ul
u32 = Int32ul
u64 = Int64ul
i64 = Int64sl

# One byte, any nonzero value decodes to True; True encodes to 1
boolean = Flag


class _PublicKeyAdapter(Adapter):  # type: ignore[misc]
    """32 raw bytes <-> solders Pubkey."""

    def _decode(self, obj: bytes, context: Any, path: str) -> Pubkey:
        return Pubkey.from_bytes(obj)

    def _encode(self, obj: Pubkey | bytes, context: Any, path: str) -> bytes:
        return bytes(obj)


public_key = _PublicKeyAdapter(Bytes(PUBLIC_KEY_SIZE))


def blob(size: int) -> Construct:
    """Opaque fixed-size bytes, kept verbatim so re-encoding is lossless."""
    return Bytes(size)


# Anchor accounts and instructions start with an 8-byte discriminator
discriminator = blob(DISCRIMINATOR_SIZE)


class _SequenceAdapter(Adapter):  # type: ignore[misc]
    def _decode(self, obj: list[Any], context: Any, path: str) -> tuple[Any, ...]:
        return tuple(obj)

    def _encode(self, obj: Any, context: Any, path: str) -> list[Any]:
        return list(obj)


def seq(subcon: Construct, count: int) -> Construct:
    """``count`` back-to-back repetitions of ``subcon``, decoded as a tuple."""
    return _SequenceAdapter(Array(count, subcon))


class TaggedVariant(Adapter):  # type: ignore[misc]
    """One discriminant byte selecting a member of a closed IntEnum.

    Every variant has a zero-width payload, so the span is exactly one byte.
    The enum's values are the on-chain tags: declaring ``BID = 0, ASK = 1``
    fixes the variant table.
    """

    def __init__(self, variants: type[IntEnum]) -> None:
        super().__init__(Int8ul)
        self.variants = variants

    def _decode(self, obj: int, context: Any, path: str) -> IntEnum:
        try:
            return self.variants(obj)
        except ValueError as err:
            raise FormatError(f"Unknown {self.variants.__name__} tag {obj} ({path})") from err

    def _encode(self, obj: Any, context: Any, path: str) -> int:
        if isinstance(obj, self.variants):
            return int(obj)
        raise ConfigError(f"{obj!r} is not a declared {self.variants.__name__} variant ({path})")


class Schema(Adapter, Generic[R]):  # type: ignore[misc]
    """Named, ordered fixed-width fields materialized as ``record_type``.

    The record dataclass must declare exactly the schema's field names; this
    is checked when the schema is built.
    """

    def __init__(self, name: str, record_type: type[R], *fields: Construct) -> None:
        struct = Struct(*fields)
        super().__init__(struct)
        self.schema_name = name
        self.record_type = record_type
        self.field_names = tuple(sc.name for sc in struct.subcons)
        self.span = struct.sizeof()

        declared = {f.name for f in dataclasses.fields(record_type)}  # type: ignore[arg-type]
        if declared != set(self.field_names):
            raise TypeError(
                f"{record_type.__name__} fields {sorted(declared)} do not match "
                f"schema {name} fields {sorted(self.field_names)}"
            )

        offsets: dict[str, int] = {}
        position = 0
        for sc in struct.subcons:
            offsets[sc.name] = position
            position += sc.sizeof()
        self._offsets = offsets

    def __repr__(self) -> str:
        return f"Schema({self.schema_name}, span={self.span})"

    def offset_of(self, field_name: str) -> int:
        """Byte offset of a top-level field from the start of the record."""
        try:
            return self._offsets[field_name]
        except KeyError:
            raise KeyError(f"Schema {self.schema_name} has no field {field_name!r}") from None

    def _decode(self, obj: Mapping[str, Any], context: Any, path: str) -> R:
        return self.record_type(**{name: obj[name] for name in self.field_names})

    def _encode(self, obj: Any, context: Any, path: str) -> dict[str, Any]:
        if isinstance(obj, Mapping):
            return {name: obj[name] for name in self.field_names}
        if not isinstance(obj, self.record_type):
            raise FormatError(
                f"{self.schema_name} expects {self.record_type.__name__}, "
                f"got {type(obj).__name__} ({path})"
            )
        return {name: getattr(obj, name) for name in self.field_names}

    def decode(self, buffer: bytes | bytearray | memoryview, offset: int = 0) -> R:
        """Decode one record from ``buffer`` starting at ``offset``.

        Raises:
            FormatError: If fewer than ``span`` bytes are available at
                ``offset`` or a field value is invalid
        """
        end = offset + self.span
        if offset < 0 or len(buffer) < end:
            raise FormatError(
                f"{self.schema_name} needs {self.span} bytes at offset {offset}, "
                f"buffer has {len(buffer)}"
            )
        try:
            return self.parse(bytes(buffer[offset:end]))  # type: ignore[no-any-return]
        except ConstructError as err:
            raise FormatError(f"Cannot decode {self.schema_name}: {err}") from err

    def to_bytes(self, record: R | Mapping[str, Any]) -> bytes:
        """Encode a record into a fresh ``span``-byte string.

        Raises:
            FormatError: If a field value does not fit its codec
            ConfigError: If a tagged variant is not declared by the schema
        """
        try:
            return self.build(record)  # type: ignore[no-any-return]
        except ConstructError as err:
            raise FormatError(f"Cannot encode {self.schema_name}: {err}") from err

    def encode(
        self,
        record: R | Mapping[str, Any],
        buffer: bytearray | memoryview,
        offset: int = 0,
    ) -> int:
        """Encode a record into ``buffer`` at ``offset``.

        Returns:
            Number of bytes written (always ``span``)

        Raises:
            FormatError: If the buffer is too short or a value does not fit
            ConfigError: If a tagged variant is not declared by the schema
        """
        end = offset + self.span
        if offset < 0 or len(buffer) < end:
            raise FormatError(
                f"{self.schema_name} needs {self.span} bytes at offset {offset}, "
                f"buffer has {len(buffer)}"
            )
        buffer[offset:end] = self.to_bytes(record)
        return self.span


def decode(schema: Schema[R], buffer: bytes | bytearray | memoryview, offset: int = 0) -> R:
    """Decode one ``schema`` record from ``buffer`` at ``offset``."""
    return schema.decode(buffer, offset)


def encode(
    schema: Schema[R],
    record: R | Mapping[str, Any],
    buffer: bytearray | memoryview,
    offset: int = 0,
) -> int:
    """Encode ``record`` into ``buffer`` at ``offset``; returns bytes written."""
    return schema.encode(record, buffer, offset)


def anchor_discriminator(namespace: str, name: str) -> bytes:
    """First 8 bytes of sha256("<namespace>:<name>").

    Anchor prefixes accounts with ``account:<TypeName>`` and instruction data
    with ``global:<snake_case_name>``.
    """
    return hashlib.sha256(f"{namespace}:{name}".encode()).digest()[:DISCRIMINATOR_SIZE]
