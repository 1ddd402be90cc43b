"""Aldrin error classes.

Layout errors come from the binary codec, curve errors from swap pricing.
Reward accrual has no error classes of its own: a missing snapshot queue or a
fully settled ticket is a zero reward, not a failure.
"""


class AldrinError(Exception):
    """Base error for the aldrin package."""

    pass


class LayoutError(AldrinError):
    """Base error for account layout decoding and encoding."""

    pass


class FormatError(LayoutError):
    """Buffer does not match the schema (too short, unknown tag, bad value)."""

    pass


class ConfigError(LayoutError):
    """Schema was asked to encode a variant it does not declare."""

    pass


class CurveError(AldrinError):
    """Base error for swap pricing."""

    pass


class EmptyPool(CurveError):
    """Pool reserves must be positive for pricing."""

    pass


class InvalidAmount(CurveError):
    """Swap amount must be positive."""

    pass


class InsufficientLiquidity(CurveError):
    """Requested output is not less than the output-side reserve."""

    pass
