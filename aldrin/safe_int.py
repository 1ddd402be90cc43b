"""Checked integer wrapper for token amount arithmetic.

Token amounts on chain are u64, but intermediate products in curve math
(``x * y``, ``D ** 3``) grow far beyond that, so SafeInt holds an unbounded
Python int and only checks the things that would silently corrupt a quote:

- Division or modulo by zero raises DivisionByZero
- Subtraction below zero raises Underflow
- ``to_u64()`` raises U64Overflow for values that do not fit an account field

Usage pattern:
    from aldrin.safe_int import S

    def amount_out(x: int, y: int, b: int) -> int:
        sx, sy, sb = S(x), S(y), S(b)
        return (sx - sx * sy // (sy + sb)).value
"""

from __future__ import annotations

U64_MAX = 2**64 - 1


class SafeIntError(ArithmeticError):
    """Base class for SafeInt arithmetic errors."""

    pass


class DivisionByZero(SafeIntError):
    """Division or modulo by zero."""

    pass


class Underflow(SafeIntError):
    """Subtraction would produce negative result."""

    pass


class U64Overflow(SafeIntError):
    """Value does not fit in an unsigned 64-bit account field."""

    pass


class SafeInt:
    """Non-negative integer with checked arithmetic.

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        if isinstance(value, SafeInt):
            self._value = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            self._value = value
        else:
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    # --- Arithmetic operations ---

    def __add__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value + _extract_value(other))

    def __radd__(self, other: int) -> SafeInt:
        return SafeInt(other + self._value)

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        """Subtract other from self.

        Raises:
            Underflow: If result would be negative
        """
        other_val = _extract_value(other)
        result = self._value - other_val
        if result < 0:
            raise Underflow(f"Underflow: {self._value} - {other_val} = {result}")
        return SafeInt(result)

    def __rsub__(self, other: int) -> SafeInt:
        result = other - self._value
        if result < 0:
            raise Underflow(f"Underflow: {other} - {self._value} = {result}")
        return SafeInt(result)

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value * _extract_value(other))

    def __rmul__(self, other: int) -> SafeInt:
        return SafeInt(other * self._value)

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Floor division.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Division by zero: {self._value} // 0")
        return SafeInt(self._value // other_val)

    def __rfloordiv__(self, other: int) -> SafeInt:
        if self._value == 0:
            raise DivisionByZero(f"Division by zero: {other} // 0")
        return SafeInt(other // self._value)

    def __mod__(self, other: SafeInt | int) -> SafeInt:
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Modulo by zero: {self._value} % 0")
        return SafeInt(self._value % other_val)

    def __pow__(self, exponent: int) -> SafeInt:
        if exponent < 0:
            raise ValueError("SafeInt only supports non-negative integer exponents")
        return SafeInt(self._value**exponent)

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeInt):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: SafeInt | int) -> bool:
        return self._value < _extract_value(other)

    def __le__(self, other: SafeInt | int) -> bool:
        return self._value <= _extract_value(other)

    def __gt__(self, other: SafeInt | int) -> bool:
        return self._value > _extract_value(other)

    def __ge__(self, other: SafeInt | int) -> bool:
        return self._value >= _extract_value(other)

    # --- Conversion ---

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __index__(self) -> int:
        return self._value

    # --- Named operations ---

    def abs_diff(self, other: SafeInt | int) -> SafeInt:
        """Absolute difference, never raises Underflow."""
        return SafeInt(abs(self._value - _extract_value(other)))

    def min(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(min(self._value, _extract_value(other)))

    def max(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(max(self._value, _extract_value(other)))

    def saturating_sub(self, other: SafeInt | int) -> SafeInt:
        """Subtract, clamping result to zero instead of raising."""
        return SafeInt(max(0, self._value - _extract_value(other)))

    def to_u64(self) -> int:
        """Convert to int, validating u64 bounds.

        Raises:
            U64Overflow: If value is negative or exceeds 2^64-1
        """
        if self._value < 0:
            raise U64Overflow(f"Negative value cannot be u64: {self._value}")
        if self._value > U64_MAX:
            raise U64Overflow(f"Value exceeds u64 max: {self._value}")
        return self._value

    @classmethod
    def zero(cls) -> SafeInt:
        return cls(0)


def _extract_value(x: SafeInt | int) -> int:
    if isinstance(x, SafeInt):
        return x._value
    return x


# Convenience alias for concise code
S = SafeInt
