"""
Arbitrary-precision signed integers stored as mutable bit vectors.

This module defines the BitVector contract shared by both storage
layouts, together with every operation that can be expressed through
logical bit access alone: equality, ordering, bitwise logic, one's and
two's complement, and the addition/subtraction pipeline.

Bit Numbering Convention:
- Bit 0 = LSB (Least Significant Bit), whatever the physical layout
- Bits at or above the stored length read as the sign-extension bit
  (``complement``), so every vector behaves as if infinitely wide

Value Model:
- ``complement == 0``: the stored bits are the magnitude
- ``complement == 1``: the stored bits are the two's complement of the
  magnitude (``magnitude = 2**length() - bits``)
- value = signum * magnitude

Arithmetic never uses Python integers for the result: every sum,
product and quotient is derived bit by bit.
"""

import abc
import functools
import logging
import operator

from bitint.errors import (
    DivisionByZeroError,
    IllegalAccessError,
    IllegalOperationError,
    IndeterminateError,
    InvalidBitError,
    InvalidSignError,
    NegativeShiftError,
)

logger = logging.getLogger(__name__)


def _check_bit(bit: int) -> int:
    """Validate a single bit value and return it as an int."""
    if bit != 0 and bit != 1:
        raise InvalidBitError(f"bit {bit!r} is neither zero nor one")
    return int(bit)


def _check_signum(signum: int) -> int:
    """Validate an explicit signature (must be exactly 1 or -1)."""
    if signum != 1 and signum != -1:
        raise InvalidSignError(f"{signum!r} is neither 1 nor -1")
    return int(signum)


def _check_shift(nbits: int) -> None:
    if nbits < 0:
        raise NegativeShiftError(f"bit shift does not support negative amounts ({nbits})")


@functools.total_ordering
class BitVector(abc.ABC):
    """
    Mutable signed integer held as a vector of bits.

    Subclasses decide how logical bit indices map onto the backing
    ``bytearray`` and therefore which end of the vector grows cheaply.
    Bitwise operators mutate the receiver and return it; arithmetic
    operators leave both operands untouched and return a new vector in
    the receiver's layout.
    """

    # Canonical constants, assigned by each layout module.
    ZERO: "BitVector"
    ONE: "BitVector"
    TWO: "BitVector"

    __hash__ = None  # mutable

    def __init__(self, signum: "int | None" = None, capacity: int = 0) -> None:
        """
        Initialize an empty bit vector.

        Args:
            signum: Declared sign applied by the first write (1 or -1),
                or None for an unsigned empty vector
            capacity: Number of bits to preallocate

        Raises:
            InvalidSignError: If signum is neither None, 1 nor -1
            ValueError: If capacity is negative
        """
        if capacity < 0:
            raise ValueError("capacity must be non-negative")

        self._bits = bytearray(capacity)
        self._len = 0
        self.signum = 0 if signum is None else _check_signum(signum)
        self.complement = 0
        self._frozen = False

    # -- layout primitives

    @classmethod
    @abc.abstractmethod
    def _reorder(cls, bits: "list[int]") -> "list[int]":
        """Convert between the layout's storage order and LSB-first order."""

    @classmethod
    @abc.abstractmethod
    def _from_logical(
        cls, logical: "list[int]", signum: int, complement: int, capacity: int = 0
    ) -> "BitVector":
        """Build a vector from LSB-first bits without normalising it."""

    @abc.abstractmethod
    def get(self, index: int) -> int:
        """
        Get the bit at a logical index.

        Args:
            index: Bit position (0 = LSB)

        Returns:
            Stored bit if index < stored length, else the extension bit

        Raises:
            IllegalAccessError: If index is negative
        """

    @abc.abstractmethod
    def _put(self, index: int, bit: int) -> None:
        """Overwrite a stored bit (index must be below the stored length)."""

    @abc.abstractmethod
    def _extend_to(self, nbits: int) -> None:
        """Grow the stored length to nbits, filling with the extension bit."""

    @abc.abstractmethod
    def _truncate(self, nbits: int) -> None:
        """Keep only the nbits least significant stored bits."""

    @abc.abstractmethod
    def _remove(self, index: int) -> None:
        """Delete a stored bit, moving the higher bits down one place."""

    @abc.abstractmethod
    def append(self, bit: int) -> None:
        """Append a bit above the most significant stored bit."""

    @abc.abstractmethod
    def prepend(self, bit: int) -> None:
        """Insert a bit below the least significant stored bit."""

    @abc.abstractmethod
    def lshift(self, nbits: int) -> "BitVector":
        """Shift left by nbits in place and return self."""

    @abc.abstractmethod
    def rshift(self, nbits: int) -> "BitVector":
        """Shift right by nbits in place and return self."""

    @abc.abstractmethod
    def _multiply_magnitudes(self, other: "BitVector") -> "BitVector":
        """Multiply two positive sign-magnitude vectors."""

    @abc.abstractmethod
    def _divide_magnitudes(self, divisor: "BitVector") -> "BitVector":
        """Divide two positive sign-magnitude vectors (dividend > divisor > 2)."""

    def _reserve(self, nbits: int) -> None:
        """Grow the backing array so it holds at least nbits."""
        if nbits > len(self._bits):
            self._bits.extend(bytes(nbits - len(self._bits)))

    def _touch(self) -> None:
        """Pick a sign on the first write to an unsigned vector."""
        if self.signum == 0:
            self.signum = -1 if self.complement else 1

    def _update_sign(self) -> None:
        """Sign bookkeeping after a write that may have produced zero."""
        if self.is_zero():
            self.signum = 0
        else:
            self._touch()

    def _check_mutable(self) -> None:
        if self._frozen:
            raise IllegalOperationError(f"cannot modify constant {self!r}")

    def _freeze(self) -> "BitVector":
        """Make this vector read-only; copies of it are writable."""
        self._frozen = True
        return self

    def is_frozen(self) -> bool:
        """True for read-only vectors such as the layout constants."""
        return self._frozen

    def _settle(self) -> None:
        """Drop leading extension bits; a zero value becomes unsigned."""
        self._truncate(self.length())
        if self.is_zero():
            self.signum = 0
        elif self.signum == 0:
            self.signum = -1 if self.complement else 1

    # -- construction

    @classmethod
    def from_twos_complement(cls, bits) -> "BitVector":
        """
        Create a vector from a two's complement bit array.

        The sign-extension bit is the most significant element: the last
        one for LSB-first layouts, the first one for MSB-first layouts.

        Args:
            bits: Iterable of 0/1 values in the layout's storage order

        Returns:
            New vector (zero for an empty array)

        Raises:
            InvalidBitError: If any element is neither 0 nor 1
        """
        logical = cls._reorder([_check_bit(b) for b in bits])
        if not logical:
            return cls()

        complement = logical.pop()
        vector = cls._from_logical(logical, -1 if complement else 1, complement)
        vector._settle()
        return vector

    @classmethod
    def from_magnitude(cls, signum: int, bits) -> "BitVector":
        """
        Create a vector from a sign and unsigned magnitude bits.

        Args:
            signum: 1 or -1
            bits: Iterable of 0/1 values in the layout's storage order

        Returns:
            New vector (zero if the magnitude is all zeros)

        Raises:
            InvalidSignError: If signum is neither 1 nor -1
            InvalidBitError: If any element is neither 0 nor 1
        """
        signum = _check_signum(signum)
        logical = cls._reorder([_check_bit(b) for b in bits])
        vector = cls._from_logical(logical, signum, 0)
        vector._settle()
        return vector

    @classmethod
    def from_string(cls, text: str) -> "BitVector":
        """
        Parse the binary form produced by to_string().

        Args:
            text: Optional '-' followed by binary digits, MSB first

        Returns:
            New vector

        Raises:
            InvalidBitError: If text is not a binary string
        """
        digits = text[1:] if text.startswith("-") else text
        if not digits or any(c not in "01" for c in digits):
            raise InvalidBitError(f"{text!r} is not a binary string")

        logical = [1 if c == "1" else 0 for c in reversed(digits)]
        vector = cls._from_logical(logical, -1 if text.startswith("-") else 1, 0)
        vector._settle()
        return vector

    def copy(self) -> "BitVector":
        """
        Create a copy of this bit vector.

        Returns:
            New vector of the same layout, capacity and state
        """
        result = type(self)()
        result._bits = bytearray(self._bits)
        result._len = self._len
        result.signum = self.signum
        result.complement = self.complement
        return result

    def _convert(self, cls) -> "BitVector":
        logical = [self.get(i) for i in range(self._len)]
        return cls._from_logical(logical, self.signum, self.complement, len(self._bits))

    def to_little_endian(self) -> "BitVector":
        """Convert to a BitVectorLE with the same value and capacity."""
        from bitint.bitvector_le import BitVectorLE

        return self._convert(BitVectorLE)

    def to_big_endian(self) -> "BitVector":
        """Convert to a BitVectorBE with the same value and capacity."""
        from bitint.bitvector_be import BitVectorBE

        return self._convert(BitVectorBE)

    def _coerce(self, other: "BitVector") -> "BitVector":
        """Return other in this vector's layout (possibly other itself)."""
        if not isinstance(other, BitVector):
            raise TypeError(f"expected a BitVector, got {type(other).__name__}")
        if type(other) is type(self):
            return other
        return other._convert(type(self))

    # -- getters

    def length(self) -> int:
        """
        Significant length.

        Returns:
            Index one past the highest bit that differs from the
            extension bit (0 if every stored bit matches it)
        """
        for i in range(self._len - 1, -1, -1):
            if self.get(i) != self.complement:
                return i + 1
        return 0

    def sign(self) -> int:
        """Sign bit: 1 if the signature is negative, 0 otherwise."""
        return 1 if self.signum == -1 else 0

    def capacity(self) -> int:
        """Number of bits the backing array can hold."""
        return len(self._bits)

    def is_empty(self) -> bool:
        """True if no bits are stored."""
        return self._len == 0

    def is_zero(self) -> bool:
        """True if the vector represents the value zero."""
        return self.complement == 0 and self.length() == 0

    def _sign_of(self) -> int:
        return 0 if self.is_zero() else self.signum

    def to_bytes(self) -> bytes:
        """
        Copy of the stored bits.

        Returns:
            One byte (0 or 1) per stored bit, in physical storage order
        """
        return bytes(self._bits[: self._len])

    def to_twos_complement(self) -> bytes:
        """
        Export the value as a two's complement bit array.

        Returns:
            Bits in the layout's storage order, sign bit included; the
            result is accepted by from_twos_complement()
        """
        vector = self._sign_magnitude()
        if vector.signum < 0:
            vector.twos_complement()

        logical = [vector.get(i) for i in range(vector.length())]
        logical.append(vector.complement)
        return bytes(self._reorder(logical))

    def to_string(self) -> str:
        """
        Binary representation, MSB first.

        Returns:
            '-' prefixed digits if negative, exactly '0' for zero
        """
        if self.is_zero():
            return "0"

        vector = self._sign_magnitude() if self.complement else self
        digits = "".join(str(vector.get(i)) for i in range(vector._len - 1, -1, -1))
        return ("-" if self.signum == -1 else "") + digits

    # -- bit manipulation

    def _check_range(self, from_index: int, to_index: "int | None") -> int:
        if to_index is None:
            to_index = from_index + 1
        if from_index < 0:
            raise IllegalAccessError(f"attempted access of undefined bit {from_index}")
        if to_index < from_index:
            raise IllegalOperationError(f"illegal range [{from_index}, {to_index})")
        return to_index

    def set(self, from_index: int, to_index: "int | None" = None, value: int = 1) -> None:
        """
        Set the bits in range [from_index, to_index) to value.

        Args:
            from_index: Start index
            to_index: End index (None = single bit at from_index)
            value: Bit value (0 or 1)

        Raises:
            IllegalAccessError: If from_index is negative
            IllegalOperationError: If to_index < from_index, or the
                vector is frozen
            InvalidBitError: If value is neither 0 nor 1
        """
        self._check_mutable()
        to_index = self._check_range(from_index, to_index)
        bit = _check_bit(value)
        if from_index == to_index:
            return

        if to_index > self._len:
            self._extend_to(to_index)
        for i in range(from_index, to_index):
            self._put(i, bit)
        self._update_sign()

    def clear(self, from_index: int, to_index: "int | None" = None) -> None:
        """Set the bits in range [from_index, to_index) to 0."""
        self.set(from_index, to_index, 0)

    def flip(self, from_index: int, to_index: "int | None" = None) -> None:
        """
        Invert the bits in range [from_index, to_index).

        Args:
            from_index: Start index
            to_index: End index (None = single bit at from_index)

        Raises:
            IllegalAccessError: If from_index is negative
            IllegalOperationError: If to_index < from_index, or the
                vector is frozen
        """
        self._check_mutable()
        to_index = self._check_range(from_index, to_index)
        if from_index == to_index:
            return

        if to_index > self._len:
            self._extend_to(to_index)
        for i in range(from_index, to_index):
            self._put(i, self.get(i) ^ 1)
        self._update_sign()

    def reset(self) -> None:
        """Reset to an empty, unsigned vector with no capacity."""
        self._check_mutable()
        self._bits = bytearray()
        self._len = 0
        self.signum = 0
        self.complement = 0

    def pop(self, index: "int | None" = None) -> int:
        """
        Remove and return a stored bit.

        Args:
            index: Bit to remove (None = most significant stored bit);
                higher bits move down one place

        Returns:
            The removed bit; the extension bit if index is at or above
            the stored length (nothing is removed)

        Raises:
            IllegalAccessError: If index is negative, or if index is None
                and the vector is empty
            IllegalOperationError: If the vector is frozen
        """
        self._check_mutable()
        if index is None:
            if self._len == 0:
                raise IllegalAccessError("pop from empty bit vector")
            index = self._len - 1
        elif index < 0:
            raise IllegalAccessError(f"attempted access of undefined bit {index}")
        elif index >= self._len:
            return self.complement

        bit = self.get(index)
        self._remove(index)
        if self.is_zero():
            self.signum = 0
        return bit

    def flip_sign(self) -> None:
        """
        Invert the signature.

        Raises:
            IllegalOperationError: If the vector is unsigned or frozen
        """
        self._check_mutable()
        if self.signum == 0:
            raise IllegalOperationError("cannot invert null signature")
        self.signum = -self.signum

    def ones_complement(self) -> None:
        """
        Transform to the one's complement: flip every stored bit, toggle
        the extension bit and invert the signature.

        Raises:
            IllegalOperationError: If the vector is unsigned or frozen
        """
        self._check_mutable()
        if self.signum == 0:
            raise IllegalOperationError("cannot invert null signature")

        for i in range(self._len):
            self._put(i, self.get(i) ^ 1)
        self.complement ^= 1
        # ~(-1) == 0
        self.signum = 0 if self.is_zero() else -self.signum

    def twos_complement(self) -> None:
        """
        Transform to the two's complement: keep the bits up to and
        including the lowest set bit, flip every bit above it (the
        extension bit included) and invert the signature. The value is
        negated; applying the transform twice restores it.

        Raises:
            IllegalOperationError: If the vector is unsigned or frozen
        """
        self._check_mutable()
        if self.signum == 0:
            raise IllegalOperationError("cannot invert null signature")
        if self.is_zero():
            self.signum = -self.signum
            return

        # One extra bit makes the old extension bit explicit, so a set
        # bit always exists in [0, width).
        width = self._len + 1
        self._extend_to(width)

        low = 0
        while self.get(low) == 0:
            low += 1
        for i in range(low + 1, width):
            self._put(i, self.get(i) ^ 1)

        self.complement ^= 1
        self.signum = -self.signum
        self._truncate(self.length())

    def _sign_magnitude(self) -> "BitVector":
        """Copy in sign-magnitude form (complement 0) with the same value."""
        vector = self.copy()
        if vector.complement:
            signum = vector.signum
            vector.twos_complement()
            vector.signum = signum
        vector._settle()
        return vector

    # -- bitwise operations

    def inverse(self) -> "BitVector":
        """
        Bitwise NOT of the stored bits, in place.

        Returns:
            self
        """
        self._check_mutable()
        if self._len:
            self.flip(0, self._len)
        return self

    def _combine(self, other: "BitVector", op) -> "BitVector":
        if not isinstance(other, BitVector):
            raise TypeError(f"expected a BitVector, got {type(other).__name__}")
        self._check_mutable()

        nbit = max(self._len, other._len)
        # Read everything first: other may be self.
        bits = [op(self.get(i), other.get(i)) for i in range(nbit)]
        if nbit > self._len:
            self._extend_to(nbit)
        for i, bit in enumerate(bits):
            self._put(i, bit)
        if nbit:
            self._update_sign()
        return self

    def and_(self, other: "BitVector") -> "BitVector":
        """
        Bitwise AND over [0, max stored length), in place.

        Args:
            other: Mask (sign-extended where shorter)

        Returns:
            self
        """
        return self._combine(other, operator.and_)

    def or_(self, other: "BitVector") -> "BitVector":
        """Bitwise OR over [0, max stored length), in place; returns self."""
        return self._combine(other, operator.or_)

    def xor(self, other: "BitVector") -> "BitVector":
        """Bitwise XOR over [0, max stored length), in place; returns self."""
        return self._combine(other, operator.xor)

    # -- comparison

    def _compare_significands(self, other: "BitVector") -> int:
        """
        Compare bits from the most to the least significant.

        Returns:
            (difference of the first differing bits) * (index + 1), with
            the sign inverted for two's complement operands; 0 if equal
        """
        nbit = max(self.length(), other.length())
        for i in range(nbit - 1, -1, -1):
            dif = self.get(i) - other.get(i)
            if dif:
                if self.complement == 1:
                    dif = -dif
                return dif * (i + 1)
        return 0

    def compare_magnitudes(self, other: "BitVector") -> int:
        """
        Compare absolute values.

        Returns:
            Positive if |self| > |other|, negative if smaller, 0 if equal
        """
        if self.complement == other.complement:
            return self._compare_significands(other)
        if other.is_zero():
            return 1

        other = other.copy()
        other.twos_complement()
        return self.compare_magnitudes(other)

    def compare_to(self, other: "BitVector") -> int:
        """
        Total order on values, consistent with equals().

        Returns:
            Positive if self > other, negative if smaller, 0 if equal
        """
        self_sign = self._sign_of()
        other_sign = other._sign_of()
        if self_sign != other_sign:
            return self_sign - other_sign
        if self_sign == 0:
            return 0

        result = self.compare_magnitudes(other)
        return result if self_sign > 0 else -result

    def equals(self, other: object) -> bool:
        """
        Value equality: sign, significant length and significant bits.

        Capacity and leading extension bits are ignored.
        """
        if self is other:
            return True
        if not isinstance(other, BitVector):
            return False
        if self._sign_of() != other._sign_of():
            return False

        if self.complement != other.complement:
            other = other.copy()
            other.twos_complement()
        return self.length() == other.length() and self._compare_significands(other) == 0

    # -- arithmetic

    def _operands(self, other: "BitVector") -> "tuple[BitVector, BitVector]":
        """Sign-magnitude copies of both operands in this vector's layout."""
        return self._sign_magnitude(), self._coerce(other)._sign_magnitude()

    def _is_one(self) -> bool:
        return self.compare_magnitudes(self.ONE) == 0

    def _is_two(self) -> bool:
        return self.compare_magnitudes(self.TWO) == 0

    def _increment(self) -> None:
        """Add one to a sign-magnitude vector's magnitude."""
        i = 0
        while self.get(i) == 1:
            i += 1
        self.flip(0, i + 1)

    def _decrement(self) -> None:
        """Subtract one from a non-zero sign-magnitude vector's magnitude."""
        i = 0
        while self.get(i) == 0:
            i += 1
        self.flip(0, i + 1)
        self._settle()

    def _ripple_add(self, other: "BitVector") -> "BitVector":
        """
        Ripple-carry addition of two sign-magnitude vectors.

        With different signs the negative operand is two's complemented
        first; if it had the larger magnitude the raw sum is itself a two's
        complement pattern and is re-complemented into a negative result.
        Consumes both operands.
        """
        width = max(self._len, other._len) + 1
        signum = self.signum
        recomplement = False

        if self.signum != other.signum:
            negative, positive = (self, other) if self.signum < 0 else (other, self)
            recomplement = negative.compare_magnitudes(positive) > 0
            negative.twos_complement()
            signum = 1

        result = type(self)(capacity=width)
        result._extend_to(width)

        carry = 0
        for i in range(width):
            total = self.get(i) + other.get(i) + carry
            result._put(i, total & 1)
            carry = total >> 1

        # carry out of the top bit is discarded
        result.signum = signum
        if recomplement:
            result.complement = 1
            result.twos_complement()

        result._settle()
        return result

    def _add(self, other: "BitVector") -> "BitVector":
        """Add two sign-magnitude vectors of this layout; consumes both."""
        if self.equals(other):
            logger.debug("add: doubling %s", self)
            return self.lshift(1)
        if self.is_zero():
            return other
        if other.is_zero():
            return self
        if self.signum != other.signum and self.compare_magnitudes(other) == 0:
            logger.debug("add: %s cancels %s", self, other)
            return type(self)()

        if self._is_one() or other._is_one():
            unit, result = (self, other) if self._is_one() else (other, self)
            if unit.signum == result.signum:
                result._increment()
            else:
                result._decrement()
            return result

        logger.debug("add: ripple-carry %s + %s", self, other)
        return self._ripple_add(other)

    def add(self, other: "BitVector") -> "BitVector":
        """
        Sum of this vector and other.

        Args:
            other: Addend (any layout)

        Returns:
            New vector in this vector's layout; operands are unchanged
        """
        a, b = self._operands(other)
        return a._add(b)

    def subtract(self, other: "BitVector") -> "BitVector":
        """
        Difference: this vector minus other.

        Implemented as the sum with the negated subtrahend.

        Returns:
            New vector in this vector's layout; operands are unchanged
        """
        a, b = self._operands(other)
        if not b.is_zero():
            b.flip_sign()
        return a._add(b)

    def negate(self) -> "BitVector":
        """New vector with the opposite value, in sign-magnitude form."""
        vector = self._sign_magnitude()
        if not vector.is_zero():
            vector.flip_sign()
        return vector

    def multiply(self, other: "BitVector") -> "BitVector":
        """
        Product of this vector and other (shift-and-add).

        Returns:
            New vector in this vector's layout; operands are unchanged
        """
        a, b = self._operands(other)
        if a.is_zero() or b.is_zero():
            return type(self)()

        signum = a.signum * b.signum
        a.signum = b.signum = 1

        for unit, factor in ((a, b), (b, a)):
            if unit._is_one():
                factor.signum = signum
                return factor
            if unit._is_two():
                logger.debug("multiply: doubling %s", factor)
                factor.lshift(1)
                factor.signum = signum
                return factor

        logger.debug("multiply: shift-and-add %s * %s", a, b)
        product = a._multiply_magnitudes(b)
        product.signum = signum
        return product

    def divide(self, other: "BitVector") -> "BitVector":
        """
        Quotient of this vector by other (restoring division).

        The quotient truncates toward zero, so the implied remainder
        takes the dividend's sign: -7 / 3 == -2 and 7 / -3 == -2.

        Returns:
            New vector in this vector's layout; operands are unchanged

        Raises:
            IndeterminateError: If both operands are zero
            DivisionByZeroError: If only the divisor is zero
        """
        a, b = self._operands(other)
        if b.is_zero():
            if a.is_zero():
                raise IndeterminateError("indeterminate operation")
            raise DivisionByZeroError("division by zero")
        if a.is_zero():
            return type(self)()

        signum = a.signum * b.signum
        a.signum = b.signum = 1

        order = a.compare_magnitudes(b)
        if order < 0:
            return type(self)()
        if order == 0:
            result = type(self).ONE.copy()
        elif b._is_one():
            result = a
        elif b._is_two():
            logger.debug("divide: halving %s", a)
            result = a.rshift(1)
        else:
            logger.debug("divide: restoring division %s / %s", a, b)
            result = a._divide_magnitudes(b)

        result.signum = signum
        return result

    # -- operators

    def __getitem__(self, index: int) -> int:
        return self.get(index)

    def __iter__(self):
        """Iterate over the stored bits, LSB first."""
        for i in range(self._len):
            yield self.get(i)

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()!r})"

    def __copy__(self) -> "BitVector":
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitVector):
            return NotImplemented
        return self.equals(other)

    def __lt__(self, other: "BitVector") -> bool:
        if not isinstance(other, BitVector):
            return NotImplemented
        return self.compare_to(other) < 0

    def __neg__(self) -> "BitVector":
        return self.negate()

    def __add__(self, other: "BitVector") -> "BitVector":
        if not isinstance(other, BitVector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "BitVector") -> "BitVector":
        if not isinstance(other, BitVector):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: "BitVector") -> "BitVector":
        if not isinstance(other, BitVector):
            return NotImplemented
        return self.multiply(other)

    def __iand__(self, other: "BitVector") -> "BitVector":
        if not isinstance(other, BitVector):
            return NotImplemented
        return self.and_(other)

    def __ior__(self, other: "BitVector") -> "BitVector":
        if not isinstance(other, BitVector):
            return NotImplemented
        return self.or_(other)

    def __ixor__(self, other: "BitVector") -> "BitVector":
        if not isinstance(other, BitVector):
            return NotImplemented
        return self.xor(other)

    def __ilshift__(self, nbits: int) -> "BitVector":
        return self.lshift(nbits)

    def __irshift__(self, nbits: int) -> "BitVector":
        return self.rshift(nbits)
