"""
Bit vector with direct (little-endian) storage.

Logical bit i is stored at ``_bits[i]``, so the least significant bit
sits at physical position 0 and the vector grows cheaply at its most
significant end:

- append (new MSB): O(1) amortized
- prepend (new LSB), left shift: O(n), every stored bit moves

Multiplication accumulates partial products directly into a
preallocated result by bit offset, and division writes quotient bits by
index, so neither needs to grow a vector at its least significant end.
"""

from bitint.bitvector import BitVector, _check_bit, _check_shift
from bitint.errors import IllegalAccessError


class BitVectorLE(BitVector):
    """Bit vector whose logical bit 0 is stored at physical position 0."""

    @classmethod
    def _reorder(cls, bits: "list[int]") -> "list[int]":
        # storage order is already LSB first
        return list(bits)

    @classmethod
    def _from_logical(
        cls, logical: "list[int]", signum: int, complement: int, capacity: int = 0
    ) -> "BitVectorLE":
        vector = cls()
        vector._bits = bytearray(logical)
        vector._reserve(capacity)
        vector._len = len(logical)
        vector.signum = signum
        vector.complement = complement
        return vector

    def get(self, index: int) -> int:
        if index < 0:
            raise IllegalAccessError(f"attempted access of undefined bit {index}")
        if index < self._len:
            return self._bits[index]
        return self.complement

    def _put(self, index: int, bit: int) -> None:
        self._bits[index] = bit

    def _extend_to(self, nbits: int) -> None:
        if nbits <= self._len:
            return
        self._reserve(nbits)
        self._bits[self._len : nbits] = bytes([self.complement]) * (nbits - self._len)
        self._len = nbits

    def _truncate(self, nbits: int) -> None:
        self._len = nbits

    def _remove(self, index: int) -> None:
        self._bits[index : self._len - 1] = self._bits[index + 1 : self._len]
        self._len -= 1

    def append(self, bit: int) -> None:
        """
        Append a bit above the most significant stored bit.

        Leading zeros are conserved. O(1) amortized.

        Args:
            bit: Bit value (0 or 1)

        Raises:
            InvalidBitError: If bit is neither 0 nor 1
            IllegalOperationError: If the vector is frozen
        """
        self._check_mutable()
        bit = _check_bit(bit)
        if bit != self.complement:
            self._touch()
        self._reserve(self._len + 1)
        self._bits[self._len] = bit
        self._len += 1

    def prepend(self, bit: int) -> None:
        """
        Insert a bit below the least significant stored bit.

        Every stored bit moves up one place.

        Args:
            bit: Bit value (0 or 1)

        Raises:
            InvalidBitError: If bit is neither 0 nor 1
            IllegalOperationError: If the vector is frozen
        """
        self._check_mutable()
        bit = _check_bit(bit)
        if bit != self.complement:
            self._touch()
        self._reserve(self._len + 1)
        self._bits[1 : self._len + 1] = self._bits[0 : self._len]
        self._bits[0] = bit
        self._len += 1

    def lshift(self, nbits: int) -> "BitVectorLE":
        """
        Shift left (multiply by 2**nbits) in place.

        Args:
            nbits: Number of positions

        Returns:
            self

        Raises:
            NegativeShiftError: If nbits is negative
            IllegalOperationError: If the vector is frozen
        """
        self._check_mutable()
        _check_shift(nbits)
        if nbits == 0 or self.is_zero():
            return self

        self._reserve(self._len + nbits)
        self._bits[nbits : self._len + nbits] = self._bits[0 : self._len]
        self._bits[0:nbits] = bytes(nbits)
        self._len += nbits
        return self

    def rshift(self, nbits: int) -> "BitVectorLE":
        """
        Shift right in place, dropping the nbits lowest bits.

        Args:
            nbits: Number of positions

        Returns:
            self

        Raises:
            NegativeShiftError: If nbits is negative
            IllegalOperationError: If the vector is frozen
        """
        self._check_mutable()
        _check_shift(nbits)
        if nbits == 0:
            return self

        if nbits >= self._len:
            self._len = 0
        else:
            self._bits[0 : self._len - nbits] = self._bits[nbits : self._len]
            self._len -= nbits

        if self.is_zero():
            self._settle()
        return self

    def _multiply_magnitudes(self, other: "BitVectorLE") -> "BitVectorLE":
        width = self._len + other._len
        product = BitVectorLE(1, width)
        product._extend_to(width)

        for i in range(other._len):
            if other._bits[i] == 0:
                continue

            # add self << i into the running product, in place
            carry = 0
            for j in range(self._len):
                total = product._bits[i + j] + self._bits[j] + carry
                product._bits[i + j] = total & 1
                carry = total >> 1

            k = i + self._len
            while carry:
                total = product._bits[k] + carry
                product._bits[k] = total & 1
                carry = total >> 1
                k += 1

        product._settle()
        return product

    def _divide_magnitudes(self, divisor: "BitVectorLE") -> "BitVectorLE":
        quotient = BitVectorLE(1, self._len)
        quotient._extend_to(self._len)
        remainder = BitVectorLE(1, divisor._len + 1)

        for i in range(self._len - 1, -1, -1):
            remainder.lshift(1)
            if self._bits[i]:
                remainder.set(0)

            if remainder.compare_magnitudes(divisor) >= 0:
                remainder = remainder.subtract(divisor)
                quotient._bits[i] = 1

        quotient._settle()
        return quotient


BitVectorLE.ZERO = BitVectorLE()._freeze()
BitVectorLE.ONE = BitVectorLE.from_magnitude(1, [1])._freeze()
BitVectorLE.TWO = BitVectorLE.from_magnitude(1, [0, 1])._freeze()
