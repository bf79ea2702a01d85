"""
Bit vector with reversed (big-endian) storage.

The stored bits occupy ``_bits[0:_len]`` most significant first, so
logical bit i lives at ``_bits[_len - 1 - i]`` and the least significant
bit sits at the physical end of the used region. The vector grows
cheaply at its least significant end:

- prepend (new LSB), left shift: O(1) amortized per bit
- right shift: O(1), the stored length simply shrinks
- append (new MSB): O(n), every stored bit moves

Left and right shifts are exact inverses of each other on the stored
bits. Multiplication shifts the partial product one place per step and
division grows both remainder and quotient with prepend.
"""

from bitint.bitvector import BitVector, _check_bit, _check_shift
from bitint.errors import IllegalAccessError


class BitVectorBE(BitVector):
    """Bit vector whose logical bit 0 is stored at the physical end."""

    @classmethod
    def _reorder(cls, bits: "list[int]") -> "list[int]":
        return list(reversed(bits))

    @classmethod
    def _from_logical(
        cls, logical: "list[int]", signum: int, complement: int, capacity: int = 0
    ) -> "BitVectorBE":
        vector = cls()
        vector._bits = bytearray(reversed(logical))
        vector._reserve(capacity)
        vector._len = len(logical)
        vector.signum = signum
        vector.complement = complement
        return vector

    def get(self, index: int) -> int:
        if index < 0:
            raise IllegalAccessError(f"attempted access of undefined bit {index}")
        if index < self._len:
            return self._bits[self._len - 1 - index]
        return self.complement

    def _put(self, index: int, bit: int) -> None:
        self._bits[self._len - 1 - index] = bit

    def _extend_to(self, nbits: int) -> None:
        if nbits <= self._len:
            return
        grow = nbits - self._len
        self._reserve(nbits)
        # new high bits go in front of the stored ones
        self._bits[grow:nbits] = self._bits[0 : self._len]
        self._bits[0:grow] = bytes([self.complement]) * grow
        self._len = nbits

    def _truncate(self, nbits: int) -> None:
        self._bits[0:nbits] = self._bits[self._len - nbits : self._len]
        self._len = nbits

    def _remove(self, index: int) -> None:
        pos = self._len - 1 - index
        self._bits[pos : self._len - 1] = self._bits[pos + 1 : self._len]
        self._len -= 1

    def append(self, bit: int) -> None:
        """
        Append a bit above the most significant stored bit.

        Leading zeros are conserved. Every stored bit moves one place.

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

    def prepend(self, bit: int) -> None:
        """
        Insert a bit below the least significant stored bit.

        O(1) amortized.

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

    def lshift(self, nbits: int) -> "BitVectorBE":
        """
        Shift left (multiply by 2**nbits) in place.

        Zeros are written after the stored bits; nothing moves.

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
        self._bits[self._len : self._len + nbits] = bytes(nbits)
        self._len += nbits
        return self

    def rshift(self, nbits: int) -> "BitVectorBE":
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

        self._len = max(self._len - nbits, 0)
        if self.is_zero():
            self._settle()
        return self

    def _multiply_magnitudes(self, other: "BitVectorBE") -> "BitVectorBE":
        partial = self.copy()
        product = BitVectorBE()

        for i in range(other._len):
            if i:
                partial.lshift(1)
            if other.get(i):
                product = product._add(partial.copy())

        return product

    def _divide_magnitudes(self, divisor: "BitVectorBE") -> "BitVectorBE":
        quotient = BitVectorBE(1, self._len)
        remainder = BitVectorBE(1, divisor._len + 1)

        # bits of the dividend enter the remainder MSB first
        for i in range(self._len):
            remainder.prepend(self._bits[i])

            if remainder.compare_magnitudes(divisor) >= 0:
                remainder = remainder.subtract(divisor)
                quotient.prepend(1)
            else:
                quotient.prepend(0)

        quotient._settle()
        return quotient


BitVectorBE.ZERO = BitVectorBE()._freeze()
BitVectorBE.ONE = BitVectorBE.from_magnitude(1, [1])._freeze()
BitVectorBE.TWO = BitVectorBE.from_magnitude(1, [1, 0])._freeze()
