"""
bitint: arbitrary-precision signed integers as mutable bit vectors.

Addition, subtraction, multiplication and division are derived from
first principles (ripple-carry addition, shift-and-add multiplication,
restoring division) over two storage layouts that share one contract:

- BitVectorLE: direct storage, cheap growth at the most significant end
- BitVectorBE: reversed storage, cheap growth at the least significant end
"""

__version__ = "1.0.0"

from bitint.bitvector import BitVector
from bitint.bitvector_be import BitVectorBE
from bitint.bitvector_le import BitVectorLE
from bitint.errors import (
    BitVectorError,
    DivisionByZeroError,
    IllegalAccessError,
    IllegalOperationError,
    IndeterminateError,
    InvalidBitError,
    InvalidSignError,
    NegativeShiftError,
)

ZERO = BitVectorLE.ZERO
ONE = BitVectorLE.ONE

__all__ = [
    "BitVector",
    "BitVectorBE",
    "BitVectorLE",
    "BitVectorError",
    "DivisionByZeroError",
    "IllegalAccessError",
    "IllegalOperationError",
    "IndeterminateError",
    "InvalidBitError",
    "InvalidSignError",
    "NegativeShiftError",
    "ONE",
    "ZERO",
    "__version__",
]
