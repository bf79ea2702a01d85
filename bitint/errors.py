"""
Exceptions raised by bit vector operations.

Every exception derives from BitVectorError and from the built-in
exception a caller would expect for the same mistake on a Python
sequence or integer, so ``except IndexError`` and ``except
ZeroDivisionError`` keep working.
"""


class BitVectorError(Exception):
    """Base class for all bit vector errors."""


class IllegalAccessError(BitVectorError, IndexError):
    """Access of an undefined bit (negative index, pop from empty vector)."""


class IllegalOperationError(BitVectorError, ValueError):
    """Malformed range or a sign flip on an unsigned vector."""


class InvalidBitError(BitVectorError, ValueError):
    """A bit value other than 0 or 1."""


class InvalidSignError(BitVectorError, ValueError):
    """A signum other than 1 or -1."""


class DivisionByZeroError(BitVectorError, ZeroDivisionError):
    """Non-zero dividend divided by zero."""


class IndeterminateError(BitVectorError, ZeroDivisionError):
    """Zero divided by zero."""


class NegativeShiftError(BitVectorError, ValueError):
    """Shift by a negative number of bits."""
