"""Tests for the direct (little-endian) storage layout."""

import bitint
from bitint import BitVectorLE
from conftest import to_int


class TestBitVectorLEStorage:
    """Test physical bit order."""

    def test_to_bytes_lsb_first(self) -> None:
        """Test that stored bits come out least significant first."""
        bv = BitVectorLE.from_string("110")
        assert bv.to_bytes() == bytes([0, 1, 1])

    def test_to_bytes_is_a_copy(self) -> None:
        """Test that the exported bits are detached from the vector."""
        bv = BitVectorLE.from_string("1")
        data = bv.to_bytes()
        bv.set(3)
        assert data == bytes([1])

    def test_from_magnitude_order(self) -> None:
        """Test that magnitude bits are read least significant first."""
        assert to_int(BitVectorLE.from_magnitude(1, [0, 1, 1])) == 6

    def test_from_twos_complement_sign_last(self) -> None:
        """Test that the sign bit is the last element."""
        assert to_int(BitVectorLE.from_twos_complement([1, 0, 1, 0])) == 5
        assert to_int(BitVectorLE.from_twos_complement([1, 1, 0, 1])) == -5

    def test_to_twos_complement_order(self) -> None:
        """Test exporting -5 as ...1011."""
        bv = BitVectorLE.from_string("-101")
        assert bv.to_twos_complement() == bytes([1, 1, 0, 1])

    def test_append_writes_at_end(self) -> None:
        """Test that append extends the physical end."""
        bv = BitVectorLE.from_string("1")
        bv.append(1)
        bv.append(0)
        assert str(bv) == "011"
        assert bv.to_bytes() == bytes([1, 1, 0])

    def test_prepend_writes_at_start(self) -> None:
        """Test that prepend moves the stored bits up."""
        bv = BitVectorLE.from_string("11")
        bv.prepend(0)
        assert bv.to_bytes() == bytes([0, 1, 1])

    def test_lshift_moves_bits_up(self) -> None:
        """Test the stored bits after a left shift."""
        bv = BitVectorLE.from_string("101")
        bv.lshift(2)
        assert bv.to_bytes() == bytes([0, 0, 1, 0, 1])

    def test_append_one_then_zero(self) -> None:
        """Test that appending 1 then 0 renders as 01."""
        bv = BitVectorLE()
        bv.append(1)
        bv.append(0)
        assert str(bv) == "01"

    def test_capacity_grows_to_fit(self) -> None:
        """Test that appending past the capacity grows the backing array."""
        bv = BitVectorLE(capacity=2)
        for _ in range(5):
            bv.append(1)
        assert bv.capacity() == 5
        assert str(bv) == "11111"


class TestBitVectorLEConstants:
    """Test the layout constants."""

    def test_constants(self) -> None:
        """Test ZERO, ONE and TWO."""
        assert str(BitVectorLE.ZERO) == "0"
        assert str(BitVectorLE.ONE) == "1"
        assert str(BitVectorLE.TWO) == "10"
        assert BitVectorLE.TWO.to_bytes() == bytes([0, 1])

    def test_package_aliases(self) -> None:
        """Test that the package level constants are the direct layout's."""
        assert bitint.ZERO is BitVectorLE.ZERO
        assert bitint.ONE is BitVectorLE.ONE
        assert bitint.ONE.is_frozen()
