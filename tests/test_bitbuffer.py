"""Tests for the random bit buffer."""

import numpy as np
import pytest

from passgen.bitbuffer import RandomBitBuffer
from passgen.errors import EntropySourceExhausted
from passgen.sources import BytesSource, SystemSource


class TestTake:
    def test_low_bits_first(self):
        buf = RandomBitBuffer(BytesSource(bytes([0b1011]) + bytes(7)))
        assert buf.take(2) == 0b11
        assert buf.take(2) == 0b10
        assert buf.take(4) == 0

    def test_little_endian_register(self):
        buf = RandomBitBuffer(BytesSource(bytes(7) + bytes([0x80])))
        assert buf.take(63) == 0
        assert buf.take(1) == 1

    def test_full_register(self):
        buf = RandomBitBuffer(BytesSource(b"\xff" * 8))
        assert buf.take(64) == (1 << 64) - 1
        assert buf.valid_bits == 0

    def test_packed_symbols(self, pack):
        symbols = [5, 262143, 0, 77, 131072, 9]
        buf = RandomBitBuffer(BytesSource(pack(symbols, 18)))
        assert [buf.take(18) for _ in symbols] == symbols

    def test_rejects_bad_width(self):
        buf = RandomBitBuffer(BytesSource(bytes(8)))
        with pytest.raises(ValueError):
            buf.take(0)
        with pytest.raises(ValueError):
            buf.take(65)

    def test_symbols_in_range(self):
        with SystemSource() as src:
            buf = RandomBitBuffer(src)
            vals = np.array([buf.take(4) for _ in range(4096)])
        assert vals.min() >= 0 and vals.max() < 16
        assert len(np.unique(vals)) == 16


class TestRefill:
    def test_lazy_refill(self):
        src = BytesSource(bytes(16))
        buf = RandomBitBuffer(src)
        assert src.bytes_read == 0
        for _ in range(16):
            buf.take(4)
        assert src.bytes_read == 8
        assert buf.valid_bits == 0
        buf.take(4)
        assert src.bytes_read == 16
        assert buf.refills == 2

    def test_leftover_bits_discarded(self):
        src = BytesSource(b"\xff" * 8 + bytes(8))
        buf = RandomBitBuffer(src)
        for _ in range(3):
            assert buf.take(18) == (1 << 18) - 1
        assert buf.valid_bits == 10
        # the 10 remaining one-bits are dropped, not stitched onto the next word
        assert buf.take(18) == 0
        assert buf.valid_bits == 46
        assert buf.bytes_consumed == 16

    def test_empty_source(self):
        buf = RandomBitBuffer(BytesSource(b""))
        with pytest.raises(EntropySourceExhausted) as exc:
            buf.take(18)
        assert exc.value.received == 0

    def test_short_read(self):
        buf = RandomBitBuffer(BytesSource(bytes(5)))
        with pytest.raises(EntropySourceExhausted) as exc:
            buf.take(4)
        assert exc.value.requested == 8
        assert exc.value.received == 5
        assert buf.refills == 0
