"""Shared fixtures: scripted byte streams and word lists."""

import pytest

from passgen.config import REGISTER_BITS, WORD_BITS
from passgen.domain import Domain

SHORT_WORDS = ["a", "an", "it", "the", "cat", "dog"]


def pack_symbols(symbols, width):
    """Lay *symbols* out so a RandomBitBuffer of *width* reads them back in order.

    Each 64-bit register holds ``64 // width`` symbols, lowest first; the
    leftover high bits are zero and get discarded on refill.
    """
    per_register = REGISTER_BITS // width
    out = bytearray()
    for i in range(0, len(symbols), per_register):
        reg = 0
        for j, s in enumerate(symbols[i:i + per_register]):
            reg |= s << (j * width)
        out += reg.to_bytes(REGISTER_BITS // 8, "little")
    return bytes(out)


@pytest.fixture(scope="session")
def wordlist():
    """Enough long words for a full 18-bit domain, plus some short ones."""
    words = [f"word{i:06d}" for i in range((1 << WORD_BITS) + 500)]
    return SHORT_WORDS + words


@pytest.fixture(scope="session")
def dictionary_file(tmp_path_factory, wordlist):
    path = tmp_path_factory.mktemp("dict") / "dictionary"
    path.write_text("\n".join(wordlist) + "\n", encoding="utf-8")
    return str(path)


@pytest.fixture(scope="session")
def word_domain():
    return Domain(f"token{i}" for i in range(1 << WORD_BITS))


@pytest.fixture
def pack():
    return pack_symbols
