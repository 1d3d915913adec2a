"""Defaults and runtime settings for passgen."""

from __future__ import annotations

from dataclasses import dataclass

# Register width of the bit buffer, in bits. Refills read REGISTER_BITS // 8 bytes.
REGISTER_BITS = 64

# Word mode: 18 bits per word, so the domain holds 2**18 words.
WORD_BITS = 18
DEFAULT_ENTROPY_BITS = 64
MIN_WORD_LENGTH = 4

# Digit mode: 4-bit nibbles, values above 9 are rejected.
DIGIT_BITS = 4
DEFAULT_DIGITS = 8

DEFAULT_DICTIONARY = "dictionary"
DEFAULT_SOURCE = "urandom"


@dataclass(frozen=True)
class Settings:
    """Runtime knobs for one generation run.

    The CLI builds one of these from its options; library callers can
    construct it directly.
    """

    dictionary_path: str = DEFAULT_DICTIONARY
    source: str = DEFAULT_SOURCE
    min_word_length: int = MIN_WORD_LENGTH
    word_bits: int = WORD_BITS
    verbose: bool = False

    @property
    def domain_size(self) -> int:
        return 1 << self.word_bits


DEFAULT_SETTINGS = Settings()
