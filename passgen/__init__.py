"""
passgen: passphrases and PINs with a guaranteed minimum entropy.

Slices an OS random byte stream into fixed-width symbols and maps each
one onto a power-of-two word domain (18 bits per word) or, with rejection
sampling, onto the decimal digits.
"""

__version__ = "0.2.0"

from passgen.errors import (
    DictionaryUnreadable,
    DomainIndexError,
    EntropySourceExhausted,
    EntropySourceUnavailable,
    InsufficientDomain,
    InvalidParameter,
    PassgenError,
)
from passgen.generate import generate_passphrase, generate_pin
from passgen.report import EntropyReport, entropy_report
from passgen.sources.base import RandomSource

__all__ = [
    "generate_passphrase",
    "generate_pin",
    "entropy_report",
    "EntropyReport",
    "RandomSource",
    "PassgenError",
    "EntropySourceUnavailable",
    "EntropySourceExhausted",
    "DictionaryUnreadable",
    "InsufficientDomain",
    "InvalidParameter",
    "DomainIndexError",
    "__version__",
]
