"""The accumulation loop: draw symbols until the target is met."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from passgen.bitbuffer import RandomBitBuffer
from passgen.config import DEFAULT_DIGITS, DEFAULT_ENTROPY_BITS, WORD_BITS
from passgen.domain import DigitMapper, Domain, WordMapper

logger = logging.getLogger(__name__)

WORDS = "words"
DIGITS = "digits"


@dataclass(frozen=True)
class Secret:
    """A finished secret.

    ``bits`` is the symbol width summed over accepted symbols only.
    ``draws`` counts every symbol taken from the buffer, rejected or not.
    """

    mode: str
    tokens: tuple[str, ...]
    bits: int
    draws: int
    rejections: int
    separator: str

    @property
    def rendered(self) -> str:
        return self.separator.join(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)


def accumulate(
    buffer: RandomBitBuffer,
    mapper: WordMapper | DigitMapper,
    done: Callable[[int, int], bool],
    mode: str,
    verbose: bool = False,
) -> Secret:
    """Draw and map symbols until ``done(bits, n_tokens)`` holds.

    At least one token is always produced. Rejected symbols are drawn
    again and earn no credit.
    """
    tokens: list[str] = []
    bits = draws = rejections = 0
    while True:
        symbol = buffer.take(mapper.width)
        draws += 1
        token = mapper.map(symbol)
        if token is None:
            rejections += 1
            if verbose:
                logger.debug("symbol %d rejected", symbol)
            continue
        if verbose:
            logger.debug("symbol %d -> %s", symbol, token)
        tokens.append(token)
        bits += mapper.width
        if done(bits, len(tokens)):
            break
    return Secret(
        mode=mode,
        tokens=tuple(tokens),
        bits=bits,
        draws=draws,
        rejections=rejections,
        separator=mapper.separator,
    )


def encode_words(
    buffer: RandomBitBuffer,
    domain: Domain,
    bits: int = DEFAULT_ENTROPY_BITS,
    width: int = WORD_BITS,
    verbose: bool = False,
) -> Secret:
    """Build a passphrase worth at least *bits* bits of entropy."""
    mapper = WordMapper(domain, width)
    return accumulate(buffer, mapper, lambda got, _n: got >= bits, WORDS, verbose=verbose)


def encode_digits(
    buffer: RandomBitBuffer,
    digits: int = DEFAULT_DIGITS,
    verbose: bool = False,
) -> Secret:
    """Build a PIN of exactly *digits* decimal digits.

    The stopping rule counts digits, not bits. Each digit carries
    log2(10) bits of information even though it occupies a 4-bit draw.
    """
    return accumulate(buffer, DigitMapper(), lambda _got, n: n >= digits, DIGITS, verbose=verbose)
