"""One-shot secret generation: dictionary, source, buffer, encoder."""

from __future__ import annotations

import logging

from passgen.bitbuffer import RandomBitBuffer
from passgen.config import DEFAULT_DIGITS, DEFAULT_ENTROPY_BITS, DEFAULT_SETTINGS, Settings
from passgen.dictionary import load_domain
from passgen.encoder import Secret, encode_digits, encode_words
from passgen.errors import InvalidParameter
from passgen.platform import open_source
from passgen.sources.base import RandomSource

logger = logging.getLogger(__name__)


def parse_count(value: str | None, default: int) -> int:
    """Parse the optional numeric invocation argument.

    Any integer is accepted. Zero or a negative target still yields one
    token, since the loop always draws at least once.
    """
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise InvalidParameter(f"not a number: {value!r}") from None


def generate_passphrase(
    bits: int = DEFAULT_ENTROPY_BITS,
    settings: Settings = DEFAULT_SETTINGS,
    source: RandomSource | None = None,
    seed: int | None = None,
) -> Secret:
    """Generate a passphrase worth at least *bits* bits.

    The dictionary is prepared before the random source is opened, so a
    bad word list fails without consuming any secret bits. *source*
    overrides ``settings.source``; *seed* fixes the dictionary shuffle.
    """
    domain = load_domain(
        settings.dictionary_path,
        width=settings.word_bits,
        min_length=settings.min_word_length,
        seed=seed,
    )
    src = source if source is not None else open_source(settings.source)
    with src:
        buffer = RandomBitBuffer(src)
        secret = encode_words(buffer, domain, bits, width=settings.word_bits, verbose=settings.verbose)
    logger.debug("%d words from %d draws, %d bytes read", len(secret), secret.draws, buffer.bytes_consumed)
    return secret


def generate_pin(
    digits: int = DEFAULT_DIGITS,
    settings: Settings = DEFAULT_SETTINGS,
    source: RandomSource | None = None,
) -> Secret:
    """Generate a PIN of exactly *digits* digits."""
    src = source if source is not None else open_source(settings.source)
    with src:
        buffer = RandomBitBuffer(src)
        secret = encode_digits(buffer, digits, verbose=settings.verbose)
    logger.debug(
        "%d digits from %d draws (%d rejected), %d bytes read",
        len(secret), secret.draws, secret.rejections, buffer.bytes_consumed,
    )
    return secret
