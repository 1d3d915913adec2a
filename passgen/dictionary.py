"""Dictionary loading and domain preparation.

A raw word list becomes a word domain in four steps:

1. drop words shorter than the minimum length,
2. shuffle what is left,
3. refuse to continue if fewer than ``2**width`` words remain,
4. keep exactly the first ``2**width``.

A phrase such as ``in my up on`` holds 72 bits of word entropy in 11
characters, which a character-level search reaches long before 2**72
guesses. With a 4 character minimum every word costs more in character
space than its 18 bits.

The shuffle uses numpy's generator seeded from the OS, so each run keeps a
different subset. It never draws from the secret's random source.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from passgen.config import MIN_WORD_LENGTH, WORD_BITS
from passgen.domain import Domain
from passgen.errors import DictionaryUnreadable, InsufficientDomain

logger = logging.getLogger(__name__)

STATS_MAX_LENGTH = 24


def read_words(path: str) -> list[str]:
    """Read whitespace-separated words from *path*.

    Words are assumed unique. Duplicates are not detected and would bias
    the domain towards them.

    The file must be UTF-8, and word length is counted in characters, not
    bytes. A list in another encoding (Latin-1, say) raises
    :class:`DictionaryUnreadable` rather than being guessed at.
    """
    try:
        with open(path, encoding="utf-8") as fh:
            words = fh.read().split()
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryUnreadable(f"cannot read dictionary {path!r}: {e}") from e
    logger.debug("read %d words from %s", len(words), path)
    return words


def filter_short(words: Sequence[str], min_length: int = MIN_WORD_LENGTH) -> list[str]:
    return [w for w in words if len(w) >= min_length]


def prepare_domain(
    words: Sequence[str],
    width: int = WORD_BITS,
    min_length: int = MIN_WORD_LENGTH,
    seed: int | None = None,
) -> Domain:
    """Build a word domain of exactly ``2**width`` entries from *words*.

    Parameters
    ----------
    words:
        The raw word list.
    width:
        Symbol width in bits.
    min_length:
        Words shorter than this are dropped.
    seed:
        Shuffle seed. ``None`` draws a fresh seed from the OS, so repeated
        runs keep different subsets.
    """
    size = 1 << width
    kept = filter_short(words, min_length)
    logger.debug("%d of %d words have at least %d characters", len(kept), len(words), min_length)

    rng = np.random.default_rng(seed)
    order = rng.permutation(len(kept))

    if len(kept) < size:
        raise InsufficientDomain(len(kept), size)
    return Domain(kept[i] for i in order[:size])


def load_domain(
    path: str,
    width: int = WORD_BITS,
    min_length: int = MIN_WORD_LENGTH,
    seed: int | None = None,
) -> Domain:
    """Read *path* and prepare a word domain from it."""
    return prepare_domain(read_words(path), width=width, min_length=min_length, seed=seed)


def length_histogram(words: Sequence[str], max_length: int = STATS_MAX_LENGTH) -> dict[int, int]:
    """Count words of each length from 1 to *max_length*."""
    lengths = np.fromiter((len(w) for w in words), dtype=np.int64, count=len(words))
    counts = np.bincount(lengths, minlength=max_length + 1)
    return {n: int(counts[n]) for n in range(1, max_length + 1)}
