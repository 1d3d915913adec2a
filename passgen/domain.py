"""Token domains and the mappers that index them by symbol."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator, Sequence

from passgen.config import DIGIT_BITS
from passgen.errors import DomainIndexError


class Domain(Sequence):
    """An immutable, fixed-size sequence of output tokens.

    Unlike a tuple, indexing never wraps: negative, out-of-range and
    non-integer indices all raise :class:`DomainIndexError`. Slicing is
    not supported.
    """

    __slots__ = ("_tokens",)

    def __init__(self, tokens: Iterable[str]) -> None:
        self._tokens = tuple(tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __getitem__(self, index) -> str:
        try:
            i = operator.index(index)
        except TypeError:
            raise DomainIndexError(f"domain index must be an integer, got {index!r}") from None
        if not 0 <= i < len(self._tokens):
            raise DomainIndexError(f"symbol {i} outside domain of size {len(self._tokens)}")
        return self._tokens[i]

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __eq__(self, other) -> bool:
        if isinstance(other, Domain):
            return self._tokens == other._tokens
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._tokens)

    def __repr__(self) -> str:
        return f"<Domain size={len(self._tokens)}>"


class WordMapper:
    """Total mapping from ``width``-bit symbols onto a domain of ``2**width`` words."""

    separator = " "

    def __init__(self, domain: Domain, width: int) -> None:
        if len(domain) != 1 << width:
            raise ValueError(f"word domain needs exactly {1 << width} entries, has {len(domain)}")
        self.domain = domain
        self.width = width

    def map(self, symbol: int) -> str:
        return self.domain[symbol]


class DigitMapper:
    """Partial mapping from 4-bit symbols onto the decimal digits.

    Values 10-15 map to ``None``: folding them with ``% 10`` would make
    0-5 twice as likely as 6-9.
    """

    separator = ""
    width = DIGIT_BITS
    domain = Domain("0123456789")

    def map(self, symbol: int) -> str | None:
        if symbol >= len(self.domain):
            return None
        return self.domain[symbol]
