"""Entropy and length figures for a finished secret."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from passgen.encoder import WORDS, Secret


@dataclass(frozen=True)
class EntropyReport:
    """Summary numbers shown alongside a secret.

    ``entropy`` is the accepted bit-width sum in word mode and the digit
    count in digit mode. ``information_bits`` is the actual information
    content: the same bit sum for words, ``n * log2(10)`` for an n-digit PIN.
    """

    mode: str
    entropy: int
    length: int
    tokens: int
    information_bits: float


def entropy_report(secret: Secret) -> EntropyReport:
    n = len(secret.tokens)
    if secret.mode == WORDS:
        entropy = secret.bits
        information = float(secret.bits)
    else:
        entropy = n
        information = float(n * np.log2(10))
    return EntropyReport(
        mode=secret.mode,
        entropy=entropy,
        length=len(secret.rendered),
        tokens=n,
        information_bits=round(information, 2),
    )
