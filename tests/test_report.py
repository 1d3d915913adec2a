"""Tests for the entropy report."""

import math

import pytest

from passgen.encoder import DIGITS, WORDS, Secret
from passgen.report import entropy_report


def _secret(mode, tokens, width, separator):
    return Secret(
        mode=mode,
        tokens=tuple(tokens),
        bits=width * len(tokens),
        draws=len(tokens),
        rejections=0,
        separator=separator,
    )


class TestWordReport:
    def test_bits_and_length(self):
        rep = entropy_report(_secret(WORDS, ["alpha", "bravo", "charlie", "delta"], 18, " "))
        assert rep.entropy == 72
        assert rep.tokens == 4
        assert rep.length == len("alpha bravo charlie delta")
        assert rep.information_bits == 72.0


class TestDigitReport:
    def test_entropy_is_digit_count(self):
        rep = entropy_report(_secret(DIGITS, "31415926", 4, ""))
        assert rep.entropy == 8
        assert rep.length == 8

    def test_information_is_log2_ten_per_digit(self):
        rep = entropy_report(_secret(DIGITS, "372", 4, ""))
        assert rep.information_bits == pytest.approx(3 * math.log2(10), abs=0.01)
        assert rep.information_bits < 3 * 4
