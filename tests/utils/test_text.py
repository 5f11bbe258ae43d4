"""
Tests for console text helpers.
"""

import os

import pytest

from fshell.utils.text import printable


@pytest.mark.parametrize(
    "text, expected",
    [
        ("plain.txt", "plain.txt"),
        ("café", "café"),
        ("bad\udcffname", "bad�name"),
        ("\ud800lone", "?lone"),
    ],
)
def test_printable(text, expected):
    assert printable(text) == expected


def test_printable_matches_fsdecode_round_trip():
    name = os.fsdecode(b"caf\xc3\xa9-\xff")

    assert printable(name) == "café-�"
    assert printable(name).encode("utf-8") == b"caf\xc3\xa9-\xef\xbf\xbd"
