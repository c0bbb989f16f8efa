from __future__ import annotations

import pytest

from captcha_core.alphabet import ALPHABET_SIZE, InvalidSolutionError, decode, encode, to_char, to_index


def test_digits_and_letters_map_to_indices():
    assert encode("09AZ") == [0, 9, 10, 35]


def test_lowercase_folds_to_uppercase_index():
    assert encode("abcxyz") == encode("ABCXYZ")


def test_decode_inverts_encode_for_every_index():
    text = decode(range(ALPHABET_SIZE))
    assert text == "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    assert encode(text) == list(range(ALPHABET_SIZE))


@pytest.mark.parametrize("char", ["-", " ", "é", "", "AB", "Ⅰ"])
def test_unknown_characters_are_rejected(char):
    with pytest.raises(InvalidSolutionError):
        to_index(char)


@pytest.mark.parametrize("index", [-1, 36, 255])
def test_out_of_range_index_is_rejected(index):
    with pytest.raises(InvalidSolutionError):
        to_char(index)
