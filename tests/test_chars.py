import string

import pytest

from minitalk.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


def test_is_alpha_accepts_letters_only():
    assert all(is_alpha(c) for c in string.ascii_letters)
    assert not any(is_alpha(c) for c in string.digits + string.punctuation + " ")


def test_is_alpha_rejects_non_ascii_letters():
    assert is_alpha("é") is False


def test_is_digit_accepts_digits_only():
    assert all(is_digit(c) for c in string.digits)
    assert not any(is_digit(c) for c in string.ascii_letters + string.punctuation)


def test_is_alnum_is_union_of_alpha_and_digit():
    for code in range(256):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_boundaries():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


def test_is_print_matches_printable_range():
    printable = set(string.printable) - set(string.whitespace) | {" "}
    for code in range(128):
        assert is_print(code) == (chr(code) in printable)


def test_to_upper_maps_lowercase_letters():
    for low, high in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_upper(low) == high
        assert to_upper(ord(low)) == ord(high)


def test_to_lower_maps_uppercase_letters():
    for low, high in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert to_lower(high) == low
        assert to_lower(ord(high)) == ord(low)


@pytest.mark.parametrize("c", list(string.digits + string.punctuation + " "))
def test_case_conversion_leaves_other_characters(c):
    assert to_upper(c) == c
    assert to_lower(c) == c


def test_case_round_trip():
    for c in string.ascii_letters:
        assert to_lower(to_upper(c)) == c.lower()
        assert to_upper(to_lower(c)) == c.upper()


def test_rejects_multi_character_string():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_rejects_non_character_type():
    with pytest.raises(TypeError):
        to_upper(1.5)