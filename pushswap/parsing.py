"""Splitting and validating the integers handed to the sorter."""

from itertools import takewhile

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = "\t\n\v\f\r "


class ParseError(ValueError):
    """Raised when the input is not a list of distinct 32-bit integers."""


def split_words(text, separator=" "):
    """Split ``text`` on ``separator``, dropping empty pieces."""
    return [word for word in text.split(separator) if word]


def is_digit(code):
    """Tell whether a character (or its code) is an ASCII decimal digit."""
    if isinstance(code, str):
        code = ord(code)
    return 48 <= code <= 57


def parse_long(text):
    """Read a leading integer the way ``atol`` does.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. Text with no digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for char in takewhile(is_digit, rest):
        value = value * 10 + ord(char) - 48
    return sign * value


def parse_int(text):
    """Read a leading integer like ``atoi``, wrapped to 32-bit signed range."""
    value = parse_long(text)
    return (value - INT_MIN) % 2**32 + INT_MIN


def is_number(text):
    """Tell whether ``text`` is an optional sign followed by ASCII digits only."""
    body = text[1:] if text[:1] in ("+", "-") else text
    return bool(body) and all(map(is_digit, body))


def has_errors(words):
    """Tell whether ``words`` holds a non-number, an out-of-range value or a duplicate."""
    seen = set()
    for word in words:
        if not is_number(word):
            return True
        number = parse_long(word)
        if not INT_MIN <= number <= INT_MAX:
            return True
        if number in seen:
            return True
        seen.add(number)
    return False


def parse_arguments(words):
    """Turn ``words`` into a list of integers, raising ParseError if invalid."""
    words = list(words)
    if has_errors(words):
        raise ParseError("Error")
    return [parse_int(word) for word in words]