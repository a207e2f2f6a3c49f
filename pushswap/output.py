"""Writing characters, strings and numbers to a text stream."""

import sys

__all__ = ["put_char", "put_endl", "put_number", "put_str"]


def _target(stream):
    return sys.stdout if stream is None else stream


def put_char(char, stream=None):
    """Write one character, given as a string or a character code."""
    if isinstance(char, int):
        char = chr(char)
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _target(stream).write(char)


def put_str(text, stream=None):
    """Write ``text`` as it is."""
    _target(stream).write(text)


def put_endl(text, stream=None):
    """Write ``text`` followed by a newline."""
    _target(stream).write(f"{text}\n")


def put_number(number, stream=None):
    """Write ``number`` in decimal, with a leading minus when negative."""
    _target(stream).write(str(int(number)))