"""String helpers with C-library semantics: bounded copies, prefix compares and searches."""

from .chars import is_ascii

__all__ = [
    "bounded_concat",
    "bounded_copy",
    "compare_prefix",
    "each_char",
    "find_char",
    "find_within",
    "int_to_str",
    "join",
    "map_chars",
    "rfind_char",
    "substring",
    "trim",
]

_TERMINATOR = "\0"


def find_char(text, char):
    """Index of the first ``char`` in ``text``, or None.

    Asking for the NUL character finds the end of the string, so it gives
    ``len(text)``.
    """
    if char == _TERMINATOR:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def rfind_char(text, char):
    """Index of the last ``char`` in ``text``, or None.

    Asking for the NUL character gives ``len(text)``.
    """
    if char == _TERMINATOR:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def join(first, second):
    """Return ``first`` followed by ``second``."""
    return first + second


def bounded_copy(source, size):
    """Copy ``source`` into a buffer of ``size`` characters.

    Returns ``(copied, len(source))``. At most ``size - 1`` characters fit,
    leaving room for the terminator; a size of 0 copies nothing.
    """
    copied = source[: size - 1] if size > 0 else ""
    return copied, len(source)


def bounded_concat(destination, source, size):
    """Append ``source`` to ``destination`` within a buffer of ``size`` characters.

    Returns ``(result, total)``. The result never grows past ``size - 1``
    characters; if ``destination`` already fills the buffer nothing is
    appended. ``total`` is the length the full concatenation would have had,
    counting the destination as at most ``size`` characters long.
    """
    room = max(0, size - len(destination) - 1)
    result = destination + source[:room]
    return result, len(source) + min(size, len(destination))


def map_chars(text, func):
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def each_char(text, func):
    """Call ``func(index, char)`` on each item of the mutable sequence ``text``.

    When ``func`` returns something other than None, the item is replaced by
    it in place.
    """
    for index, char in enumerate(text):
        replacement = func(index, char)
        if replacement is not None:
            text[index] = replacement


def _code(char):
    code = ord(char)
    return code & 0xFF if not is_ascii(code) else code


def compare_prefix(first, second, count):
    """Compare at most ``count`` characters of two strings.

    Returns 0 when they match, otherwise the difference between the codes of
    the first pair of characters that differ (the end of a string counting
    as 0).
    """
    for index in range(count):
        left = _code(first[index]) if index < len(first) else 0
        right = _code(second[index]) if index < len(second) else 0
        if left != right or left == 0:
            return left - right
    return 0


def find_within(haystack, needle, length):
    """Index of ``needle`` lying wholly inside the first ``length`` characters, or None.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    index = haystack[: max(0, length)].find(needle)
    return None if index < 0 else index


def trim(text, charset):
    """Remove characters of ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substring(text, start, length):
    """At most ``length`` characters of ``text`` from ``start``; empty if ``start`` is past the end."""
    if start >= len(text):
        return ""
    return text[start : start + length]


def int_to_str(number):
    """Decimal representation of ``number``, with a leading minus when negative."""
    return str(int(number))