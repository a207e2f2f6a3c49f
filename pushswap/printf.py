"""A small formatted-output facility with conversions c, s, d, i, u, x, X, p and %."""

import sys

__all__ = [
    "FormatError",
    "format_hex",
    "format_pointer",
    "format_string",
    "format_unsigned",
    "printf",
]

_UINT_MASK = 0xFFFFFFFF
_INT_MIN = -(2**31)


class FormatError(ValueError):
    """Raised for a missing template, a dangling '%' or too few arguments."""


def format_hex(number, upper=False):
    """Hexadecimal digits of ``number`` taken as a 32-bit unsigned value."""
    text = format(int(number) & _UINT_MASK, "x")
    return text.upper() if upper else text


def format_unsigned(number):
    """Decimal digits of ``number`` taken as a 32-bit unsigned value."""
    return str(int(number) & _UINT_MASK)


def format_pointer(address):
    """An address as ``0x`` and lower-case hex digits; a null address gives ``(nil)``."""
    if not address:
        return "(nil)"
    return "0x" + format(int(address), "x")


def _as_int(number):
    return (int(number) - _INT_MIN) % 2**32 + _INT_MIN


def _as_char(value):
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _convert(conversion, args):
    """Render one conversion, drawing its argument from the iterator ``args``."""
    if conversion == "%":
        return "%"
    if conversion not in "csdiuxXp":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise FormatError(f"no argument left for %{conversion}") from None
    if conversion == "c":
        return _as_char(value)
    if conversion == "s":
        return "(null)" if value is None else str(value)
    if conversion in "di":
        return str(_as_int(value))
    if conversion == "u":
        return format_unsigned(value)
    if conversion in "xX":
        return format_hex(value, upper=conversion == "X")
    return format_pointer(value)


def _render(template, args):
    """Yield the output of ``template`` piece by piece."""
    if template is None:
        raise FormatError("no template given")
    args = iter(args)
    pieces = iter(template)
    for char in pieces:
        if char != "%":
            yield char
            continue
        conversion = next(pieces, None)
        if conversion is None:
            raise FormatError("template ends with a lone '%'")
        yield _convert(conversion, args)


def format_string(template, *args):
    """Return ``template`` with its conversions replaced by ``args``."""
    return "".join(_render(template, args))


def printf(template, *args, stream=None):
    """Write the formatted ``template`` to ``stream`` (stdout by default).

    Returns the number of characters written. Output produced before an
    error in the template has already been written when FormatError is raised.
    """
    target = sys.stdout if stream is None else stream
    count = 0
    for piece in _render(template, args):
        target.write(piece)
        count += len(piece)
    return count