import io

import pytest

from pushswap.printf import (
    FormatError,
    format_hex,
    format_pointer,
    format_string,
    format_unsigned,
    printf,
)


def test_char_conversion():
    assert format_string("char: %c\n", "d") == "char: d\n"


def test_char_from_code():
    assert format_string("%c", ord("q")) == "q"


def test_string_conversion():
    assert format_string("chaine: %s\n", "ilyass") == "chaine: ilyass\n"


def test_null_string():
    assert format_string("%s", None) == "(null)"


def test_signed_conversions():
    assert format_string("int: %d / %i\n", 111, 2222) == "int: 111 / 2222\n"


def test_min_int():
    assert format_string("%d", -2147483648) == "-2147483648"


def test_unsigned_conversion():
    assert format_string("unsigned int: %u\n", 2148473649) == "unsigned int: 2148473649\n"


def test_unsigned_wraps_negative():
    assert format_unsigned(-1) == str(2**32 - 1)


def test_percent():
    assert format_string("%%\n") == "%\n"


def test_hex_conversions():
    assert format_string("hexa: %x, %X\n", 11, 11) == "hexa: b, B\n"


def test_hex_zero():
    assert format_hex(0) == "0"


def test_hex_roundtrip():
    for number in (1, 255, 4096, 123456789):
        assert int(format_hex(number), 16) == number
        assert format_hex(number, upper=True) == format_hex(number).upper()


def test_pointer():
    assert format_string("pointeur: %p\n", 11) == "pointeur: 0xb\n"


def test_null_pointer():
    assert format_pointer(None) == "(nil)"
    assert format_pointer(0) == "(nil)"


def test_pointer_roundtrip():
    text = format_pointer(0xDEADBEEF)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0xDEADBEEF


def test_unknown_conversion_prints_nothing_and_keeps_argument():
    assert format_string("a%qb%d", 7) == "ab7"


def test_trailing_percent_raises():
    with pytest.raises(FormatError):
        format_string("abc%")


def test_missing_argument_raises():
    with pytest.raises(FormatError):
        format_string("%d")


def test_none_template_raises():
    with pytest.raises(FormatError):
        format_string(None)


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = printf("int: %d / %i\n", 111, 2222, stream=stream)
    assert stream.getvalue() == "int: 111 / 2222\n"
    assert count == len(stream.getvalue())


def test_printf_null_string_count():
    stream = io.StringIO()
    assert printf("%s", None, stream=stream) == len("(null)")


def test_printf_writes_prefix_before_error():
    stream = io.StringIO()
    with pytest.raises(FormatError):
        printf("ab%", stream=stream)
    assert stream.getvalue() == "ab"