"""ASCII character classes and case conversion.

Each function takes a character code or a one-character string.
"""


def _code(char):
    return ord(char) if isinstance(char, str) else char


def is_alpha(code):
    """Tell whether the character is an ASCII letter."""
    code = _code(code)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_alnum(code):
    """Tell whether the character is an ASCII letter or digit."""
    code = _code(code)
    return is_alpha(code) or 48 <= code <= 57


def is_ascii(code):
    """Tell whether the character lies in the 7-bit ASCII range."""
    return 0 <= _code(code) <= 127


def is_print(code):
    """Tell whether the character is printable ASCII (space to tilde)."""
    return 32 <= _code(code) <= 126


def to_lower(code):
    """Turn an ASCII capital into lower case; anything else is unchanged."""
    value = _code(code)
    if 65 <= value <= 90:
        value += 32
    return chr(value) if isinstance(code, str) else value


def to_upper(code):
    """Turn an ASCII lower-case letter into a capital; anything else is unchanged."""
    value = _code(code)
    if 97 <= value <= 122:
        value -= 32
    return chr(value) if isinstance(code, str) else value