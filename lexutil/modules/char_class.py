"""
Character Classification Module
ASCII-only predicates used by the scanner to tokenize a character sequence.

Every predicate is total: it accepts any element of a character sequence,
including the end-of-input marker, and never raises. Nothing here consults
the locale or the Unicode database; `str.isalpha()` and friends are not
used.
"""

from lexutil.modules.char_sequence import Char

WHITESPACE = frozenset((" ", "\t", "\r", "\n"))

# Fixed offset between 'A' and 'a' in ASCII
_CASE_OFFSET = ord("a") - ord("A")


def _is_char(ch: Char) -> bool:
    return isinstance(ch, str) and len(ch) == 1


def is_alpha(ch: Char) -> bool:
    """Return True if ch is in [a-zA-Z]."""
    return _is_char(ch) and ("a" <= ch <= "z" or "A" <= ch <= "Z")


def is_digit(ch: Char) -> bool:
    """Return True if ch is in [0-9]."""
    return _is_char(ch) and "0" <= ch <= "9"


def is_alphanum(ch: Char) -> bool:
    """Return True if ch is_alpha or is_digit."""
    return is_alpha(ch) or is_digit(ch)


def is_print(ch: Char) -> bool:
    """Return True if ch is 7-bit ASCII and not a control character."""
    return _is_char(ch) and " " <= ch <= "~"


def is_whitespace(ch: Char) -> bool:
    """Return True if ch is ' ', '\\t', '\\r' or '\\n'."""
    return _is_char(ch) and ch in WHITESPACE


def lower_char(ch: Char) -> Char:
    """
    Lowercase an ASCII letter.

    Args:
        ch: Any element of a character sequence

    Returns:
        The matching [a-z] character for input in [A-Z], otherwise ch unchanged
    """
    if _is_char(ch) and "A" <= ch <= "Z":
        return chr(ord(ch) + _CASE_OFFSET)
    return ch
