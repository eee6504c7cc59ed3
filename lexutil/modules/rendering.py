"""
Rendering Module
Provides functions to render character sequences for safe logging and display.
"""

from typing import Iterable

from lexutil.modules.char_class import is_print
from lexutil.modules.char_sequence import Char

# Must stay plain ASCII: not every logging handler transports arbitrary
# Unicode faithfully.
PLACEHOLDER = "."


def munge_chars(chars: Iterable[Char]) -> str:
    """
    Replace every character that is not is_print with a placeholder.

    Unlike escaping, this keeps one output character per input element, so a
    caret placed under column N of the rendered text still points at element
    N of the source. The EOT marker renders as the placeholder as well.

    Args:
        chars: CharSequence, SequenceView, str or any iterable of elements

    Returns:
        A str with the same length as chars
    """
    return "".join(ch if is_print(ch) else PLACEHOLDER for ch in chars)


def repeat_char(ch: str, count: int) -> str:
    """
    Return a string holding count copies of ch.

    Raises:
        ValueError: If count is negative
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    return ch * count
