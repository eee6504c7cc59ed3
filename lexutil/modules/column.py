"""
Column Locator Module
Maps an index into a character sequence to a 1-based display column.
"""

from typing import Sequence

from lexutil.modules.char_sequence import Char


def is_line_break(ch: Char) -> bool:
    """Return True if ch ends a line ('\\n' or '\\r')."""
    return ch == "\n" or ch == "\r"


def check_index(chars: Sequence[Char], index: int) -> None:
    """
    Raise IndexError unless index is a position inside chars.

    Negative indices are rejected, not wrapped.
    """
    if not 0 <= index < len(chars):
        raise IndexError(
            f"index {index} out of range for sequence of length {len(chars)}"
        )


def get_col(chars: Sequence[Char], index: int) -> int:
    """
    Compute the column of chars[index].

    Scans backward only as far as the previous line break, so the cost
    depends on the length of the line rather than the whole text.

    Args:
        chars: Character sequence (CharSequence, view, tuple or str)
        index: Zero-based position inside chars

    Returns:
        1-based column of index within its line

    Raises:
        IndexError: If index is outside chars
    """
    check_index(chars, index)

    i = index
    while i > 0 and not is_line_break(chars[i - 1]):
        i -= 1

    return index - i + 1
