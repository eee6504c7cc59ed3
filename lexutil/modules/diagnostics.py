"""
Diagnostics Module
Builds caret-style error displays from a character sequence and an index,
and sends them through the standard logging machinery.

Example output of format_pointer for index 4 of "let x = 1":

    1: let x = 1
           ^

Every piece of the display comes from the same sequence the scanner read:
get_col finds the column, munge_chars renders the line one character per
position, and repeat_char pads the pointer out to the column.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from lexutil.modules.char_sequence import EOT, Char
from lexutil.modules.column import check_index, get_col, is_line_break
from lexutil.modules.rendering import munge_chars, repeat_char
from lexutil.utils.config import DiagnosticsConfig, check_pointer_char


@dataclass(frozen=True)
class SourceLocation:
    """A 1-based line/column location inside a character sequence."""

    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


def _is_crlf_tail(chars: Sequence[Char], index: int) -> bool:
    """True if chars[index] is the "\\n" of a "\\r\\n" pair."""
    return index > 0 and chars[index] == "\n" and chars[index - 1] == "\r"


def display_column(chars: Sequence[Char], index: int) -> int:
    """
    Return the column of index as shown in diagnostics.

    Same as get_col, except that the "\\n" of a "\\r\\n" pair stays on the
    line the pair ends, one column past its "\\r".

    Raises:
        IndexError: If index is outside chars
    """
    check_index(chars, index)
    if _is_crlf_tail(chars, index):
        return get_col(chars, index - 1) + 1
    return get_col(chars, index)


def line_bounds(chars: Sequence[Char], index: int) -> Tuple[int, int]:
    """
    Return the half-open [start, stop) bounds of the line holding index.

    The line break that ends the line and the EOT marker are not part of it.

    Raises:
        IndexError: If index is outside chars
    """
    check_index(chars, index)
    if _is_crlf_tail(chars, index):
        return line_bounds(chars, index - 1)

    start = index - get_col(chars, index) + 1

    stop = index
    while stop < len(chars) and chars[stop] is not EOT and not is_line_break(chars[stop]):
        stop += 1

    return start, stop


def get_line_number(chars: Sequence[Char], index: int) -> int:
    """
    Return the 1-based line number of index.

    "\\r\\n" counts as a single break; a lone "\\r" or "\\n" counts as one.

    Raises:
        IndexError: If index is outside chars
    """
    check_index(chars, index)
    if _is_crlf_tail(chars, index):
        return get_line_number(chars, index - 1)

    start = index - get_col(chars, index) + 1
    line = 1
    for i in range(start):
        ch = chars[i]
        if ch == "\n":
            line += 1
        elif ch == "\r" and (i + 1 >= len(chars) or chars[i + 1] != "\n"):
            line += 1
    return line


def locate(chars: Sequence[Char], index: int) -> SourceLocation:
    """Return the line and column of index as a SourceLocation."""
    return SourceLocation(line=get_line_number(chars, index), column=display_column(chars, index))


def format_pointer(
    chars: Sequence[Char],
    index: int,
    message: str = "",
    config: Optional[DiagnosticsConfig] = None
) -> str:
    """
    Render the line holding index with a pointer under the offending character.

    Args:
        chars: Character sequence the index refers to
        index: Zero-based position of the offending character
        message: Optional headline placed above the source line
        config: Pointer character and gutter settings (defaults if omitted)

    Returns:
        Multi-line string: [message,] rendered source line, pointer line

    Raises:
        IndexError: If index is outside chars
        ValueError: If config.pointer_char is not one visible ASCII character
    """
    config = config or DiagnosticsConfig()
    check_pointer_char(config.pointer_char)

    column = display_column(chars, index)
    start, stop = line_bounds(chars, index)

    gutter = ""
    if config.show_line_numbers:
        gutter = f"{get_line_number(chars, index)}: "

    lines = []
    if message:
        lines.append(message)
    lines.append(gutter + munge_chars(chars[start:stop]))
    lines.append(repeat_char(" ", len(gutter) + column - 1) + config.pointer_char)
    return "\n".join(lines)


def _log_pointer(
    logger: logging.Logger,
    level: int,
    chars: Sequence[Char],
    index: int,
    message: str,
    config: Optional[DiagnosticsConfig]
) -> SourceLocation:
    location = locate(chars, index)
    if not logger.isEnabledFor(level):
        return location

    text = format_pointer(chars, index, f"{location}: {message}", config)
    start, stop = line_bounds(chars, index)
    logger.log(level, text, extra={"extra_fields": {
        "source_line": location.line,
        "column": location.column,
        "index": index,
        "snippet": munge_chars(chars[start:stop]),
    }})
    return location


def log_err(
    logger: logging.Logger,
    chars: Sequence[Char],
    index: int,
    message: str,
    config: Optional[DiagnosticsConfig] = None
) -> SourceLocation:
    """
    Log an error with a pointer at chars[index].

    Args:
        logger: Destination logger
        chars: Character sequence the index refers to
        index: Zero-based position of the offending character
        message: Description of the problem
        config: Pointer settings

    Returns:
        The location that was reported
    """
    return _log_pointer(logger, logging.ERROR, chars, index, message, config)


def log_ok(
    logger: logging.Logger,
    chars: Sequence[Char],
    index: int,
    message: str,
    config: Optional[DiagnosticsConfig] = None
) -> SourceLocation:
    """Trace a successful match at chars[index]; logged at DEBUG."""
    return _log_pointer(logger, logging.DEBUG, chars, index, message, config)
