"""
Character Sequence Module
Expands source text into the end-marked sequence the scanner consumes.

The scanner reads one element at a time and stops when it sees
`EndOfInput.EOT`, so it never needs a separate length check. The marker is
an enum member rather than a reserved control character: a literal "\\x03"
in the source stays an ordinary character and can never be mistaken for the
end of input.
"""

import collections.abc
import enum
from typing import Iterable, Iterator, List, Tuple, Union

from lexutil.modules.copy_helpers import SequenceView


class EndOfInput(enum.Enum):
    """Marker appended after the last character of a sequence"""

    EOT = "end-of-input"

    def __repr__(self) -> str:
        return "EOT"


EOT = EndOfInput.EOT

Char = Union[str, EndOfInput]

_HIGH_SURROGATES = ("\ud800", "\udbff")
_LOW_SURROGATES = ("\udc00", "\udfff")


class CharSequence(collections.abc.Sequence):
    """
    Immutable sequence of characters terminated by exactly one EOT marker.

    Indexing with an int returns a one-character str or EOT. Slicing returns
    a borrowed SequenceView; call `to_owned()` on it for an independent copy.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Char]):
        items = tuple(items)
        if not items or items[-1] is not EOT:
            raise ValueError("character sequence must end with EOT")
        if EOT in items[:-1]:
            raise ValueError("EOT may only appear at the final position")
        self._items = items

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            start, stop, step = index.indices(len(self._items))
            if step != 1:
                raise ValueError("character sequences only support contiguous slices")
            return SequenceView(self._items, start, max(start, stop))
        return self._items[index]

    def __iter__(self) -> Iterator[Char]:
        return iter(self._items)

    def __contains__(self, item) -> bool:
        return item in self._items

    def __eq__(self, other) -> bool:
        if isinstance(other, CharSequence):
            return self._items == other._items
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"CharSequence({self.text!r})"

    @property
    def items(self) -> Tuple[Char, ...]:
        """All elements, EOT included"""
        return self._items

    @property
    def text(self) -> str:
        """The source text, without the trailing marker"""
        return "".join(self._items[:-1])


def _char_range_at(text: str, i: int) -> Tuple[str, int]:
    """
    Decode the scalar value starting at offset i.

    A high/low surrogate pair (as left behind by 'surrogatepass' decoding)
    is joined into the scalar value it encodes.

    Returns:
        (scalar value, offset of the next unit)

    Raises:
        ValueError: If a lone surrogate is found
    """
    ch = text[i]
    if _HIGH_SURROGATES[0] <= ch <= _LOW_SURROGATES[1]:
        following = text[i + 1] if i + 1 < len(text) else ""
        if (_HIGH_SURROGATES[0] <= ch <= _HIGH_SURROGATES[1]
                and _LOW_SURROGATES[0] <= following <= _LOW_SURROGATES[1]):
            code = 0x10000 + ((ord(ch) - 0xD800) << 10) + (ord(following) - 0xDC00)
            return chr(code), i + 2
        raise ValueError(
            f"lone surrogate U+{ord(ch):04X} at offset {i} is not a scalar value"
        )
    return ch, i + 1


def chars_with_eot(text: str) -> CharSequence:
    """
    Convert a string to a sequence of characters and append EOT.

    Args:
        text: Source text

    Returns:
        A CharSequence with one element per scalar value of text, plus EOT

    Raises:
        ValueError: If text holds a lone surrogate
    """
    chars: List[Char] = []
    i = 0
    length = len(text)
    while i < length:
        ch, following = _char_range_at(text, i)
        assert following > i, "decode step did not advance"
        chars.append(ch)
        i = following
    chars.append(EOT)
    return CharSequence(chars)
