"""
Copy Helpers Module
Borrowed views over character sequences and the conversions that turn them
into owned values.

PATTERN RECOGNITION: This is the same split as `memoryview` vs `bytes`.
A `SequenceView` is a cheap window that shares the storage of the sequence
it was cut from; `to_owned()` (or `unslice_vec`) materializes an independent
copy that can outlive the original.
"""

import collections.abc
from typing import Iterator, List, Optional, Sequence, Tuple, TypeVar, Union

T = TypeVar("T")


class SequenceView(collections.abc.Sequence):
    """Read-only [start, stop) window over an immutable tuple of elements"""

    __slots__ = ("_items", "_start", "_stop")

    def __init__(self, items: Tuple, start: int = 0, stop: Optional[int] = None):
        if stop is None:
            stop = len(items)
        if not 0 <= start <= stop <= len(items):
            raise IndexError(
                f"view bounds [{start}, {stop}) outside sequence of length {len(items)}"
            )
        self._items = items
        self._start = start
        self._stop = stop

    @property
    def start(self) -> int:
        """Offset of the first element of the view in the underlying sequence"""
        return self._start

    @property
    def stop(self) -> int:
        return self._stop

    def __len__(self) -> int:
        return self._stop - self._start

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            start, stop, step = index.indices(len(self))
            if step != 1:
                raise ValueError("views only support contiguous slices")
            stop = max(start, stop)
            return SequenceView(self._items, self._start + start, self._start + stop)

        if index < 0:
            index += len(self)
        if not 0 <= index < len(self):
            raise IndexError(f"view index {index} out of range")
        return self._items[self._start + index]

    def __iter__(self) -> Iterator:
        for i in range(self._start, self._stop):
            yield self._items[i]

    def __eq__(self, other) -> bool:
        if isinstance(other, SequenceView):
            return self.to_owned() == other.to_owned()
        if isinstance(other, tuple):
            return self.to_owned() == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.to_owned())

    def __repr__(self) -> str:
        return f"SequenceView({list(self)!r})"

    def to_owned(self) -> Tuple:
        """Copy the viewed elements into a tuple independent of the source"""
        return self._items[self._start:self._stop]


def unslice(s: Sequence[str]) -> str:
    """
    Materialize a string view as an owned string.

    Args:
        s: A str, or any sequence of one-character strings (e.g. a
           SequenceView that does not cover the end-of-input marker)

    Returns:
        A str with identical contents

    Raises:
        ValueError: If s holds a non-character element such as the EOT marker
    """
    if isinstance(s, str):
        return s[0:len(s)]

    for i, ch in enumerate(s):
        if not isinstance(ch, str):
            raise ValueError(
                f"element {i} is {ch!r}, not a character; "
                "slice the view short of the EOT marker before unslicing"
            )
    return "".join(s)


def unslice_vec(s: Sequence[T]) -> List[T]:
    """Copy any sequence or view into a new list with identical contents."""
    return list(s)
