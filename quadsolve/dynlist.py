"""A growable array that reports when its capacity doubles."""

from __future__ import annotations

from typing import Any, Iterable, Iterator


class DynamicList:
    """Sequence with an explicit capacity that doubles when full."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._items: list[Any] = []
        self._capacity = 1
        for item in items or ():
            self.append(item)

    @property
    def capacity(self) -> int:
        """Number of items that fit before the next expansion."""
        return self._capacity

    def append(self, item: Any) -> bool:
        """Add ``item`` at the end; return True if the list had to grow."""
        grew = False
        if len(self._items) == self._capacity:
            self.expand()
            grew = True
        self._items.append(item)
        return grew

    def remove_at(self, index: int) -> None:
        """Remove the item at ``index``, shifting later items back."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range")
        del self._items[index]

    def expand(self) -> None:
        """Double the capacity."""
        self._capacity *= 2

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"DynamicList({self._items!r})"