"""A list that tracks its capacity and grows it geometrically."""

from __future__ import annotations

from typing import Any, Iterator


class GrowableList:
    """An append-only sequence whose capacity multiplies when full."""

    def __init__(self, growth_multiplier: int = 2) -> None:
        if growth_multiplier < 2:
            raise ValueError("growth multiplier must be at least 2")
        self.growth_multiplier = growth_multiplier
        self._items: list[Any] = []
        self._capacity = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def _grow(self) -> None:
        self._capacity = 1 if self._capacity == 0 else self._capacity * self.growth_multiplier

    def push(self, element: Any) -> None:
        """Append ``element``, growing the capacity first if it is full."""
        if len(self._items) >= self._capacity:
            self._grow()
        self._items.append(element)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __repr__(self) -> str:
        contents = (
            "[" + ", ".join(repr(x) for x in self._items) + "]" if self._items else ""
        )
        return (
            f"GrowableList(vec={contents!r}, cap={self._capacity}, "
            f"len={len(self._items)}, growth_multiplier={self.growth_multiplier})"
        )