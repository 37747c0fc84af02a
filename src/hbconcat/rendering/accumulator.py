from __future__ import annotations

from typing import List


class OutputAccumulator:
    """Ordered buffer of produced element texts for one concat call.

    With *distinct* enabled a text is appended only if the exact string is
    not already in the buffer. Each offer is checked against everything
    accumulated so far, including texts produced earlier by the same
    sequence or mapping expansion.
    """

    def __init__(self, *, distinct: bool = False) -> None:
        self._distinct = distinct
        self._items: List[str] = []
        self._seen: set[str] = set()

    def offer(self, text: str) -> bool:
        """Append *text* unless distinct filtering rejects it; report whether it was kept."""
        if self._distinct and text in self._seen:
            return False
        self._items.append(text)
        self._seen.add(text)
        return True

    def join(self, separator: str) -> str:
        return separator.join(self._items)

    @property
    def items(self) -> List[str]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)
