from typing import Iterable, Iterator, Set


class CoverageSet:
    """
    Word indices already attributed to a decoded value.

    Grows monotonically over a single decode pass.
    """

    def __init__(self) -> None:
        self._indices: Set[int] = set()

    def __contains__(self, index: object) -> bool:
        return index in self._indices

    def __len__(self) -> int:
        return len(self._indices)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._indices))

    def __repr__(self) -> str:
        return f"CoverageSet({sorted(self._indices)})"

    def add(self, index: int) -> None:
        self._indices.add(index)

    def merge(self, indices: Iterable[int]) -> None:
        for index in indices:
            self.add(index)

    def is_complete(self, word_count: int) -> bool:
        return len(self._indices) == word_count
