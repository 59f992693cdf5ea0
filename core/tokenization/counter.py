"""
Core word counting logic.

Functions:
- count(): Dem tan suat cho mot token stream
- merge(): Cong 2 FrequencyMap theo tung key (pure, khong mutate input)
- merge_all(): Fold merge() tuan tu tren nhieu maps
- count_words(): Shortcut tokenize + count cho mot document

merge() giao hoan, ket hop va co FrequencyMap() lam phan tu don vi,
nen ket qua khong phu thuoc thu tu hay cach chia nhom documents.
"""

import threading
from collections.abc import Mapping
from types import MappingProxyType
from typing import Iterable, Iterator, List, Optional, Tuple

from core.tokenization.scanner import tokenize


class FrequencyMap(Mapping):
    """
    Mapping Token -> so lan xuat hien (luon >= 1).

    Chi mutate qua increment(). Moi thao tac doc/ghi deu giu lock cua
    instance, nen doc trong luc thread khac increment van an toan.
    Sau khi freeze(), map khong the thay doi nua.
    """

    __slots__ = ("_counts", "_lock", "_frozen")

    def __init__(self, counts: Optional[Mapping] = None):
        self._counts: dict[str, int] = {}
        self._lock = threading.Lock()
        self._frozen = False
        if counts:
            for word, n in _snapshot_items(counts):
                self.increment(word, n)

    def increment(self, word: str, amount: int = 1) -> None:
        """
        Tang count cua word them amount (default 0 neu chua co).

        Raises:
            TypeError: Neu map da bi freeze
            ValueError: Neu word rong hoac amount < 1
        """
        if not word:
            raise ValueError("word must be a non-empty string")
        if amount < 1:
            raise ValueError(f"amount must be >= 1, got {amount}")
        with self._lock:
            # Check frozen trong lock: sau khi freeze() tra ve, khong con write nao
            if self._frozen:
                raise TypeError("FrequencyMap is frozen")
            self._counts[word] = self._counts.get(word, 0) + amount

    def freeze(self) -> "FrequencyMap":
        """Khoa map (immutable) va tra ve chinh no."""
        with self._lock:
            self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def items(self) -> List[Tuple[str, int]]:
        """Snapshot (word, count) tai thoi diem goi."""
        with self._lock:
            return list(self._counts.items())

    def as_dict(self) -> Mapping:
        """Read-only view cua mot snapshot counts."""
        with self._lock:
            return MappingProxyType(dict(self._counts))

    def total(self) -> int:
        """Tong so word (tong tat ca counts)."""
        with self._lock:
            return sum(self._counts.values())

    def __getitem__(self, word: str) -> int:
        with self._lock:
            return self._counts[word]

    def __iter__(self) -> Iterator[str]:
        with self._lock:
            return iter(list(self._counts))

    def __len__(self) -> int:
        with self._lock:
            return len(self._counts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return dict(self.items()) == dict(_snapshot_items(other))

    def __repr__(self) -> str:
        return f"FrequencyMap({dict(self.items())!r})"


def _snapshot_items(freq: Mapping) -> List[Tuple[str, int]]:
    """Lay list (word, count) cua mot Mapping bat ky."""
    if isinstance(freq, FrequencyMap):
        return freq.items()
    return list(freq.items())


def count(tokens: Iterable[str]) -> FrequencyMap:
    """
    Dem tan suat cho token stream (duyet dung mot lan).

    Args:
        tokens: Iterable cac Token da normalize

    Returns:
        FrequencyMap moi (chua freeze)
    """
    freq = FrequencyMap()
    for token in tokens:
        freq.increment(token)
    return freq


def merge(a: Mapping, b: Mapping) -> FrequencyMap:
    """
    Cong 2 map theo tung key. Khong mutate a hoac b.

    Args:
        a: FrequencyMap (hoac Mapping str -> int)
        b: FrequencyMap (hoac Mapping str -> int)

    Returns:
        FrequencyMap moi voi count = a[k] + b[k] (0 neu vang mat)
    """
    result = FrequencyMap(a)
    for word, n in _snapshot_items(b):
        result.increment(word, n)
    return result


def merge_all(maps: Iterable[Mapping]) -> FrequencyMap:
    """Fold merge() tuan tu, bat dau tu map rong."""
    result = FrequencyMap()
    for freq in maps:
        for word, n in _snapshot_items(freq):
            result.increment(word, n)
    return result


def count_words(text: str) -> FrequencyMap:
    """Dem tan suat cho mot document."""
    return count(tokenize(text))
