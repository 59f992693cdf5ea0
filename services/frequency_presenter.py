"""
FrequencyPresenter - Ghi bang xep hang tan suat ra text sink.

Format (moi dong mot word, sau cung la tong):

    the: 4
    dog: 2
    fox: 2
    ...
    Total words: 16

Thu tu: count giam dan, hoa thi sap xep word tang dan (ordinal),
nen output luon deterministic.
"""

import sys
from typing import List, Mapping, Optional, TextIO, Tuple

from core.logging_config import log_info
from services.interfaces.frequency_presenter import IFrequencyPresenter


def rank_frequencies(frequencies: Mapping[str, int]) -> List[Tuple[str, int]]:
    """Sap xep (word, count) theo count giam dan, tie-break word tang dan."""
    return sorted(frequencies.items(), key=lambda item: (-item[1], item[0]))


def total_word_count(frequencies: Mapping[str, int]) -> int:
    """Tong so word = tong tat ca counts."""
    return sum(frequencies.values())


def format_listing(frequencies: Mapping[str, int], top_n: int = 0) -> List[str]:
    """
    Build cac dong output.

    Args:
        frequencies: Map word -> count
        top_n: Chi liet ke N dong dau (0 = tat ca). Total van tinh tren tat ca.

    Returns:
        List dong (khong co newline)
    """
    ranked = rank_frequencies(frequencies)
    if top_n > 0:
        ranked = ranked[:top_n]

    lines = [f"{word}: {n}" for word, n in ranked]
    lines.append(f"Total words: {total_word_count(frequencies)}")
    return lines


class FrequencyPresenter(IFrequencyPresenter):
    """Presenter ghi ra stream (mac dinh stdout)."""

    def __init__(self, stream: Optional[TextIO] = None, top_n: int = 0) -> None:
        self._stream = stream
        self._top_n = top_n

    def present(self, frequencies: Mapping[str, int]) -> None:
        # Resolve sys.stdout luc goi (de pytest capsys hoat dong)
        stream = self._stream if self._stream is not None else sys.stdout

        lines = format_listing(frequencies, self._top_n)
        for line in lines:
            stream.write(line + "\n")
        stream.flush()

        log_info(
            f"[FrequencyPresenter] Printed {len(frequencies)} distinct words, "
            f"total {total_word_count(frequencies)}"
        )
