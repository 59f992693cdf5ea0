"""
IFrequencyPresenter - Interface cho presenter hien thi bang tan suat.

Presenter nhan FrequencyMap da freeze (immutable) va chiu trach nhiem
sap xep + ghi ra sink (stdout, file, log...).
"""

from abc import ABC, abstractmethod
from typing import Mapping


class IFrequencyPresenter(ABC):
    """Interface cho frequency presenter."""

    @abstractmethod
    def present(self, frequencies: Mapping[str, int]) -> None:
        """
        Ghi bang xep hang tan suat + tong so word ra sink.

        Args:
            frequencies: Map word -> count (khong duoc mutate)
        """
        ...
