from __future__ import annotations

from abc import ABC, abstractmethod


class DurationCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked duration)."""

    @abstractmethod
    def duration_minutes(self, *, in_date: str, in_time: str, out_date: str, out_time: str) -> int:
        raise NotImplementedError
