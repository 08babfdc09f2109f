from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class CumulativeSummary:
    grace_in_count: int
    grace_out_count: int
    late_in_count: int
    early_out_count: int
    double_grace: int
    observations: int
    cls: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class DurationSummary:
    """Average worked time and the CL it costs.

    `grace_cl` comes from lateness observations, `additional_cl` from short
    days; `total_cl` is their sum.
    """

    avg_minutes: int
    normalized_hours: str
    under_count: int
    additional_cl: int
    grace_cl: int
    total_cl: int

    def to_dict(self) -> dict:
        return asdict(self)
