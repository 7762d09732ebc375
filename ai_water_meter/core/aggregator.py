"""
Usage aggregation.

Period statistics are always recomputed from the full record list; nothing
is cached between calls. Running session totals live in an explicit
SessionAggregator object owned by the caller.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Iterable, List, Optional

from ai_water_meter.storage.models import PromptRecord


class Period(Enum):
    """Reporting windows for usage statistics."""
    TODAY = "today"  # Since local midnight
    WEEK = "week"    # Since Sunday 00:00
    MONTH = "month"  # Since the 1st of the month
    ALL = "all"


def period_start(period: Period, now: datetime) -> Optional[datetime]:
    """Return the inclusive start of a period, or None for all time."""
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    if period == Period.TODAY:
        return midnight
    if period == Period.WEEK:
        days_since_sunday = (now.weekday() + 1) % 7
        return midnight - timedelta(days=days_since_sunday)
    if period == Period.MONTH:
        return midnight.replace(day=1)
    return None


@dataclass(frozen=True)
class PeriodStats:
    """Aggregated usage over a time window."""
    period: Period
    start: Optional[datetime]
    end: datetime
    total_prompts: int
    total_tokens: int
    total_kwh: float
    total_water_ml: float
    records: List[PromptRecord] = field(default_factory=list)

    @property
    def total_watt_hours(self) -> float:
        return self.total_kwh * 1000


def compute_period_stats(
    records: Iterable[PromptRecord],
    period: Period = Period.ALL,
    now: Optional[datetime] = None
) -> PeriodStats:
    """
    Aggregate records whose timestamp falls within a period.

    Args:
        records: Full prompt history
        period: Window to aggregate over
        now: Reference time (defaults to the current local time)

    Returns:
        PeriodStats for records with start <= timestamp <= now. Missing
        token, energy or water values count as zero.
    """
    now = now or datetime.now()
    start = period_start(period, now)

    matching = [
        record for record in records
        if (start is None or record.timestamp >= start) and record.timestamp <= now
    ]

    return PeriodStats(
        period=period,
        start=start,
        end=now,
        total_prompts=len(matching),
        total_tokens=sum(record.total_tokens for record in matching),
        total_kwh=sum(record.real_world_kwh for record in matching),
        total_water_ml=sum(record.real_world_water_ml for record in matching),
        records=matching,
    )


@dataclass(frozen=True)
class SessionTotals:
    """Snapshot of running totals for an interactive session."""
    prompts: int = 0
    tokens: int = 0
    real_world_kwh: float = 0.0
    real_world_water_ml: float = 0.0

    @property
    def real_world_watt_hours(self) -> float:
        return self.real_world_kwh * 1000


class SessionAggregator:
    """Accumulates prompt footprints into running totals."""

    def __init__(self):
        self._totals = SessionTotals()

    def add(self, footprint) -> SessionTotals:
        """Add a PromptFootprint and return the updated totals."""
        current = self._totals
        self._totals = SessionTotals(
            prompts=current.prompts + 1,
            tokens=current.tokens + footprint.analysis.total_tokens,
            real_world_kwh=current.real_world_kwh + footprint.energy.real_world_kwh,
            real_world_water_ml=current.real_world_water_ml + footprint.energy.real_world_water_ml,
        )
        return self._totals

    @property
    def totals(self) -> SessionTotals:
        return self._totals

    def reset(self) -> None:
        """Reset all counters to zero."""
        self._totals = SessionTotals()
