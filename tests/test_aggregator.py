"""
Unit tests for usage aggregation.
"""

from datetime import datetime

import pytest

from ai_water_meter.core.aggregator import (
    Period,
    SessionAggregator,
    compute_period_stats,
    period_start,
)
from ai_water_meter.core.analysis import measure_prompt
from ai_water_meter.storage.models import PromptRecord

# Wednesday afternoon
NOW = datetime(2024, 5, 15, 14, 30)


def make_record(timestamp, tokens=100, kwh=0.01, water_ml=15.0, prompt=None):
    return PromptRecord(
        timestamp=timestamp,
        prompt=prompt or f"prompt at {timestamp.isoformat()}",
        energy_data={
            "totalTokens": tokens,
            "realWorldKWh": kwh,
            "realWorldWaterUsageMl": water_ml,
        },
    )


class TestPeriodStart:
    """Test reporting window boundaries."""

    def test_today(self):
        assert period_start(Period.TODAY, NOW) == datetime(2024, 5, 15)

    def test_week_starts_on_sunday(self):
        assert period_start(Period.WEEK, NOW) == datetime(2024, 5, 12)

    def test_week_on_a_sunday(self):
        sunday = datetime(2024, 5, 12, 9, 0)
        assert period_start(Period.WEEK, sunday) == datetime(2024, 5, 12)

    def test_week_across_month_boundary(self):
        assert period_start(Period.WEEK, datetime(2024, 6, 1, 8, 0)) == datetime(2024, 5, 26)

    def test_month(self):
        assert period_start(Period.MONTH, NOW) == datetime(2024, 5, 1)

    def test_all(self):
        assert period_start(Period.ALL, NOW) is None


class TestComputePeriodStats:
    """Test period aggregation over records."""

    def setup_method(self):
        self.records = [
            make_record(datetime(2024, 4, 30, 23, 59)),  # last month
            make_record(datetime(2024, 5, 3, 10, 0)),    # this month
            make_record(datetime(2024, 5, 12, 0, 0)),    # this week, Sunday midnight
            make_record(datetime(2024, 5, 15, 0, 0)),    # today, midnight
            make_record(datetime(2024, 5, 15, 14, 0)),   # today
            make_record(datetime(2024, 5, 15, 15, 0)),   # after now
        ]

    @pytest.mark.parametrize("period,expected", [
        (Period.TODAY, 2),
        (Period.WEEK, 3),
        (Period.MONTH, 4),
        (Period.ALL, 5),
    ])
    def test_counts(self, period, expected):
        stats = compute_period_stats(self.records, period, now=NOW)
        assert stats.total_prompts == expected
        assert len(stats.records) == expected

    def test_totals(self):
        stats = compute_period_stats(self.records, Period.TODAY, now=NOW)

        assert stats.total_tokens == 200
        assert stats.total_kwh == pytest.approx(0.02)
        assert stats.total_watt_hours == pytest.approx(20.0)
        assert stats.total_water_ml == pytest.approx(30.0)
        assert stats.start == datetime(2024, 5, 15)
        assert stats.end == NOW

    def test_empty_history(self):
        stats = compute_period_stats([], Period.ALL, now=NOW)
        assert stats.total_prompts == 0
        assert stats.total_tokens == 0
        assert stats.total_kwh == 0
        assert stats.total_water_ml == 0

    def test_missing_values_count_as_zero(self):
        records = [
            PromptRecord(timestamp=datetime(2024, 5, 15, 9, 0), prompt="a", energy_data={}),
            PromptRecord(
                timestamp=datetime(2024, 5, 15, 9, 0),
                prompt="b",
                energy_data={"totalTokens": "many", "realWorldWaterUsageMl": 5.0},
            ),
        ]
        stats = compute_period_stats(records, Period.TODAY, now=NOW)
        assert stats.total_prompts == 2
        assert stats.total_tokens == 0
        assert stats.total_water_ml == pytest.approx(5.0)


class TestSessionAggregator:
    """Test running session totals."""

    def test_starts_empty(self):
        totals = SessionAggregator().totals
        assert totals.prompts == 0
        assert totals.tokens == 0
        assert totals.real_world_kwh == 0.0
        assert totals.real_world_water_ml == 0.0

    def test_accumulates(self):
        session = SessionAggregator()
        first = measure_prompt("Is Paris the capital of France?")
        second = measure_prompt("Write a poem about the ocean")

        session.add(first)
        totals = session.add(second)

        assert totals.prompts == 2
        assert totals.tokens == first.analysis.total_tokens + second.analysis.total_tokens
        assert totals.real_world_water_ml == pytest.approx(
            first.energy.real_world_water_ml + second.energy.real_world_water_ml
        )
        assert totals.real_world_watt_hours == pytest.approx(totals.real_world_kwh * 1000)

    def test_reset(self):
        session = SessionAggregator()
        session.add(measure_prompt("Hello there"))
        session.reset()
        assert session.totals.prompts == 0
        assert session.totals.real_world_kwh == 0.0
