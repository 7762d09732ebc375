"""
Tests for the PromptMeter facade.
"""

import json
import os
import tempfile
from datetime import datetime

import httpx
import pytest

from ai_water_meter.config.loader import AggregationConfig, EstimatorConfig, MeterConfig
from ai_water_meter.core.aggregator import Period
from ai_water_meter.core.classifiers import MatchMode, ReasoningLevel
from ai_water_meter.sdk import AggregationClient, PromptMeter
from ai_water_meter.storage.export import ExportFormat


class TestPromptMeter:
    """Test recording, statistics and history management."""

    def setup_method(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.db_path = os.path.join(self.temp_dir.name, "history.db")
        self.meter = PromptMeter(db_path=self.db_path)

    def teardown_method(self):
        self.temp_dir.cleanup()

    def test_measure_does_not_record(self):
        footprint = self.meter.measure("Is Paris the capital of France?")

        assert footprint.analysis.total_tokens == 28
        assert self.meter.history() == []
        assert self.meter.session.totals.prompts == 0

    def test_record(self):
        outcome = self.meter.record("Write a poem about the ocean")

        assert outcome.recorded is True
        assert outcome.session.prompts == 1
        history = self.meter.history()
        assert len(history) == 1
        assert history[0].prompt == "Write a poem about the ocean"
        assert history[0].real_world_water_ml == pytest.approx(
            outcome.footprint.energy.real_world_water_ml
        )

    def test_duplicate_counts_in_session_only(self):
        self.meter.record("Hello there")
        outcome = self.meter.record("Hello there")

        assert outcome.recorded is False
        assert outcome.session.prompts == 2
        assert len(self.meter.history()) == 1

    def test_empty_prompt_not_recorded(self):
        outcome = self.meter.record("   ")

        assert outcome.recorded is False
        assert outcome.session.prompts == 0
        assert self.meter.history() == []

    def test_stats(self):
        now = datetime(2024, 5, 15, 14, 30)
        first = self.meter.record("Hello there", timestamp=datetime(2024, 5, 15, 9, 0))
        self.meter.record("Why do cats purr?", timestamp=datetime(2024, 4, 1, 9, 0))

        today = self.meter.stats(Period.TODAY, now)
        everything = self.meter.stats(Period.ALL, now)

        assert today.total_prompts == 1
        assert today.total_tokens == first.footprint.analysis.total_tokens
        assert everything.total_prompts == 2

    def test_history_limit(self):
        for index, prompt in enumerate(["one", "two", "three"]):
            self.meter.record(prompt, timestamp=datetime(2024, 5, 15, 9, index))

        assert [record.prompt for record in self.meter.history(limit=2)] == ["two", "three"]

    def test_clear_resets_session(self):
        self.meter.record("Hello there")

        assert self.meter.clear() == 1
        assert self.meter.history() == []
        assert self.meter.session.totals.prompts == 0

    def test_export_and_import(self):
        self.meter.record("Hello there")
        self.meter.record("Write a poem about the ocean")
        path = self.meter.export(os.path.join(self.temp_dir.name, "history.json"), ExportFormat.JSON)

        with open(path, encoding="utf-8") as handle:
            assert len(json.load(handle)) == 2

        other = PromptMeter(db_path=os.path.join(self.temp_dir.name, "other.db"))
        other.record("Hello there")
        assert other.import_history(path) == 1
        assert len(other.history()) == 2

    def test_config_is_applied(self):
        config = MeterConfig(estimator=EstimatorConfig(match_mode=MatchMode.SUBSTRING))
        meter = PromptMeter(config, db_path=self.db_path)

        footprint = meter.measure("Is Paris the capital of France?")
        assert footprint.analysis.reasoning_level == ReasoningLevel.MODERATE

    def test_contributor_id_is_stable(self):
        user_id = self.meter.contributor_id()

        assert user_id.startswith("user-")
        assert self.meter.contributor_id() == user_id
        assert PromptMeter(db_path=self.db_path).contributor_id() == user_id

    def test_configured_contributor_id_wins(self):
        config = MeterConfig(aggregation=AggregationConfig(user_id="user-configured"))
        meter = PromptMeter(config, db_path=self.db_path)

        assert meter.contributor_id() == "user-configured"

    def test_submit_sends_all_time_total(self):
        submitted = []

        def handler(request):
            submitted.append(json.loads(request.content)["waterUsageML"])
            return httpx.Response(200, json={"success": True, "totalWaterML": 5, "contributorCount": 1})

        self.meter.record("Hello there")
        self.meter.record("Write a poem about the ocean")
        client = AggregationClient(
            base_url="http://water.test", user_id="user-test", transport=httpx.MockTransport(handler)
        )

        result = self.meter.submit(client)

        assert result.success is True
        assert submitted[0] == pytest.approx(self.meter.stats(Period.ALL).total_water_ml)
