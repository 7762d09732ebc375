"""
Tests for the CLI interface.
"""
import json
import os
import tempfile
from unittest.mock import patch

import httpx
import pytest
from fastapi.testclient import TestClient
from typer.testing import CliRunner

from ai_water_meter.cli.main import app, EXIT_CODE_PASS, EXIT_CODE_FAIL
from ai_water_meter.sdk.aggregation_client import AggregationClient, SubmissionResult
from ai_water_meter.sdk.meter import PromptMeter
from ai_water_meter.server.app import create_app
from ai_water_meter.server.ledger import WaterUsageLedger

runner = CliRunner()


@pytest.fixture
def db_path():
    """Temporary history database path."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield os.path.join(temp_dir, "history.db")


def invoke(db_path, *args, **kwargs):
    return runner.invoke(app, ["--db", db_path, *args], **kwargs)


class TestAnalyze:
    """Test the analyze command."""

    def test_analyze_text_output(self, db_path):
        result = invoke(db_path, "analyze", "Is Paris the capital of France?")

        assert result.exit_code == EXIT_CODE_PASS
        assert "Energy Analysis" in result.output
        assert "Prompt Tokens: 8" in result.output
        assert "Reasoning Level: Simple (1)" in result.output

    def test_analyze_json_output(self, db_path):
        result = invoke(db_path, "analyze", "Is Paris the capital of France?", "--json")

        assert result.exit_code == EXIT_CODE_PASS
        data = json.loads(result.output)
        assert data["promptTokens"] == 8
        assert data["estimatedResponseTokens"] == 20
        assert "estimationRule" not in data

    def test_analyze_explain(self, db_path):
        result = invoke(db_path, "analyze", "Write a poem about the ocean", "--json", "--explain")

        data = json.loads(result.output)
        assert data["estimationRule"] == "content_type"

    def test_analyze_does_not_record_by_default(self, db_path):
        invoke(db_path, "analyze", "Hello there")
        assert PromptMeter(db_path=db_path).history() == []

    def test_analyze_record(self, db_path):
        result = invoke(db_path, "analyze", "Hello there", "--record")

        assert result.exit_code == EXIT_CODE_PASS
        assert "Prompt added to history" in result.output
        assert len(PromptMeter(db_path=db_path).history()) == 1

    def test_analyze_record_duplicate(self, db_path):
        invoke(db_path, "analyze", "Hello there", "--record")
        result = invoke(db_path, "analyze", "Hello there", "--record")

        assert result.exit_code == EXIT_CODE_PASS
        assert "Prompt not added" in result.output


class TestHistoryCommands:
    """Test stats, history, export, import and clear."""

    def test_init(self, db_path):
        result = invoke(db_path, "init")

        assert result.exit_code == EXIT_CODE_PASS
        assert "Database initialized" in result.output
        assert os.path.exists(db_path)

    def test_stats(self, db_path):
        meter = PromptMeter(db_path=db_path)
        meter.record("Hello there")
        meter.record("Write a poem about the ocean")

        result = invoke(db_path, "stats", "--period", "today")

        assert result.exit_code == EXIT_CODE_PASS
        assert "Usage Statistics (today)" in result.output
        assert "Prompts: 2" in result.output

    def test_stats_invalid_period(self, db_path):
        result = invoke(db_path, "stats", "--period", "decade")
        assert result.exit_code != EXIT_CODE_PASS

    def test_history_empty(self, db_path):
        result = invoke(db_path, "history")

        assert result.exit_code == EXIT_CODE_PASS
        assert "No prompts recorded yet" in result.output

    def test_history(self, db_path):
        PromptMeter(db_path=db_path).record("Hello there")

        result = invoke(db_path, "history", "--limit", "5")

        assert result.exit_code == EXIT_CODE_PASS
        assert "Hello there" in result.output

    @pytest.mark.parametrize("limit", ["0", "-1"])
    def test_history_rejects_non_positive_limit(self, db_path, limit):
        PromptMeter(db_path=db_path).record("Hello there")

        result = invoke(db_path, "history", "--limit", limit)

        assert result.exit_code != EXIT_CODE_PASS
        assert "Hello there" not in result.output

    def test_export_and_import(self, db_path):
        PromptMeter(db_path=db_path).record("Hello there")
        export_path = os.path.join(os.path.dirname(db_path), "history.csv")
        json_path = os.path.join(os.path.dirname(db_path), "history.json")

        result = invoke(db_path, "export", "--format", "csv", "--output", export_path)
        assert result.exit_code == EXIT_CODE_PASS
        with open(export_path, encoding="utf-8") as handle:
            assert handle.readline().startswith("Timestamp,Prompt")

        invoke(db_path, "export", "--output", json_path)
        other_db = os.path.join(os.path.dirname(db_path), "other.db")
        result = invoke(other_db, "import", json_path)

        assert result.exit_code == EXIT_CODE_PASS
        assert "Imported 1 prompt(s)" in result.output

    def test_export_empty_history(self, db_path):
        output = os.path.join(os.path.dirname(db_path), "history.json")

        result = invoke(db_path, "export", "--output", output)

        assert result.exit_code == EXIT_CODE_PASS
        assert "No history to export" in result.output
        assert not os.path.exists(output)

    def test_clear_with_yes(self, db_path):
        PromptMeter(db_path=db_path).record("Hello there")

        result = invoke(db_path, "clear", "--yes")

        assert result.exit_code == EXIT_CODE_PASS
        assert "Removed 1 prompt(s)" in result.output
        assert PromptMeter(db_path=db_path).history() == []

    def test_clear_aborted(self, db_path):
        PromptMeter(db_path=db_path).record("Hello there")

        result = invoke(db_path, "clear", input="n\n")

        assert result.exit_code == EXIT_CODE_PASS
        assert "Aborted" in result.output
        assert len(PromptMeter(db_path=db_path).history()) == 1


class TestSession:
    """Test the interactive session."""

    def test_session_totals(self, db_path):
        result = invoke(db_path, "session", input="Hello there\nstats\nreset\nstats\nexit\n")

        assert result.exit_code == EXIT_CODE_PASS
        assert "Prompt Energy Calculator" in result.output
        assert "Prompts: 1" in result.output
        assert "All counters have been reset to zero." in result.output
        assert "Prompts: 0" in result.output

    def test_session_ends_on_eof(self, db_path):
        result = invoke(db_path, "session", input="Hello there\n")
        assert result.exit_code == EXIT_CODE_PASS

    def test_session_record(self, db_path):
        invoke(db_path, "session", "--record", input="Hello there\nexit\n")
        assert len(PromptMeter(db_path=db_path).history()) == 1


class TestSubmitAndServe:
    """Test aggregation commands."""

    def test_submit_success(self, db_path):
        with patch("ai_water_meter.cli.main.AggregationClient") as mock_client:
            mock_client.return_value.submit_water_usage.return_value = SubmissionResult(
                success=True, total_water_ml=1500.0, contributor_count=3
            )
            result = invoke(db_path, "submit", "--server", "http://water.test")

        assert result.exit_code == EXIT_CODE_PASS
        assert "Water usage submitted" in result.output
        assert mock_client.call_args.kwargs["base_url"] == "http://water.test"

    def test_submit_failure(self, db_path):
        with patch("ai_water_meter.cli.main.AggregationClient") as mock_client:
            mock_client.return_value.submit_water_usage.return_value = SubmissionResult(
                success=False, error="connection refused"
            )
            result = invoke(db_path, "submit")

        assert result.exit_code == EXIT_CODE_FAIL
        assert "connection refused" in result.output

    def test_resubmitting_same_total_does_not_double_count(self, db_path):
        ledger = WaterUsageLedger(os.path.join(os.path.dirname(db_path), "ledger.json"))
        server = TestClient(create_app(ledger))

        def forward(request):
            response = server.request(
                request.method,
                request.url.path,
                content=request.content,
                headers={"content-type": request.headers.get("content-type", "application/json")},
            )
            return httpx.Response(response.status_code, json=response.json())

        def client_factory(**kwargs):
            return AggregationClient(transport=httpx.MockTransport(forward), **kwargs)

        PromptMeter(db_path=db_path).record("Write a poem about the ocean")
        with patch("ai_water_meter.cli.main.AggregationClient", side_effect=client_factory):
            first = invoke(db_path, "submit")
            total_after_first = ledger.snapshot()["totalWaterML"]
            second = invoke(db_path, "submit")

        assert first.exit_code == EXIT_CODE_PASS
        assert second.exit_code == EXIT_CODE_PASS
        snapshot = ledger.snapshot()
        assert snapshot["contributorCount"] == 1
        assert len(snapshot["submittedUsers"]) == 1
        assert total_after_first > 0
        assert snapshot["totalWaterML"] == pytest.approx(total_after_first)
        assert "from 1 contributor(s)" in second.output

    def test_serve(self, db_path):
        with patch("uvicorn.run") as mock_run:
            result = runner.invoke(app, ["serve", "--port", "8080"])

        assert result.exit_code == EXIT_CODE_PASS
        mock_run.assert_called_once()
        assert mock_run.call_args.kwargs["port"] == 8080


class TestConfigOption:
    """Test --config handling."""

    def test_missing_config_file(self, db_path):
        result = runner.invoke(app, ["--config", "/nonexistent/meter.yaml", "history"])

        assert result.exit_code == EXIT_CODE_FAIL
        assert "Invalid configuration" in result.output

    def test_config_from_file(self, db_path):
        config_path = os.path.join(os.path.dirname(db_path), "meter.yaml")
        with open(config_path, "w", encoding="utf-8") as handle:
            handle.write(f"storage:\n  db_path: {db_path}\n")

        runner.invoke(app, ["--config", config_path, "analyze", "Hello there", "--record"])

        assert len(PromptMeter(db_path=db_path).history()) == 1

    def test_no_command(self):
        result = runner.invoke(app, [])

        assert result.exit_code == EXIT_CODE_PASS
        assert "Use --help" in result.output
