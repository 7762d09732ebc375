"""
PromptMeter facade.

Wires the analysis pipeline, the prompt history and the session totals
together behind one object.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union

from ai_water_meter.config.loader import MeterConfig
from ai_water_meter.core.aggregator import Period, PeriodStats, SessionAggregator, SessionTotals
from ai_water_meter.core.analysis import PromptAnalyzer, PromptFootprint
from ai_water_meter.core.token_counter import TokenCounter
from ai_water_meter.storage.export import ExportFormat, load_json_history, write_export
from ai_water_meter.storage.models import PromptRecord
from ai_water_meter.storage.repository import get_repository

from .aggregation_client import AggregationClient, SubmissionResult, generate_user_id

logger = logging.getLogger(__name__)

USER_ID_SETTING = "user_id"


@dataclass(frozen=True)
class RecordOutcome:
    """Result of recording a prompt."""
    footprint: PromptFootprint
    recorded: bool  # False for empty or already recorded prompts
    session: SessionTotals


class PromptMeter:
    """Measures prompts and keeps their history.

    Example:
        meter = PromptMeter()
        outcome = meter.record("Write a 500 word essay about renewable energy")
        print(outcome.footprint.energy.real_world_water_ml)
    """

    def __init__(self, config: Optional[MeterConfig] = None, db_path: Optional[str] = None):
        """Initialize the meter.

        Args:
            config: Meter configuration (defaults when omitted)
            db_path: Overrides the configured history database path
        """
        self.config = config or MeterConfig()
        estimator_config = self.config.estimator
        self.analyzer = PromptAnalyzer(
            energy_config=self.config.energy,
            match_mode=estimator_config.match_mode,
            token_counter=TokenCounter(estimator_config.tokenizer, estimator_config.encoding),
        )
        self.db_path = db_path or self.config.storage.db_path
        self.repository = get_repository(self.db_path)
        self.session = SessionAggregator()

    def measure(self, text: str) -> PromptFootprint:
        """Analyze a prompt without recording it."""
        return self.analyzer.measure(text)

    def record(self, text: str, timestamp: Optional[datetime] = None) -> RecordOutcome:
        """Measure a prompt, add it to the session and append it to history.

        Every non-empty prompt counts towards the session totals. History
        keeps at most one record per exact prompt text.
        """
        footprint = self.analyzer.measure(text)
        if not text or not text.strip():
            return RecordOutcome(footprint, recorded=False, session=self.session.totals)

        totals = self.session.add(footprint)
        record = PromptRecord.from_footprint(footprint, timestamp)
        recorded = self.repository.append(record)
        if recorded:
            logger.info(
                "Recorded prompt: %d tokens, %.2f mL",
                footprint.analysis.total_tokens,
                footprint.energy.real_world_water_ml,
            )
        return RecordOutcome(footprint, recorded=recorded, session=totals)

    def stats(self, period: Period = Period.ALL, now: Optional[datetime] = None) -> PeriodStats:
        """Aggregate history for a period."""
        return self.repository.get_period_stats(period, now)

    def history(self, limit: Optional[int] = None) -> List[PromptRecord]:
        """Recorded prompts, oldest first."""
        return self.repository.load_all(limit)

    def clear(self) -> int:
        """Delete the whole history and reset the session."""
        self.session.reset()
        return self.repository.clear()

    def export(self, path: Union[str, Path], fmt: ExportFormat = ExportFormat.JSON) -> Path:
        """Write the history to a JSON or CSV file."""
        return write_export(self.history(), path, fmt)

    def import_history(self, path: Union[str, Path]) -> int:
        """Append records from a JSON history file, skipping known prompts.

        Returns:
            Number of records added
        """
        records = load_json_history(path)
        return self.repository.append_many(records)

    def contributor_id(self) -> str:
        """Pseudonymous id sent with submissions.

        A configured id wins. Otherwise one is generated on first use and
        stored in the history database, so every later submission from this
        database updates the same contributor on the server.
        """
        configured = self.config.aggregation.user_id
        if configured:
            return configured
        return self.repository.get_or_create_setting(USER_ID_SETTING, generate_user_id)

    def submit(self, client: Optional[AggregationClient] = None) -> SubmissionResult:
        """Report the cumulative real-world water usage to the aggregation server."""
        if client is None:
            aggregation = self.config.aggregation
            client = AggregationClient(
                base_url=aggregation.server_url,
                user_id=self.contributor_id(),
                timeout=aggregation.timeout_seconds,
            )
        total_water_ml = self.stats(Period.ALL).total_water_ml
        return client.submit_water_usage(total_water_ml)
