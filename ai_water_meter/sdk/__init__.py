"""
SDK for AI Water Meter.

Provides programmatic access to prompt measurement and history.
"""

from .aggregation_client import AggregationClient, SubmissionResult
from .meter import PromptMeter, RecordOutcome

__all__ = ["AggregationClient", "PromptMeter", "RecordOutcome", "SubmissionResult"]
