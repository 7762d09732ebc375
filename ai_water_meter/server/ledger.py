"""
Global water usage ledger.

Stores a running water total contributed by pseudonymous users in a JSON
file:

    {
      "totalWaterML": 10250.5,
      "contributorCount": 42,
      "submittedUsers": {"user-abc123": 250.5},
      "lastUpdated": "2024-06-01T12:00:00+00:00"
    }

Clients submit their cumulative total, not a delta. The ledger adds only
the growth since the last value it stored for that user, so resending the
same total adds nothing and a smaller total never decreases anything.
"""

import json
import logging
import math
import os
import tempfile
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = "water-usage-data.json"


class LedgerStorageError(Exception):
    """Raised when the ledger file cannot be read or written."""


@dataclass(frozen=True)
class SubmissionOutcome:
    """Result of recording one submission."""
    added_ml: float
    total_water_ml: float
    contributor_count: int
    new_contributor: bool


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _validate_amount(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number")
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"{name} must be a finite, non-negative number")
    return float(value)


class WaterUsageLedger:
    """Thread-safe, file-backed running total of submitted water usage."""

    def __init__(self, path: Union[str, Path] = DEFAULT_DATA_FILE):
        self.path = Path(path)
        self._lock = threading.Lock()

    @staticmethod
    def _initial_data() -> Dict[str, Any]:
        return {
            "totalWaterML": 0,
            "contributorCount": 0,
            "submittedUsers": {},
            "lastUpdated": _now_iso(),
        }

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            data = self._initial_data()
            self._write(data)
            logger.info("Created water usage ledger at %s", self.path)
            return data
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise LedgerStorageError(f"Failed to read ledger {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise LedgerStorageError(f"Ledger {self.path} does not contain an object")

        # Files written before per-user tracking lack these keys
        data.setdefault("totalWaterML", 0)
        data.setdefault("contributorCount", 0)
        if not isinstance(data.get("submittedUsers"), dict):
            data["submittedUsers"] = {}
        return data

    def _write(self, data: Dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=self.path.name, suffix=".tmp", dir=str(self.path.parent)
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    json.dump(data, handle, indent=2)
                os.replace(tmp_name, self.path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as exc:
            raise LedgerStorageError(f"Failed to write ledger {self.path}: {exc}") from exc

    def snapshot(self) -> Dict[str, Any]:
        """Return the current ledger document."""
        with self._lock:
            return self._read()

    def submit(
        self,
        user_id: str,
        water_usage_ml: float,
        previously_submitted: Optional[float] = None
    ) -> SubmissionOutcome:
        """
        Record a user's cumulative water usage.

        Args:
            user_id: Pseudonymous contributor id
            water_usage_ml: The user's cumulative total in mL
            previously_submitted: What the client believes it sent last time.
                Only logged; accounting always uses the stored value.

        Returns:
            SubmissionOutcome with the amount added and the new totals

        Raises:
            ValueError: If the user id is empty or the amount is invalid
            LedgerStorageError: If the ledger file cannot be read or written
        """
        if not isinstance(user_id, str) or not user_id.strip():
            raise ValueError("userId must be a non-empty string")
        amount = _validate_amount(water_usage_ml, "waterUsageML")

        with self._lock:
            data = self._read()
            users = data["submittedUsers"]
            new_contributor = user_id not in users

            if new_contributor:
                added = amount
                data["contributorCount"] += 1
                users[user_id] = amount
            else:
                stored = float(users[user_id])
                if previously_submitted is not None and previously_submitted != stored:
                    logger.debug(
                        "Client hint %s for %s differs from stored %s",
                        previously_submitted, user_id, stored
                    )
                added = max(0.0, amount - stored)
                users[user_id] = max(stored, amount)

            data["totalWaterML"] += added
            data["lastUpdated"] = _now_iso()
            self._write(data)

        logger.info("Recorded %.2f mL from %s", added, user_id)
        return SubmissionOutcome(
            added_ml=added,
            total_water_ml=data["totalWaterML"],
            contributor_count=data["contributorCount"],
            new_contributor=new_contributor,
        )
