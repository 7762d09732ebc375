"""
Client for the global water usage aggregation service.

Submissions never raise: network and HTTP failures are reported in the
returned SubmissionResult.
"""

import logging
import uuid
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from ai_water_meter.config.loader import DEFAULT_SERVER_URL

logger = logging.getLogger(__name__)


def generate_user_id() -> str:
    """Create a pseudonymous contributor id."""
    return f"user-{uuid.uuid4().hex[:12]}"


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of a water usage submission."""
    success: bool
    total_water_ml: Optional[float] = None
    contributor_count: Optional[int] = None
    error: Optional[str] = None


class AggregationClient:
    """Submits cumulative water usage to an aggregation server."""

    def __init__(
        self,
        base_url: str = DEFAULT_SERVER_URL,
        user_id: Optional[str] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.user_id = user_id or generate_user_id()
        self.timeout = timeout
        self._transport = transport
        self.last_submitted_ml: Optional[float] = None

    def _create_http_client(self) -> httpx.Client:
        return httpx.Client(base_url=self.base_url, timeout=self.timeout, transport=self._transport)

    def submit_water_usage(self, total_water_ml: float) -> SubmissionResult:
        """
        Submit this user's cumulative water usage.

        Args:
            total_water_ml: Cumulative total in mL since the user started

        Returns:
            SubmissionResult; success is False on any network, HTTP or
            response format error
        """
        payload: Dict[str, Any] = {
            "waterUsageML": total_water_ml,
            "userId": self.user_id,
        }
        if self.last_submitted_ml is not None:
            payload["previouslySubmitted"] = self.last_submitted_ml

        try:
            with self._create_http_client() as client:
                response = client.post("/api/submit-usage", json=payload)
                response.raise_for_status()
                body = response.json()
        except httpx.TimeoutException as exc:
            logger.warning("Water usage submission timed out: %s", exc)
            return SubmissionResult(success=False, error=f"Request timed out: {exc}")
        except httpx.HTTPStatusError as exc:
            logger.warning("Water usage submission rejected: %s", exc)
            return SubmissionResult(
                success=False, error=f"HTTP {exc.response.status_code}: {exc.response.text}"
            )
        except httpx.HTTPError as exc:
            logger.warning("Water usage submission failed: %s", exc)
            return SubmissionResult(success=False, error=str(exc))
        except ValueError as exc:
            logger.warning("Malformed response from aggregation server: %s", exc)
            return SubmissionResult(success=False, error=f"Malformed response: {exc}")

        if not isinstance(body, dict) or not body.get("success"):
            return SubmissionResult(success=False, error="Server did not confirm the submission")

        self.last_submitted_ml = total_water_ml
        return SubmissionResult(
            success=True,
            total_water_ml=body.get("totalWaterML"),
            contributor_count=body.get("contributorCount"),
        )

    def fetch_totals(self) -> Optional[Dict[str, Any]]:
        """Fetch the global totals, or None if the server is unreachable."""
        try:
            with self._create_http_client() as client:
                response = client.get("/api/water-usage")
                response.raise_for_status()
                return response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Could not fetch global water usage: %s", exc)
            return None
