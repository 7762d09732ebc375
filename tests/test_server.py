"""
Tests for the aggregation HTTP API.
"""

import os
import tempfile
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from ai_water_meter.server.app import create_app
from ai_water_meter.server.ledger import LedgerStorageError, WaterUsageLedger


class TestAggregationApi:
    """Test the ledger endpoints."""

    def setup_method(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.ledger = WaterUsageLedger(os.path.join(self.temp_dir.name, "ledger.json"))
        self.client = TestClient(create_app(self.ledger))

    def teardown_method(self):
        self.temp_dir.cleanup()

    def test_get_empty_ledger(self):
        response = self.client.get("/api/water-usage")

        assert response.status_code == 200
        body = response.json()
        assert body["totalWaterML"] == 0
        assert body["contributorCount"] == 0

    def test_submit_usage(self):
        response = self.client.post(
            "/api/submit-usage", json={"waterUsageML": 42.5, "userId": "user-a"}
        )

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "message": "Water usage data recorded successfully",
            "totalWaterML": 42.5,
            "contributorCount": 1,
        }

    def test_cumulative_submissions(self):
        self.client.post("/api/submit-usage", json={"waterUsageML": 40, "userId": "user-a"})
        response = self.client.post(
            "/api/submit-usage",
            json={"waterUsageML": 100, "userId": "user-a", "previouslySubmitted": 40},
        )

        assert response.json()["totalWaterML"] == 100
        assert self.client.get("/api/water-usage").json()["submittedUsers"] == {"user-a": 100}

    def test_missing_fields_rejected(self):
        response = self.client.post("/api/submit-usage", json={"waterUsageML": 10})
        assert response.status_code == 400
        assert "userId" in response.json()["error"]

    def test_negative_amount_rejected(self):
        response = self.client.post(
            "/api/submit-usage", json={"waterUsageML": -5, "userId": "user-a"}
        )
        assert response.status_code == 400

    def test_non_object_body_rejected(self):
        response = self.client.post("/api/submit-usage", json=[1, 2, 3])
        assert response.status_code == 400

    def test_malformed_json_rejected(self):
        response = self.client.post(
            "/api/submit-usage",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400

    def test_cors_headers(self):
        response = self.client.get("/api/water-usage", headers={"Origin": "http://example.com"})
        assert response.headers["access-control-allow-origin"] == "*"


class TestStorageFailures:
    """Test error responses when the ledger file is unusable."""

    def setup_method(self):
        self.ledger = MagicMock(spec=WaterUsageLedger)
        self.client = TestClient(create_app(self.ledger))

    def test_read_failure(self):
        self.ledger.snapshot.side_effect = LedgerStorageError("disk gone")

        response = self.client.get("/api/water-usage")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to retrieve water usage data"}

    def test_write_failure(self):
        self.ledger.submit.side_effect = LedgerStorageError("disk full")

        response = self.client.post(
            "/api/submit-usage", json={"waterUsageML": 1, "userId": "user-a"}
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to update water usage data"}
