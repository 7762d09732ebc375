"""
HTTP API for the global water usage ledger.

    GET  /api/water-usage   current ledger document
    POST /api/submit-usage  {waterUsageML, userId, previouslySubmitted?}
"""

import logging
from typing import Any, Optional

from fastapi import Body, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .ledger import LedgerStorageError, WaterUsageLedger

logger = logging.getLogger(__name__)


def create_app(ledger: Optional[WaterUsageLedger] = None) -> FastAPI:
    """Build the API around a ledger (a ledger in the working directory by default)."""
    ledger = ledger or WaterUsageLedger()

    app = FastAPI(title="AI Water Meter Aggregation API")
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
    app.state.ledger = ledger

    @app.exception_handler(RequestValidationError)
    async def invalid_request(request: Request, exc: RequestValidationError):
        return JSONResponse({"error": "Invalid request body"}, status_code=400)

    @app.get("/api/water-usage")
    def get_water_usage():
        try:
            return ledger.snapshot()
        except LedgerStorageError as exc:
            logger.error("Error reading water usage data: %s", exc)
            return JSONResponse({"error": "Failed to retrieve water usage data"}, status_code=500)

    @app.post("/api/submit-usage")
    def submit_usage(payload: Any = Body(...)):
        if not isinstance(payload, dict):
            return JSONResponse({"error": "Request body must be a JSON object"}, status_code=400)
        try:
            outcome = ledger.submit(
                payload.get("userId"),
                payload.get("waterUsageML"),
                payload.get("previouslySubmitted"),
            )
        except ValueError as exc:
            return JSONResponse({"error": str(exc)}, status_code=400)
        except LedgerStorageError as exc:
            logger.error("Error updating water usage data: %s", exc)
            return JSONResponse({"error": "Failed to update water usage data"}, status_code=500)

        return {
            "success": True,
            "message": "Water usage data recorded successfully",
            "totalWaterML": outcome.total_water_ml,
            "contributorCount": outcome.contributor_count,
        }

    return app
