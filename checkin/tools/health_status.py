"""Health status logging LangChain tool."""

import logging
from datetime import datetime, timezone
from typing import Any, Literal

from langchain_core.tools import tool
from pydantic import Field

from checkin.clients.sheets import SheetsClient
from checkin.schemas.tools import VapiModel
from checkin.tools.base import tool_error_handler

logger = logging.getLogger(__name__)

_client: SheetsClient | None = None


def set_client(client: SheetsClient) -> None:
    global _client
    _client = client


def _get_client() -> SheetsClient:
    if _client is None:
        raise RuntimeError("Sheets client not initialized; call set_client() first")
    return _client


class LogHealthStatusArgs(VapiModel):
    patient_name: str = Field(description="Full name of the patient")
    patient_phone: str = Field(
        description="Patient phone number in E.164 format (e.g. +11234567890)"
    )
    symptoms: list[str] = Field(description="List of symptoms the patient reported")
    mood: Literal["good", "fair", "poor"] = Field(
        description="Patient's self-reported mood"
    )
    notes: str | None = Field(
        default=None, description="Any additional notes from the conversation"
    )


def build_row(
    timestamp: str,
    patient_name: str,
    patient_phone: str,
    symptoms: list[str],
    mood: str,
    notes: str | None,
) -> list[str]:
    """Sheet columns: timestamp | patient | phone | symptoms | mood | notes."""
    return [timestamp, patient_name, patient_phone, ", ".join(symptoms), mood, notes or ""]


@tool(args_schema=LogHealthStatusArgs)
@tool_error_handler
async def log_health_status(
    patient_name: str,
    patient_phone: str,
    symptoms: list[str],
    mood: str,
    notes: str | None = None,
) -> dict[str, Any]:
    """Log the patient's current health status. Call this after collecting
    symptoms, mood, and any vitals from the patient."""
    client = _get_client()
    timestamp = datetime.now(timezone.utc).isoformat()
    row = build_row(timestamp, patient_name, patient_phone, symptoms, mood, notes)
    await client.append_row(row)
    logger.info("Health status logged for %s at %s", patient_name, timestamp)
    return {
        "status": "success",
        "result": (
            f"Health status logged for {patient_name}. "
            f"Symptoms: {', '.join(symptoms)}. Mood: {mood}."
        ),
    }
