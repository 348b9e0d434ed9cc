"""Follow-up call scheduling LangChain tool."""

import logging
from typing import Any

from langchain_core.tools import tool
from pydantic import Field

from checkin.clients.errors import VapiError
from checkin.clients.vapi import VapiClient
from checkin.prompts import (
    FOLLOWUP_ASSISTANT_NAME,
    followup_first_message,
    followup_system_prompt,
)
from checkin.schemas.tools import VapiModel
from checkin.tools.base import tool_error_handler

logger = logging.getLogger(__name__)

_client: VapiClient | None = None
_phone_number_id: str = ""


def set_client(client: VapiClient, phone_number_id: str) -> None:
    global _client, _phone_number_id
    _client = client
    _phone_number_id = phone_number_id


def _get_client() -> VapiClient:
    if _client is None:
        raise RuntimeError("Vapi client not initialized; call set_client() first")
    return _client


class ScheduleFollowupArgs(VapiModel):
    patient_name: str = Field(description="Full name of the patient")
    patient_phone: str = Field(description="Patient phone number in E.164 format")
    # Passed through untouched; the platform decides whether it is acceptable
    follow_up_date: str = Field(
        description="ISO 8601 datetime for the follow-up call (e.g. 2026-03-15T14:00:00Z)"
    )
    reason: str = Field(description="Reason for the follow-up call")


def build_call_payload(
    patient_name: str,
    patient_phone: str,
    follow_up_date: str,
    reason: str,
    phone_number_id: str,
) -> dict[str, Any]:
    """Scheduled call with a transient assistant defined inline."""
    return {
        "assistant": {
            "name": FOLLOWUP_ASSISTANT_NAME,
            "model": {
                "provider": "openai",
                "model": "gpt-4o",
                "messages": [
                    {
                        "role": "system",
                        "content": followup_system_prompt(patient_name, reason),
                    }
                ],
            },
            "voice": {"provider": "azure", "voiceId": "andrew"},
            "firstMessage": followup_first_message(patient_name, reason),
            "firstMessageMode": "assistant-speaks-first",
        },
        "phoneNumberId": phone_number_id,
        "customer": {"number": patient_phone, "name": patient_name},
        "schedulePlan": {"earliestAt": follow_up_date},
    }


@tool(args_schema=ScheduleFollowupArgs)
@tool_error_handler
async def schedule_followup(
    patient_name: str,
    patient_phone: str,
    follow_up_date: str,
    reason: str,
) -> dict[str, Any]:
    """Schedule a follow-up phone call with the patient. Use this when the patient
    agrees to a check-in call or when their symptoms warrant a follow-up."""
    client = _get_client()
    payload = build_call_payload(
        patient_name, patient_phone, follow_up_date, reason, _phone_number_id
    )
    try:
        call = await client.create_call(payload)
    except VapiError as e:
        raise VapiError(
            f"Failed to schedule follow-up: {e}", status_code=e.status_code, details=e.details
        ) from e
    logger.info("Scheduled follow-up call %s for %s", call.get("id"), follow_up_date)
    return {
        "status": "success",
        "result": (
            f"Follow-up call scheduled for {patient_name} on {follow_up_date}. "
            f"Call ID: {call.get('id')}."
        ),
    }
