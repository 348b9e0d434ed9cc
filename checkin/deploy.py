"""Provision the health check-in assistant on Vapi.

Usage:
    checkin-deploy

Creates (or reuses) a phone number, registers one webhook tool per local tool
pointing at PUBLIC_BASE_URL/tool/<name>, adds a placeholder send_alert tool,
creates the check-in assistant (or reuses VAPI_ASSISTANT_ID) and links every
tool to it.
"""

import asyncio
import logging
import sys
from dataclasses import dataclass, field
from typing import Any

import httpx
from langchain_core.tools import BaseTool

from checkin.clients.errors import VapiError
from checkin.clients.vapi import VapiClient
from checkin.config import Settings
from checkin.prompts import (
    CHECKIN_ASSISTANT_NAME,
    CHECKIN_FIRST_MESSAGE,
    CHECKIN_SYSTEM_PROMPT,
)
from checkin.tools import ALL_TOOLS

logger = logging.getLogger(__name__)

SEND_ALERT_TOOL = {
    "type": "function",
    "function": {
        "name": "send_alert",
        "description": (
            "Send an urgent alert to health professionals when a patient reports "
            "serious symptoms or a critical health concern. Use for chest pain, "
            "difficulty breathing, severe symptoms, or any emergency situation."
        ),
        "parameters": {
            "type": "object",
            "properties": {
                "patientName": {"type": "string", "description": "Name of the patient"},
                "alertLevel": {
                    "type": "string",
                    "enum": ["warning", "urgent", "critical"],
                    "description": "Severity level of the alert",
                },
                "symptoms": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Concerning symptoms reported",
                },
                "description": {
                    "type": "string",
                    "description": "Description of the health concern",
                },
            },
            "required": ["alertLevel", "description"],
        },
    },
}


@dataclass
class DeploymentResult:
    assistant_id: str
    phone_number_id: str
    tool_ids: dict[str, str] = field(default_factory=dict)


def tool_parameters(tool: BaseTool) -> dict[str, Any]:
    """JSON schema of a tool's arguments, using the camelCase names Vapi sends back."""
    schema = tool.args_schema.model_json_schema(by_alias=True)
    schema.pop("title", None)
    for prop in schema.get("properties", {}).values():
        prop.pop("title", None)
    return schema


def webhook_tool_payload(tool: BaseTool, public_base_url: str) -> dict[str, Any]:
    return {
        "type": "function",
        "function": {
            "name": tool.name,
            "description": " ".join(tool.description.split()),
            "parameters": tool_parameters(tool),
        },
        "server": {"url": f"{public_base_url.rstrip('/')}/tool/{tool.name}"},
    }


def assistant_model(tool_ids: list[str]) -> dict[str, Any]:
    return {
        "provider": "openai",
        "model": "gpt-4o",
        "messages": [{"role": "system", "content": CHECKIN_SYSTEM_PROMPT}],
        "toolIds": tool_ids,
    }


async def deploy(client: VapiClient, settings: Settings) -> DeploymentResult:
    """Create the remote resources and return their ids."""
    phone_number_id = settings.vapi_phone_number_id
    if phone_number_id:
        logger.info("Using existing phone number: %s", phone_number_id)
    else:
        logger.info("Provisioning phone number")
        phone = await client.create_phone_number({"provider": "vapi"})
        phone_number_id = phone["id"]
        logger.info(
            "Phone number %s (%s)", phone_number_id, phone.get("number") or "provisioning"
        )

    tool_ids: dict[str, str] = {}
    for tool in ALL_TOOLS:
        created = await client.create_tool(
            webhook_tool_payload(tool, settings.public_base_url)
        )
        tool_ids[tool.name] = created["id"]
        logger.info("Tool %s: %s", tool.name, created["id"])

    alert = await client.create_tool(SEND_ALERT_TOOL)
    tool_ids["send_alert"] = alert["id"]
    logger.info("Tool send_alert (placeholder): %s", alert["id"])

    all_ids = list(tool_ids.values())
    assistant_id = settings.vapi_assistant_id
    if assistant_id:
        await client.update_assistant(assistant_id, {"model": assistant_model(all_ids)})
        logger.info("Linked %d tools to existing assistant %s", len(all_ids), assistant_id)
    else:
        assistant = await client.create_assistant({
            "name": CHECKIN_ASSISTANT_NAME,
            "firstMessage": CHECKIN_FIRST_MESSAGE,
            "model": assistant_model(all_ids),
            "voice": {"provider": "11labs", "voiceId": "sarah"},
            "transcriber": {"provider": "deepgram", "model": "nova-2", "language": "en"},
        })
        assistant_id = assistant["id"]
        logger.info("Assistant %s: %s", CHECKIN_ASSISTANT_NAME, assistant_id)

    return DeploymentResult(
        assistant_id=assistant_id,
        phone_number_id=phone_number_id,
        tool_ids=tool_ids,
    )


async def _main(settings: Settings) -> DeploymentResult:
    client = VapiClient(settings)
    try:
        return await deploy(client, settings)
    finally:
        await client.close()


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    settings = Settings()
    missing = [
        name
        for name, value in (
            ("VAPI_API_KEY", settings.vapi_api_key),
            ("PUBLIC_BASE_URL", settings.public_base_url),
        )
        if not value
    ]
    if missing:
        logger.error("Missing required configuration: %s", ", ".join(missing))
        sys.exit(1)

    try:
        result = asyncio.run(_main(settings))
    except (VapiError, httpx.HTTPError) as e:
        logger.error("Deployment failed: %s", e)
        sys.exit(1)

    logger.info("Deployment complete")
    logger.info("  Assistant ID:    %s", result.assistant_id)
    logger.info("  Phone number ID: %s", result.phone_number_id)
    for name, tool_id in result.tool_ids.items():
        logger.info("  Tool %-18s %s", name, tool_id)
    logger.info(
        "Add sheet headers: timestamp | patient | phone | symptoms | mood | notes"
    )
    logger.info(
        "Share the spreadsheet with %s",
        settings.google_client_email or "(configure GOOGLE_CLIENT_EMAIL)",
    )


if __name__ == "__main__":
    main()
