"""Vapi REST client: calls, phone numbers, tools and assistants."""

import logging
from typing import Any

import httpx

from checkin.clients.errors import VapiError
from checkin.config import Settings

logger = logging.getLogger(__name__)


class VapiClient:
    """Async bearer-token client for the Vapi API."""

    def __init__(self, settings: Settings) -> None:
        self.base_url = settings.vapi_base_url.rstrip("/")
        self.http = httpx.AsyncClient(
            timeout=settings.http_timeout_seconds,
            headers={"Authorization": f"Bearer {settings.vapi_api_key}"},
        )

    async def _request(
        self, method: str, path: str, payload: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Send a JSON request and return the decoded body.

        Non-2xx responses raise VapiError carrying the platform's message.
        """
        resp = await self.http.request(method, f"{self.base_url}{path}", json=payload)
        try:
            data = resp.json()
        except ValueError:
            data = {}
        if not resp.is_success:
            message = data.get("message") if isinstance(data, dict) else None
            # Validation errors come back as a list of messages
            if isinstance(message, list):
                message = "; ".join(str(m) for m in message)
            logger.error("Vapi %s %s failed (%s): %s", method, path, resp.status_code, data)
            raise VapiError(
                message or "unknown error", status_code=resp.status_code, details=data
            )
        return data

    async def create_call(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Create an outbound call, immediate or scheduled via schedulePlan."""
        return await self._request("POST", "/call", payload)

    async def create_phone_number(self, payload: dict[str, Any]) -> dict[str, Any]:
        return await self._request("POST", "/phone-number", payload)

    async def create_tool(self, payload: dict[str, Any]) -> dict[str, Any]:
        return await self._request("POST", "/tool", payload)

    async def create_assistant(self, payload: dict[str, Any]) -> dict[str, Any]:
        return await self._request("POST", "/assistant", payload)

    async def update_assistant(
        self, assistant_id: str, payload: dict[str, Any]
    ) -> dict[str, Any]:
        return await self._request("PATCH", f"/assistant/{assistant_id}", payload)

    async def close(self) -> None:
        await self.http.aclose()
