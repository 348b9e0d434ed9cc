"""Google Sheets client with service-account (JWT bearer) token exchange."""

import logging
import time
from typing import Any

import httpx
import jwt

from checkin.clients.errors import SheetsAppendError, SheetsAuthError
from checkin.config import Settings

logger = logging.getLogger(__name__)

TOKEN_URL = "https://oauth2.googleapis.com/token"
SHEETS_BASE = "https://sheets.googleapis.com/v4/spreadsheets"
SHEETS_SCOPE = "https://www.googleapis.com/auth/spreadsheets"
JWT_BEARER_GRANT = "urn:ietf:params:oauth:grant-type:jwt-bearer"
ASSERTION_LIFETIME_SECONDS = 3600


def _json_body(resp: httpx.Response) -> dict[str, Any]:
    """Decoded JSON object, or {} when Google answers with an HTML error page."""
    try:
        data = resp.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


class SheetsClient:
    """Appends rows to a single spreadsheet as a Google service account.

    Each append exchanges a freshly signed RS256 assertion for a short-lived
    access token; nothing is cached between calls.
    """

    def __init__(self, settings: Settings) -> None:
        self.client_email = settings.google_client_email
        # .env files usually carry the PEM with escaped newlines
        self.private_key = settings.google_private_key.replace("\\n", "\n")
        self.spreadsheet_id = settings.spreadsheet_id
        self.sheet_range = settings.sheet_range
        self.http = httpx.AsyncClient(timeout=settings.http_timeout_seconds)

    def build_assertion(self, now: int | None = None) -> str:
        """Sign the JWT assertion for the token endpoint."""
        issued_at = int(time.time()) if now is None else now
        claims = {
            "iss": self.client_email,
            "scope": SHEETS_SCOPE,
            "aud": TOKEN_URL,
            "iat": issued_at,
            "exp": issued_at + ASSERTION_LIFETIME_SECONDS,
        }
        return jwt.encode(claims, self.private_key, algorithm="RS256")

    async def fetch_access_token(self) -> str:
        """Exchange a signed assertion for a bearer token.

        Raises SheetsAuthError when Google answers with an error status or payload.
        """
        resp = await self.http.post(
            TOKEN_URL,
            data={"grant_type": JWT_BEARER_GRANT, "assertion": self.build_assertion()},
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )
        data = _json_body(resp)
        if not resp.is_success or data.get("error") or not data.get("access_token"):
            logger.warning(
                "Google token exchange failed (%s): %s",
                resp.status_code,
                data.get("error_description") or data.get("error") or resp.text,
            )
            raise SheetsAuthError(
                "Failed to authenticate with Google", details=data.get("error") or resp.text
            )
        return data["access_token"]

    async def append_row(self, values: list[str]) -> int:
        """Append one row below the existing data. Returns the updated cell count."""
        token = await self.fetch_access_token()
        url = f"{SHEETS_BASE}/{self.spreadsheet_id}/values/{self.sheet_range}:append"
        resp = await self.http.post(
            url,
            params={"valueInputOption": "USER_ENTERED"},
            headers={"Authorization": f"Bearer {token}"},
            json={"values": [values]},
        )
        data = _json_body(resp)
        if not resp.is_success or data.get("error"):
            details = data.get("error") or resp.text
            logger.warning("Sheets append failed (%s): %s", resp.status_code, details)
            raise SheetsAppendError("Failed to append to sheet", details=details)
        updated = data.get("updates", {}).get("updatedCells", 0)
        logger.info("Appended row to %s (%d cells)", self.sheet_range, updated)
        return updated

    async def close(self) -> None:
        await self.http.aclose()
