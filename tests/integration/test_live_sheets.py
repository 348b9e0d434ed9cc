"""Integration tests against the configured Google Sheet.

Appends a real row; use a scratch spreadsheet.
"""

import pytest

from checkin.clients.sheets import SheetsClient
from checkin.config import Settings

pytestmark = pytest.mark.integration


@pytest.fixture
async def live_sheets():
    client = SheetsClient(Settings())
    yield client
    await client.close()


@pytest.mark.asyncio
async def test_token_exchange(live_sheets):
    token = await live_sheets.fetch_access_token()
    assert token


@pytest.mark.asyncio
async def test_append_row(live_sheets):
    updated = await live_sheets.append_row(
        ["integration-test", "Test Patient", "+15550000000", "none", "good", "ignore me"]
    )
    assert updated == 6
