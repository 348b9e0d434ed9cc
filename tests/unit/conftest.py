"""Shared test fixtures for check-in webhook unit tests."""

from unittest.mock import AsyncMock

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from checkin.config import Settings


@pytest.fixture(scope="session")
def rsa_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def private_key_pem(rsa_key) -> str:
    return rsa_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()


@pytest.fixture
def test_settings(private_key_pem) -> Settings:
    """Settings with every credential filled in, independent of the environment."""
    return Settings(
        vapi_api_key="test-vapi-key",
        vapi_base_url="https://api.vapi.ai",
        vapi_phone_number_id="phone-123",
        vapi_assistant_id="",
        google_client_email="checkin@project.iam.gserviceaccount.com",
        # Escaped newlines, as they usually arrive from a .env file
        google_private_key=private_key_pem.replace("\n", "\\n"),
        spreadsheet_id="sheet-123",
        sheet_range="Sheet1",
        public_base_url="https://hooks.example.com",
        port=3000,
    )


@pytest.fixture
def mock_sheets_client():
    """AsyncMock of SheetsClient whose appends succeed."""
    client = AsyncMock()
    client.append_row.return_value = 6
    return client


@pytest.fixture
def mock_vapi_client():
    """AsyncMock of VapiClient returning a scheduled call."""
    client = AsyncMock()
    client.create_call.return_value = {
        "id": "call-abc",
        "status": "scheduled",
        "schedulePlan": {"earliestAt": "2026-03-15T14:00:00Z"},
    }
    return client


@pytest.fixture
def health_args() -> dict:
    """camelCase arguments as Vapi sends them for log_health_status."""
    return {
        "patientName": "Jane Smith",
        "patientPhone": "+15551234567",
        "symptoms": ["headache", "fatigue"],
        "mood": "fair",
        "notes": "Sleeping poorly",
    }


@pytest.fixture
def followup_args() -> dict:
    """camelCase arguments as Vapi sends them for schedule_followup."""
    return {
        "patientName": "Jane Smith",
        "patientPhone": "+15551234567",
        "followUpDate": "2026-03-15T14:00:00Z",
        "reason": "Check on persistent headache",
    }
