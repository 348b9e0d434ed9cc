"""Unit tests for the application lifespan and server entry point."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

import checkin.main as main_module
import checkin.tools.followup as followup_module
import checkin.tools.health_status as health_status_module
from checkin.clients.sheets import SheetsClient
from checkin.clients.vapi import VapiClient
from checkin.config import Settings


def test_run_exits_when_credentials_missing(monkeypatch):
    monkeypatch.setattr(
        main_module, "settings", Settings(_env_file=None, vapi_api_key="", spreadsheet_id="")
    )
    serve = MagicMock()
    monkeypatch.setattr(main_module.uvicorn, "run", serve)

    with pytest.raises(SystemExit) as exc_info:
        main_module.run()

    assert exc_info.value.code == 1
    serve.assert_not_called()


def test_run_serves_on_configured_port(monkeypatch, test_settings):
    test_settings.port = 4321
    monkeypatch.setattr(main_module, "settings", test_settings)
    serve = MagicMock()
    monkeypatch.setattr(main_module.uvicorn, "run", serve)

    main_module.run()

    serve.assert_called_once_with(main_module.app, host="0.0.0.0", port=4321)


def test_lifespan_injects_clients(monkeypatch, test_settings):
    monkeypatch.setattr(main_module, "settings", test_settings)
    monkeypatch.setattr(health_status_module, "_client", None)
    monkeypatch.setattr(followup_module, "_client", None)
    monkeypatch.setattr(followup_module, "_phone_number_id", "")

    with TestClient(main_module.app) as client:
        assert client.get("/health").json() == {"status": "ok"}
        assert isinstance(health_status_module._client, SheetsClient)
        assert isinstance(followup_module._client, VapiClient)
        assert followup_module._phone_number_id == "phone-123"
