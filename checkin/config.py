"""Check-in webhook configuration: loaded from environment variables / .env file."""

from pydantic_settings import BaseSettings

# Required for the webhook server to serve both tools.
REQUIRED_SERVER_CREDENTIALS = (
    "vapi_api_key",
    "vapi_phone_number_id",
    "google_client_email",
    "google_private_key",
    "spreadsheet_id",
)


class Settings(BaseSettings):
    # Vapi
    vapi_api_key: str = ""
    vapi_base_url: str = "https://api.vapi.ai"
    vapi_phone_number_id: str = ""
    vapi_assistant_id: str = ""

    # Google Sheets (service account)
    google_client_email: str = ""
    google_private_key: str = ""
    spreadsheet_id: str = ""
    sheet_range: str = "Sheet1"

    # Webhook server
    public_base_url: str = ""
    port: int = 3000
    http_timeout_seconds: float = 30.0

    model_config = {"env_file": ".env", "extra": "ignore"}

    def missing_credentials(self) -> list[str]:
        """Names of required server credentials that are empty."""
        return [
            name.upper()
            for name in REQUIRED_SERVER_CREDENTIALS
            if not getattr(self, name)
        ]


settings = Settings()
