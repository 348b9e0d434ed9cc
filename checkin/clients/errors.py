"""Upstream failures that tools report back to the caller instead of raising."""

from typing import Any


class UpstreamError(Exception):
    """An external API answered, but refused or failed the request."""

    def __init__(self, message: str, details: Any = None) -> None:
        super().__init__(message)
        self.details = details


class SheetsAuthError(UpstreamError):
    pass


class SheetsAppendError(UpstreamError):
    pass


class VapiError(UpstreamError):
    def __init__(self, message: str, status_code: int, details: Any = None) -> None:
        super().__init__(message, details)
        self.status_code = status_code
