"""Shared tool utilities: upstream error handler decorator."""

import functools
import logging
from typing import Any, Callable

from checkin.clients.errors import UpstreamError

logger = logging.getLogger(__name__)


def tool_error_handler(func: Callable) -> Callable:
    """Decorator that turns upstream refusals into error results the caller can speak.

    Only UpstreamError is absorbed. Transport and programming errors propagate
    so the dispatcher fails the batch.
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> dict[str, Any]:
        try:
            result: dict[str, Any] = await func(*args, **kwargs)
            return result
        except UpstreamError as e:
            logger.warning("Tool %s upstream failure: %s (%s)", func.__name__, e, e.details)
            return {
                "status": "error",
                "error": str(e),
                "result": f"Sorry, there was an error: {e}.",
            }

    return wrapper
