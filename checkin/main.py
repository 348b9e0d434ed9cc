"""Check-in webhook FastAPI application with lifespan-managed clients."""

import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from checkin.clients.sheets import SheetsClient
from checkin.clients.vapi import VapiClient
from checkin.config import settings
from checkin.middleware.request_timer import RequestTimerMiddleware
from checkin.routes.health import router as health_router
from checkin.routes.tools import router as tools_router
from checkin.tools import followup as followup_tool
from checkin.tools import health_status as health_status_tool

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create API clients and inject them into the tool modules."""
    sheets = SheetsClient(settings)
    vapi = VapiClient(settings)

    health_status_tool.set_client(sheets)
    followup_tool.set_client(vapi, settings.vapi_phone_number_id)

    logger.info("Check-in webhook started, tools ready")
    yield

    await sheets.close()
    await vapi.close()
    logger.info("Check-in webhook shutdown, clients closed")


app = FastAPI(title="Health Check-In Tool Webhook", lifespan=lifespan)

app.add_middleware(RequestTimerMiddleware)

app.include_router(health_router)
app.include_router(tools_router)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Vapi expects {"error": ...} rather than FastAPI's {"detail": ...}."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


def run() -> None:
    """Serve the webhook; exits with status 1 when credentials are missing."""
    missing = settings.missing_credentials()
    if missing:
        logger.error("Missing required configuration: %s", ", ".join(missing))
        sys.exit(1)
    logger.info("Tool webhook server running on port %d", settings.port)
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
