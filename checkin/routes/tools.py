"""Tool-call webhook: runs each call in a Vapi batch through the registered tool."""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse
from langchain_core.tools import BaseTool

from checkin.schemas.tools import (
    ToolCall,
    ToolResult,
    ToolWebhookRequest,
    ToolWebhookResponse,
)
from checkin.tools import get_tool

router = APIRouter()
logger = logging.getLogger(__name__)


def normalize_arguments(tool: BaseTool, call: ToolCall) -> dict[str, Any]:
    """Decode the call's arguments and map camelCase wire names to tool parameters."""
    decoded = call.decoded_arguments()
    return tool.args_schema.model_validate(decoded).model_dump()


@router.post("/tool/{tool_name}", response_model=ToolWebhookResponse)
async def dispatch_tool_calls(tool_name: str, req: ToolWebhookRequest):
    """Execute a batch of tool calls sequentially.

    Fail-fast: the first call that raises aborts the batch with a 500 and
    results already computed for earlier calls are discarded.
    """
    tool = get_tool(tool_name)
    if tool is None:
        raise HTTPException(status_code=404, detail=f"Unknown tool: {tool_name}")

    results: list[ToolResult] = []
    for raw_call in req.tool_calls():
        call_id = raw_call.get("id") if isinstance(raw_call, dict) else None
        try:
            call = ToolCall.model_validate(raw_call)
            params = normalize_arguments(tool, call)
            if call.name and call.name != tool_name:
                logger.warning(
                    "[%s] tool call %s names %s; routing by path", tool_name, call.id, call.name
                )
            logger.info("[%s] running tool call %s", tool_name, call.id)
            output = await tool.ainvoke(params)
        except Exception as e:
            logger.exception("[%s] tool call %s failed", tool_name, call_id)
            return JSONResponse(
                status_code=500, content={"error": str(e), "toolCallId": call_id}
            )
        results.append(ToolResult(tool_call_id=call.id, result=output["result"]))

    return ToolWebhookResponse(results=results)
