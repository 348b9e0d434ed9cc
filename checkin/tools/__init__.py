"""Check-in LangChain tool registry, keyed by the tool name Vapi sends."""

from langchain_core.tools import BaseTool

from checkin.tools.followup import schedule_followup
from checkin.tools.health_status import log_health_status

ALL_TOOLS: list[BaseTool] = [
    log_health_status,
    schedule_followup,
]

TOOL_REGISTRY: dict[str, BaseTool] = {t.name: t for t in ALL_TOOLS}


def get_tool(name: str) -> BaseTool | None:
    return TOOL_REGISTRY.get(name)


__all__ = ["ALL_TOOLS", "TOOL_REGISTRY", "get_tool"]
