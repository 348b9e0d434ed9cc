"""Unit tests for the LangChain tool registry."""

from checkin.tools import ALL_TOOLS, TOOL_REGISTRY, get_tool


def test_all_tools_count():
    assert len(ALL_TOOLS) == 2


def test_registry_keys_match_vapi_tool_names():
    assert set(TOOL_REGISTRY) == {"log_health_status", "schedule_followup"}


def test_all_tools_have_args_schema_and_description():
    for t in ALL_TOOLS:
        assert t.args_schema is not None
        assert t.description


def test_get_tool_unknown_returns_none():
    assert get_tool("send_alert") is None
    assert get_tool("log_health_status") is TOOL_REGISTRY["log_health_status"]
