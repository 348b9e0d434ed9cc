"""Request/response schemas for the Vapi tool-call webhook."""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class VapiModel(BaseModel):
    """Vapi speaks camelCase on the wire; Python code uses snake_case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ToolFunction(VapiModel):
    name: str = ""
    arguments: dict[str, Any] | str = Field(default_factory=dict)


class ToolCall(VapiModel):
    """One entry of message.toolCallList.

    Vapi nests the arguments under `function`; the flattened
    `{id, functionName, arguments}` shape is accepted as well.
    """

    # Echoed back unchanged, whatever JSON scalar Vapi used
    id: str | int
    function: ToolFunction | None = None
    function_name: str | None = None
    arguments: dict[str, Any] | str | None = None

    @property
    def name(self) -> str:
        if self.function is not None and self.function.name:
            return self.function.name
        return self.function_name or ""

    def decoded_arguments(self) -> dict[str, Any]:
        """Resolve raw JSON or already-decoded arguments into a mapping."""
        raw = self.function.arguments if self.function is not None else self.arguments
        if raw is None:
            return {}
        if isinstance(raw, str):
            raw = json.loads(raw) if raw.strip() else {}
        if not isinstance(raw, dict):
            raise ValueError(
                f"Tool call {self.id} arguments must be an object, got {type(raw).__name__}"
            )
        return raw


class ToolCallMessage(VapiModel):
    type: str = "tool-calls"
    # Kept raw so one malformed call fails inside the dispatch loop
    tool_call_list: list[Any] | None = None


class ToolWebhookRequest(VapiModel):
    message: ToolCallMessage | None = None

    def tool_calls(self) -> list[Any]:
        if self.message is None or self.message.tool_call_list is None:
            return []
        return self.message.tool_call_list


class ToolResult(VapiModel):
    tool_call_id: str | int
    result: str


class ToolWebhookResponse(VapiModel):
    results: list[ToolResult] = []


class HealthResponse(BaseModel):
    status: str = "ok"
