from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict


class Tool:
    """A named operation exposed to a calling agent.

    `handler` receives the validated `input_schema` instance and may be sync
    or async.
    """

    def __init__(
        self,
        *,
        name: str,
        description: str,
        input_schema: type[BaseModel],
        handler: Callable,
    ) -> None:
        self.name = name
        self.description = description
        self.input_schema = input_schema
        self.handler = handler

    def to_schema(self) -> dict[str, Any]:
        """Tool listing entry as advertised over a tool-call transport."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema.model_json_schema(by_alias=True),
        }


class ToolCall(BaseModel):
    model_config = ConfigDict(extra="forbid")

    tool_name: str
    arguments: dict[str, Any]
