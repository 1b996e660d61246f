import pytest
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from canvas_kit.tools.tool import Tool, ToolCall


class LookupInput(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    project_id: str


def test_tool_call_rejects_extra_fields() -> None:
    with pytest.raises(ValidationError):
        ToolCall(tool_name="parse_research", arguments={}, extra_field="bad")


def test_to_schema_uses_aliases() -> None:
    tool = Tool(
        name="lookup",
        description="Look up a project",
        input_schema=LookupInput,
        handler=lambda args: args.project_id,
    )

    schema = tool.to_schema()

    assert schema["name"] == "lookup"
    assert schema["description"] == "Look up a project"
    assert "projectId" in schema["inputSchema"]["properties"]
    assert schema["inputSchema"]["required"] == ["projectId"]
