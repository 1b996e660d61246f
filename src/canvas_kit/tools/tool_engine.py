import inspect
import logging
from time import monotonic
from typing import Any

from canvas_kit.observability import names
from canvas_kit.observability.base import MetricsHook, NoOpMetricsHook

from .tool import ToolCall
from .tool_registry import ToolRegistry

logger = logging.getLogger(__name__)


class ToolEngine:
    """Validates tool-call arguments and runs the matching handler."""

    def __init__(
        self,
        tool_registry: ToolRegistry,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.tool_registry = tool_registry
        self.metrics_hook = metrics_hook

    async def call_tool(self, tool_call: ToolCall) -> Any:
        """Run one tool call.

        Raises:
            KeyError: If the tool is not registered.
            pydantic.ValidationError: If the arguments do not fit the schema.
        """
        logger.debug("Calling tool: %s", tool_call.tool_name)
        start = monotonic()
        tool = self.tool_registry.get(tool_call.tool_name)
        validated_args = tool.input_schema.model_validate(tool_call.arguments)

        result = tool.handler(validated_args)
        if inspect.isawaitable(result):
            result = await result

        elapsed_ms = 1000 * (monotonic() - start)
        labels = {"tool": tool_call.tool_name}
        self.metrics_hook.record_latency(names.TOOL_CALL_DURATION, elapsed_ms, labels)
        self.metrics_hook.increment(names.TOOL_CALLS_TOTAL, labels=labels)
        return result
