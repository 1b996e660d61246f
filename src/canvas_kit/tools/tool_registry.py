import logging
from typing import Any

from .tool import Tool

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Named tools in registration order.

    Tool names are unique; the listing served to a calling agent follows
    the order tools were registered in.
    """

    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def register(self, tool: Tool) -> None:
        if tool.name in self._tools:
            logger.error("Tool already registered: %s", tool.name)
            raise ValueError(f"Tool '{tool.name}' already registered")

        self._tools[tool.name] = tool
        logger.debug("Registered tool: %s (%d total)", tool.name, len(self._tools))

    def get(self, name: str) -> Tool:
        tool = self._tools.get(name)
        if tool is None:
            logger.error("Tool not found: %s", name)
            raise KeyError(f"Tool '{name}' not found")
        return tool

    def remove(self, name: str) -> None:
        if self._tools.pop(name, None) is None:
            logger.error("Cannot remove tool, not found: %s", name)
            raise KeyError(f"Tool '{name}' not found")
        logger.debug("Removed tool: %s", name)

    def schemas(self) -> list[dict[str, Any]]:
        """Listing entries for every registered tool."""
        return [tool.to_schema() for tool in self._tools.values()]

    # Defined last: the method name shadows the builtin inside the class body
    def list(self) -> dict[str, Tool]:
        return dict(self._tools)
