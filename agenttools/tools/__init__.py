from .base import Tool, ToolDescriptor, ToolResult, error_message
from .registry import ToolRegistry
from .schema import validate_against_schema
from .web_search import (
    DuckDuckGoProvider,
    SearchCancelledError,
    WebSearchProvider,
    WebSearchTool,
)

__all__ = [
    "DuckDuckGoProvider",
    "SearchCancelledError",
    "Tool",
    "ToolDescriptor",
    "ToolRegistry",
    "ToolResult",
    "WebSearchProvider",
    "WebSearchTool",
    "error_message",
    "validate_against_schema",
]
