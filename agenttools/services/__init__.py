from .executor import ExecutedCall, ToolCall, ToolExecutor

__all__ = [
    "ExecutedCall",
    "ToolCall",
    "ToolExecutor",
]
