from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any

from agenttools.tools.registry import ToolRegistry


@dataclass(frozen=True)
class ToolCall:
    id: str
    name: str
    params: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ExecutedCall:
    id: str
    tool_name: str
    success: bool
    description: str
    llm_content: str
    return_display: str
    sources: list[dict[str, Any]] | None = None
    error: str | None = None


class ToolExecutor:
    def __init__(self, tool_registry: ToolRegistry) -> None:
        self._tool_registry = tool_registry

    async def execute_calls(
        self,
        calls: list[ToolCall],
        signal: asyncio.Event | None = None,
    ) -> list[ExecutedCall]:
        return list(
            await asyncio.gather(*(self._execute_call(call, signal) for call in calls))
        )

    async def _execute_call(
        self, call: ToolCall, signal: asyncio.Event | None
    ) -> ExecutedCall:
        try:
            tool = self._tool_registry.get(call.name)
        except ValueError as exc:
            return ExecutedCall(
                id=call.id,
                tool_name=call.name,
                success=False,
                description="",
                llm_content=f"Error: {exc}",
                return_display=str(exc),
                error=str(exc),
            )

        result = await tool.execute(call.params, signal)
        return ExecutedCall(
            id=call.id,
            tool_name=tool.name,
            success=True,
            description=tool.get_description(call.params),
            llm_content=result.llm_content,
            return_display=result.return_display,
            sources=result.sources,
        )
