from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from .schema import validate_against_schema


@dataclass(frozen=True)
class ToolDescriptor:
    name: str
    display_name: str
    description: str
    parameter_schema: dict[str, Any] = field(default_factory=dict)
    icon: str = "tool"

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "display_name": self.display_name,
            "description": self.description,
            "parameter_schema": self.parameter_schema,
            "icon": self.icon,
        }


@dataclass(frozen=True)
class ToolResult:
    llm_content: str
    return_display: str
    sources: list[dict[str, Any]] | None = None


class Tool(ABC):
    """Common contract for every tool the orchestrator can dispatch by name.

    ``execute`` must resolve to a ``ToolResult`` for every input; failures are
    reported through the result text instead of being raised.
    """

    descriptor: ToolDescriptor

    @property
    def name(self) -> str:
        return self.descriptor.name

    def describe(self) -> ToolDescriptor:
        return self.descriptor

    def validate_params(self, params: Any) -> str | None:
        return validate_against_schema(self.descriptor.parameter_schema, params)

    @abstractmethod
    def get_description(self, params: Any) -> str:
        raise NotImplementedError

    @abstractmethod
    async def execute(
        self, params: Any, signal: asyncio.Event | None = None
    ) -> ToolResult:
        raise NotImplementedError


def error_message(exc: BaseException) -> str:
    message = str(exc).strip()
    return message or type(exc).__name__
