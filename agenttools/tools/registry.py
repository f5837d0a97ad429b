from __future__ import annotations

import logging

from .base import Tool, ToolDescriptor

logger = logging.getLogger(__name__)


class ToolRegistry:
    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        name = tool.name
        if name in self._tools:
            raise ValueError(f"Tool '{name}' is already registered.")
        self._tools[name] = tool
        logger.debug("Registered tool %s (%s)", name, tool.descriptor.display_name)

    def get(self, name: str) -> Tool:
        try:
            return self._tools[name]
        except KeyError as exc:
            raise ValueError(f"Tool '{name}' is not registered.") from exc

    def list_tools(self) -> list[str]:
        return sorted(self._tools.keys())

    def descriptors(self) -> list[ToolDescriptor]:
        return [self._tools[name].describe() for name in self.list_tools()]

    def render_for_prompt(self) -> str:
        lines = ["TOOL REGISTRY"]
        for descriptor in self.descriptors():
            lines.append(f"- {descriptor.name}: {descriptor.description}")
            schema = descriptor.parameter_schema
            properties = schema.get("properties")
            required = schema.get("required")
            required_fields = set(required) if isinstance(required, list) else set()
            if isinstance(properties, dict):
                for arg_name, arg_spec in properties.items():
                    if not isinstance(arg_name, str) or not isinstance(arg_spec, dict):
                        continue
                    arg_type = str(arg_spec.get("type") or "any")
                    if arg_name in required_fields:
                        arg_type += ", required"
                    arg_desc = str(arg_spec.get("description") or "").strip()
                    lines.append(f"  - {arg_name} ({arg_type}): {arg_desc}")
        return "\n".join(lines)
