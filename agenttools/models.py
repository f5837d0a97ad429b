from typing import Any

from pydantic import BaseModel, Field


class ToolDescriptorResponse(BaseModel):
    name: str
    display_name: str
    description: str
    parameter_schema: dict[str, Any] = Field(default_factory=dict)
    icon: str


class ToolInvokeRequest(BaseModel):
    params: Any = Field(default_factory=dict)


class ToolInvokeResponse(BaseModel):
    tool_name: str
    description: str
    llm_content: str
    return_display: str
    sources: list[dict[str, Any]] | None = None
