from __future__ import annotations

from fastapi import FastAPI, HTTPException

from agenttools.config import settings
from agenttools.logging_config import configure_logging
from agenttools.models import (
    ToolDescriptorResponse,
    ToolInvokeRequest,
    ToolInvokeResponse,
)
from agenttools.tools import ToolRegistry, WebSearchTool

configure_logging(settings.log_level)

app = FastAPI(title="agenttools API", version="0.1.0")


def _build_tool_registry() -> ToolRegistry:
    registry = ToolRegistry()
    registry.register(WebSearchTool())
    return registry


tool_registry = _build_tool_registry()


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/tools", response_model=list[ToolDescriptorResponse])
def list_tools() -> list[ToolDescriptorResponse]:
    return [
        ToolDescriptorResponse(**descriptor.to_dict())
        for descriptor in tool_registry.descriptors()
    ]


@app.post("/tools/{name}/invoke", response_model=ToolInvokeResponse)
async def invoke_tool(name: str, payload: ToolInvokeRequest) -> ToolInvokeResponse:
    try:
        tool = tool_registry.get(name)
    except ValueError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    result = await tool.execute(payload.params)
    return ToolInvokeResponse(
        tool_name=tool.name,
        description=tool.get_description(payload.params),
        llm_content=result.llm_content,
        return_display=result.return_display,
        sources=result.sources,
    )
