from __future__ import annotations

import asyncio
import logging
from typing import Any

from duckduckgo_search import DDGS

from agenttools.config import settings
from .base import Tool, ToolDescriptor, ToolResult, error_message

logger = logging.getLogger(__name__)

MAX_RESULTS = 5
SAFESEARCH = "off"


class SearchCancelledError(RuntimeError):
    pass


class WebSearchProvider:
    name = "unknown"
    label = "Unknown"

    async def search(
        self, keywords: str, *, safesearch: str, max_results: int
    ) -> list[dict[str, Any]]:
        raise NotImplementedError


class DuckDuckGoProvider(WebSearchProvider):
    name = "duckduckgo"
    label = "DuckDuckGo"

    def __init__(
        self,
        *,
        timeout_seconds: int | None = None,
        proxy: str | None = None,
        region: str | None = None,
    ) -> None:
        self.timeout_seconds = max(1, timeout_seconds or settings.duckduckgo_timeout_seconds)
        self.proxy = proxy if proxy is not None else settings.duckduckgo_proxy
        self.region = region or settings.duckduckgo_region

    async def search(
        self, keywords: str, *, safesearch: str, max_results: int
    ) -> list[dict[str, Any]]:
        # DDGS is blocking; keep the event loop free while it runs.
        return await asyncio.to_thread(
            self._text_search, keywords, safesearch, max_results
        )

    def _text_search(
        self, keywords: str, safesearch: str, max_results: int
    ) -> list[dict[str, Any]]:
        with DDGS(proxy=self.proxy, timeout=self.timeout_seconds) as ddgs:
            results = ddgs.text(
                keywords,
                region=self.region,
                safesearch=safesearch,
                max_results=max_results,
            )
            return list(results or [])


class WebSearchTool(Tool):
    def __init__(self, provider: WebSearchProvider | None = None) -> None:
        self.provider = provider or DuckDuckGoProvider()
        label = self.provider.label
        self.descriptor = ToolDescriptor(
            name=f"{self.provider.name}_web_search",
            display_name=f"{label} Search",
            description=(
                f"Performs a web search using {label} and returns the results. "
                "This tool is useful for finding information on the internet based on a query."
            ),
            parameter_schema={
                "type": "object",
                "properties": {
                    "query": {
                        "type": "string",
                        "description": "The search query to find information on the web.",
                    },
                },
                "required": ["query"],
            },
            icon="globe",
        )

    def validate_params(self, params: Any) -> str | None:
        error = super().validate_params(params)
        if error:
            return error
        if not params["query"].strip():
            return "The 'query' parameter cannot be empty."
        return None

    def get_description(self, params: Any) -> str:
        query = params.get("query", "") if isinstance(params, dict) else ""
        return f'Searching the web with {self.provider.label} for: "{query}"'

    async def execute(
        self, params: Any, signal: asyncio.Event | None = None
    ) -> ToolResult:
        validation_error = self.validate_params(params)
        if validation_error:
            return ToolResult(
                llm_content=f"Error: Invalid parameters provided. Reason: {validation_error}",
                return_display=validation_error,
            )

        query: str = params["query"]
        label = self.provider.label
        try:
            if signal is not None and signal.is_set():
                raise SearchCancelledError("Search was cancelled")
            results = await self.provider.search(
                query, safesearch=SAFESEARCH, max_results=MAX_RESULTS
            )

            if not results:
                return ToolResult(
                    llm_content=f'No search results found for query: "{query}"',
                    return_display="No information found.",
                )

            return ToolResult(
                llm_content=format_results(label, query, results),
                return_display=f'Search results for "{query}" returned.',
                sources=results,
            )
        except Exception as exc:
            logger.error(
                "Error during %s web search for query %r", label, query, exc_info=exc
            )
            return ToolResult(
                llm_content=(
                    f'Error: Error during {label} web search for query "{query}": '
                    f"{error_message(exc)}"
                ),
                return_display=f"Error performing {label} web search.",
            )


def format_results(label: str, query: str, results: list[dict[str, Any]]) -> str:
    text = f'{label} search results for "{query}":\n\n'
    source_lines: list[str] = []
    for index, result in enumerate(results, start=1):
        title = result.get("title") or "Untitled"
        url = result.get("href") or "No URL"
        snippet = result.get("body") or "No description"
        text += f"{index}. {title}\n"
        text += f"   URL: {url}\n"
        text += f"   Snippet: {snippet}\n\n"
        source_lines.append(f"[{index}] {title} ({url})")
    return text + "\nSources:\n" + "\n".join(source_lines)
