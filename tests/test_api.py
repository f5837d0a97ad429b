import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from agenttools import main
from agenttools.tools.registry import ToolRegistry
from agenttools.tools.web_search import WebSearchProvider, WebSearchTool


class _FakeProvider(WebSearchProvider):
    name = "duckduckgo"
    label = "DuckDuckGo"

    async def search(self, keywords, *, safesearch, max_results):
        if keywords == "error search":
            raise RuntimeError("Network error")
        if keywords == "empty search":
            return []
        return [{"title": "Doc", "href": "https://example.com/doc", "body": "About docs"}]


class ApiTests(unittest.TestCase):
    def setUp(self):
        registry = ToolRegistry()
        registry.register(WebSearchTool(_FakeProvider()))
        patcher = patch.object(main, "tool_registry", registry)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.client = TestClient(main.app)

    def test_health(self):
        self.assertEqual(self.client.get("/health").json(), {"status": "ok"})

    def test_lists_descriptors(self):
        body = self.client.get("/tools").json()
        self.assertEqual(len(body), 1)
        self.assertEqual(body[0]["name"], "duckduckgo_web_search")
        self.assertEqual(body[0]["display_name"], "DuckDuckGo Search")
        self.assertEqual(body[0]["parameter_schema"]["required"], ["query"])

    def test_invoke_success(self):
        res = self.client.post(
            "/tools/duckduckgo_web_search/invoke", json={"params": {"query": "docs"}}
        )
        self.assertEqual(res.status_code, 200)
        body = res.json()
        self.assertEqual(body["return_display"], 'Search results for "docs" returned.')
        self.assertEqual(body["sources"][0]["href"], "https://example.com/doc")
        self.assertEqual(body["description"], 'Searching the web with DuckDuckGo for: "docs"')

    def test_invoke_empty_results_has_no_sources(self):
        res = self.client.post(
            "/tools/duckduckgo_web_search/invoke", json={"params": {"query": "empty search"}}
        )
        self.assertEqual(res.json()["return_display"], "No information found.")
        self.assertIsNone(res.json()["sources"])

    def test_provider_error_is_still_200(self):
        with self.assertLogs("agenttools.tools.web_search", level="ERROR"):
            res = self.client.post(
                "/tools/duckduckgo_web_search/invoke",
                json={"params": {"query": "error search"}},
            )
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()["return_display"], "Error performing DuckDuckGo web search.")

    def test_invalid_params_is_still_200(self):
        res = self.client.post("/tools/duckduckgo_web_search/invoke", json={"params": {}})
        self.assertEqual(res.status_code, 200)
        self.assertIn("query", res.json()["return_display"])

    def test_unknown_tool_is_404(self):
        res = self.client.post("/tools/nope/invoke", json={"params": {}})
        self.assertEqual(res.status_code, 404)


if __name__ == "__main__":
    unittest.main()
