# /tests/test_providers.py

import unittest
from unittest.mock import patch, AsyncMock, MagicMock
import sys
import os

import httpx

# Add root directory to path to allow imports from 'discovery'
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from discovery.providers import GeminiResourceSearchProvider, HttpxReachabilityChecker
from pathway.errors import DiscoveryStrategyError, ValidationTimeoutError


def handler(request: httpx.Request) -> httpx.Response:
    path = request.url.path
    if path == "/ok":
        return httpx.Response(200)
    if path == "/missing":
        return httpx.Response(404)
    if path == "/no-head":
        return httpx.Response(405 if request.method == "HEAD" else 200)
    if path == "/moved":
        return httpx.Response(301, headers={"Location": "https://example.org/ok"})
    if path == "/slow":
        raise httpx.ReadTimeout("timed out", request=request)
    if path == "/refused":
        raise httpx.ConnectError("connection refused", request=request)
    return httpx.Response(500)


class TestHttpxReachabilityChecker(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        self.checker = HttpxReachabilityChecker(transport=httpx.MockTransport(handler))

    async def test_status_codes(self):
        self.assertTrue(await self.checker.check("https://example.org/ok", 5))
        self.assertFalse(await self.checker.check("https://example.org/missing", 5))
        self.assertFalse(await self.checker.check("https://example.org/broken", 5))

    async def test_get_retry_when_head_not_allowed(self):
        self.assertTrue(await self.checker.check("https://example.org/no-head", 5))

    async def test_redirects_are_followed(self):
        self.assertTrue(await self.checker.check("https://example.org/moved", 5))

    async def test_timeout_raises(self):
        with self.assertRaises(ValidationTimeoutError):
            await self.checker.check("https://example.org/slow", 5)

    async def test_connection_error_is_unreachable(self):
        self.assertFalse(await self.checker.check("https://example.org/refused", 5))

    async def test_check_many_keeps_order_and_exceptions(self):
        results = await self.checker.check_many(
            ["https://example.org/ok", "https://example.org/missing", "https://example.org/slow"], 5,
        )
        self.assertEqual(results[:2], [True, False])
        self.assertIsInstance(results[2], ValidationTimeoutError)


class TestGeminiResourceSearchProvider(unittest.IsolatedAsyncioTestCase):

    async def test_missing_api_key(self):
        provider = GeminiResourceSearchProvider(model="test-model", api_key="")
        with self.assertRaises(DiscoveryStrategyError):
            await provider.search("Find courses")

    @patch('discovery.providers.ChatPromptTemplate')
    @patch('discovery.providers.ChatGoogleGenerativeAI')
    async def test_search_returns_model_text(self, mock_chat_google, mock_prompt_template):
        # --- Arrange ---
        mock_chain = MagicMock()
        mock_chain.ainvoke = AsyncMock(return_value='[{"title": "T", "url": "https://example.org"}]')
        mock_prompt_template.from_messages.return_value.__or__.return_value.__or__.return_value = mock_chain
        provider = GeminiResourceSearchProvider(model="test-model", api_key="key")

        # --- Act ---
        response = await provider.search("Find courses")

        # --- Assert ---
        self.assertIn('"title": "T"', response)
        mock_chain.ainvoke.assert_awaited_once_with({"request": "Find courses"})
        mock_chat_google.assert_called_once_with(model="test-model", temperature=0.1, google_api_key="key")

    @patch('discovery.providers.ChatPromptTemplate')
    @patch('discovery.providers.ChatGoogleGenerativeAI')
    async def test_model_errors_become_strategy_errors(self, mock_chat_google, mock_prompt_template):
        mock_chain = MagicMock()
        mock_chain.ainvoke = AsyncMock(side_effect=RuntimeError("quota exceeded"))
        mock_prompt_template.from_messages.return_value.__or__.return_value.__or__.return_value = mock_chain
        provider = GeminiResourceSearchProvider(model="test-model", api_key="key")

        with self.assertRaises(DiscoveryStrategyError):
            await provider.search("Find courses")


if __name__ == '__main__':
    unittest.main()
