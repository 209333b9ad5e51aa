# /tests/test_strategies.py

import asyncio
import unittest
from unittest.mock import AsyncMock, MagicMock
import sys
import os

# Add root directory to path to allow imports from 'discovery'
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from discovery.catalog import PROVIDERS
from discovery.strategies import (
    AggregatorSiteStrategy, CuratedFallbackStrategy, IntelligentSearchStrategy, ProviderSearchStrategy,
    StrategyResult, search_terms,
)
from pathway.errors import DiscoveryStrategyError


class TestIntelligentSearchStrategy(unittest.IsolatedAsyncioTestCase):

    async def test_parses_provider_response(self):
        # --- Arrange ---
        provider = MagicMock()
        provider.search = AsyncMock(return_value='[{"title": "Prompting 101", "url": "https://example.org/p"}]')
        strategy = IntelligentSearchStrategy(provider, timeout=1)

        # --- Act ---
        result = await strategy.run("Prompt Engineering")

        # --- Assert ---
        self.assertTrue(result.ok)
        self.assertEqual(result.strategy, "intelligent-search")
        self.assertEqual([c.title for c in result.candidates], ["Prompting 101"])
        prompt = provider.search.await_args.args[0]
        self.assertIn('"Prompt Engineering"', prompt)

    async def test_provider_error_becomes_failed_result(self):
        provider = MagicMock()
        provider.search = AsyncMock(side_effect=DiscoveryStrategyError("no key"))

        result = await IntelligentSearchStrategy(provider, timeout=1).run("Prompt Engineering")

        self.assertFalse(result.ok)
        self.assertEqual(result.candidates, [])
        self.assertIn("no key", result.error)

    async def test_unexpected_exception_becomes_failed_result(self):
        provider = MagicMock()
        provider.search = AsyncMock(side_effect=ConnectionError("boom"))

        result = await IntelligentSearchStrategy(provider, timeout=1).run("Prompt Engineering")
        self.assertFalse(result.ok)

    async def test_timeout_cancels_and_fails(self):
        async def slow_search(prompt):
            await asyncio.sleep(5)
            return []

        provider = MagicMock()
        provider.search = slow_search

        result = await IntelligentSearchStrategy(provider, timeout=0.05).run("Prompt Engineering")

        self.assertFalse(result.ok)
        self.assertIn("timed out", result.error)


class TestSynthesizedStrategies(unittest.IsolatedAsyncioTestCase):

    async def test_provider_search_builds_search_urls_only(self):
        result = await ProviderSearchStrategy(limit=3, timeout=1).run("Prompt Engineering")

        searchable = [p for p in PROVIDERS if p.search_url][:3]
        self.assertEqual(len(result.candidates), 3 * ProviderSearchStrategy.TERMS_PER_PROVIDER)
        self.assertEqual({c.provider for c in result.candidates}, {p.name for p in searchable})
        first = result.candidates[0]
        self.assertEqual(first.url, "https://www.coursera.org/search?query=prompt+engineering")
        self.assertIn("prompt engineering", first.title.lower())

    async def test_provider_search_skips_providers_without_search_endpoint(self):
        no_search = [p for p in PROVIDERS if not p.search_url]
        result = await ProviderSearchStrategy(providers=no_search, limit=5, timeout=1).run("Prompt Engineering")
        self.assertEqual(result.candidates, [])

    async def test_free_providers_produce_free_candidates(self):
        microsoft = [p for p in PROVIDERS if p.name == "Microsoft Learn"]
        result = await ProviderSearchStrategy(providers=microsoft, limit=5, timeout=1).run("Process Automation")
        self.assertTrue(all(c.cost == "free" for c in result.candidates))

    async def test_aggregator_sites(self):
        result = await AggregatorSiteStrategy(timeout=1).run("Data Visualization with AI")

        self.assertEqual([c.provider for c in result.candidates], ["Class Central", "Course Report"])
        self.assertEqual(result.candidates[0].title, "Data Visualization with AI Courses")
        self.assertEqual(
            result.candidates[0].url, "https://www.classcentral.com/search?q=Data+Visualization+with+AI",
        )

    async def test_curated_table(self):
        result = await CuratedFallbackStrategy().run("Prompt Engineering")
        self.assertEqual(len(result.candidates), 3)
        self.assertEqual((await CuratedFallbackStrategy().run("Underwater Basket Weaving")).candidates, [])


class TestSearchTerms(unittest.TestCase):

    def test_variants(self):
        terms = search_terms("AI-Powered Customer Analytics")
        self.assertEqual(terms[0], "ai-powered customer analytics")
        self.assertIn("artificial intelligence-Powered Customer Analytics", terms)
        self.assertIn("AI-Powered Customer analysis", terms)
        self.assertEqual(terms[-1], "AI-Powered Customer Analytics certification")

    def test_strategy_result_constructors(self):
        self.assertTrue(StrategyResult.success("s", []).ok)
        self.assertFalse(StrategyResult.failure("s", "reason").ok)


if __name__ == '__main__':
    unittest.main()
