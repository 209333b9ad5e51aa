# /tests/test_aggregator.py

import asyncio
import unittest
from unittest.mock import AsyncMock, MagicMock
import sys
import os

# Add root directory to path to allow imports from 'discovery'
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from discovery.aggregator import ResourceAggregator
from discovery.ranker import ResourceRanker
from discovery.strategies import CuratedFallbackStrategy, DiscoveryStrategy
from discovery.urls import normalize_url
from pathway.errors import DiscoveryStrategyError, ValidationTimeoutError
from pathway.models import CandidateResource


def resource(title, url, **kwargs):
    return CandidateResource(title=title, url=url, **kwargs)


class FakeStrategy(DiscoveryStrategy):
    def __init__(self, name, candidates=None, delay=0.0, error=None, timeout=1.0):
        super().__init__(timeout)
        self.name = name
        self.candidates = candidates or []
        self.delay = delay
        self.error = error

    async def find(self, skill_name):
        await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        return list(self.candidates)


class TestResourceAggregatorMerge(unittest.IsolatedAsyncioTestCase):

    async def test_merge_follows_strategy_order_and_first_seen_wins(self):
        # --- Arrange ---
        # The first strategy finishes last; its candidates must still come first.
        slow = FakeStrategy("slow", [
            resource("A from slow", "https://www.example.org/a"),
            resource("B", "https://example.org/b"),
        ], delay=0.05)
        fast = FakeStrategy("fast", [
            resource("A from fast", "https://example.org/a/?utm_source=x"),
            resource("C", "https://example.org/c"),
        ])
        aggregator = ResourceAggregator([slow, fast], curated=None, checker=None, min_viable=3)

        # --- Act ---
        candidates = await aggregator.discover("Anything")

        # --- Assert ---
        self.assertEqual([c.title for c in candidates], ["A from slow", "B", "C"])

    async def test_never_returns_duplicate_normalized_urls(self):
        strategies = [
            FakeStrategy("one", [resource("x", "https://www.coursera.org/learn/ai-for-everyone")]),
            FakeStrategy("two", [resource("y", "HTTPS://coursera.org/learn/ai-for-everyone/#top")]),
        ]
        aggregator = ResourceAggregator(strategies, curated=CuratedFallbackStrategy(), checker=None, min_viable=3)

        candidates = await aggregator.discover("AI Tools Proficiency")

        keys = [normalize_url(c.url) for c in candidates]
        self.assertEqual(len(keys), len(set(keys)))
        self.assertEqual(candidates[0].title, "x")

    async def test_failing_strategy_does_not_abort_discovery(self):
        strategies = [
            FakeStrategy("broken", error=DiscoveryStrategyError("bad response")),
            FakeStrategy("crashing", error=RuntimeError("unexpected")),
            FakeStrategy("slow", [resource("late", "https://example.org/late")], delay=1.0, timeout=0.05),
            FakeStrategy("good", [resource(f"r{i}", f"https://example.org/{i}") for i in range(3)]),
        ]
        aggregator = ResourceAggregator(strategies, curated=None, checker=None, min_viable=3)

        candidates = await aggregator.discover("Prompt Engineering")
        self.assertEqual([c.title for c in candidates], ["r0", "r1", "r2"])

    async def test_all_strategies_failing_falls_back_to_curated(self):
        strategies = [
            FakeStrategy("broken", error=DiscoveryStrategyError("no key")),
            FakeStrategy("slow", delay=1.0, timeout=0.05),
        ]
        aggregator = ResourceAggregator(strategies, curated=CuratedFallbackStrategy(), checker=None, min_viable=3)

        candidates = await aggregator.discover("Prompt Engineering")
        ranked = ResourceRanker().rank(candidates, "Prompt Engineering", limit=3)

        self.assertGreaterEqual(len(candidates), 1)
        self.assertTrue(all(c.verified for c in candidates))
        self.assertTrue(ranked)
        ranker = ResourceRanker()
        scores = [ranker.score(c, "Prompt Engineering") for c in ranked]
        self.assertEqual(scores, sorted(scores, reverse=True))

    async def test_curated_not_merged_when_enough_candidates(self):
        strategies = [FakeStrategy("good", [resource(f"r{i}", f"https://example.org/{i}") for i in range(3)])]
        curated = MagicMock(spec=CuratedFallbackStrategy)
        curated.run = AsyncMock()
        aggregator = ResourceAggregator(strategies, curated=curated, checker=None, min_viable=3)

        candidates = await aggregator.discover("Prompt Engineering")

        self.assertEqual(len(candidates), 3)
        curated.run.assert_not_awaited()

    async def test_offline_synthesized_candidates_stay_unverified(self):
        strategies = [FakeStrategy("synth", [resource("s", "https://example.org/s")])]
        aggregator = ResourceAggregator(strategies, curated=CuratedFallbackStrategy(), checker=None, min_viable=3)

        candidates = await aggregator.discover("Prompt Engineering")

        self.assertFalse(candidates[0].verified)
        self.assertTrue(all(c.verified for c in candidates[1:]))


class TestResourceAggregatorValidation(unittest.IsolatedAsyncioTestCase):

    async def test_only_reachable_candidates_survive(self):
        # --- Arrange ---
        strategies = [FakeStrategy("live", [
            resource("ok", "https://example.org/ok"),
            resource("dead", "https://example.org/dead"),
            resource("slow", "https://example.org/slow"),
            resource("error", "https://example.org/error"),
        ])]
        checker = MagicMock()
        checker.check_many = AsyncMock(return_value=[
            True, False, ValidationTimeoutError("https://example.org/slow", 5), RuntimeError("boom"),
        ])
        aggregator = ResourceAggregator(strategies, curated=None, checker=checker, min_viable=1, validation_timeout=5)

        # --- Act ---
        candidates = await aggregator.discover("Anything")

        # --- Assert ---
        self.assertEqual([c.title for c in candidates], ["ok"])
        self.assertTrue(candidates[0].verified)
        checker.check_many.assert_awaited_once()
        self.assertEqual(checker.check_many.await_args.args[1], 5)

    async def test_curated_tops_up_after_validation_losses(self):
        strategies = [FakeStrategy("live", [
            resource(f"r{i}", f"https://example.org/{i}") for i in range(3)
        ])]

        async def reachable(urls, timeout):
            return ["example.org" not in url for url in urls]

        checker = MagicMock()
        checker.check_many = AsyncMock(side_effect=reachable)
        aggregator = ResourceAggregator(strategies, curated=CuratedFallbackStrategy(), checker=checker, min_viable=3)

        candidates = await aggregator.discover("Prompt Engineering")

        self.assertEqual(checker.check_many.await_count, 2)
        self.assertEqual(len(candidates), 3)
        self.assertTrue(all(c.verified for c in candidates))
        self.assertTrue(all("example.org" not in c.url for c in candidates))

    async def test_curated_is_validated_like_everything_else(self):
        checker = MagicMock()
        checker.check_many = AsyncMock(side_effect=lambda urls, timeout: [False] * len(urls))
        aggregator = ResourceAggregator([], curated=CuratedFallbackStrategy(), checker=checker, min_viable=3)

        candidates = await aggregator.discover("Prompt Engineering")

        self.assertEqual(candidates, [])
        checker.check_many.assert_awaited_once()


if __name__ == '__main__':
    unittest.main()
