# /discovery/aggregator.py

import asyncio
from functools import reduce
from typing import List, Optional, Sequence, Set, Tuple

from discovery.providers import UrlReachabilityChecker
from discovery.strategies import CuratedFallbackStrategy, DiscoveryStrategy, StrategyResult
from discovery.urls import is_http_url, normalize_url
from pathway.config import settings
from pathway.errors import ValidationTimeoutError
from pathway.logger import get_logger
from pathway.models import CandidateResource

logger = get_logger(__name__)

# Accumulator of the merge fold: admitted candidates and their normalized URLs.
Merged = Tuple[List[CandidateResource], Set[str]]


class ResourceAggregator:
    """
    Collects candidate resources for one skill from several strategies.

    Live strategies run concurrently, each bounded by its own timeout, and are
    merged in the order they were given regardless of which finishes first.
    Candidates are deduplicated by normalized URL (first seen wins). The curated
    table tops the list up whenever fewer than `min_viable` candidates survive.
    """

    def __init__(
        self,
        strategies: Sequence[DiscoveryStrategy],
        curated: Optional[CuratedFallbackStrategy] = None,
        checker: Optional[UrlReachabilityChecker] = None,
        min_viable: Optional[int] = None,
        validation_timeout: Optional[float] = None,
    ):
        self.strategies = list(strategies)
        self.curated = curated
        self.checker = checker
        self.min_viable = settings.MIN_VIABLE_RESOURCES if min_viable is None else min_viable
        self.validation_timeout = settings.URL_VALIDATION_TIMEOUT if validation_timeout is None else validation_timeout

    async def discover(self, skill_name: str) -> List[CandidateResource]:
        results = await asyncio.gather(*(strategy.run(skill_name) for strategy in self.strategies))
        candidates, seen = reduce(self._merge, results, ([], set()))

        curated_result: Optional[StrategyResult] = None
        if len(candidates) < self.min_viable and self.curated is not None:
            curated_result = await self.curated.run(skill_name)
            candidates, seen = self._merge((candidates, seen), self._mark_curated(curated_result))

        if self.checker is None:
            logger.info(f"Discovered {len(candidates)} unvalidated resource(s) for '{skill_name}'")
            return candidates

        candidates = await self._validate(candidates)

        # Curated entries already merged above were checked with the rest.
        if len(candidates) < self.min_viable and self.curated is not None and curated_result is None:
            curated_result = await self.curated.run(skill_name)
            fresh, _ = self._merge(([], seen), curated_result)
            candidates.extend(await self._validate(fresh))

        logger.info(f"Discovered {len(candidates)} validated resource(s) for '{skill_name}'")
        return candidates

    @staticmethod
    def _merge(acc: Merged, result: StrategyResult) -> Merged:
        candidates, seen = acc
        if not result.ok:
            return acc
        for candidate in result.candidates:
            if not is_http_url(candidate.url):
                logger.info("Dropping candidate with invalid URL", extra={"url": candidate.url})
                continue
            key = normalize_url(candidate.url)
            if key in seen:
                continue
            seen.add(key)
            candidates.append(candidate)
        return candidates, seen

    def _mark_curated(self, result: StrategyResult) -> StrategyResult:
        # Without a checker curated entries are trusted as-is.
        if self.checker is not None or not result.ok:
            return result
        verified = [c.model_copy(update={"verified": True}) for c in result.candidates]
        return StrategyResult.success(result.strategy, verified)

    async def _validate(self, candidates: List[CandidateResource]) -> List[CandidateResource]:
        if not candidates:
            return []
        outcomes = await self.checker.check_many([c.url for c in candidates], self.validation_timeout)

        kept = []
        for candidate, outcome in zip(candidates, outcomes):
            if outcome is True:
                kept.append(candidate.model_copy(update={"verified": True}))
            elif isinstance(outcome, ValidationTimeoutError):
                logger.warning(f"Dropping resource after validation timeout: {outcome}")
            elif isinstance(outcome, BaseException):
                logger.warning(f"Dropping resource, validation raised: {outcome!r}", extra={"url": candidate.url})
            else:
                logger.info("Dropping unreachable resource", extra={"url": candidate.url})
        return kept
