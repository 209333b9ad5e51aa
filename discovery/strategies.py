# /discovery/strategies.py

import asyncio
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from urllib.parse import quote_plus

from pydantic import BaseModel, Field

from discovery.catalog import AGGREGATOR_SITES, PROVIDERS, AggregatorSite, LearningProvider, curated_resources
from discovery.parsing import parse_search_response
from discovery.providers import ResourceSearchProvider
from pathway.config import settings
from pathway.errors import DiscoveryStrategyError
from pathway.logger import get_logger
from pathway.models import CandidateResource

logger = get_logger(__name__)


class StrategyResult(BaseModel):
    """Outcome of one strategy run: either candidates or the reason there are none."""
    strategy: str
    candidates: List[CandidateResource] = Field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, strategy: str, candidates: List[CandidateResource]) -> "StrategyResult":
        return cls(strategy=strategy, candidates=candidates)

    @classmethod
    def failure(cls, strategy: str, reason: str) -> "StrategyResult":
        return cls(strategy=strategy, error=reason)


class DiscoveryStrategy(ABC):
    """
    One independent way of finding resources for a skill. Subclasses implement
    `find`; `run` applies the timeout and turns every failure into a failed
    StrategyResult so a single strategy can never abort discovery.
    """
    name: str = "strategy"

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    @abstractmethod
    async def find(self, skill_name: str) -> List[CandidateResource]:
        pass

    async def run(self, skill_name: str) -> StrategyResult:
        try:
            if self.timeout is None:
                candidates = await self.find(skill_name)
            else:
                candidates = await asyncio.wait_for(self.find(skill_name), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.warning(f"Strategy '{self.name}' timed out after {self.timeout}s", extra={"skill": skill_name})
            return StrategyResult.failure(self.name, f"timed out after {self.timeout}s")
        except DiscoveryStrategyError as e:
            logger.warning(f"Strategy '{self.name}' failed: {e}", extra={"skill": skill_name})
            return StrategyResult.failure(self.name, str(e))
        except Exception as e:
            logger.warning(f"Strategy '{self.name}' raised unexpectedly: {e!r}", extra={"skill": skill_name})
            return StrategyResult.failure(self.name, repr(e))

        logger.info(f"Strategy '{self.name}' returned {len(candidates)} candidate(s)", extra={"skill": skill_name})
        return StrategyResult.success(self.name, candidates)


def search_terms(skill_name: str) -> List[str]:
    terms = [skill_name.lower()]
    if "AI" in skill_name:
        terms.append(skill_name.replace("AI", "artificial intelligence"))
        terms.append(skill_name.replace("AI", "machine learning"))
    if "Analytics" in skill_name:
        terms.append(skill_name.replace("Analytics", "analysis"))
        terms.append(skill_name.replace("Analytics", "data science"))
    terms.extend([f"{skill_name} course", f"{skill_name} training", f"{skill_name} certification"])
    return terms


def build_search_prompt(skill_name: str) -> str:
    return f"""Find 5 active online courses for "{skill_name}" with URLs that exist right now.

Requirements:
1. Real courses from: Coursera, edX, LinkedIn Learning, Udemy, FutureLearn, Pluralsight, Microsoft Learn
2. Currently available courses (not discontinued)
3. Specific to "{skill_name}"

Return a JSON array:
[
  {{
    "title": "Exact Course Title",
    "url": "https://provider.example/course/path",
    "provider": "Provider Name",
    "description": "What you'll learn",
    "duration": "X weeks",
    "cost": "free" or "paid",
    "rating": 4.5
  }}
]"""


class IntelligentSearchStrategy(DiscoveryStrategy):
    name = "intelligent-search"

    def __init__(self, provider: ResourceSearchProvider, timeout: Optional[float] = None):
        super().__init__(settings.SEARCH_PROVIDER_TIMEOUT if timeout is None else timeout)
        self.provider = provider

    async def find(self, skill_name: str) -> List[CandidateResource]:
        response = await self.provider.search(build_search_prompt(skill_name))
        return parse_search_response(response)


class ProviderSearchStrategy(DiscoveryStrategy):
    """
    Builds search-results URLs on roster providers. Only search pages are
    produced; a guessed course deep link would usually 404.
    """
    name = "provider-search"
    TERMS_PER_PROVIDER = 2

    def __init__(self, providers: Optional[Sequence[LearningProvider]] = None,
                 limit: Optional[int] = None, timeout: Optional[float] = None):
        super().__init__(settings.SYNTHESIZED_STRATEGY_TIMEOUT if timeout is None else timeout)
        self.providers = list(PROVIDERS if providers is None else providers)
        self.limit = settings.PROVIDER_SEARCH_LIMIT if limit is None else limit

    async def find(self, skill_name: str) -> List[CandidateResource]:
        searchable = [p for p in self.providers if p.search_url][:self.limit]
        terms = search_terms(skill_name)[:self.TERMS_PER_PROVIDER]

        candidates = []
        for provider in searchable:
            for term in terms:
                candidates.append(CandidateResource(
                    title=f"{provider.name} courses: {term}",
                    url=provider.build_search_url(term),
                    provider=provider.name,
                    cost="free" if provider.cost_model == "free" else "paid",
                    rating=4.2,
                    description=f"Search results for '{term}' on {provider.name}",
                ))
        return candidates


class AggregatorSiteStrategy(DiscoveryStrategy):
    name = "aggregator-sites"

    def __init__(self, sites: Optional[Sequence[AggregatorSite]] = None, timeout: Optional[float] = None):
        super().__init__(settings.SYNTHESIZED_STRATEGY_TIMEOUT if timeout is None else timeout)
        self.sites = list(AGGREGATOR_SITES if sites is None else sites)

    async def find(self, skill_name: str) -> List[CandidateResource]:
        return [
            CandidateResource(
                title=site.title_template.format(skill=skill_name),
                url=site.search_url.format(query=quote_plus(skill_name)),
                provider=site.name,
                cost="paid",
                rating=site.rating,
                description=site.description_template.format(skill=skill_name),
            )
            for site in self.sites
        ]


class CuratedFallbackStrategy(DiscoveryStrategy):
    """Hand-maintained known-good resources. Never times out."""
    name = "curated"

    async def find(self, skill_name: str) -> List[CandidateResource]:
        return curated_resources(skill_name)
