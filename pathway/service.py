# /pathway/service.py

from typing import Optional

from discovery.aggregator import ResourceAggregator
from discovery.providers import GeminiResourceSearchProvider, HttpxReachabilityChecker
from discovery.ranker import ResourceRanker
from discovery.strategies import (
    AggregatorSiteStrategy, CuratedFallbackStrategy, IntelligentSearchStrategy, ProviderSearchStrategy,
)
from pathway.assembler import PathwayAssembler
from pathway.config import Settings, settings as default_settings
from pathway.graph_store import GraphStore
from pathway.logger import get_logger
from pathway.models import SKILL
from pathway.path_finder import PathFinder
from pathway.seed import seed_graph
from pathway.skill_extractor import GeminiSkillExtractor, KeywordSkillExtractor, SkillExtractor

logger = get_logger(__name__)


def build_aggregator(config: Settings, offline: bool = False) -> ResourceAggregator:
    """
    Offline mode drops every network-bound piece: no intelligent search and no
    URL validation. The synthesized strategies and the curated table still run.
    """
    strategies = []
    if config.ENABLE_INTELLIGENT_SEARCH and not offline:
        if config.GOOGLE_API_KEY:
            provider = GeminiResourceSearchProvider(model=config.GENERATION_MODEL, api_key=config.GOOGLE_API_KEY)
            strategies.append(IntelligentSearchStrategy(provider, timeout=config.SEARCH_PROVIDER_TIMEOUT))
        else:
            logger.info("GOOGLE_API_KEY is not set; intelligent search is disabled.")
    strategies.append(ProviderSearchStrategy(
        limit=config.PROVIDER_SEARCH_LIMIT, timeout=config.SYNTHESIZED_STRATEGY_TIMEOUT,
    ))
    strategies.append(AggregatorSiteStrategy(timeout=config.SYNTHESIZED_STRATEGY_TIMEOUT))

    checker = HttpxReachabilityChecker() if config.VALIDATE_URLS and not offline else None
    return ResourceAggregator(
        strategies,
        curated=CuratedFallbackStrategy(),
        checker=checker,
        min_viable=config.MIN_VIABLE_RESOURCES,
        validation_timeout=config.URL_VALIDATION_TIMEOUT,
    )


def build_pathway_service(config: Optional[Settings] = None, offline: bool = False,
                          store: Optional[GraphStore] = None) -> PathwayAssembler:
    """Seeds a graph (unless one is given) and wires a ready-to-use assembler."""
    config = config or default_settings
    if store is None:
        store = seed_graph(GraphStore())

    assembler = PathwayAssembler(
        PathFinder(store),
        build_aggregator(config, offline=offline),
        ResourceRanker(),
        store,
        max_resources=config.MAX_RESOURCES_PER_GAP,
    )
    logger.info("Pathway service ready", extra={"nodes": len(store), "offline": offline})
    return assembler


def build_skill_extractor(store: GraphStore, config: Optional[Settings] = None,
                          offline: bool = False) -> SkillExtractor:
    """
    Keyword matching over the pattern list and the graph's skills. With an API
    key (and not offline) the Gemini extractor answers first and falls back to
    keyword matching when the model call fails.
    """
    config = config or default_settings
    skills = {node.name: node.attributes.category for node in store.nodes(SKILL)}
    keyword = KeywordSkillExtractor(skills)
    if offline or not config.GOOGLE_API_KEY:
        return keyword
    return GeminiSkillExtractor(
        known_skills=list(skills), model=config.FAST_MODEL, api_key=config.GOOGLE_API_KEY, fallback=keyword,
    )
