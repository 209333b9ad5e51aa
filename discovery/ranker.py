# /discovery/ranker.py

from typing import Dict, List, Optional, Sequence

from discovery.catalog import PROVIDERS, LearningProvider
from pathway.models import CandidateResource

FREE_BONUS = 5.0
TITLE_MATCH_BONUS = 10.0
VERIFIED_BONUS = 3.0
RATING_WEIGHT = 2.0


class ResourceRanker:
    """
    Orders candidates by a composite score:

        provider quality + 2 * rating + 5 if free + 10 if the skill name is in
        the title (case-insensitive) + 3 if verified

    Providers missing from the roster contribute 0. The sort is stable, so equal
    scores keep their discovery order.
    """

    def __init__(self, providers: Optional[Sequence[LearningProvider]] = None):
        roster = PROVIDERS if providers is None else providers
        self._quality: Dict[str, float] = {p.name.lower(): p.quality_score for p in roster}

    def provider_quality(self, provider_name: str) -> float:
        return self._quality.get((provider_name or "").strip().lower(), 0.0)

    def score(self, candidate: CandidateResource, skill_name: str) -> float:
        score = self.provider_quality(candidate.provider) + RATING_WEIGHT * candidate.rating
        if candidate.cost == "free":
            score += FREE_BONUS
        if skill_name and skill_name.lower() in candidate.title.lower():
            score += TITLE_MATCH_BONUS
        if candidate.verified:
            score += VERIFIED_BONUS
        return score

    def rank(self, candidates: Sequence[CandidateResource], skill_name: str,
             limit: Optional[int] = None) -> List[CandidateResource]:
        ranked = sorted(candidates, key=lambda c: self.score(c, skill_name), reverse=True)
        return ranked if limit is None else ranked[:limit]
