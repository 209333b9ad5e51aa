# /pathway/path_finder.py

import heapq
import itertools
from typing import Dict, List, Optional, Sequence

from pathway.errors import UnknownRoleError
from pathway.graph_store import GraphStore
from pathway.logger import get_logger
from pathway.models import REQUIRED_FOR, ROLE, SKILL, Node, PathResult, SkillRequirement
from pathway.role_requirements import has_requirements, required_skills_for_role

logger = get_logger(__name__)

# Neutral confidence reported whenever the static requirement lookup is used
# instead of a graph path. A documented heuristic, not a computed value.
FALLBACK_CONFIDENCE = 0.6
MAX_SKILL_GAPS = 3

HOURS_BY_DIFFICULTY = {"beginner": 15, "intermediate": 25, "advanced": 40}
DEFAULT_HOURS = 20


def estimate_hours(difficulty: str) -> int:
    return HOURS_BY_DIFFICULTY.get(difficulty, DEFAULT_HOURS)


class PathFinder:
    """
    Finds the most confident route from the skills a person already has to a
    target role, and turns it into an ordered list of skill gaps.
    """

    def __init__(self, store: GraphStore):
        self.store = store

    def find_shortest_path(self, known_skill_names: Sequence[str], target_role_name: str) -> PathResult:
        """
        Runs Dijkstra (edge weight 1/strength) from every known skill that has a
        node, and keeps the path whose average edge strength is highest. That
        average is the confidence. When no path can be found the static
        requirement lookup is used with FALLBACK_CONFIDENCE.

        Raises:
            UnknownRoleError: the role has no graph node and no table entry.
        """
        known = set(known_skill_names)
        target = self.store.find_node(ROLE, target_role_name)

        if target is None:
            if not has_requirements(target_role_name):
                raise UnknownRoleError(target_role_name)
            logger.info(f"Role '{target_role_name}' is not in the graph; using the requirement table.")
            return self._fallback(None, target_role_name, known)

        best_path: List[Node] = []
        best_confidence = -1.0

        for skill_name in known_skill_names:
            origin = self.store.find_node(SKILL, skill_name)
            if origin is None:
                continue
            node_ids = self._dijkstra(origin.id, target.id)
            if not node_ids:
                continue
            confidence = self._path_confidence(node_ids)
            if confidence > best_confidence:
                best_confidence = confidence
                best_path = [self.store.get_node(node_id) for node_id in node_ids]

        if not best_path:
            return self._fallback(target, target_role_name, known)

        gaps = []
        for node in best_path:
            if node.kind != SKILL or node.name in known:
                continue
            gaps.append(SkillRequirement(
                name=node.name,
                category=node.attributes.category,
                difficulty=node.attributes.difficulty,
                estimated_hours=estimate_hours(node.attributes.difficulty),
                priority=self._priority_towards(node.id, target.id),
            ))

        logger.info("Graph path found", extra={
            "role": target_role_name,
            "path": [node.name for node in best_path],
            "confidence": round(best_confidence, 4),
        })
        return PathResult(path=best_path, skill_gaps=gaps[:MAX_SKILL_GAPS], confidence=best_confidence)

    def _dijkstra(self, start_id: str, end_id: str) -> List[str]:
        distances: Dict[str, float] = {start_id: 0.0}
        previous: Dict[str, Optional[str]] = {start_id: None}
        visited = set()
        # The counter keeps heap ordering deterministic on equal distances.
        counter = itertools.count()
        queue = [(0.0, next(counter), start_id)]

        while queue:
            distance, _, current = heapq.heappop(queue)
            if current in visited:
                continue
            visited.add(current)

            if current == end_id:
                path = []
                node_id: Optional[str] = end_id
                while node_id is not None:
                    path.append(node_id)
                    node_id = previous[node_id]
                return path[::-1]

            for neighbor in sorted(self.store.neighbors(current)):
                if neighbor in visited:
                    continue
                candidate = distance + self.store.edge_weight(current, neighbor)
                if candidate < distances.get(neighbor, float("inf")):
                    distances[neighbor] = candidate
                    previous[neighbor] = current
                    heapq.heappush(queue, (candidate, next(counter), neighbor))

        return []

    def _path_confidence(self, node_ids: List[str]) -> float:
        if len(node_ids) <= 1:
            return 1.0
        strengths = [self.store.edge_strength(a, b) or 0.0 for a, b in zip(node_ids, node_ids[1:])]
        return sum(strengths) / len(strengths)

    def _priority_towards(self, skill_id: str, role_id: str) -> str:
        for rel in self.store.relationships(skill_id, role_id):
            if rel.type == REQUIRED_FOR and rel.priority:
                return rel.priority
        return "core"

    def _fallback(self, target: Optional[Node], role_name: str, known: set) -> PathResult:
        gaps = self._required_from_graph(target, known) if target is not None else []
        if not gaps:
            gaps = [req for req in required_skills_for_role(role_name) if req.name not in known]

        logger.info("Using requirement fallback", extra={
            "role": role_name, "gaps": [gap.name for gap in gaps[:MAX_SKILL_GAPS]],
        })
        return PathResult(
            path=[], skill_gaps=gaps[:MAX_SKILL_GAPS], confidence=FALLBACK_CONFIDENCE, used_fallback=True,
        )

    def _required_from_graph(self, target: Node, known: set) -> List[SkillRequirement]:
        rels = self.store.incoming(target.id, REQUIRED_FOR)
        # Core before complementary, then strongest first; sorted() is stable.
        rels = sorted(rels, key=lambda r: (r.priority == "complementary", -r.strength))

        gaps, seen = [], set()
        for rel in rels:
            node = self.store.get_node(rel.source_id)
            if node is None or node.kind != SKILL or node.name in known or node.name in seen:
                continue
            seen.add(node.name)
            attrs = node.attributes
            gaps.append(SkillRequirement(
                name=node.name,
                category=attrs.category,
                difficulty=attrs.difficulty,
                estimated_hours=attrs.base_hours if attrs.base_hours > 0 else estimate_hours(attrs.difficulty),
                priority=rel.priority or "core",
            ))
        return gaps
