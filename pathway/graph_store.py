# /pathway/graph_store.py

import re
from typing import Dict, Iterator, List, Mapping, Optional, Set, Tuple, Union

from pathway.errors import DuplicateNodeError, InvalidWeightError, UnknownNodeError
from pathway.models import (
    ROLE, SKILL, Node, NodeAttributes, NodeKind, Relationship, RoleAttributes, SkillAttributes,
)

_ATTRIBUTE_TYPES = {SKILL: SkillAttributes, ROLE: RoleAttributes}


def slugify(name: str) -> str:
    return re.sub(r"\s+", "-", name.strip().lower())


class GraphStore:
    """
    In-memory store of skill and role nodes joined by directed, weighted
    relationships.

    The store is populated once (see ``pathway.seed.seed_graph``) and then only
    read while requests are in flight. Writers are administrative operations
    and must be serialized by the caller.
    """

    def __init__(self):
        self._nodes: Dict[str, Node] = {}
        self._index: Dict[Tuple[str, str], str] = {}
        self._outgoing: Dict[str, Dict[str, List[Relationship]]] = {}
        self._incoming: Dict[str, List[Relationship]] = {}

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: str) -> bool:
        return node_id in self._nodes

    # --- Nodes ---

    def add_node(self, kind: NodeKind, name: str, attributes: Union[NodeAttributes, Mapping]) -> str:
        if kind not in _ATTRIBUTE_TYPES:
            raise ValueError(f"Unknown node kind: {kind!r}")
        if (kind, name) in self._index:
            raise DuplicateNodeError(kind, name)

        expected = _ATTRIBUTE_TYPES[kind]
        if isinstance(attributes, Mapping):
            attributes = expected.model_validate(dict(attributes))
        elif not isinstance(attributes, expected):
            raise ValueError(f"A {kind} node needs {expected.__name__}, got {type(attributes).__name__}.")

        node_id = self._new_id(kind, name)
        self._nodes[node_id] = Node(id=node_id, kind=kind, name=name, attributes=attributes)
        self._index[(kind, name)] = node_id
        return node_id

    def add_skill(self, name: str, category: str, difficulty: str = "intermediate", base_hours: int = 0) -> str:
        return self.add_node(SKILL, name, SkillAttributes(category=category, difficulty=difficulty, base_hours=base_hours))

    def add_role(self, name: str, category: str, demand: str = "medium", description: str = "",
                 avg_salary: Optional[int] = None) -> str:
        return self.add_node(ROLE, name, RoleAttributes(
            category=category, demand=demand, description=description, avg_salary=avg_salary,
        ))

    def update_node_attributes(self, node_id: str, **changes) -> Node:
        node = self._nodes.get(node_id)
        if node is None:
            raise UnknownNodeError(node_id)
        merged = {**node.attributes.model_dump(), **changes}
        attributes = _ATTRIBUTE_TYPES[node.kind].model_validate(merged)
        updated = node.model_copy(update={"attributes": attributes})
        self._nodes[node_id] = updated
        return updated

    def get_node(self, node_id: str) -> Optional[Node]:
        return self._nodes.get(node_id)

    def find_node(self, kind: NodeKind, name: str) -> Optional[Node]:
        node_id = self._index.get((kind, name))
        return self._nodes[node_id] if node_id else None

    def nodes(self, kind: Optional[NodeKind] = None) -> Iterator[Node]:
        for node in self._nodes.values():
            if kind is None or node.kind == kind:
                yield node

    # --- Relationships ---

    def add_relationship(self, source_id: str, target_id: str, rel_type: str, strength: float,
                         priority: Optional[str] = None, effort: Optional[str] = None) -> Relationship:
        for node_id in (source_id, target_id):
            if node_id not in self._nodes:
                raise UnknownNodeError(node_id)
        # A zero strength would make the edge weight infinite.
        if isinstance(strength, bool) or not isinstance(strength, (int, float)) or not 0 < strength <= 1:
            raise InvalidWeightError(strength)

        relationship = Relationship(
            source_id=source_id, target_id=target_id, type=rel_type,
            strength=float(strength), priority=priority, effort=effort,
        )
        self._outgoing.setdefault(source_id, {}).setdefault(target_id, []).append(relationship)
        self._incoming.setdefault(target_id, []).append(relationship)
        return relationship

    def relationships(self, source_id: str, target_id: str) -> List[Relationship]:
        return list(self._outgoing.get(source_id, {}).get(target_id, []))

    def incoming(self, node_id: str, rel_type: Optional[str] = None) -> List[Relationship]:
        return [r for r in self._incoming.get(node_id, []) if rel_type is None or r.type == rel_type]

    def neighbors(self, node_id: str) -> Set[str]:
        return set(self._outgoing.get(node_id, {}))

    def edge_strength(self, source_id: str, target_id: str) -> Optional[float]:
        rels = self._outgoing.get(source_id, {}).get(target_id)
        if not rels:
            return None
        return max(r.strength for r in rels)

    def edge_weight(self, source_id: str, target_id: str) -> float:
        strength = self.edge_strength(source_id, target_id)
        # Unit cost for pairs without a relationship; the path finder only
        # asks about pairs taken from the adjacency map.
        if strength is None:
            return 1.0
        return 1.0 / strength

    def clear(self):
        self._nodes.clear()
        self._index.clear()
        self._outgoing.clear()
        self._incoming.clear()

    def _new_id(self, kind: str, name: str) -> str:
        base = f"{kind}-{slugify(name)}"
        node_id, n = base, 2
        # Names differing only in case or spacing slugify to the same id.
        while node_id in self._nodes:
            node_id = f"{base}-{n}"
            n += 1
        return node_id
