from __future__ import annotations

from dataclasses import dataclass, field

from cim.modgraph.types import JSONObj

__all__ = [
    "DEFAULT_LAST_UPDATED",
    "DEFAULT_NODE_TYPE",
    "DEPENDENCY_EDGE_TYPE",
    "EdgeSpec",
    "GraphDocument",
    "GraphSpec",
    "NodeSpec",
]

DEFAULT_NODE_TYPE = "core"
DEFAULT_LAST_UPDATED = "unknown"
DEPENDENCY_EDGE_TYPE = "dependency"


# --- typed default factories (avoid Unknown from dict/list) -----------------
def _empty_obj() -> JSONObj:
    return {}


def _empty_node_map() -> dict[str, NodeSpec]:
    return {}


def _empty_edge_list() -> list[EdgeSpec]:
    return []


# --- spec dataclasses -------------------------------------------------------
@dataclass(frozen=True)
class NodeSpec:
    id: str
    type: str | None = None  # e.g. "core", "domain"
    status: str | None = None  # e.g. "production"
    extra: JSONObj = field(default_factory=_empty_obj, compare=False)

    @property
    def category_key(self) -> str:
        """Grouping key; a missing or empty type falls back to ``core``."""
        return self.type or DEFAULT_NODE_TYPE


@dataclass(frozen=True)
class EdgeSpec:
    source: str | None  # raw "from"; required for dependency edges
    target: str | None  # raw "to"
    type: str | None = None

    @property
    def is_dependency(self) -> bool:
        return self.type == DEPENDENCY_EDGE_TYPE


@dataclass(frozen=True)
class GraphSpec:
    nodes: dict[str, NodeSpec] = field(default_factory=_empty_node_map)
    edges: list[EdgeSpec] = field(default_factory=_empty_edge_list)

    def dependency_edges(self) -> list[EdgeSpec]:
        """Edges of type ``dependency``, in input order."""
        return [e for e in self.edges if e.is_dependency]


@dataclass(frozen=True)
class GraphDocument:
    graph: GraphSpec = field(default_factory=GraphSpec)
    metadata: JSONObj = field(default_factory=_empty_obj)

    @property
    def last_updated(self) -> str:
        value = self.metadata.get("last_updated")
        if value is None:
            return DEFAULT_LAST_UPDATED
        return value if isinstance(value, str) else str(value)
