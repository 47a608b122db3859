"""
File loader for CIM module graphs.

This module reads ``modules-graph.json`` from disk and turns it into a
:class:`GraphDocument`. It is the only place that touches the filesystem or
checks the document shape; renderers assume a well-formed document.
"""

from __future__ import annotations

from collections.abc import Mapping
import json
import logging
from pathlib import Path

from cim.modgraph.spec import EdgeSpec, GraphDocument, GraphSpec, NodeSpec
from cim.modgraph.types import JSONObj, RawDocument

__all__ = [
    "DEFAULT_GRAPH_PATH",
    "InvalidDocument",
    "load_document",
    "parse_document",
]

DEFAULT_GRAPH_PATH = Path("registry") / "modules-graph.json"

logger = logging.getLogger("cim.modgraph.loader")


class InvalidDocument(ValueError):
    """Raised when a graph document does not have the expected shape."""


# --- Shape helpers ----------------------------------------------------------


def _require_mapping(value: object, where: str) -> Mapping[str, object]:
    if not isinstance(value, Mapping):
        raise InvalidDocument(f"{where} must be an object, got {type(value).__name__}")
    return value  # type: ignore[return-value]


def _optional_text(raw: Mapping[str, object], key: str) -> str | None:
    """Read a scalar field as text; non-string JSON values are formatted with ``str``."""
    value = raw.get(key)
    if value is None or isinstance(value, str):
        return value
    return str(value)


def _parse_node(key: str, raw: object) -> NodeSpec:
    where = f"graph.nodes[{key!r}]"
    node = _require_mapping(raw, where)
    node_id = _optional_text(node, "id") or key
    extra: JSONObj = {
        k: v for k, v in node.items() if k not in ("id", "type", "status")  # type: ignore[misc]
    }
    return NodeSpec(
        id=node_id,
        type=_optional_text(node, "type"),
        status=_optional_text(node, "status"),
        extra=extra,
    )


def _parse_edge(index: int, raw: object) -> EdgeSpec:
    where = f"graph.edges[{index}]"
    edge = _require_mapping(raw, where)
    spec = EdgeSpec(
        source=_optional_text(edge, "from"),
        target=_optional_text(edge, "to"),
        type=_optional_text(edge, "type"),
    )
    # Only dependency edges are drawn, so only they need endpoints.
    if spec.is_dependency and not (spec.source and spec.target):
        raise InvalidDocument(f"{where} requires both 'from' and 'to'")
    return spec


# --- Public API --------------------------------------------------------------


def parse_document(raw: RawDocument | object) -> GraphDocument:
    """
    Build a :class:`GraphDocument` from an already-parsed JSON value.

    Parameters
    ----------
    raw : RawDocument | object
        Result of ``json.load`` on a module graph file.

    Returns
    -------
    GraphDocument
        The typed document. Missing ``nodes``/``edges``/``metadata`` become
        empty collections.

    Raises
    ------
    InvalidDocument
        If the root, ``graph``, ``nodes``, ``edges`` or any entry has the
        wrong JSON type, or a ``dependency`` edge lacks ``from``/``to``.
        Non-string scalars (e.g. ``"status": 2``) are formatted with ``str``
        rather than rejected.
    """
    root = _require_mapping(raw, "document")
    metadata = _require_mapping(root.get("metadata", {}), "metadata")
    if "graph" not in root:
        raise InvalidDocument("document is missing the 'graph' object")
    graph = _require_mapping(root["graph"], "graph")

    raw_nodes = _require_mapping(graph.get("nodes", {}), "graph.nodes")
    raw_edges = graph.get("edges", [])
    if not isinstance(raw_edges, list):
        raise InvalidDocument(
            f"graph.edges must be a list, got {type(raw_edges).__name__}"
        )

    nodes = {key: _parse_node(key, value) for key, value in raw_nodes.items()}
    edges = [_parse_edge(i, value) for i, value in enumerate(raw_edges)]
    return GraphDocument(
        graph=GraphSpec(nodes=nodes, edges=edges),
        metadata=dict(metadata),  # type: ignore[arg-type]
    )


def load_document(path: Path | str = DEFAULT_GRAPH_PATH) -> GraphDocument:
    """
    Read and parse a module graph JSON file.

    Parameters
    ----------
    path : Path | str, default ``registry/modules-graph.json``
        Location of the graph file, relative to the working directory unless
        absolute.

    Returns
    -------
    GraphDocument
        The parsed document.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    InvalidDocument
        If the file is not valid JSON or does not match the expected shape.
    """
    path = Path(path)
    logger.debug(f"Reading module graph from {path}")
    text = path.read_text(encoding="utf-8")
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidDocument(f"{path}: invalid JSON ({exc})") from exc

    try:
        document = parse_document(raw)
    except InvalidDocument as exc:
        raise InvalidDocument(f"{path}: {exc}") from exc
    logger.info(
        f"Loaded module graph {path.name} "
        f"nodes={len(document.graph.nodes)} edges={len(document.graph.edges)}"
    )
    return document
