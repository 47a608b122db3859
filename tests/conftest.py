# pyright: reportUnusedFunction=false

from __future__ import annotations

import json
from pathlib import Path
import typing as _t

import pytest

from cim.modgraph.loader import parse_document
from cim.modgraph.spec import GraphDocument
from cim.modgraph.types import RawDocument, RawEdge, RawGraph, RawNode


def make_raw_document(
    nodes: dict[str, RawNode] | None = None,
    edges: list[RawEdge] | None = None,
    last_updated: str = "2025-01-20",
) -> RawDocument:
    graph: RawGraph = {"nodes": nodes or {}, "edges": edges or []}
    return {"metadata": {"last_updated": last_updated}, "graph": graph}


@pytest.fixture()
def make_document() -> _t.Callable[..., GraphDocument]:
    """Build a parsed GraphDocument from raw node/edge JSON."""

    def _make(
        nodes: dict[str, RawNode] | None = None,
        edges: list[RawEdge] | None = None,
        last_updated: str = "2025-01-20",
    ) -> GraphDocument:
        return parse_document(make_raw_document(nodes, edges, last_updated))

    return _make


@pytest.fixture()
def raw_core_pair() -> RawDocument:
    """Two core nodes A (production) and B (development) with A -> B."""
    return make_raw_document(
        nodes={
            "A": {"id": "A", "type": "core", "status": "production"},
            "B": {"id": "B", "type": "core", "status": "development"},
        },
        edges=[{"from": "A", "to": "B", "type": "dependency"}],
    )


@pytest.fixture()
def core_pair(raw_core_pair: RawDocument) -> GraphDocument:
    return parse_document(raw_core_pair)


@pytest.fixture()
def write_graph(tmp_path: Path) -> _t.Callable[[object], Path]:
    """Return a helper that dumps a JSON value to a temp graph file."""

    def _write(raw: object, name: str = "modules-graph.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(raw), encoding="utf-8")
        return path

    return _write
