from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from cim.modgraph import InvalidDocument
from cim.modgraph.api import render, render_path
from cim.modgraph.render_mermaid import render_mermaid
from cim.modgraph.spec import GraphDocument
from cim.modgraph.types import RawDocument


def test_render_mermaid_target_matches_renderer(core_pair: GraphDocument) -> None:
    assert render(core_pair) == render_mermaid(core_pair)
    assert render(core_pair, target="mermaid") == render_mermaid(core_pair)


def test_render_edges_target(core_pair: GraphDocument) -> None:
    assert render(core_pair, target="edges") == "A -> B"


def test_render_unsupported_target_raises(core_pair: GraphDocument) -> None:
    with pytest.raises(ValueError) as err:
        _ = render(core_pair, target="dot")  # type: ignore[arg-type]

    assert "Unsupported target" in str(err.value)


def test_render_path_loads_and_renders(
    write_graph: Callable[..., Path], raw_core_pair: RawDocument
) -> None:
    text = render_path(write_graph(raw_core_pair))
    assert text.startswith("graph TB\n")
    assert "    A --> B\n" in text


def test_render_path_propagates_loader_errors(
    write_graph: Callable[..., Path], tmp_path: Path
) -> None:
    with pytest.raises(FileNotFoundError):
        _ = render_path(tmp_path / "missing.json")
    with pytest.raises(InvalidDocument):
        _ = render_path(write_graph([1, 2, 3]))


def test_ascii_edges_empty_when_no_dependencies(
    make_document: Callable[..., GraphDocument],
) -> None:
    doc = make_document(
        nodes={"a": {}, "b": {}},
        edges=[{"from": "a", "to": "b", "type": "reference"}],
    )
    assert render(doc, target="edges") == ""
