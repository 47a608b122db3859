from types import MappingProxyType

import pytest

from cim.modgraph.spec import EdgeSpec, GraphDocument, GraphSpec, NodeSpec
from cim.modgraph.styles import (
    CATEGORY_NAMES,
    STATUS_STYLES,
    UNKNOWN_STATUS_STYLE,
    category_name,
    status_style,
)


def test_node_spec_defaults():
    node = NodeSpec(id="A")

    assert node.type is None
    assert node.status is None
    assert node.extra == {}
    assert node.category_key == "core"


def test_edge_spec_dependency_flag():
    assert EdgeSpec(source="a", target="b", type="dependency").is_dependency
    assert not EdgeSpec(source="a", target="b", type="reference").is_dependency
    assert not EdgeSpec(source="a", target="b").is_dependency


def test_graph_document_defaults_are_not_shared():
    doc1 = GraphDocument()
    doc2 = GraphDocument()

    assert doc1.graph.nodes == {}
    assert doc1.graph.edges == []
    assert doc1.graph is not doc2.graph
    assert doc1.metadata is not doc2.metadata
    assert doc1.last_updated == "unknown"


def test_dependency_edges_keep_input_order():
    graph = GraphSpec(
        edges=[
            EdgeSpec("b", "a", "dependency"),
            EdgeSpec("a", "c", "reference"),
            EdgeSpec("a", "b", "dependency"),
        ]
    )
    assert [(e.source, e.target) for e in graph.dependency_edges()] == [
        ("b", "a"),
        ("a", "b"),
    ]


def test_tables_are_read_only():
    assert isinstance(CATEGORY_NAMES, MappingProxyType)
    assert isinstance(STATUS_STYLES, MappingProxyType)
    with pytest.raises(TypeError):
        CATEGORY_NAMES["new"] = "New"  # type: ignore[index]


def test_category_name_lookup():
    assert category_name("core") == "Core Infrastructure"
    assert category_name("graph") == "Graph Systems"
    assert category_name("security") == "Security Modules"
    assert category_name("mystery") == "mystery"


def test_status_style_lookup():
    assert status_style("production").directive == (
        "fill:#2ECC71,stroke:#27AE60,stroke-width:3px,color:#FFF"
    )
    assert status_style("template").emoji == "🔵"
    assert status_style(None) is UNKNOWN_STATUS_STYLE
    assert status_style("PRODUCTION") is UNKNOWN_STATUS_STYLE
    assert UNKNOWN_STATUS_STYLE.emoji == "⚪"
