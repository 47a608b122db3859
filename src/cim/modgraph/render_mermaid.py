"""
Mermaid rendering for CIM module graphs.

This module turns a :class:`GraphDocument` into a ``graph TB`` Mermaid
flowchart: one subgraph per node category, one styled element per node,
one arrow per dependency edge, and a fixed legend.
"""

from __future__ import annotations

from cim.modgraph.spec import GraphDocument, NodeSpec
from cim.modgraph.styles import LEGEND_ENTRIES, STATUS_STYLES, category_name, status_style

__all__ = ["group_nodes", "render_mermaid"]

_INDENT = "    "


def group_nodes(document: GraphDocument) -> dict[str, list[NodeSpec]]:
    """
    Partition nodes by category key, preserving encounter order.

    Both the group keys and the nodes inside each group keep the order in
    which they were first seen in ``document.graph.nodes``.
    """
    groups: dict[str, list[NodeSpec]] = {}
    for node in document.graph.nodes.values():
        groups.setdefault(node.category_key, []).append(node)
    return groups


def _node_lines(node: NodeSpec) -> list[str]:
    style = status_style(node.status)
    pad = _INDENT * 2
    return [
        f'{pad}{node.id}["{node.id}<br/>{style.emoji}"]',
        f"{pad}style {node.id} {style.directive}",
    ]


def _legend_lines() -> list[str]:
    pad = _INDENT * 2
    lines = [f"{_INDENT}%% Legend", f'{_INDENT}subgraph "Legend"']
    for key, caption in LEGEND_ENTRIES:
        lines.append(f'{pad}{key}["{caption} {STATUS_STYLES[key].emoji}"]')
    lines.append("")
    for key, _ in LEGEND_ENTRIES:
        lines.append(f"{pad}style {key} {STATUS_STYLES[key].directive}")
    lines.append(f"{_INDENT}end")
    return lines


def render_mermaid(document: GraphDocument) -> str:
    """
    Render a module graph document as Mermaid flowchart text.

    Parameters
    ----------
    document : GraphDocument
        Parsed module graph. It is not modified.

    Returns
    -------
    str
        Newline-terminated Mermaid source. Identical inputs always produce
        identical text.
    """
    lines: list[str] = [
        "graph TB",
        f"{_INDENT}%% CIM Module Dependency Graph",
        f"{_INDENT}%% Auto-generated from modules-graph.json",
        f"{_INDENT}%% Last updated: {document.last_updated}",
        "",
        f"{_INDENT}%% Nodes",
    ]

    for type_key, nodes in group_nodes(document).items():
        lines.append(f'{_INDENT}subgraph "{category_name(type_key)}"')
        for node in nodes:
            lines.extend(_node_lines(node))
        lines.append(f"{_INDENT}end")
        lines.append("")

    lines.append(f"{_INDENT}%% Dependencies")
    for edge in document.graph.dependency_edges():
        lines.append(f"{_INDENT}{edge.source} --> {edge.target}")

    lines.append("")
    lines.extend(_legend_lines())
    return "\n".join(lines) + "\n"
