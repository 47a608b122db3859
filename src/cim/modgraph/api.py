"""
Public API for rendering CIM module graphs.

This module defines a small façade used by callers (e.g., CLI, tests) to turn
a :class:`GraphDocument` into text without knowing which renderer module
produces it.

Layering:
- cim.modgraph.spec   : Typed document (NodeSpec, EdgeSpec, GraphDocument)
- cim.modgraph.loader : File reading and shape checks
- cim.modgraph.api    : Public façade (this module)
- cim.modgraph.render_mermaid / graph_ascii : Renderers
"""

from __future__ import annotations

from pathlib import Path

from cim.modgraph.loader import DEFAULT_GRAPH_PATH, load_document
from cim.modgraph.spec import GraphDocument
from cim.modgraph.types import TargetName

__all__ = ["TargetName", "render", "render_path"]


def render(
    document: GraphDocument,
    target: TargetName = "mermaid",
) -> str:
    """
    Render a module graph document into the selected text target.

    Parameters
    ----------
    document : GraphDocument
        Parsed module graph.
    target : TargetName, default "mermaid"
        ``"mermaid"`` for the flowchart, ``"edges"`` for `U -> V` lines.

    Returns
    -------
    str
        Rendered text.

    Raises
    ------
    ValueError
        If the target is unknown or unsupported.
    """
    if target == "mermaid":
        from cim.modgraph.render_mermaid import render_mermaid

        return render_mermaid(document)

    if target == "edges":
        from cim.modgraph.graph_ascii import ascii_edges

        return ascii_edges(document)

    raise ValueError(f"Unsupported target: {target!r}")


def render_path(
    path: Path | str = DEFAULT_GRAPH_PATH,
    target: TargetName = "mermaid",
) -> str:
    """
    Load a module graph file and render it.

    Convenience wrapper around :func:`load_document` and :func:`render`;
    loader errors (``FileNotFoundError``, ``InvalidDocument``) propagate.
    """
    return render(load_document(path), target=target)
