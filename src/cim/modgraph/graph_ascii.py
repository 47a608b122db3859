"""
ASCII edge listing for CIM module graphs.

This module renders a graph's dependency edges as newline-separated strings in
the form `U -> V`, suitable for quick CLI inspection and test assertions.
"""

from __future__ import annotations

from cim.modgraph.spec import GraphDocument

__all__ = ["ascii_edges"]


def ascii_edges(document: GraphDocument) -> str:
    """
    Render the dependency edges of a module graph as ASCII lines.

    Only edges of type ``dependency`` contribute a line, formatted as
    `"<from> -> <to>"`. Lines keep the order of the input edge list, so the
    listing matches the arrows of the Mermaid output one for one.

    Parameters
    ----------
    document : GraphDocument
        The module graph whose dependencies should be printed.

    Returns
    -------
    str
        Newline-separated edges (empty string when there are none).
    """
    return "\n".join(f"{e.source} -> {e.target}" for e in document.graph.dependency_edges())
