"""
Lightweight types for cim-modgraph.

This module intentionally contains *only* typing constructs (aliases,
TypedDicts, Literals) so that spec, loader and renderers can share them
without circular imports.
"""

from __future__ import annotations

from typing import Literal, TypedDict, Union

JSONScalar = Union[str, int, float, bool, None]
JSONValue = Union[JSONScalar, "JSONList", "JSONObj"]
JSONList = list[JSONValue]
JSONObj = dict[str, JSONValue]

# Output formats understood by the CLI.
Format = Literal["plain", "rich", "json"]

# Text targets the api façade can render a document into.
TargetName = Literal["mermaid", "edges"]


__all__ = [
    "Format",
    "JSONList",
    "JSONObj",
    "JSONScalar",
    "JSONValue",
    "RawDocument",
    "RawEdge",
    "RawGraph",
    "RawNode",
    "TargetName",
]


class RawNode(TypedDict, total=False):
    """
    A node entry as it appears in ``modules-graph.json``.

    Attributes
    ----------
    id : str
        Module identifier; expected to match the mapping key.
    type : str
        Category tag (``core``, ``domain``, ...).
    status : str
        Lifecycle stage (``production``, ``development``, ``template``).
    """

    id: str
    type: str
    status: str


# "from" is a keyword, so the functional syntax is required here.
RawEdge = TypedDict("RawEdge", {"from": str, "to": str, "type": str}, total=False)


class RawGraph(TypedDict, total=False):
    nodes: dict[str, RawNode]
    edges: list[RawEdge]


class RawDocument(TypedDict, total=False):
    metadata: JSONObj
    graph: RawGraph
