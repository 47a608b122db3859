"""
Public API for cim-modgraph.
"""

from .api import render, render_path
from .loader import InvalidDocument, load_document, parse_document
from .render_mermaid import render_mermaid
from .spec import EdgeSpec, GraphDocument, GraphSpec, NodeSpec

__all__ = [
    "EdgeSpec",
    "GraphDocument",
    "GraphSpec",
    "InvalidDocument",
    "NodeSpec",
    "load_document",
    "parse_document",
    "render",
    "render_mermaid",
    "render_path",
]
