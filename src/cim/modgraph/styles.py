"""
Visual lookup tables for module graphs.

Both tables are read-only mappings built once at import time. Lookups are by
exact string match; unknown keys fall back to the raw type string (categories)
or to the neutral gray style (statuses).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

__all__ = [
    "CATEGORY_NAMES",
    "LEGEND_ENTRIES",
    "STATUS_STYLES",
    "UNKNOWN_STATUS_STYLE",
    "StatusStyle",
    "category_name",
    "status_style",
]


@dataclass(frozen=True)
class StatusStyle:
    emoji: str
    fill: str
    stroke: str
    stroke_width: str
    color: str = "#FFF"

    @property
    def directive(self) -> str:
        """Mermaid ``style`` payload, e.g. ``fill:#2ECC71,stroke:...``."""
        return (
            f"fill:{self.fill},stroke:{self.stroke},"
            f"stroke-width:{self.stroke_width},color:{self.color}"
        )


CATEGORY_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "template": "Template",
        "core": "Core Infrastructure",
        "domain": "Domain Modules",
        "storage": "Storage Modules",
        "graph": "Graph Systems",
        "security": "Security Modules",
        "edge": "Edge Computing",
    }
)

STATUS_STYLES: Mapping[str, StatusStyle] = MappingProxyType(
    {
        "production": StatusStyle("🟢", "#2ECC71", "#27AE60", "3px"),
        "development": StatusStyle("🟡", "#F39C12", "#E67E22", "2px"),
        "template": StatusStyle("🔵", "#3498DB", "#2980B9", "2px"),
    }
)

UNKNOWN_STATUS_STYLE = StatusStyle("⚪", "#95A5A6", "#7F8C8D", "2px")

# (legend node id, caption) per known status, in display order.
LEGEND_ENTRIES: tuple[tuple[str, str], ...] = (
    ("production", "Production Ready"),
    ("development", "In Development"),
    ("template", "Template"),
)


def category_name(type_key: str) -> str:
    return CATEGORY_NAMES.get(type_key, type_key)


def status_style(status: str | None) -> StatusStyle:
    if status is None:
        return UNKNOWN_STATUS_STYLE
    return STATUS_STYLES.get(status, UNKNOWN_STATUS_STYLE)
