"""
core/services/chrome_service.py
Moldura comum das páginas: header, sidebar e navbar.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Navbar:
    """Barra de navegação do topo da página."""

    title: str
    context: str | None = None
    actions: list[tuple[str, str]] | None = None


@dataclass(frozen=True)
class SidebarEntry:
    label: str
    endpoint: str


@dataclass(frozen=True)
class SidebarSection:
    title: str
    entries: tuple[SidebarEntry, ...] = field(default_factory=tuple)


# Compartilhada por todas as páginas; a ordem é a de exibição.
SIDEBAR: tuple[SidebarSection, ...] = (
    SidebarSection(
        "Statistics",
        (
            SidebarEntry("Get started", "statistics.index"),
            SidebarEntry("OS distribution", "statistics.os_distribution"),
            SidebarEntry(
                "OS family distribution",
                "statistics.os_family_distribution",
            ),
        ),
    ),
    SidebarSection(
        "Systems",
        (SidebarEntry("All systems", "systems.index"),),
    ),
)


def build_chrome(title: str, navbar: Navbar) -> dict[str, Any]:
    """Contexto de template com título, navbar e sidebar."""
    return {
        "title": title,
        "navbar": navbar,
        "sidebar": SIDEBAR,
    }
