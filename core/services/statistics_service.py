"""
core/services/statistics_service.py
Distribuições de SO para as páginas de estatística.
"""

from __future__ import annotations

from typing import Any, Iterable

from core.repositories.statistics_repository import (
    os_distribution,
    os_family_distribution,
)
from core.schemas import OsCount
from internalloggin.logger import setup_logger

logger = setup_logger(__name__)


def _with_percent(rows: Iterable[dict[str, Any]]) -> list[OsCount]:
    """Acrescenta o percentual (1 casa decimal) sobre o total."""
    rows = list(rows)
    total = sum(int(r["count"]) for r in rows)
    if total == 0:
        return []
    return [
        OsCount(
            name=r["name"],
            count=int(r["count"]),
            percent=round(int(r["count"]) * 100.0 / total, 1),
        )
        for r in rows
    ]


def get_os_distribution() -> list[OsCount]:
    data = _with_percent(os_distribution())
    logger.debug("Distribuição de SO: %d grupo(s).", len(data))
    return data


def get_os_family_distribution() -> list[OsCount]:
    data = _with_percent(os_family_distribution())
    logger.debug("Distribuição de família de SO: %d grupo(s).", len(data))
    return data
