"""
core/repositories/statistics_repository.py
Agregações do inventário para as páginas de estatística.
"""

from __future__ import annotations

from typing import Any

from core.constants import UNKNOWN_OS_LABEL
from core.db import query_rows


def _distribution(column: str) -> list[dict[str, Any]]:
    # column vem apenas das funções abaixo, nunca da requisição
    rows = query_rows(
        f"""
        SELECT COALESCE(NULLIF(TRIM({column}), ''), ?) AS name,
               COUNT(*)                                AS count
        FROM   systems
        GROUP  BY 1
        ORDER  BY count DESC, name ASC
        """,
        (UNKNOWN_OS_LABEL,),
    )
    return [dict(r) for r in rows]


def os_distribution() -> list[dict[str, Any]]:
    """Contagem de sistemas por distribuição de SO."""
    return _distribution("os_name")


def os_family_distribution() -> list[dict[str, Any]]:
    """Contagem de sistemas por família de SO."""
    return _distribution("os_family")
