"""
core/repositories/systems_repository.py
CRUD de sistemas e interfaces no SQLite.
"""

from __future__ import annotations

import sqlite3
from typing import Any

from core.db import ensure_inventory_tables, query_rows, transaction
from core.schemas import Interface, System


def get_system_info(system_name: str) -> dict[str, Any] | None:
    """Retorna o registro do sistema, ou None se não existir."""
    rows = query_rows(
        """
        SELECT name, hostname, os_name, os_family, os_version,
               description, owner, created_at
        FROM   systems
        WHERE  name = ?
        """,
        (system_name,),
    )
    return dict(rows[0]) if rows else None


def get_system_interfaces(system_name: str) -> list[dict[str, Any]]:
    """Interfaces do sistema, ordenadas por nome e MAC."""
    rows = query_rows(
        """
        SELECT mac, system_name, name, comment
        FROM   interfaces
        WHERE  system_name = ?
        ORDER  BY name, mac
        """,
        (system_name,),
    )
    return [dict(r) for r in rows]


def list_system_names() -> list[str]:
    """Nomes de todos os sistemas cadastrados, em ordem alfabética."""
    rows = query_rows("SELECT name FROM systems ORDER BY name")
    return [r["name"] for r in rows]


def upsert_system(
    system: System,
    *,
    conn: sqlite3.Connection | None = None,
) -> None:
    """
    Insere ou atualiza um sistema.

    created_at é preservado quando o sistema já existe.
    """
    if conn is None:
        ensure_inventory_tables()
    with transaction(conn) as tx:
        tx.execute(
            """
            INSERT INTO systems
                (name, hostname, os_name, os_family, os_version,
                 description, owner, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(name) DO UPDATE SET
                hostname    = excluded.hostname,
                os_name     = excluded.os_name,
                os_family   = excluded.os_family,
                os_version  = excluded.os_version,
                description = excluded.description,
                owner       = excluded.owner
            """,
            (
                system.name, system.hostname, system.os_name,
                system.os_family, system.os_version, system.description,
                system.owner,
                system.created_at.strftime("%Y-%m-%d %H:%M:%S"),
            ),
        )


def upsert_interface(
    interface: Interface,
    *,
    conn: sqlite3.Connection | None = None,
) -> None:
    """Insere ou atualiza uma interface (chave: MAC)."""
    if conn is None:
        ensure_inventory_tables()
    with transaction(conn) as tx:
        tx.execute(
            """
            INSERT INTO interfaces (mac, system_name, name, comment)
            VALUES (?, ?, ?, ?)
            ON CONFLICT(mac) DO UPDATE SET
                system_name = excluded.system_name,
                name        = excluded.name,
                comment     = excluded.comment
            """,
            (
                interface.mac, interface.system_name,
                interface.name, interface.comment,
            ),
        )
