"""
core/repositories/firewall_repository.py
Regras de firewall por endereço.
"""

from __future__ import annotations

import sqlite3
from typing import Any, Iterable

from core.db import ensure_inventory_tables, query_rows, transaction
from core.schemas import FirewallRule


def get_address_rules(address: str) -> list[dict[str, Any]]:
    """Regras associadas a *address*, na ordem de cadastro."""
    rows = query_rows(
        """
        SELECT rule_id, address, source, action, protocol,
               port, program, comment
        FROM   firewall_rules
        WHERE  address = ?
        ORDER  BY rule_id
        """,
        (address,),
    )
    return [dict(r) for r in rows]


def insert_rule(
    rule: FirewallRule,
    *,
    conn: sqlite3.Connection | None = None,
) -> int:
    """Insere uma regra e retorna o rule_id gerado (ou o informado)."""
    if conn is None:
        ensure_inventory_tables()
    with transaction(conn) as tx:
        cur = tx.execute(
            """
            INSERT OR REPLACE INTO firewall_rules
                (rule_id, address, source, action, protocol,
                 port, program, comment)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                rule.rule_id, rule.address, rule.source, rule.action,
                rule.protocol, rule.port, rule.program, rule.comment,
            ),
        )
        return int(cur.lastrowid)


def replace_address_rules(
    address: str,
    rules: Iterable[FirewallRule],
    *,
    conn: sqlite3.Connection | None = None,
) -> int:
    """
    Substitui todas as regras de *address* pelas informadas.

    Recarregar o mesmo inventário não duplica regras. Retorna a
    quantidade gravada.
    """
    if conn is None:
        ensure_inventory_tables()
    count = 0
    with transaction(conn) as tx:
        tx.execute(
            "DELETE FROM firewall_rules WHERE address = ?",
            (address,),
        )
        for rule in rules:
            insert_rule(rule, conn=tx)
            count += 1
    return count
