"""
core/repositories/addresses_repository.py
Endereços IP por interface.
"""

from __future__ import annotations

import sqlite3
from ipaddress import ip_address
from typing import Any

from core.db import ensure_inventory_tables, query_rows, transaction
from core.schemas import Address, normalize_mac


def _address_key(row: dict[str, Any]) -> tuple[int, int]:
    ip = ip_address(row["address"])
    return ip.version, int(ip)


def get_interface_addresses(mac: str) -> list[dict[str, Any]]:
    """
    Endereços vinculados à interface *mac*, IPv4 antes de IPv6 e em
    ordem numérica dentro de cada família.

    O MAC é normalizado antes da consulta; um valor inválido
    resulta em lista vazia.
    """
    try:
        mac = normalize_mac(mac)
    except ValueError:
        return []
    rows = query_rows(
        """
        SELECT address, mac, family, config, comment
        FROM   addresses
        WHERE  mac = ?
        """,
        (mac,),
    )
    return sorted((dict(r) for r in rows), key=_address_key)


def upsert_address(
    address: Address,
    *,
    conn: sqlite3.Connection | None = None,
) -> None:
    """Insere ou atualiza um endereço (chave: address)."""
    if conn is None:
        ensure_inventory_tables()
    with transaction(conn) as tx:
        tx.execute(
            """
            INSERT INTO addresses (address, mac, family, config, comment)
            VALUES (?, ?, ?, ?, ?)
            ON CONFLICT(address) DO UPDATE SET
                mac     = excluded.mac,
                family  = excluded.family,
                config  = excluded.config,
                comment = excluded.comment
            """,
            (
                address.address, address.mac, address.family,
                address.config, address.comment,
            ),
        )
