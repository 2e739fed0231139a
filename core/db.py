"""
core/db.py
Utilitário de acesso ao banco de dados SQLite.

Funções compartilhadas por todos os repositórios do sistema.
O caminho é lido de ``core.constants.DB_PATH`` a cada chamada,
o que permite trocá-lo em testes.
"""

from __future__ import annotations

import sqlite3
from contextlib import closing, contextmanager
from pathlib import Path
from typing import Any, Iterator

from core import constants


def db_path() -> Path:
    """Caminho atual do arquivo SQLite."""
    return constants.DB_PATH


def db_exists() -> bool:
    """Retorna True se o arquivo do banco de dados existir."""
    return db_path().exists()


def connect() -> sqlite3.Connection:
    """Abre uma conexão (criando o diretório) com FKs ativas."""
    path = db_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(path)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def query_rows(
    sql: str,
    params: tuple[Any, ...] = (),
) -> list[sqlite3.Row]:
    """Executa uma query SELECT e retorna todas as linhas."""
    if not db_exists():
        return []
    with closing(connect()) as conn:
        return conn.execute(sql, params).fetchall()


@contextmanager
def transaction(
    conn: sqlite3.Connection | None = None,
) -> Iterator[sqlite3.Connection]:
    """
    Escopo de escrita.

    Sem *conn*, abre uma conexão própria, faz commit (ou rollback em
    caso de erro) e fecha ao final. Com *conn*, apenas a repassa: o
    commit fica a cargo de quem abriu a transação externa.
    """
    if conn is not None:
        yield conn
        return
    with closing(connect()) as own, own:
        yield own


# ── Tabelas do inventário ─────────────────────────────────────────────────────

def ensure_inventory_tables() -> None:
    """
    Cria as tabelas do inventário (sistemas, interfaces, endereços e
    regras de firewall) caso não existam.

    Sem sistema de migração formal: ``CREATE TABLE IF NOT EXISTS``.
    """
    with closing(connect()) as conn:
        conn.executescript(
            """
            CREATE TABLE IF NOT EXISTS systems (
                name         TEXT    PRIMARY KEY,
                hostname     TEXT,
                os_name      TEXT,
                os_family    TEXT,
                os_version   TEXT,
                description  TEXT,
                owner        TEXT,
                created_at   TEXT    NOT NULL DEFAULT (datetime('now'))
            );

            CREATE INDEX IF NOT EXISTS idx_systems_os
                ON systems(os_name);
            CREATE INDEX IF NOT EXISTS idx_systems_family
                ON systems(os_family);

            -- Interfaces de rede (identificadas pelo MAC)
            CREATE TABLE IF NOT EXISTS interfaces (
                mac          TEXT    PRIMARY KEY,
                system_name  TEXT    NOT NULL
                    REFERENCES systems(name) ON DELETE CASCADE,
                name         TEXT,
                comment      TEXT
            );

            CREATE INDEX IF NOT EXISTS idx_interfaces_system
                ON interfaces(system_name);

            -- Endereços IP vinculados a uma interface
            CREATE TABLE IF NOT EXISTS addresses (
                address      TEXT    PRIMARY KEY,
                mac          TEXT    NOT NULL
                    REFERENCES interfaces(mac) ON DELETE CASCADE,
                family       INTEGER NOT NULL,
                config       TEXT,
                comment      TEXT
            );

            CREATE INDEX IF NOT EXISTS idx_addresses_mac
                ON addresses(mac);

            -- Regras de firewall por endereço
            CREATE TABLE IF NOT EXISTS firewall_rules (
                rule_id      INTEGER PRIMARY KEY AUTOINCREMENT,
                address      TEXT    NOT NULL
                    REFERENCES addresses(address) ON DELETE CASCADE,
                source       TEXT    NOT NULL,
                action       TEXT    NOT NULL DEFAULT 'accept',
                protocol     TEXT,
                port         INTEGER,
                program      TEXT,
                comment      TEXT
            );

            CREATE INDEX IF NOT EXISTS idx_fw_rules_address
                ON firewall_rules(address);
            """
        )
        conn.commit()
