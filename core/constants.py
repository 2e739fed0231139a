"""
core/constants.py
Constantes de domínio do Impulse Dashboard.

Single source of truth para o caminho do banco de dados,
tags de origem de regras de firewall e rótulos padrão.
"""

from __future__ import annotations

import os
from pathlib import Path

# ── Caminho do banco de dados SQLite ─────────────────────────
DB_PATH: Path = Path(
    os.getenv(
        "IMPULSE_DB_PATH",
        str(
            Path(__file__).resolve().parent.parent
            / "inventory"
            / "impulse_data.db"
        ),
    )
)

# ── Origem das regras de firewall ────────────────────────────
RULE_SOURCE_STANDALONE: str = "standalone-standalone"
RULE_SOURCE_PROGRAM: str = "standalone-program"

# ── Agrupamento de SO sem valor cadastrado ───────────────────
UNKNOWN_OS_LABEL: str = "Unknown"

# ── Skin padrão das páginas de sistema ───────────────────────
DEFAULT_SKIN: str = "grid"
