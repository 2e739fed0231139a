"""
core/
Núcleo do Impulse Dashboard.

Contém:
- schemas.py      : Modelos Pydantic do inventário (sistema, interface, endereço, regra).
- constants.py    : Caminho do banco e tags de origem de regras.
- db.py           : Conexão SQLite e criação das tabelas.
- repositories/   : Consultas do inventário.
- services/       : Montagem dos view-models das páginas.
"""

from .schemas import Address, FirewallRule, Interface, OsCount, RuleSource, System

__all__ = [
    "Address",
    "FirewallRule",
    "Interface",
    "OsCount",
    "RuleSource",
    "System",
]
