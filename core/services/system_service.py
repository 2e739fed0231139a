"""
core/services/system_service.py
Montagem da página de um sistema.

Fluxo (fan-out fixo em 3 níveis):
    1. Dados do sistema.
    2. Para cada interface, seus endereços.
    3. Para cada endereço, suas regras de firewall separadas por origem:
         standalone-standalone → stdrules
         standalone-program    → stdprogs
       Regras com outra origem não entram em nenhum grupo.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from core.constants import RULE_SOURCE_PROGRAM, RULE_SOURCE_STANDALONE
from core.repositories.addresses_repository import get_interface_addresses
from core.repositories.firewall_repository import get_address_rules
from core.repositories.systems_repository import (
    get_system_info,
    get_system_interfaces,
)
from internalloggin.logger import setup_logger

logger = setup_logger(__name__)


class SystemServiceError(Exception):
    """Erro base da montagem de páginas de sistema."""


class MissingSystemNameError(SystemServiceError):
    """Nenhum nome de sistema foi informado."""

    def __init__(self) -> None:
        super().__init__("Need to specify system")


class SystemNotFoundError(SystemServiceError):
    """O nome informado não existe no inventário."""

    def __init__(self, system_name: str) -> None:
        self.system_name = system_name
        super().__init__(f"System '{system_name}' not found")


@dataclass
class RuleBuckets:
    stdrules: list[dict[str, Any]] = field(default_factory=list)
    stdprogs: list[dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        return {"stdrules": self.stdrules, "stdprogs": self.stdprogs}


def partition_rules(rules: Iterable[dict[str, Any]]) -> RuleBuckets:
    """
    Separa as regras em dois grupos pela tag ``source``.

    A ordem de entrada é preservada dentro de cada grupo. Origens
    desconhecidas são descartadas (apenas logadas em DEBUG).
    """
    buckets = RuleBuckets()
    for rule in rules:
        source = rule.get("source")
        if source == RULE_SOURCE_STANDALONE:
            buckets.stdrules.append(rule)
        elif source == RULE_SOURCE_PROGRAM:
            buckets.stdprogs.append(rule)
        else:
            logger.debug(
                "Regra %s ignorada: origem '%s' sem grupo de exibição.",
                rule.get("rule_id"), source,
            )
    return buckets


def _address_view(address: dict[str, Any]) -> dict[str, Any]:
    buckets = partition_rules(get_address_rules(address["address"]))
    return {
        **address,
        "rules": buckets.to_dict(),
        "show_stdrules": len(buckets.stdrules) > 0,
        "show_stdprogs": len(buckets.stdprogs) > 0,
    }


def _interface_view(interface: dict[str, Any]) -> dict[str, Any]:
    addresses = [
        _address_view(a) for a in get_interface_addresses(interface["mac"])
    ]
    return {**interface, "addresses": addresses}


def build_system_view(system_name: str | None) -> dict[str, Any]:
    """
    View-model completo da página de um sistema.

    Raises:
        MissingSystemNameError: nome vazio ou ausente.
        SystemNotFoundError: sistema inexistente no inventário.
    """
    if not system_name or not system_name.strip():
        raise MissingSystemNameError()

    system = get_system_info(system_name)
    if system is None:
        raise SystemNotFoundError(system_name)

    interfaces = [
        _interface_view(i) for i in get_system_interfaces(system_name)
    ]
    logger.debug(
        "Sistema '%s': %d interface(s), %d endereço(s).",
        system_name,
        len(interfaces),
        sum(len(i["addresses"]) for i in interfaces),
    )
    return {"system": system, "interfaces": interfaces}
