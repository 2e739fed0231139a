"""
core/repositories/
Camada de acesso a dados (DAL) do Impulse Dashboard.

Repositórios compartilhados pelo CLI (main.py) e pela
camada web (api/).
"""

from core.repositories.addresses_repository import (
    get_interface_addresses,
    upsert_address,
)
from core.repositories.firewall_repository import (
    get_address_rules,
    insert_rule,
    replace_address_rules,
)
from core.repositories.statistics_repository import (
    os_distribution,
    os_family_distribution,
)
from core.repositories.systems_repository import (
    get_system_info,
    get_system_interfaces,
    list_system_names,
    upsert_interface,
    upsert_system,
)

__all__ = [
    # addresses
    "get_interface_addresses",
    "upsert_address",
    # firewall
    "get_address_rules",
    "insert_rule",
    "replace_address_rules",
    # statistics
    "os_distribution",
    "os_family_distribution",
    # systems
    "get_system_info",
    "get_system_interfaces",
    "list_system_names",
    "upsert_interface",
    "upsert_system",
]
