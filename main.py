"""
main.py
────────
Ponto de entrada de linha de comando do Impulse Dashboard.

Uso:
    python main.py init-db
    python main.py load inventory.json
    python main.py stats
    python main.py stats --family

Formato do inventário (JSON):
    {
      "systems": [
        {
          "name": "web01", "os_name": "Ubuntu 22.04", "os_family": "Linux",
          "interfaces": [
            {
              "mac": "52:54:00:12:34:56", "name": "eth0",
              "addresses": [
                {
                  "address": "10.0.0.10", "config": "static",
                  "rules": [
                    {"source": "standalone-standalone", "protocol": "tcp", "port": 22}
                  ]
                }
              ]
            }
          ]
        }
      ]
    }

O documento inteiro é validado pelos modelos Pydantic antes da gravação;
um registro inválido aborta a carga sem gravar nada. As regras de cada
endereço informado são substituídas a cada carga.
"""

from __future__ import annotations

import argparse
import json
import sqlite3
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from core.db import ensure_inventory_tables, transaction
from core.repositories.addresses_repository import upsert_address
from core.repositories.firewall_repository import replace_address_rules
from core.repositories.systems_repository import upsert_interface, upsert_system
from core.schemas import (
    Address,
    FirewallRule,
    Interface,
    InventoryDocument,
    System,
)
from core.services.statistics_service import (
    get_os_distribution,
    get_os_family_distribution,
)
from internalloggin.logger import setup_logger

logger = setup_logger(__name__)


# ── Carga do inventário ────────────────────────────────────────────────────────


def load_inventory(document: Any) -> dict[str, int]:
    """
    Grava sistemas, interfaces, endereços e regras de *document*.

    O documento inteiro é validado antes da primeira escrita, e a
    gravação ocorre numa única transação: ou tudo entra, ou nada.
    As regras de cada endereço presente no documento são substituídas,
    então recarregar o mesmo arquivo não as duplica.

    Raises:
        ValidationError: documento ou registro inválido (MAC, IP,
            campos obrigatórios, estrutura diferente de objeto).
        sqlite3.Error: falha de escrita no banco.
    """
    inventory = InventoryDocument.model_validate(document)

    ensure_inventory_tables()
    counts = {"systems": 0, "interfaces": 0, "addresses": 0, "rules": 0}

    with transaction() as conn:
        for entry in inventory.systems:
            system = System.model_validate(
                entry.model_dump(exclude={"interfaces"})
            )
            upsert_system(system, conn=conn)
            counts["systems"] += 1

            for if_entry in entry.interfaces:
                interface = Interface(
                    mac=if_entry.mac,
                    system_name=system.name,
                    name=if_entry.name,
                    comment=if_entry.comment,
                )
                upsert_interface(interface, conn=conn)
                counts["interfaces"] += 1

                for addr_entry in if_entry.addresses:
                    address = Address(
                        address=addr_entry.address,
                        mac=interface.mac,
                        config=addr_entry.config,
                        comment=addr_entry.comment,
                    )
                    upsert_address(address, conn=conn)
                    counts["addresses"] += 1

                    counts["rules"] += replace_address_rules(
                        address.address,
                        (
                            FirewallRule(
                                address=address.address,
                                **rule.model_dump(),
                            )
                            for rule in addr_entry.rules
                        ),
                        conn=conn,
                    )

    logger.info(
        "Inventário carregado — sistemas: %d  interfaces: %d  "
        "endereços: %d  regras: %d.",
        counts["systems"], counts["interfaces"],
        counts["addresses"], counts["rules"],
    )
    return counts


# ── Comandos ───────────────────────────────────────────────────────────────────


def _cmd_init_db(args: argparse.Namespace) -> int:
    ensure_inventory_tables()
    logger.info("Tabelas do inventário prontas.")
    return 0


def _cmd_load(args: argparse.Namespace) -> int:
    path = Path(args.file)
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
        load_inventory(document)
    except OSError as exc:
        logger.error("Falha ao ler '%s': %s", path, exc)
        return 1
    except json.JSONDecodeError as exc:
        logger.error("JSON inválido em '%s': %s", path, exc)
        return 1
    except ValidationError as exc:
        logger.error("Registro inválido em '%s': %s", path, exc)
        return 1
    except sqlite3.Error as exc:
        logger.error("Erro no banco ao carregar '%s': %s", path, exc)
        return 1
    return 0


def _cmd_stats(args: argparse.Namespace) -> int:
    try:
        data = (
            get_os_family_distribution()
            if args.family
            else get_os_distribution()
        )
    except sqlite3.Error as exc:
        logger.error("Erro no banco ao calcular estatísticas: %s", exc)
        return 1

    if not data:
        print("Nenhum sistema no inventário.")
        return 0

    width = max(len(row.name) for row in data)
    for row in data:
        print(f"{row.name:<{width}}  {row.count:>5}  {row.percent:5.1f}%")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="impulse",
        description="Ferramentas de linha de comando do Impulse Dashboard.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_init = sub.add_parser("init-db", help="Cria as tabelas do inventário.")
    p_init.set_defaults(func=_cmd_init_db)

    p_load = sub.add_parser("load", help="Carrega um inventário JSON.")
    p_load.add_argument("file", help="Caminho do arquivo JSON.")
    p_load.set_defaults(func=_cmd_load)

    p_stats = sub.add_parser("stats", help="Distribuição de SO do inventário.")
    p_stats.add_argument(
        "--family",
        action="store_true",
        help="Agrupa por família de SO.",
    )
    p_stats.set_defaults(func=_cmd_stats)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
