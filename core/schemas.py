"""
core/schemas.py
───────────────
Modelos Pydantic que representam o inventário exibido pelo Impulse
Dashboard: sistemas, interfaces, endereços e regras de firewall.

Design Decisions
────────────────
1. Hierarquia em 4 níveis:
       FirewallRule → Address → Interface → System

   Cada nível aponta para o dono pela chave natural (system_name, mac,
   address), espelhando as foreign keys do SQLite.

2. ConfigDict(str_strip_whitespace=True):
   Dados importados de planilhas e coletores costumam trazer espaços
   extras. A normalização evita chaves duplicadas por diferença de espaço.

3. mac normalizado para XX:XX:XX:XX:XX:XX via field_validator, aceitando
   separadores ':', '-', '.' ou nenhum.

4. address validado com ipaddress; a família (4/6) é derivada e nunca
   informada manualmente.
"""

import re
from datetime import datetime, timezone
from enum import Enum
from ipaddress import ip_address
from typing import Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from core.constants import RULE_SOURCE_PROGRAM, RULE_SOURCE_STANDALONE

_MAC_HEX_RE = re.compile(r"^[0-9A-Fa-f]{12}$")


def normalize_mac(value: str) -> str:
    """
    Normaliza um MAC para XX:XX:XX:XX:XX:XX (maiúsculo).

    Raises:
        ValueError: se o valor não contiver exatamente 12 dígitos hex.
    """
    raw = re.sub(r"[:\-.\s]", "", value or "")
    if not _MAC_HEX_RE.match(raw):
        raise ValueError(f"Endereço MAC inválido: '{value}'")
    raw = raw.upper()
    return ":".join(raw[i:i + 2] for i in range(0, 12, 2))


def normalize_ip(value: str) -> str:
    """Forma canônica de um IPv4/IPv6; ValueError se inválido."""
    try:
        return str(ip_address(value))
    except ValueError as exc:
        raise ValueError(f"Endereço IP inválido: '{value}'") from exc


# ─── Enum: Origem da regra ───────────────────────────────────────────────────

class RuleSource(str, Enum):
    """Tags de origem conhecidas para regras de firewall."""

    STANDALONE = RULE_SOURCE_STANDALONE
    PROGRAM = RULE_SOURCE_PROGRAM


# ─── Modelo 1: Sistema ───────────────────────────────────────────────────────

class System(BaseModel):
    """Um sistema (host) do inventário, identificado pelo nome."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, description="Nome único do sistema.")
    hostname: Optional[str] = None
    os_name: Optional[str] = Field(
        default=None,
        description="Distribuição do SO (ex: 'Ubuntu 22.04', 'Windows 10').",
    )
    os_family: Optional[str] = Field(
        default=None,
        description="Família do SO (ex: 'Linux', 'Windows', 'BSD').",
    )
    os_version: Optional[str] = None
    description: Optional[str] = None
    owner: Optional[str] = None
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )


# ─── Modelo 2: Interface ─────────────────────────────────────────────────────

class Interface(BaseModel):
    """Interface de rede de um sistema, identificada pelo MAC."""

    model_config = ConfigDict(str_strip_whitespace=True)

    mac: str = Field(..., description="MAC em formato XX:XX:XX:XX:XX:XX.")
    system_name: str = Field(..., min_length=1)
    name: Optional[str] = Field(
        default=None, description="Nome da interface (ex: 'eth0')."
    )
    comment: Optional[str] = None

    @field_validator("mac")
    @classmethod
    def _normalize_mac(cls, v: str) -> str:
        return normalize_mac(v)


# ─── Modelo 3: Endereço ──────────────────────────────────────────────────────

class Address(BaseModel):
    """Endereço IP (v4 ou v6) vinculado a uma interface."""

    model_config = ConfigDict(str_strip_whitespace=True)

    address: str
    mac: str
    family: int = Field(default=4, description="4 ou 6, derivado de address.")
    config: Optional[str] = Field(
        default=None,
        description="Origem da configuração: static, dhcp, autoconf.",
    )
    comment: Optional[str] = None

    @field_validator("mac")
    @classmethod
    def _normalize_mac(cls, v: str) -> str:
        return normalize_mac(v)

    @field_validator("address")
    @classmethod
    def _validate_address(cls, v: str) -> str:
        return normalize_ip(v)

    @model_validator(mode="after")
    def _derive_family(self) -> "Address":
        self.family = ip_address(self.address).version
        return self


# ─── Modelo 4: Regra de firewall ─────────────────────────────────────────────

class FirewallRule(BaseModel):
    """
    Regra de firewall associada a um endereço.

    ``source`` é mantido como string livre: valores fora de RuleSource
    são aceitos e armazenados, apenas não entram em nenhum grupo de
    exibição.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    rule_id: Optional[int] = None
    address: str
    source: str = Field(..., min_length=1)
    action: str = "accept"
    protocol: Optional[str] = None
    port: Optional[int] = Field(default=None, ge=0, le=65535)
    program: Optional[str] = None
    comment: Optional[str] = None

    @field_validator("address")
    @classmethod
    def _validate_address(cls, v: str) -> str:
        return normalize_ip(v)


# ─── Documento de inventário (carga via CLI) ─────────────────────────────────
#
# Forma aninhada do JSON aceito por `main.py load`. O documento inteiro é
# validado antes de qualquer escrita no banco.

class RuleEntry(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    rule_id: Optional[int] = None
    source: str = Field(..., min_length=1)
    action: str = "accept"
    protocol: Optional[str] = None
    port: Optional[int] = Field(default=None, ge=0, le=65535)
    program: Optional[str] = None
    comment: Optional[str] = None


class AddressEntry(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    address: str
    config: Optional[str] = None
    comment: Optional[str] = None
    rules: list[RuleEntry] = Field(default_factory=list)

    @field_validator("address")
    @classmethod
    def _validate_address(cls, v: str) -> str:
        return normalize_ip(v)


class InterfaceEntry(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    mac: str
    name: Optional[str] = None
    comment: Optional[str] = None
    addresses: list[AddressEntry] = Field(default_factory=list)

    @field_validator("mac")
    @classmethod
    def _normalize_mac(cls, v: str) -> str:
        return normalize_mac(v)


class SystemEntry(System):
    interfaces: list[InterfaceEntry] = Field(default_factory=list)


class InventoryDocument(BaseModel):
    """Raiz do JSON de inventário: ``{"systems": [...]}``."""

    systems: list[SystemEntry] = Field(default_factory=list)


# ─── Estatísticas ────────────────────────────────────────────────────────────

class OsCount(BaseModel):
    """Uma linha de distribuição de SO (ou família de SO)."""

    name: str
    count: int = Field(..., ge=0)
    percent: float = Field(default=0.0, ge=0.0, le=100.0)
