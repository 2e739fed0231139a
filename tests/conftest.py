"""Shared fixtures for the Impulse Dashboard test suite."""

from __future__ import annotations

import copy

import pytest

from api import create_app
from api.config import TestingConfig
from core import constants
from main import load_inventory

SAMPLE_INVENTORY = {
    "systems": [
        {
            "name": "web01",
            "hostname": "web01.lab",
            "os_name": "Ubuntu 22.04",
            "os_family": "Linux",
            "owner": "ops",
            "interfaces": [
                {
                    "mac": "52:54:00:aa:bb:01",
                    "name": "eth0",
                    "addresses": [
                        {
                            "address": "10.0.0.10",
                            "config": "static",
                            "rules": [
                                {
                                    "source": "standalone-standalone",
                                    "protocol": "tcp",
                                    "port": 22,
                                    "comment": "ssh",
                                },
                                {
                                    "source": "standalone-program",
                                    "program": "/usr/sbin/nginx",
                                },
                                {
                                    "source": "legacy-import",
                                    "comment": "imported-from-old-fw",
                                },
                            ],
                        },
                        {
                            "address": "10.0.0.11",
                            "rules": [
                                {
                                    "source": "standalone-standalone",
                                    "protocol": "udp",
                                    "port": 53,
                                },
                            ],
                        },
                    ],
                },
                {
                    "mac": "52-54-00-AA-BB-02",
                    "name": "eth1",
                    "addresses": [
                        {"address": "fe80::1", "config": "autoconf"},
                    ],
                },
            ],
        },
        {
            "name": "db01",
            "os_name": "Ubuntu 22.04",
            "os_family": "Linux",
        },
        {
            "name": "win01",
            "os_name": "Windows 10",
            "os_family": "Windows",
            "interfaces": [
                {
                    "mac": "001122334455",
                    "name": "Ethernet0",
                    "addresses": [
                        {
                            "address": "192.168.1.5",
                            "rules": [
                                {
                                    "source": "standalone-program",
                                    "program": "C:\\Program Files\\app.exe",
                                    "action": "drop",
                                },
                            ],
                        },
                    ],
                },
            ],
        },
        {
            "name": "bsd01",
            "os_family": "BSD",
        },
    ]
}


@pytest.fixture()
def db_path(tmp_path, monkeypatch):
    """Points the repositories at an empty, per-test SQLite file."""
    path = tmp_path / "impulse.db"
    monkeypatch.setattr(constants, "DB_PATH", path)
    return path


@pytest.fixture()
def sample_inventory():
    return copy.deepcopy(SAMPLE_INVENTORY)


@pytest.fixture()
def seeded_db(db_path, sample_inventory):
    """Database loaded with SAMPLE_INVENTORY."""
    load_inventory(sample_inventory)
    return db_path


@pytest.fixture()
def app(seeded_db):
    return create_app(TestingConfig)


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def json_headers():
    return {"Accept": "application/json"}
