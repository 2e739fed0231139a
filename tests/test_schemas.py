"""Tests for core.schemas."""

import pytest
from pydantic import ValidationError

from core.schemas import Address, FirewallRule, Interface, OsCount, System, normalize_mac


class TestNormalizeMac:
    @pytest.mark.parametrize(
        "raw",
        [
            "52:54:00:aa:bb:01",
            "52-54-00-AA-BB-01",
            "5254.00aa.bb01",
            "525400aabb01",
            "  52:54:00:aa:bb:01 ",
        ],
    )
    def test_accepted_formats(self, raw):
        assert normalize_mac(raw) == "52:54:00:AA:BB:01"

    @pytest.mark.parametrize("raw", ["", "52:54:00:aa:bb", "zz:54:00:aa:bb:01", "52:54:00:aa:bb:01:02"])
    def test_rejected_formats(self, raw):
        with pytest.raises(ValueError):
            normalize_mac(raw)


class TestModels:
    def test_interface_normalizes_mac(self):
        iface = Interface(mac="001122334455", system_name="web01")
        assert iface.mac == "00:11:22:33:44:55"

    def test_interface_rejects_bad_mac(self):
        with pytest.raises(ValidationError):
            Interface(mac="not-a-mac", system_name="web01")

    def test_address_family_is_derived(self):
        v4 = Address(address="10.0.0.1", mac="00:11:22:33:44:55", family=6)
        v6 = Address(address="FE80::0001", mac="00:11:22:33:44:55")
        assert v4.family == 4
        assert v6.family == 6
        assert v6.address == "fe80::1"

    def test_address_rejects_invalid_ip(self):
        with pytest.raises(ValidationError):
            Address(address="10.0.0.300", mac="00:11:22:33:44:55")

    def test_rule_keeps_unknown_source(self):
        rule = FirewallRule(address="10.0.0.1", source="custom-tag")
        assert rule.source == "custom-tag"
        assert rule.action == "accept"

    def test_rule_port_range(self):
        with pytest.raises(ValidationError):
            FirewallRule(address="10.0.0.1", source="standalone-standalone", port=70000)

    def test_system_requires_name(self):
        with pytest.raises(ValidationError):
            System(name="")

    def test_system_strips_whitespace(self):
        assert System(name="  web01 ").name == "web01"

    def test_os_count_percent_bounds(self):
        with pytest.raises(ValidationError):
            OsCount(name="Linux", count=1, percent=101.0)
