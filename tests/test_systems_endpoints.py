"""Tests for the systems blueprint."""

import pytest


class TestSystemsIndex:
    def test_html_lists_systems(self, client):
        body = client.get("/systems/").get_data(as_text=True)
        assert "You are working with a system" in body
        assert 'href="/systems/view/web01"' in body

    def test_json(self, client, json_headers):
        payload = client.get("/systems/", headers=json_headers).get_json()
        assert payload == {
            "systems": ["bsd01", "db01", "web01", "win01"],
            "total": 4,
        }


class TestSystemView:
    def test_missing_name_is_rejected(self, client):
        resp = client.get("/systems/view/")
        assert resp.status_code == 400
        assert resp.get_data(as_text=True) == "Need to specify system"

    def test_missing_name_json(self, client, json_headers):
        resp = client.get("/systems/view/", headers=json_headers)
        assert resp.status_code == 400
        assert resp.get_json() == {"error": "Need to specify system"}

    def test_unknown_system_is_404(self, client):
        resp = client.get("/systems/view/ghost")
        assert resp.status_code == 404
        assert "ghost" in resp.get_data(as_text=True)

    def test_unknown_system_json(self, client, json_headers):
        resp = client.get("/systems/view/ghost", headers=json_headers)
        assert resp.status_code == 404
        assert resp.get_json() == {"error": "System 'ghost' not found"}

    def test_renders_full_tree(self, client):
        resp = client.get("/systems/view/web01")
        body = resp.get_data(as_text=True)
        assert resp.status_code == 200
        assert "css/grid/full/main.css" in body
        assert "web01" in body
        assert "52:54:00:AA:BB:01" in body
        assert "10.0.0.11" in body
        assert "fe80::1" in body

    def test_bucket_views_render_only_when_non_empty(self, client):
        body = client.get("/systems/view/web01").get_data(as_text=True)
        # 10.0.0.10 and 10.0.0.11 have standalone rules, only 10.0.0.10 has programs
        assert body.count('class="firewall standalone-rules"') == 2
        assert body.count('class="firewall standalone-programs"') == 1
        assert "/usr/sbin/nginx" in body
        assert "imported-from-old-fw" not in body

    def test_program_only_system(self, client):
        body = client.get("/systems/view/win01").get_data(as_text=True)
        assert 'class="firewall standalone-rules"' not in body
        assert body.count('class="firewall standalone-programs"') == 1

    def test_system_without_interfaces(self, client):
        body = client.get("/systems/view/db01").get_data(as_text=True)
        assert 'class="interface"' not in body
        assert 'class="firewall' not in body

    def test_json(self, client, json_headers):
        payload = client.get("/systems/view/web01", headers=json_headers).get_json()
        addr = payload["interfaces"][0]["addresses"][0]
        assert payload["system"]["os_name"] == "Ubuntu 22.04"
        assert addr["show_stdprogs"] is True
        assert [r["program"] for r in addr["rules"]["stdprogs"]] == ["/usr/sbin/nginx"]

    def test_skin_from_config(self, app):
        app.config["SKIN"] = "classic"
        body = app.test_client().get("/systems/view/web01").get_data(as_text=True)
        assert "css/classic/full/main.css" in body


class TestSystemEdit:
    def test_acknowledges_name(self, client):
        resp = client.get("/systems/edit/web01")
        assert resp.status_code == 200
        assert resp.get_data(as_text=True) == 'Editing system "web01"'

    @pytest.mark.parametrize("url", ["/systems/edit/", "/systems/edit/%20"])
    def test_missing_name(self, client, url):
        resp = client.get(url)
        assert resp.status_code == 400
        assert "Need to specify system" in resp.get_data(as_text=True)

    def test_json(self, client, json_headers):
        payload = client.get("/systems/edit/db01", headers=json_headers).get_json()
        assert payload == {"system": "db01", "message": 'Editing system "db01"'}
