"""Tests for the statistics service and blueprint."""

from core.services.statistics_service import (
    _with_percent,
    get_os_distribution,
    get_os_family_distribution,
)


class TestStatisticsService:
    def test_percent_rounding(self):
        rows = [{"name": "A", "count": 1}, {"name": "B", "count": 2}]
        data = _with_percent(rows)
        assert [(d.name, d.percent) for d in data] == [("A", 33.3), ("B", 66.7)]

    def test_empty_rows(self):
        assert _with_percent([]) == []

    def test_os_distribution(self, seeded_db):
        data = get_os_distribution()
        assert [(d.name, d.count, d.percent) for d in data] == [
            ("Ubuntu 22.04", 2, 50.0),
            ("Unknown", 1, 25.0),
            ("Windows 10", 1, 25.0),
        ]

    def test_os_family_distribution(self, seeded_db):
        data = get_os_family_distribution()
        assert data[0].name == "Linux"
        assert sum(d.count for d in data) == 4


class TestStatisticsEndpoints:
    def test_root_redirects_to_statistics(self, client):
        resp = client.get("/")
        assert resp.status_code == 302
        assert resp.headers["Location"].endswith("/statistics/")

    def test_index_renders_get_started(self, client):
        resp = client.get("/statistics/")
        body = resp.get_data(as_text=True)
        assert resp.status_code == 200
        assert "<title>Impulse - Statistics</title>" in body
        assert "Get started" in body
        assert "css/grid/full/main.css" in body

    def test_index_json(self, client, json_headers):
        resp = client.get("/statistics/", headers=json_headers)
        assert resp.status_code == 200
        assert resp.get_json() == {"title": "Statistics", "data": None}

    def test_sidebar_links(self, client):
        body = client.get("/statistics/").get_data(as_text=True)
        assert 'href="/statistics/os_distribution"' in body
        assert 'href="/statistics/os_family_distribution"' in body
        assert 'href="/systems/"' in body

    def test_os_distribution_html(self, client):
        resp = client.get("/statistics/os_distribution")
        body = resp.get_data(as_text=True)
        assert resp.status_code == 200
        assert "Statistics - Operating System Distribution" in body
        assert "<title>Impulse - OS Distribution</title>" in body
        assert "Ubuntu 22.04" in body
        assert "50.0" in body

    def test_os_family_distribution_html(self, client):
        resp = client.get("/statistics/os_family_distribution")
        body = resp.get_data(as_text=True)
        assert resp.status_code == 200
        assert "Statistics - Operating System Family Distribution" in body
        assert "OS Family Distribution" in body
        assert "BSD" in body

    def test_os_distribution_json(self, client, json_headers):
        resp = client.get("/statistics/os_distribution", headers=json_headers)
        payload = resp.get_json()
        assert payload["title"] == "OS Distribution"
        assert payload["total"] == 4
        assert payload["data"][0] == {"name": "Ubuntu 22.04", "count": 2, "percent": 50.0}

    def test_empty_inventory_message(self, db_path):
        from api import create_app
        from api.config import TestingConfig

        client = create_app(TestingConfig).test_client()
        body = client.get("/statistics/os_distribution").get_data(as_text=True)
        assert "No systems in the inventory yet." in body
