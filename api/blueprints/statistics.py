"""
api/blueprints/statistics.py
Blueprint de estatísticas do inventário.

Endpoints:
    GET /statistics/                        — página "get started"
    GET /statistics/os_distribution         — distribuição por SO
    GET /statistics/os_family_distribution  — distribuição por família de SO
"""

from __future__ import annotations

from flask import (
    Blueprint,
    jsonify,
    render_template,
    request,
)

from api.http_utils import wants_json
from core.services.chrome_service import Navbar, build_chrome
from core.services.statistics_service import (
    get_os_distribution,
    get_os_family_distribution,
)

statistics_bp = Blueprint("statistics", __name__)


# ── Helpers ──────────────────────────────────────────


def _render_distribution(template: str, navbar_title: str, title: str, data):
    if wants_json(request):
        return jsonify(
            {
                "title": title,
                "data": [d.model_dump() for d in data],
                "total": sum(d.count for d in data),
            }
        )

    return render_template(
        template,
        data=data,
        **build_chrome(title, Navbar(navbar_title)),
    )


# ── Rotas ────────────────────────────────────────────


@statistics_bp.get("/")
def index():
    """Página inicial de estatísticas, sem consulta de dados."""
    if wants_json(request):
        return jsonify({"title": "Statistics", "data": None})

    return render_template(
        "statistics/getstarted.html",
        **build_chrome("Statistics", Navbar("Statistics")),
    )


@statistics_bp.get("/os_distribution")
def os_distribution():
    """Distribuição de sistemas por sistema operacional."""
    return _render_distribution(
        "statistics/os_distribution.html",
        "Statistics - Operating System Distribution",
        "OS Distribution",
        get_os_distribution(),
    )


@statistics_bp.get("/os_family_distribution")
def os_family_distribution():
    """Distribuição de sistemas por família de SO."""
    return _render_distribution(
        "statistics/os_family_distribution.html",
        "Statistics - Operating System Family Distribution",
        "OS Family Distribution",
        get_os_family_distribution(),
    )
