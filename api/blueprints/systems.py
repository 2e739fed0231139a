"""
api/blueprints/systems.py
Blueprint de visualização de sistemas do inventário.

Endpoints:
    GET /systems/                     — lista de sistemas
    GET /systems/view/<system_name>   — sistema → interfaces → endereços → regras
    GET /systems/edit/<system_name>   — confirmação de edição (sem persistência)

Sem nome de sistema, /view e /edit respondem 400.
"""

from __future__ import annotations

from flask import (
    Blueprint,
    current_app,
    jsonify,
    render_template,
    request,
)
from api.http_utils import error_response, wants_json
from core.repositories.systems_repository import list_system_names
from core.services.chrome_service import Navbar, build_chrome
from core.services.system_service import (
    MissingSystemNameError,
    SystemNotFoundError,
    build_system_view,
)
from internalloggin.logger import setup_logger

logger = setup_logger(__name__)

systems_bp = Blueprint("systems", __name__)


# ── Rotas ────────────────────────────────────────────


@systems_bp.get("/")
def index():
    """Ponto de entrada: lista os sistemas conhecidos."""
    names = list_system_names()

    if wants_json(request):
        return jsonify({"systems": names, "total": len(names)})

    return render_template(
        "systems/index.html",
        systems=names,
        **build_chrome("Systems", Navbar("Systems")),
    )


@systems_bp.get("/view/", defaults={"system_name": None})
@systems_bp.get("/view/<system_name>")
def view(system_name: str | None):
    """Página completa de um sistema com regras de firewall agrupadas."""
    try:
        page = build_system_view(system_name)
    except MissingSystemNameError as exc:
        logger.warning("Visualização de sistema sem nome informado.")
        return error_response(request, str(exc), 400)
    except SystemNotFoundError as exc:
        logger.warning("Sistema '%s' não encontrado.", exc.system_name)
        return error_response(request, str(exc), 404)

    if wants_json(request):
        return jsonify(page)

    return render_template(
        "systems/view.html",
        skin=current_app.config.get("SKIN", "grid"),
        **page,
    )


@systems_bp.get("/edit/", defaults={"system_name": None})
@systems_bp.get("/edit/<system_name>")
def edit(system_name: str | None):
    """Confirma o sistema em edição; nada é persistido."""
    if not system_name or not system_name.strip():
        logger.warning("Edição de sistema sem nome informado.")
        return error_response(request, str(MissingSystemNameError()), 400)

    message = f'Editing system "{system_name}"'
    if wants_json(request):
        return jsonify({"system": system_name, "message": message})
    return message, 200, {"Content-Type": "text/plain; charset=utf-8"}
