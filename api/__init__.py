"""
api/__init__.py
App Factory do Impulse Dashboard (Flask).

Uso:
    from api import create_app
    app = create_app()
"""

from flask import Flask, redirect, url_for

from api.blueprints.statistics import statistics_bp
from api.blueprints.systems import systems_bp
from api.config import DevelopmentConfig
from core.db import ensure_inventory_tables


def create_app(config_class=DevelopmentConfig) -> Flask:
    """Cria e configura a instância Flask."""

    app = Flask(
        __name__,
        template_folder="templates",
        static_folder="static",
    )

    app.config.from_object(config_class)

    ensure_inventory_tables()

    # ── Blueprints ────────────────────────────────────
    app.register_blueprint(
        statistics_bp, url_prefix="/statistics"
    )
    app.register_blueprint(
        systems_bp, url_prefix="/systems"
    )

    # ── Rota raiz ─────────────────────────────────────
    @app.get("/")
    def index():
        return redirect(url_for("statistics.index"))

    return app
