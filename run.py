"""
run.py — Servidor de desenvolvimento do Impulse Dashboard.

Uso:
    python run.py                      # DevelopmentConfig (debug ligado)
    FLASK_ENV=production python run.py # ProductionConfig

Host e porta: FLASK_HOST (padrão 127.0.0.1) e FLASK_PORT (padrão 5000).
"""

import os

from api import create_app
from api.config import DevelopmentConfig, ProductionConfig


def _config_from_env():
    if os.getenv("FLASK_ENV", "development").lower() == "production":
        return ProductionConfig
    return DevelopmentConfig


app = create_app(config_class=_config_from_env())

if __name__ == "__main__":
    app.run(
        host=os.getenv("FLASK_HOST", "127.0.0.1"),
        port=int(os.getenv("FLASK_PORT", "5000")),
        debug=bool(app.config.get("DEBUG", False)),
    )
