"""
api/config.py
Classes de configuração Flask por ambiente.
"""

import os

from core.constants import DEFAULT_SKIN


class BaseConfig:
    SECRET_KEY: str = os.getenv(
        "FLASK_SECRET_KEY", "dev-secret-change-in-prod"
    )

    APP_NAME: str = "Impulse"

    # Skin CSS usada pelas páginas de sistema
    SKIN: str = os.getenv("IMPULSE_SKIN", DEFAULT_SKIN)


class DevelopmentConfig(BaseConfig):
    DEBUG: bool = True
    TESTING: bool = False


class ProductionConfig(BaseConfig):
    DEBUG: bool = False
    TESTING: bool = False


class TestingConfig(BaseConfig):
    TESTING: bool = True
    SKIN: str = DEFAULT_SKIN
