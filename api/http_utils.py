"""
api/http_utils.py
Utilitários HTTP exclusivos da camada web Flask.
"""

from __future__ import annotations

from flask import Request, jsonify


def wants_json(request: Request) -> bool:
    """True se o cliente prefere application/json."""
    best = request.accept_mimetypes.best_match(
        ["application/json", "text/html"]
    )
    return best == "application/json"


def error_response(request: Request, message: str, status: int):
    """Erro em JSON ({"error": ...}) ou text/plain, conforme Accept."""
    if wants_json(request):
        return jsonify({"error": message}), status
    return message, status, {"Content-Type": "text/plain; charset=utf-8"}
