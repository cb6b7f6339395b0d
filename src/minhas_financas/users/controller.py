from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import error_response, json_body, json_errors
from ..container import Container
from .model import User


def user_to_json(user: User) -> dict:
    # The password hash never leaves the service.
    return {"id": user.user_id, "nome": user.name, "email": user.email}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/usuarios/autenticar", methods=["POST"], endpoint="authenticate_user")
    @json_errors
    def authenticate_user():
        payload = json_body()
        user = container.user_service.authenticate(payload.get("email") or "", payload.get("senha") or "")
        return jsonify(user_to_json(user)), 200

    @app.route("/api/usuarios", methods=["POST"], endpoint="register_user")
    @json_errors
    def register_user():
        payload = json_body()
        user = User(name=payload.get("nome"), email=payload.get("email"), password=payload.get("senha"))
        saved = container.user_service.register_user(user)
        return jsonify(user_to_json(saved)), 201

    @app.route("/api/usuarios/<int:user_id>/saldo", methods=["GET"], endpoint="user_balance")
    @json_errors
    def user_balance(user_id: int):
        if container.user_service.get_by_id(user_id) is None:
            return error_response("Usuário não encontrado para o Id informado.", 404)

        balance = container.entry_service.get_balance_for_user(user_id)
        return jsonify({"saldo": str(balance)}), 200
