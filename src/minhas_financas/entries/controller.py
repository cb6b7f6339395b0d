from __future__ import annotations

from dataclasses import replace
from decimal import Decimal, InvalidOperation
from typing import Optional

from flask import Flask, jsonify, request

from ..common.http import error_response, json_body, json_errors
from ..container import Container
from ..core.enums import EntryStatus, EntryType
from ..core.exceptions import BusinessRuleError
from .model import Entry, EntryFilter

ENTRY_NOT_FOUND = "Lançamento não encontrado na base de Dados."


def entry_to_json(entry: Entry) -> dict:
    return {
        "id": entry.entry_id,
        "descricao": entry.description,
        "mes": entry.month,
        "ano": entry.year,
        "usuario": entry.user_id,
        "valor": str(entry.amount) if entry.amount is not None else None,
        "tipo": entry.entry_type.value if entry.entry_type else None,
        "status": entry.status.value if entry.status else None,
        "dataCadastro": entry.created_on.isoformat() if entry.created_on else None,
    }


def _parse_int(value, message: str) -> Optional[int]:
    if value is None or value == "":
        return None
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise BusinessRuleError(message)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise BusinessRuleError(message)


def _parse_decimal(value) -> Optional[Decimal]:
    if value is None or value == "":
        return None
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        raise BusinessRuleError("Informe um Valor válido.")
    if not amount.is_finite():
        raise BusinessRuleError("Informe um Valor válido.")
    return amount


def _parse_type(value) -> Optional[EntryType]:
    if not value:
        return None
    try:
        return EntryType(str(value).upper())
    except ValueError:
        raise BusinessRuleError("Informe um tipo de Lançamento.")


def _parse_status(value) -> Optional[EntryStatus]:
    if not value:
        return None
    try:
        return EntryStatus(str(value).upper())
    except ValueError:
        raise BusinessRuleError("Não foi possível atualizar o status do lançamento, envie um status válido.")


def register(app: Flask, container: Container) -> None:
    def entry_from_json(payload: dict) -> Entry:
        user_id = _parse_int(payload.get("usuario"), "Informe um Usuário.")
        if user_id is None or container.user_service.get_by_id(user_id) is None:
            raise BusinessRuleError("Usuário não encontrado para o Id informado.")

        return Entry(
            description=payload.get("descricao"),
            month=_parse_int(payload.get("mes"), "Informe um Mês válido."),
            year=_parse_int(payload.get("ano"), "Informe um Ano válido."),
            user_id=user_id,
            amount=_parse_decimal(payload.get("valor")),
            entry_type=_parse_type(payload.get("tipo")),
            status=_parse_status(payload.get("status")),
        )

    @app.route("/api/lancamentos", methods=["GET"], endpoint="search_entries")
    @json_errors
    def search_entries():
        user_id = _parse_int(request.args.get("usuario"), "Informe um Usuário.")
        if user_id is None or container.user_service.get_by_id(user_id) is None:
            return error_response(
                "Não foi possível realizar a consulta. Usuário não encontrado para o Id informado.", 400
            )

        criteria = EntryFilter(
            user_id=user_id,
            description=request.args.get("descricao") or None,
            month=_parse_int(request.args.get("mes"), "Informe um Mês válido."),
            year=_parse_int(request.args.get("ano"), "Informe um Ano válido."),
            entry_type=_parse_type(request.args.get("tipo")),
        )
        entries = container.entry_service.search(criteria)
        return jsonify([entry_to_json(e) for e in entries]), 200

    @app.route("/api/lancamentos/<int:entry_id>", methods=["GET"], endpoint="get_entry")
    @json_errors
    def get_entry(entry_id: int):
        entry = container.entry_service.get_by_id(entry_id)
        if entry is None:
            return error_response(ENTRY_NOT_FOUND, 404)
        return jsonify(entry_to_json(entry)), 200

    @app.route("/api/lancamentos", methods=["POST"], endpoint="create_entry")
    @json_errors
    def create_entry():
        entry = entry_from_json(json_body())
        saved = container.entry_service.save(entry)
        return jsonify(entry_to_json(saved)), 201

    @app.route("/api/lancamentos/<int:entry_id>", methods=["PUT"], endpoint="update_entry")
    @json_errors
    def update_entry(entry_id: int):
        existing = container.entry_service.get_by_id(entry_id)
        if existing is None:
            return error_response(ENTRY_NOT_FOUND, 400)

        entry = entry_from_json(json_body())
        entry = replace(
            entry,
            entry_id=existing.entry_id,
            status=entry.status or existing.status,
            created_on=existing.created_on,
        )
        saved = container.entry_service.update(entry)
        return jsonify(entry_to_json(saved)), 200

    @app.route("/api/lancamentos/<int:entry_id>/atualiza-status", methods=["PUT"], endpoint="update_entry_status")
    @json_errors
    def update_entry_status(entry_id: int):
        existing = container.entry_service.get_by_id(entry_id)
        if existing is None:
            return error_response(ENTRY_NOT_FOUND, 400)

        payload = json_body()
        status = _parse_status(payload.get("status"))
        if status is None:
            return error_response(
                "Não foi possível atualizar o status do lançamento, envie um status válido.", 400
            )

        saved = container.entry_service.update_status(existing, status)
        return jsonify(entry_to_json(saved)), 200

    @app.route("/api/lancamentos/<int:entry_id>", methods=["DELETE"], endpoint="delete_entry")
    @json_errors
    def delete_entry(entry_id: int):
        existing = container.entry_service.get_by_id(entry_id)
        if existing is None:
            return error_response(ENTRY_NOT_FOUND, 400)

        container.entry_service.delete(existing)
        return "", 204
