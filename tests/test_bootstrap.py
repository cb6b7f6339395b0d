from __future__ import annotations

from decimal import Decimal

from minhas_financas.database.bootstrap import DEMO_EMAIL, DEMO_PASSWORD, apply_schema, ensure_demo_data, list_tables
from minhas_financas.extensions import db


def test_apply_schema_is_idempotent(app):
    apply_schema(db)
    apply_schema(db)

    assert list_tables(db) == ["lancamento", "usuario"]


def test_demo_data_is_seeded_once(app, container):
    first = ensure_demo_data(db)
    second = ensure_demo_data(db)

    assert first.user_id == second.user_id
    assert container.user_service.authenticate(DEMO_EMAIL, DEMO_PASSWORD).user_id == first.user_id
    # settled salary minus settled rent; pending and cancelled entries ignored
    assert container.entry_service.get_balance_for_user(first.user_id) == Decimal("3500.00")
