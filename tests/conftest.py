from __future__ import annotations

import pytest

from minhas_financas.extensions import db
from minhas_financas.main import create_app


@pytest.fixture
def app():
    # config.testing: fresh in-memory SQLite with tables created on startup
    app = create_app("config.testing")
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def container(app):
    return app.extensions["container"]


@pytest.fixture
def client(app):
    return app.test_client()
