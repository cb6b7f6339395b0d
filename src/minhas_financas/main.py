from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from sqlalchemy.engine import make_url

from config import get_settings_module

from .container import build_container
from .database.bootstrap import apply_schema, ensure_demo_data, list_tables
from .entries.controller import register as register_entries
from .extensions import db
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config.from_object(settings)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    db.init_app(app)

    with app.app_context():
        if app.config.get("AUTO_INIT_DB"):
            apply_schema(db)
            logger.info("Schema ready (tables=%d)", len(list_tables(db)))
        if app.config.get("AUTO_SEED_DB"):
            ensure_demo_data(db)

    if app.config.get("DEBUG"):
        db_url = make_url(app.config["SQLALCHEMY_DATABASE_URI"]).render_as_string(hide_password=True)
        logger.info("settings=%s db=%s", settings_module, db_url)

    container = build_container(db=db)
    app.extensions["container"] = container

    register_users(app, container)
    register_entries(app, container)

    return app
