from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from flask import Flask
from sqlalchemy.engine import make_url

from config import get_settings_module

from minhas_financas.database.bootstrap import apply_schema, list_tables
from minhas_financas.extensions import db


def main() -> None:
    settings_module = get_settings_module()
    app = Flask(__name__)
    app.config.from_object(importlib.import_module(settings_module))
    db.init_app(app)

    with app.app_context():
        apply_schema(db)
        tables = list_tables(db)

    db_url = make_url(app.config["SQLALCHEMY_DATABASE_URI"]).render_as_string(hide_password=True)
    print(f"OK: schema applied -> {db_url} (tables={len(tables)}: {', '.join(tables)})")


if __name__ == "__main__":
    main()
