from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from flask import Flask

from config import get_settings_module

from minhas_financas.database.bootstrap import DEMO_EMAIL, DEMO_PASSWORD, apply_schema, ensure_demo_data
from minhas_financas.extensions import db


def main() -> None:
    app = Flask(__name__)
    app.config.from_object(importlib.import_module(get_settings_module()))
    db.init_app(app)

    with app.app_context():
        apply_schema(db)
        user = ensure_demo_data(db)

    print(f"OK: demo user id={user.user_id} email={DEMO_EMAIL} password={DEMO_PASSWORD}")


if __name__ == "__main__":
    main()
