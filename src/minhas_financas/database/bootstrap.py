from __future__ import annotations

import logging
from decimal import Decimal

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import inspect

from ..core.enums import EntryStatus, EntryType
from ..entries.model import Entry
from ..entries.sqlalchemy_entry_repository import SQLAlchemyEntryRepository
from ..users.model import User
from ..users.service import UserService
from ..users.sqlalchemy_user_repository import SQLAlchemyUserRepository

logger = logging.getLogger(__name__)

DEMO_EMAIL = "demo@minhasfinancas.com"
DEMO_PASSWORD = "demo123"


def apply_schema(db: SQLAlchemy) -> None:
    """Create missing tables (idempotent). Must run inside an app context."""
    db.create_all()


def list_tables(db: SQLAlchemy) -> list[str]:
    return sorted(inspect(db.engine).get_table_names())


def ensure_demo_data(db: SQLAlchemy) -> User:
    users_repo = SQLAlchemyUserRepository(db)
    existing = users_repo.find_by_email(DEMO_EMAIL)
    if existing:
        return existing

    user = UserService(users_repo).register_user(User(name="Usuário Demo", email=DEMO_EMAIL, password=DEMO_PASSWORD))

    entries_repo = SQLAlchemyEntryRepository(db)
    samples = [
        ("Salário", 1, Decimal("5000.00"), EntryType.INCOME, EntryStatus.SETTLED),
        ("Aluguel", 1, Decimal("1500.00"), EntryType.EXPENSE, EntryStatus.SETTLED),
        ("Mercado", 1, Decimal("650.40"), EntryType.EXPENSE, EntryStatus.PENDING),
        ("Academia", 2, Decimal("120.00"), EntryType.EXPENSE, EntryStatus.CANCELLED),
    ]
    for description, month, amount, entry_type, status in samples:
        entries_repo.save(
            Entry(
                description=description,
                month=month,
                year=2024,
                user_id=user.user_id,
                amount=amount,
                entry_type=entry_type,
                status=status,
            )
        )

    logger.info("Demo data ready (user %s, %d entries)", user.user_id, len(samples))
    return user
