from __future__ import annotations

from dataclasses import dataclass

from flask_sqlalchemy import SQLAlchemy

from .entries.service import EntryService
from .entries.sqlalchemy_entry_repository import SQLAlchemyEntryRepository
from .users.service import UserService
from .users.sqlalchemy_user_repository import SQLAlchemyUserRepository


@dataclass(frozen=True)
class Container:
    users_repo: SQLAlchemyUserRepository
    entries_repo: SQLAlchemyEntryRepository

    user_service: UserService
    entry_service: EntryService


def build_container(*, db: SQLAlchemy) -> Container:
    users_repo = SQLAlchemyUserRepository(db)
    entries_repo = SQLAlchemyEntryRepository(db)

    return Container(
        users_repo=users_repo,
        entries_repo=entries_repo,
        user_service=UserService(users_repo),
        entry_service=EntryService(entries_repo),
    )
