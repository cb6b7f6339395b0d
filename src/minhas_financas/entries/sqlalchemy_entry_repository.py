from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import func, select

from ..core.enums import EntryStatus, EntryType
from ..database.models import EntryModel
from ..database.session import session_scope
from .model import Entry, EntryFilter
from .repository import EntryRepository

logger = logging.getLogger(__name__)


class SQLAlchemyEntryRepository(EntryRepository):
    def __init__(self, db: SQLAlchemy):
        self._db = db

    def save(self, entry: Entry) -> Entry:
        with session_scope(self._db) as session:
            model = session.get(EntryModel, entry.entry_id) if entry.entry_id is not None else None
            if model is None:
                model = EntryModel(entry_id=entry.entry_id)
                session.add(model)
            model.description = entry.description
            model.month = entry.month
            model.year = entry.year
            model.user_id = entry.user_id
            model.amount = entry.amount
            model.entry_type = entry.entry_type
            model.status = entry.status
            model.created_on = entry.created_on or model.created_on or date.today()
            session.flush()
            saved = self._to_domain(model)

        logger.debug("Saved entry %s", saved.entry_id)
        return saved

    def delete(self, entry_id: int) -> bool:
        with session_scope(self._db) as session:
            model = session.get(EntryModel, entry_id)
            if model is None:
                return False
            session.delete(model)
        return True

    def find_by_id(self, entry_id: int) -> Optional[Entry]:
        model = self._db.session.get(EntryModel, entry_id)
        if model is None:
            return None
        return self._to_domain(model)

    def search(self, criteria: EntryFilter) -> Sequence[Entry]:
        stmt = select(EntryModel)
        if criteria.user_id is not None:
            stmt = stmt.where(EntryModel.user_id == criteria.user_id)
        if criteria.description:
            stmt = stmt.where(func.lower(EntryModel.description).contains(criteria.description.lower()))
        if criteria.month is not None:
            stmt = stmt.where(EntryModel.month == criteria.month)
        if criteria.year is not None:
            stmt = stmt.where(EntryModel.year == criteria.year)
        if criteria.entry_type is not None:
            stmt = stmt.where(EntryModel.entry_type == criteria.entry_type)
        if criteria.status is not None:
            stmt = stmt.where(EntryModel.status == criteria.status)
        stmt = stmt.order_by(EntryModel.year, EntryModel.month, EntryModel.entry_id)

        return [self._to_domain(m) for m in self._db.session.execute(stmt).scalars()]

    def sum_amount(self, *, user_id: int, entry_type: EntryType, status: EntryStatus) -> Decimal:
        stmt = select(func.coalesce(func.sum(EntryModel.amount), 0)).where(
            EntryModel.user_id == user_id,
            EntryModel.entry_type == entry_type,
            EntryModel.status == status,
        )
        total = self._db.session.execute(stmt).scalar()
        return Decimal(str(total or 0))

    @staticmethod
    def _to_domain(model: EntryModel) -> Entry:
        return Entry(
            entry_id=model.entry_id,
            description=model.description,
            month=model.month,
            year=model.year,
            user_id=model.user_id,
            amount=Decimal(str(model.amount)) if model.amount is not None else None,
            entry_type=model.entry_type,
            status=model.status,
            created_on=model.created_on,
        )
