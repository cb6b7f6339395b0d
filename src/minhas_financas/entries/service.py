from __future__ import annotations

import logging
from dataclasses import replace
from decimal import Decimal
from typing import Optional, Sequence

from ..common.validators import (
    require_digits,
    require_in_range,
    require_non_empty,
    require_positive,
    require_present,
)
from ..core.enums import EntryStatus, EntryType
from .model import Entry, EntryFilter
from .repository import EntryRepository

logger = logging.getLogger(__name__)


class EntryService:
    """Use cases: register, edit and query financial entries; user balance."""

    def __init__(self, entries: EntryRepository):
        self._entries = entries

    def validate(self, entry: Entry) -> None:
        require_non_empty(entry.description, "Informe uma Descrição válida.")
        require_in_range(entry.month, 1, 12, "Informe um Mês válido.")
        require_digits(entry.year, 4, "Informe um Ano válido.")
        require_present(entry.user_id, "Informe um Usuário.")
        require_positive(entry.amount, "Informe um Valor válido.")
        require_present(entry.entry_type, "Informe um tipo de Lançamento.")

    def save(self, entry: Entry) -> Entry:
        self.validate(entry)
        saved = self._entries.save(replace(entry, status=EntryStatus.PENDING))
        logger.info("Created entry %s for user %s", saved.entry_id, saved.user_id)
        return saved

    def update(self, entry: Entry) -> Entry:
        self._require_id(entry)
        self.validate(entry)
        saved = self._entries.save(entry)
        logger.info("Updated entry %s (status=%s)", saved.entry_id, saved.status)
        return saved

    def delete(self, entry: Entry) -> None:
        self._require_id(entry)
        self._entries.delete(entry.entry_id)
        logger.info("Deleted entry %s", entry.entry_id)

    def search(self, criteria: EntryFilter) -> Sequence[Entry]:
        return self._entries.search(criteria)

    def update_status(self, entry: Entry, status: EntryStatus) -> Entry:
        return self.update(replace(entry, status=status))

    def get_by_id(self, entry_id: int) -> Optional[Entry]:
        return self._entries.find_by_id(entry_id)

    def get_balance_for_user(self, user_id: int) -> Decimal:
        """Settled income minus settled expense; pending and cancelled entries do not count."""
        income = self._entries.sum_amount(user_id=user_id, entry_type=EntryType.INCOME, status=EntryStatus.SETTLED)
        expense = self._entries.sum_amount(user_id=user_id, entry_type=EntryType.EXPENSE, status=EntryStatus.SETTLED)
        return (income or Decimal("0")) - (expense or Decimal("0"))

    @staticmethod
    def _require_id(entry: Entry) -> None:
        if entry.entry_id is None:
            raise ValueError("Lançamento sem identificador: salve-o antes de alterar ou excluir.")
