from __future__ import annotations

from decimal import Decimal
from typing import Optional, Protocol, Sequence

from ..core.enums import EntryStatus, EntryType
from .model import Entry, EntryFilter


class EntryRepository(Protocol):
    """Repository interface for Entry."""

    def save(self, entry: Entry) -> Entry:
        raise NotImplementedError

    def delete(self, entry_id: int) -> bool:
        raise NotImplementedError

    def find_by_id(self, entry_id: int) -> Optional[Entry]:
        raise NotImplementedError

    def search(self, criteria: EntryFilter) -> Sequence[Entry]:
        raise NotImplementedError

    def sum_amount(self, *, user_id: int, entry_type: EntryType, status: EntryStatus) -> Decimal:
        raise NotImplementedError
