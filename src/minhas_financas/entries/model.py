from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..core.enums import EntryStatus, EntryType


@dataclass(frozen=True)
class Entry:
    """Domain entity: financial entry (lançamento) owned by one user."""

    entry_id: Optional[int] = None
    description: Optional[str] = None
    month: Optional[int] = None
    year: Optional[int] = None
    user_id: Optional[int] = None
    amount: Optional[Decimal] = None
    entry_type: Optional[EntryType] = None
    status: Optional[EntryStatus] = None
    created_on: Optional[date] = None


@dataclass(frozen=True)
class EntryFilter:
    """Search criteria; ``None`` fields are ignored."""

    user_id: Optional[int] = None
    description: Optional[str] = None
    month: Optional[int] = None
    year: Optional[int] = None
    entry_type: Optional[EntryType] = None
    status: Optional[EntryStatus] = None
