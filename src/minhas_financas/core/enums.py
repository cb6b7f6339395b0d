from __future__ import annotations

from enum import Enum


class EntryType(str, Enum):
    """Tipo de lançamento: receita ou despesa."""

    INCOME = "RECEITA"
    EXPENSE = "DESPESA"


class EntryStatus(str, Enum):
    """Situação do lançamento armazenada no banco."""

    PENDING = "PENDENTE"
    CANCELLED = "CANCELADO"
    SETTLED = "EFETIVADO"
