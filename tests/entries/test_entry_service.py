from __future__ import annotations

from dataclasses import replace
from decimal import Decimal
from typing import Optional

import pytest

from minhas_financas.core.enums import EntryStatus, EntryType
from minhas_financas.core.exceptions import BusinessRuleError
from minhas_financas.entries.model import Entry, EntryFilter
from minhas_financas.entries.service import EntryService


class InMemoryEntries:
    def __init__(self):
        self._next_id = 1
        self.entries: dict[int, Entry] = {}
        self.deleted: list[int] = []

    def save(self, entry: Entry) -> Entry:
        if entry.entry_id is None:
            entry = replace(entry, entry_id=self._next_id)
            self._next_id += 1
        self.entries[entry.entry_id] = entry
        return entry

    def delete(self, entry_id: int) -> bool:
        self.deleted.append(entry_id)
        return self.entries.pop(entry_id, None) is not None

    def find_by_id(self, entry_id: int) -> Optional[Entry]:
        return self.entries.get(entry_id)

    def search(self, criteria: EntryFilter):
        return [e for e in self.entries.values() if e.user_id == criteria.user_id]

    def sum_amount(self, *, user_id, entry_type, status) -> Decimal:
        return sum(
            (
                e.amount
                for e in self.entries.values()
                if e.user_id == user_id and e.entry_type == entry_type and e.status == status
            ),
            Decimal("0"),
        )


def make_entry(**overrides) -> Entry:
    fields = {
        "description": "Salário",
        "month": 1,
        "year": 2024,
        "user_id": 1,
        "amount": Decimal("10.00"),
        "entry_type": EntryType.INCOME,
    }
    fields.update(overrides)
    return Entry(**fields)


@pytest.fixture
def repo():
    return InMemoryEntries()


@pytest.fixture
def service(repo):
    return EntryService(repo)


def test_save_forces_pending_status(service, repo):
    saved = service.save(make_entry(status=EntryStatus.SETTLED))

    assert saved.entry_id == 1
    assert saved.status == EntryStatus.PENDING
    assert repo.entries[1].status == EntryStatus.PENDING


def test_save_invalid_entry_is_not_persisted(service, repo):
    with pytest.raises(BusinessRuleError):
        service.save(make_entry(description=" "))

    assert repo.entries == {}


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"description": None}, "Informe uma Descrição válida."),
        ({"description": "   "}, "Informe uma Descrição válida."),
        ({"month": None}, "Informe um Mês válido."),
        ({"month": 0}, "Informe um Mês válido."),
        ({"month": 13}, "Informe um Mês válido."),
        ({"year": None}, "Informe um Ano válido."),
        ({"year": 202}, "Informe um Ano válido."),
        ({"year": 20245}, "Informe um Ano válido."),
        ({"user_id": None}, "Informe um Usuário."),
        ({"amount": None}, "Informe um Valor válido."),
        ({"amount": Decimal("0")}, "Informe um Valor válido."),
        ({"amount": Decimal("-5")}, "Informe um Valor válido."),
        ({"entry_type": None}, "Informe um tipo de Lançamento."),
    ],
)
def test_validate_messages(service, overrides, message):
    with pytest.raises(BusinessRuleError) as exc:
        service.validate(make_entry(**overrides))

    assert str(exc.value) == message


@pytest.mark.parametrize("amount", [Decimal("NaN"), Decimal("sNaN"), Decimal("Infinity")])
def test_validate_rejects_non_finite_amount(service, repo, amount):
    with pytest.raises(BusinessRuleError, match="Informe um Valor válido."):
        service.save(make_entry(amount=amount))

    assert repo.entries == {}


def test_validate_reports_first_failing_field(service):
    with pytest.raises(BusinessRuleError, match="Informe uma Descrição válida."):
        service.validate(Entry())


def test_validate_accepts_complete_entry(service):
    assert service.validate(make_entry()) is None


def test_update_requires_identifier(service, repo):
    with pytest.raises(ValueError):
        service.update(make_entry())

    assert repo.entries == {}


def test_update_keeps_given_status(service, repo):
    saved = service.save(make_entry())

    updated = service.update(replace(saved, description="Salário março", status=EntryStatus.SETTLED))

    assert updated.entry_id == saved.entry_id
    assert repo.entries[saved.entry_id].description == "Salário março"
    assert repo.entries[saved.entry_id].status == EntryStatus.SETTLED


def test_delete_requires_identifier(service, repo):
    with pytest.raises(ValueError):
        service.delete(make_entry())

    assert repo.deleted == []


def test_delete(service, repo):
    saved = service.save(make_entry())

    service.delete(saved)

    assert repo.deleted == [saved.entry_id]
    assert service.get_by_id(saved.entry_id) is None


def test_update_status(service, repo):
    saved = service.save(make_entry())

    result = service.update_status(saved, EntryStatus.CANCELLED)

    assert result.status == EntryStatus.CANCELLED
    assert repo.entries[saved.entry_id].status == EntryStatus.CANCELLED


def test_search_delegates_to_repository(service):
    mine = service.save(make_entry())
    service.save(make_entry(user_id=2))

    assert service.search(EntryFilter(user_id=1)) == [mine]


def test_balance_counts_only_settled_entries(service, repo):
    repo.save(make_entry(amount=Decimal("5000.00"), status=EntryStatus.SETTLED))
    repo.save(make_entry(amount=Decimal("100.00"), status=EntryStatus.PENDING))
    repo.save(make_entry(amount=Decimal("1500.00"), entry_type=EntryType.EXPENSE, status=EntryStatus.SETTLED))
    repo.save(make_entry(amount=Decimal("300.00"), entry_type=EntryType.EXPENSE, status=EntryStatus.CANCELLED))
    repo.save(make_entry(user_id=2, amount=Decimal("999.00"), status=EntryStatus.SETTLED))

    assert service.get_balance_for_user(1) == Decimal("3500.00")


def test_balance_without_entries_is_zero(service):
    assert service.get_balance_for_user(1) == Decimal("0")
