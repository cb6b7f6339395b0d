"""Example: drive the service layer directly (no HTTP).

Controllers are a thin layer; the business rules live in the services.
"""

from decimal import Decimal

from minhas_financas.core.enums import EntryStatus, EntryType
from minhas_financas.core.exceptions import AuthenticationError
from minhas_financas.entries.model import Entry, EntryFilter
from minhas_financas.main import create_app
from minhas_financas.users.model import User


def main():
    app = create_app("config.testing")
    container = app.extensions["container"]

    with app.app_context():
        user = container.user_service.register_user(User(name="Ana", email="ana@email.com", password="segredo"))

        try:
            container.user_service.authenticate("ana@email.com", "errada")
        except AuthenticationError as e:
            print("login recusado:", e)

        entry = container.entry_service.save(
            Entry(
                description="Salário",
                month=1,
                year=2024,
                user_id=user.user_id,
                amount=Decimal("4200.00"),
                entry_type=EntryType.INCOME,
            )
        )
        container.entry_service.update_status(entry, EntryStatus.SETTLED)

        print(container.entry_service.search(EntryFilter(user_id=user.user_id)))
        print("saldo:", container.entry_service.get_balance_for_user(user.user_id))


if __name__ == "__main__":
    main()
