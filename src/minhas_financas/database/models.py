from __future__ import annotations

from datetime import date

from ..core.enums import EntryStatus, EntryType
from ..extensions import db


def _enum_values(enum_cls) -> list[str]:
    # Store "RECEITA"/"PENDENTE", not the Python member names.
    return [member.value for member in enum_cls]


class UserModel(db.Model):
    __tablename__ = "usuario"

    user_id = db.Column("id", db.Integer, primary_key=True)
    name = db.Column("nome", db.String(150))
    email = db.Column(db.String(150), unique=True, index=True)
    password = db.Column("senha", db.String(255))

    entries = db.relationship("EntryModel", back_populates="user", lazy=True)


class EntryModel(db.Model):
    __tablename__ = "lancamento"

    entry_id = db.Column("id", db.Integer, primary_key=True)
    description = db.Column("descricao", db.String(100), nullable=False)
    month = db.Column("mes", db.Integer, nullable=False)
    year = db.Column("ano", db.Integer, nullable=False)
    user_id = db.Column("id_usuario", db.Integer, db.ForeignKey("usuario.id"), nullable=False)
    amount = db.Column("valor", db.Numeric(16, 2), nullable=False)
    entry_type = db.Column("tipo", db.Enum(EntryType, native_enum=False, length=20, values_callable=_enum_values), nullable=False)
    status = db.Column(db.Enum(EntryStatus, native_enum=False, length=20, values_callable=_enum_values), nullable=False)
    created_on = db.Column("data_cadastro", db.Date, default=date.today)

    user = db.relationship("UserModel", back_populates="entries")
