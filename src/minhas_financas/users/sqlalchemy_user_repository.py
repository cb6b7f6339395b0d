from __future__ import annotations

import logging
from typing import Optional

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError

from ..core.exceptions import BusinessRuleError
from ..database.models import UserModel
from ..database.session import session_scope
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


class SQLAlchemyUserRepository(UserRepository):
    def __init__(self, db: SQLAlchemy):
        self._db = db

    def exists_by_email(self, email: str) -> bool:
        stmt = select(exists().where(UserModel.email == email))
        return bool(self._db.session.execute(stmt).scalar())

    def find_by_email(self, email: str) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.email == email)
        model = self._db.session.execute(stmt).scalar_one_or_none()
        if model is None:
            return None
        return self._to_domain(model)

    def find_by_id(self, user_id: int) -> Optional[User]:
        model = self._db.session.get(UserModel, user_id)
        if model is None:
            return None
        return self._to_domain(model)

    def save(self, user: User) -> User:
        try:
            with session_scope(self._db) as session:
                model = session.get(UserModel, user.user_id) if user.user_id is not None else None
                if model is None:
                    model = UserModel(user_id=user.user_id)
                    session.add(model)
                model.name = user.name
                model.email = user.email
                model.password = user.password
                session.flush()
                saved = self._to_domain(model)
        except IntegrityError as e:
            # Unique index on email lost a race against a concurrent registration.
            logger.warning("Rejected duplicate email on save: %s", user.email)
            raise BusinessRuleError("Já existe um usuário cadastrado com este email.") from e

        logger.debug("Saved user %s", saved.user_id)
        return saved

    @staticmethod
    def _to_domain(model: UserModel) -> User:
        return User(
            user_id=model.user_id,
            name=model.name,
            email=model.email,
            password=model.password,
        )
