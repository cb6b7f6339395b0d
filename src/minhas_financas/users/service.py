from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.exceptions import AuthenticationError, BusinessRuleError
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Use cases: register users, authenticate (login), email uniqueness."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, email: str, password: str) -> User:
        user = self._users.find_by_email(email)
        if user is None:
            logger.info("Login failed, unknown email: %s", email)
            raise AuthenticationError("Usuário não encontrado para o email informado.")

        try:
            ok = check_password_hash(user.password or "", password)
        except ValueError:
            # Stored value is not a werkzeug hash (placeholder or corrupted).
            ok = False

        if not ok:
            logger.info("Login failed, wrong password for user %s", user.user_id)
            raise AuthenticationError("Senha inválida.")

        return user

    def register_user(self, user: User) -> User:
        self.validate_email(user.email)

        if user.password:
            user = replace(user, password=generate_password_hash(user.password))

        saved = self._users.save(user)
        logger.info("Registered user %s (email: %s)", saved.user_id, saved.email)
        return saved

    def validate_email(self, email: str) -> None:
        if self._users.exists_by_email(email):
            raise BusinessRuleError("Já existe um usuário cadastrado com este email.")

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._users.find_by_id(user_id)
