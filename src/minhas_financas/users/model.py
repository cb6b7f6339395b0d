from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Plain data object (no DB access code). ``user_id`` stays ``None`` until the
    record is first persisted; ``password`` holds the stored hash once saved.
    """

    user_id: Optional[int] = None
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
