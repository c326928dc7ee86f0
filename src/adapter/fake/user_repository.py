"""In-memory implementation of UserRepository.

Used by tests and by the API when no MONGO_URL is configured.
"""

import uuid
from dataclasses import replace
from datetime import datetime, timezone
from domain.model.errors import DuplicateResourceError
from domain.model.user import User


class FakeUserRepository:
    def __init__(self):
        self.store: dict[str, User] = {}

    # ── write operations ─────────────────────────────────────

    def create(self, name: str, email: str, password_hash: str) -> User:
        if any(u.email == email for u in self.store.values()):
            raise DuplicateResourceError()

        user = User(
            id=uuid.uuid4().hex,
            name=name,
            email=email,
            created_at=datetime.now(timezone.utc),
            password_hash=password_hash,
        )
        self.store[user.id] = user
        return replace(user)

    # ── read operations ──────────────────────────────────────

    def get_by_email(self, email: str) -> User | None:
        for user in self.store.values():
            if user.email == email:
                return replace(user)
        return None

    def get_by_id(self, user_id: str) -> User | None:
        user = self.store.get(user_id)
        if not user:
            return None
        return replace(user, password_hash=None)
