"""In-process stores, seeded at construction.

Each instance owns its rows, so two stores never share state. Used by the
unit tests and handy for local experiments without a database.
"""

from datetime import datetime, timezone
from typing import Any, Iterable, Mapping, Optional

from todoapp.models import Todo, User

from .base import normalize_email


class InMemoryUserStore:
    def __init__(self, seed: Iterable[User] = ()):
        self._rows: dict[str, User] = {user.id: user for user in seed}

    def find_by_email(self, email: str) -> Optional[User]:
        email = normalize_email(email)
        return next((u for u in self._rows.values() if u.email == email), None)

    def find_by_id(self, user_id: str) -> Optional[User]:
        return self._rows.get(user_id)

    def upsert_by_email(
        self,
        email: str,
        *,
        name: Optional[str],
        image: Optional[str],
        email_verified: bool = False,
    ) -> User:
        existing = self.find_by_email(email)
        if existing is None:
            return self.create(
                email, name=name, image=image, email_verified=email_verified
            )
        existing.name = name
        existing.image = image
        existing.updated_at = datetime.now(timezone.utc)
        return existing

    def create(
        self,
        email: str,
        *,
        name: Optional[str] = None,
        image: Optional[str] = None,
        password_hash: Optional[str] = None,
        email_verified: bool = False,
    ) -> User:
        if self.find_by_email(email) is not None:
            raise ValueError(f"duplicate email: {email}")
        user = User(
            email=normalize_email(email),
            name=name,
            image=image,
            password_hash=password_hash,
            email_verified=email_verified,
        )
        self._rows[user.id] = user
        return user

    def __len__(self) -> int:
        return len(self._rows)


class InMemoryTodoStore:
    def __init__(self, seed: Iterable[Todo] = ()):
        self._rows: dict[str, Todo] = {todo.id: todo for todo in seed}
        self.writes = 0

    def list_for_user(self, user_id: str) -> list[Todo]:
        owned = [t for t in self._rows.values() if t.user_id == user_id]
        owned.sort(key=lambda t: t.updated_at, reverse=True)
        owned.sort(key=lambda t: t.completed)
        return owned

    def create(self, user_id: str, title: str, description: Optional[str]) -> Todo:
        todo = Todo(user_id=user_id, title=title, description=description)
        self._rows[todo.id] = todo
        self.writes += 1
        return todo

    def get_owned(self, todo_id: str, user_id: str) -> Optional[Todo]:
        todo = self._rows.get(todo_id)
        if todo is None or todo.user_id != user_id:
            return None
        return todo

    def update(self, todo: Todo, changes: Mapping[str, Any]) -> Todo:
        for field, value in changes.items():
            setattr(todo, field, value)
        todo.updated_at = datetime.now(timezone.utc)
        self.writes += 1
        return todo

    def delete(self, todo: Todo) -> None:
        self._rows.pop(todo.id, None)
        self.writes += 1


class InMemoryRevokedTokenStore:
    def __init__(self, seed: Iterable[str] = ()):
        self._revoked: set[str] = set(seed)

    def is_revoked(self, jti: str) -> bool:
        return jti in self._revoked

    def revoke(
        self, jti: str, *, user_id: Optional[str], expires_at: Optional[datetime]
    ) -> None:
        self._revoked.add(jti)
