from datetime import datetime
from typing import Any, Mapping, Optional, Protocol

from todoapp.models import Todo, User


class UserStore(Protocol):
    def find_by_email(self, email: str) -> Optional[User]: ...

    def find_by_id(self, user_id: str) -> Optional[User]: ...

    def upsert_by_email(
        self,
        email: str,
        *,
        name: Optional[str],
        image: Optional[str],
        email_verified: bool = False,
    ) -> User: ...

    def create(
        self,
        email: str,
        *,
        name: Optional[str] = None,
        image: Optional[str] = None,
        password_hash: Optional[str] = None,
        email_verified: bool = False,
    ) -> User: ...


class TodoStore(Protocol):
    def list_for_user(self, user_id: str) -> list[Todo]: ...

    def create(self, user_id: str, title: str, description: Optional[str]) -> Todo: ...

    def get_owned(self, todo_id: str, user_id: str) -> Optional[Todo]: ...

    def update(self, todo: Todo, changes: Mapping[str, Any]) -> Todo: ...

    def delete(self, todo: Todo) -> None: ...


class RevokedTokenStore(Protocol):
    def is_revoked(self, jti: str) -> bool: ...

    def revoke(
        self, jti: str, *, user_id: Optional[str], expires_at: Optional[datetime]
    ) -> None: ...


def normalize_email(email: str) -> str:
    """Emails are matched and stored case-insensitively."""
    return email.strip().lower()
