import logging
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from todoapp.models import Todo

logger = logging.getLogger(__name__)


class SQLTodoStore:
    """Todo persistence. Every lookup is filtered by the owning user id."""

    def __init__(self, session: Session):
        self.session = session

    def list_for_user(self, user_id: str) -> list[Todo]:
        stmt = (
            select(Todo)
            .where(Todo.user_id == user_id)
            .order_by(Todo.completed.asc(), Todo.updated_at.desc())
        )
        return list(self.session.exec(stmt).all())

    def create(self, user_id: str, title: str, description: Optional[str]) -> Todo:
        todo = Todo(user_id=user_id, title=title, description=description)
        self.session.add(todo)
        self._commit("create")
        self.session.refresh(todo)
        return todo

    def get_owned(self, todo_id: str, user_id: str) -> Optional[Todo]:
        stmt = select(Todo).where(Todo.id == todo_id, Todo.user_id == user_id)
        return self.session.exec(stmt).first()

    def update(self, todo: Todo, changes: Mapping[str, Any]) -> Todo:
        for field, value in changes.items():
            setattr(todo, field, value)
        todo.updated_at = datetime.now(timezone.utc)
        self.session.add(todo)
        self._commit("update")
        self.session.refresh(todo)
        return todo

    def delete(self, todo: Todo) -> None:
        self.session.delete(todo)
        self._commit("delete")

    def _commit(self, action: str) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError:
            logger.exception("Todo %s failed, rolling back", action)
            self.session.rollback()
            raise
