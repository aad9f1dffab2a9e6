from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime, timezone
import uuid

TITLE_MAX_LENGTH = 500
DESCRIPTION_MAX_LENGTH = 1000


class Todo(SQLModel, table=True):
    __tablename__ = "todos"

    id: str = Field(default_factory=lambda: uuid.uuid4().hex, primary_key=True)
    user_id: str = Field(foreign_key="users.id", index=True)

    title: str = Field(max_length=TITLE_MAX_LENGTH)
    description: Optional[str] = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    completed: bool = False

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
