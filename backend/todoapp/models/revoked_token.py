from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime, timezone


class RevokedToken(SQLModel, table=True):
    """Auth-library JWT ids that were signed out before they expired."""

    __tablename__ = "revoked_tokens"

    id: Optional[int] = Field(default=None, primary_key=True)
    jti: str = Field(index=True, unique=True)
    user_id: Optional[str] = Field(default=None, index=True)
    expires_at: Optional[datetime] = None
    revoked_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
