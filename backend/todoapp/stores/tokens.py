from datetime import datetime
from typing import Optional

from sqlmodel import Session, select

from todoapp.models import RevokedToken


class SQLRevokedTokenStore:
    def __init__(self, session: Session):
        self.session = session

    def is_revoked(self, jti: str) -> bool:
        stmt = select(RevokedToken).where(RevokedToken.jti == jti)
        return self.session.exec(stmt).first() is not None

    def revoke(
        self, jti: str, *, user_id: Optional[str], expires_at: Optional[datetime]
    ) -> None:
        if self.is_revoked(jti):
            return
        self.session.add(RevokedToken(jti=jti, user_id=user_id, expires_at=expires_at))
        self.session.commit()
