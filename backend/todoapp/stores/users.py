import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from todoapp.models import User

from .base import normalize_email

logger = logging.getLogger(__name__)


class SQLUserStore:
    def __init__(self, session: Session):
        self.session = session

    def find_by_email(self, email: str) -> Optional[User]:
        email = normalize_email(email)
        try:
            return self.session.exec(select(User).where(User.email == email)).first()
        except SQLAlchemyError:
            logger.exception("Error retrieving user by email")
            raise

    def find_by_id(self, user_id: str) -> Optional[User]:
        try:
            return self.session.get(User, user_id)
        except SQLAlchemyError:
            logger.exception("Error retrieving user %s", user_id)
            raise

    def upsert_by_email(
        self,
        email: str,
        *,
        name: Optional[str],
        image: Optional[str],
        email_verified: bool = False,
    ) -> User:
        existing = self.find_by_email(email)
        if existing:
            return self._refresh_profile(existing, name=name, image=image)

        try:
            return self.create(
                email, name=name, image=image, email_verified=email_verified
            )
        except IntegrityError:
            # another request inserted the same email first
            self.session.rollback()
            existing = self.find_by_email(email)
            if existing is None:
                raise
            return self._refresh_profile(existing, name=name, image=image)

    def create(
        self,
        email: str,
        *,
        name: Optional[str] = None,
        image: Optional[str] = None,
        password_hash: Optional[str] = None,
        email_verified: bool = False,
    ) -> User:
        user = User(
            email=normalize_email(email),
            name=name,
            image=image,
            password_hash=password_hash,
            email_verified=email_verified,
        )
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        logger.info("Created user %s", user.id)
        return user

    def _refresh_profile(
        self, user: User, *, name: Optional[str], image: Optional[str]
    ) -> User:
        user.name = name
        user.image = image
        user.updated_at = datetime.now(timezone.utc)
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user
