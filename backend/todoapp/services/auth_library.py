"""Email/password sign-in, backed by argon2 hashes and HS256 session JWTs."""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Mapping, Optional

from jose import JWTError

from todoapp.core.config import settings
from todoapp.core.errors import unauthenticated, validation_error
from todoapp.core.results import Result
from todoapp.core.security import (
    create_access_token,
    decode_token,
    hash_password,
    parse_bearer,
    verify_password,
)
from todoapp.models import User
from todoapp.schemas.auth import LoginIn, SignupIn
from todoapp.schemas.session import AuthSession
from todoapp.stores import RevokedTokenStore, UserStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IssuedSession:
    user: User
    token: str


class EmailPasswordAuth:
    def __init__(self, users: UserStore, revoked: RevokedTokenStore):
        self.users = users
        self.revoked = revoked

    def sign_up(self, data: SignupIn) -> Result[IssuedSession]:
        email = data.email
        if self.users.find_by_email(email):
            return Result.failure(validation_error("Email already registered"))

        user = self.users.create(
            email,
            name=(data.name or "").strip() or None,
            password_hash=hash_password(data.password),
        )
        logger.info("Signed up user %s with email/password", user.id)
        return Result.success(IssuedSession(user=user, token=create_access_token(user.id)))

    def sign_in(self, data: LoginIn) -> Result[IssuedSession]:
        user = self.users.find_by_email(data.email)
        if not user or not verify_password(data.password, user.password_hash):
            return Result.failure(unauthenticated("Invalid credentials"))
        return Result.success(IssuedSession(user=user, token=create_access_token(user.id)))

    def sign_out(self, token: Optional[str]) -> None:
        payload = self._decode(token)
        if not payload or not payload.get("jti"):
            return
        exp = payload.get("exp")
        self.revoked.revoke(
            payload["jti"],
            user_id=payload.get("sub"),
            expires_at=datetime.fromtimestamp(exp, tz=timezone.utc) if exp else None,
        )

    def get_session(
        self, cookies: Mapping[str, str], headers: Mapping[str, str]
    ) -> Optional[AuthSession]:
        """Session for the request, or ``None`` when no usable token is present.

        Store failures propagate.
        """
        candidates = (
            cookies.get(settings.session_cookie_name),
            parse_bearer(headers.get("authorization")),
        )
        for token in candidates:
            payload = self._decode(token)
            if not payload:
                continue
            user_id, jti = payload.get("sub"), payload.get("jti")
            if not user_id or not jti:
                continue
            if self.revoked.is_revoked(jti):
                continue
            return AuthSession(user_id=user_id, token_id=jti)
        return None

    @staticmethod
    def _decode(token: Optional[str]) -> Optional[dict]:
        if not token:
            return None
        try:
            return decode_token(token)
        except JWTError:
            return None
