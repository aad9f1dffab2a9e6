"""Resolve the signed-in user for a request.

Two sign-in mechanisms can produce a session: an identity-provider ID token
stored in the session cookie, and the email/password library's own session.
They are tried in that order and the first one that maps to a stored user
wins. Callers only ever see the normalized ``SessionUser``.

A token the provider rejects just means "not this path". Provider outages
and store failures are raised so they never look like a logged-out user.
"""

import logging
from typing import Any, Optional, Protocol

from todoapp.core.config import settings
from todoapp.core.errors import InvalidTokenError
from todoapp.models import User
from todoapp.schemas.session import (
    AuthSession,
    IdentityClaims,
    IdentityProfile,
    ResolvedSession,
    SessionSource,
    SessionUser,
)
from todoapp.stores import UserStore

logger = logging.getLogger(__name__)


class IdentityVerifier(Protocol):
    def verify(self, token: str) -> IdentityClaims: ...

    def get_profile(self, uid: str) -> Optional[IdentityProfile]: ...


class AuthLibrarySessions(Protocol):
    def get_session(self, cookies: Any, headers: Any) -> Optional[AuthSession]: ...


def to_session_user(user: User) -> SessionUser:
    return SessionUser(id=user.id, email=user.email, name=user.name, image=user.image)


class SessionResolver:
    def __init__(
        self,
        verifier: IdentityVerifier,
        auth_library: AuthLibrarySessions,
        users: UserStore,
        cookie_name: Optional[str] = None,
    ):
        self.verifier = verifier
        self.auth_library = auth_library
        self.users = users
        self.cookie_name = cookie_name or settings.session_cookie_name

    def resolve(self, request: Any) -> Optional[SessionUser]:
        """``request`` needs ``cookies`` and ``headers`` mappings."""
        resolved = self.resolve_source(request)
        return resolved.user if resolved else None

    def resolve_source(self, request: Any) -> Optional[ResolvedSession]:
        resolved = self._from_identity_provider(request.cookies.get(self.cookie_name))
        if resolved is None:
            resolved = self._from_auth_library(request)

        if resolved is None:
            logger.debug("No session for request")
        else:
            logger.debug("Session for user %s via %s", resolved.user.id, resolved.source.value)
        return resolved

    def _from_identity_provider(self, token: Optional[str]) -> Optional[ResolvedSession]:
        if not token:
            return None

        try:
            claims = self.verifier.verify(token)
        except InvalidTokenError as exc:
            logger.debug("Session cookie rejected by identity provider: %s", exc)
            return None

        if not claims.email:
            return None

        user = self.users.find_by_email(claims.email)
        if user is None:
            return None
        return ResolvedSession(SessionSource.IDENTITY_PROVIDER, to_session_user(user))

    def _from_auth_library(self, request: Any) -> Optional[ResolvedSession]:
        session = self.auth_library.get_session(request.cookies, request.headers)
        if session is None or not session.user_id:
            return None

        user = self.users.find_by_id(session.user_id)
        if user is None:
            return None
        return ResolvedSession(SessionSource.AUTH_LIBRARY, to_session_user(user))
