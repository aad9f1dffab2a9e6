from typing import Optional

from todoapp.core.errors import InvalidTokenError
from todoapp.schemas.session import AuthSession, IdentityClaims, IdentityProfile


class FakeIdentityVerifier:
    """Accepts only tokens registered with ``add_token``."""

    def __init__(self):
        self.tokens: dict[str, IdentityClaims] = {}
        self.profiles: dict[str, IdentityProfile] = {}
        self.verified: list[str] = []
        self.failure: Optional[Exception] = None

    def add_token(self, token, uid, email=None, name=None, picture=None, email_verified=False):
        self.tokens[token] = IdentityClaims(
            uid=uid,
            email=email,
            name=name,
            picture=picture,
            email_verified=email_verified,
        )

    def verify(self, token: str) -> IdentityClaims:
        self.verified.append(token)
        if self.failure is not None:
            raise self.failure
        claims = self.tokens.get(token)
        if claims is None:
            raise InvalidTokenError("Could not verify ID token")
        return claims

    def get_profile(self, uid: str) -> Optional[IdentityProfile]:
        return self.profiles.get(uid)


class FakeAuthLibrary:
    def __init__(self, session: Optional[AuthSession] = None):
        self.session = session
        self.calls = 0

    def get_session(self, cookies, headers) -> Optional[AuthSession]:
        self.calls += 1
        return self.session
