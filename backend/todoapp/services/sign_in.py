import logging
from dataclasses import dataclass
from typing import Optional

from todoapp.core.errors import InvalidTokenError, unauthenticated
from todoapp.core.results import Result
from todoapp.core.security import parse_bearer
from todoapp.services.session import IdentityVerifier
from todoapp.stores import UserStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SyncedIdentity:
    user_id: str
    token: str


def sync_from_bearer_token(
    authorization: Optional[str], verifier: IdentityVerifier, users: UserStore
) -> Result[SyncedIdentity]:
    """Verify a bearer ID token and upsert the matching user by email."""
    token = parse_bearer(authorization)
    if token is None:
        return Result.failure(unauthenticated("Unauthorized"))

    try:
        claims = verifier.verify(token)
    except InvalidTokenError as exc:
        logger.info("Identity token rejected: %s", exc)
        return Result.failure(unauthenticated("Authentication failed"))

    if not claims.email:
        return Result.failure(unauthenticated("Email not found in token"))

    profile = verifier.get_profile(claims.uid)
    name = (profile.display_name if profile else None) or claims.name
    image = (profile.photo_url if profile else None) or claims.picture

    user = users.upsert_by_email(
        claims.email,
        name=name,
        image=image,
        email_verified=claims.email_verified,
    )
    logger.info("Synced identity %s to user %s", claims.uid, user.id)
    return Result.success(SyncedIdentity(user_id=user.id, token=token))


def create_session_from_bearer_token(
    authorization: Optional[str], verifier: IdentityVerifier
) -> Result[str]:
    """Verify a bearer ID token without touching the user store.

    Returns the token to store in the session cookie. Provider outages are
    raised, not reported as a failed login.
    """
    token = parse_bearer(authorization)
    if token is None:
        return Result.failure(unauthenticated("Unauthorized"))

    try:
        verifier.verify(token)
    except InvalidTokenError as exc:
        logger.info("Identity token rejected: %s", exc)
        return Result.failure(unauthenticated("Unauthorized"))

    return Result.success(token)
