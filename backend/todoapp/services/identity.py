"""Identity-provider adapter.

Wraps the Firebase Admin SDK behind two calls, ``verify`` and
``get_profile``, and sorts its exceptions into token rejections
(``InvalidTokenError``) and outages or setup problems
(``InfrastructureError``).
"""

import logging
import threading
from typing import Optional

import firebase_admin
from firebase_admin import auth, credentials
from firebase_admin.exceptions import FirebaseError

from todoapp.core.config import settings
from todoapp.core.errors import InfrastructureError, InvalidTokenError
from todoapp.schemas.session import IdentityClaims, IdentityProfile

logger = logging.getLogger(__name__)

_init_lock = threading.Lock()

# a deleted or disabled account makes an otherwise valid token unusable
TOKEN_REJECTIONS = (auth.InvalidIdTokenError, auth.UserDisabledError, auth.UserNotFoundError)


def initialize_firebase_app() -> firebase_admin.App:
    with _init_lock:
        try:
            return firebase_admin.get_app()
        except ValueError:
            pass

        if settings.firebase_credentials:
            cred = credentials.Certificate(settings.firebase_credentials)
        else:
            cred = credentials.ApplicationDefault()

        options = {"projectId": settings.firebase_project_id} if settings.firebase_project_id else None
        logger.info("Initializing Firebase app (project=%s)", settings.firebase_project_id or "default")
        return firebase_admin.initialize_app(cred, options)


class FirebaseIdentityVerifier:
    def __init__(self, app: Optional[firebase_admin.App] = None):
        self._app = app

    @property
    def app(self) -> firebase_admin.App:
        if self._app is None:
            try:
                self._app = initialize_firebase_app()
            except Exception as exc:
                logger.exception("Firebase app could not be initialized")
                raise InfrastructureError("Identity provider is not configured") from exc
        return self._app

    def verify(self, token: str) -> IdentityClaims:
        """Verify an ID token with the revocation check enabled."""
        if not isinstance(token, str) or not token:
            raise InvalidTokenError("ID token must be a non-empty string")
        app = self.app

        try:
            decoded = auth.verify_id_token(token, app=app, check_revoked=True)
        except TOKEN_REJECTIONS as exc:
            # expired and revoked tokens are InvalidIdTokenError subclasses
            raise InvalidTokenError(str(exc)) from exc
        except (FirebaseError, ValueError) as exc:
            # ValueError here means a missing project id, not a bad token
            raise InfrastructureError("Identity provider is unavailable") from exc

        return IdentityClaims(
            uid=decoded["uid"],
            email=decoded.get("email"),
            name=decoded.get("name"),
            picture=decoded.get("picture"),
            email_verified=bool(decoded.get("email_verified", False)),
        )

    def get_profile(self, uid: str) -> Optional[IdentityProfile]:
        app = self.app
        try:
            record = auth.get_user(uid, app=app)
        except auth.UserNotFoundError:
            return None
        except FirebaseError as exc:
            raise InfrastructureError("Identity provider is unavailable") from exc

        return IdentityProfile(display_name=record.display_name, photo_url=record.photo_url)
