from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class SessionUser(BaseModel):
    """Identity handed to every protected operation, whatever the login path."""

    id: str
    email: str
    name: Optional[str] = None
    image: Optional[str] = None


class SessionSource(str, Enum):
    IDENTITY_PROVIDER = "identity_provider"
    AUTH_LIBRARY = "auth_library"


@dataclass(frozen=True)
class ResolvedSession:
    source: SessionSource
    user: SessionUser


@dataclass(frozen=True)
class IdentityClaims:
    uid: str
    email: Optional[str] = None
    name: Optional[str] = None
    picture: Optional[str] = None
    email_verified: bool = False


@dataclass(frozen=True)
class IdentityProfile:
    display_name: Optional[str] = None
    photo_url: Optional[str] = None


@dataclass(frozen=True)
class AuthSession:
    user_id: str
    token_id: Optional[str] = None
