from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"


STATUS_CODES = {
    ErrorKind.UNAUTHENTICATED: 401,
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
}


@dataclass(frozen=True)
class ServiceError:
    """A recoverable failure reported back to the caller as data."""

    kind: ErrorKind
    message: str

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.kind]


def unauthenticated(message: str) -> ServiceError:
    return ServiceError(ErrorKind.UNAUTHENTICATED, message)


def validation_error(message: str) -> ServiceError:
    return ServiceError(ErrorKind.VALIDATION, message)


def not_found(message: str) -> ServiceError:
    return ServiceError(ErrorKind.NOT_FOUND, message)


class InvalidTokenError(Exception):
    """The identity provider rejected a token (expired, revoked, malformed)."""


class InfrastructureError(Exception):
    """An external dependency failed; never reported as a login or lookup miss."""
