from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .errors import ServiceError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    ok: bool
    value: Optional[T] = None
    error: Optional[ServiceError] = None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: ServiceError) -> "Result[T]":
        return cls(ok=False, error=error)
