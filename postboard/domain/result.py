"""
Success/error values returned by the validation step and entity operations.
"""
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from .error.service_errors import ServiceError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    error: ServiceError

    @property
    def is_ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]
