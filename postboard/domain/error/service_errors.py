"""
Error taxonomy shared by the entity operations and the HTTP layer.

Errors are plain values discriminated by their ``kind`` tag. Entity
operations return them inside ``Err`` and the responder maps the tag to a
status code; nothing in this module is raised.
"""
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class ErrorKind(str, Enum):
    INPUT_VALIDATION = "input_validation"
    MUTATION = "mutation"
    NOT_FOUND = "not_found"


class MutationReason(str, Enum):
    UNIQUE_CONSTRAINT = "unique_constraint"
    FOREIGN_KEY = "foreign_key"


def _compact(entry) -> Dict[str, Any]:
    return {key: value for key, value in asdict(entry).items() if value is not None}


@dataclass
class ValidationErrorEntry:
    """One violated rule of a request body."""
    msg: str
    location: Optional[str] = None
    path: Optional[str] = None
    type: Optional[str] = None
    value: Any = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact(self)


@dataclass
class MutationErrorEntry:
    """A write rejected by a storage constraint."""
    msg: str
    type: Optional[str] = None
    value: Any = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact(self)


@dataclass
class MissingResourceErrorEntry:
    msg: str
    resource_id: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        content: Dict[str, Any] = {"msg": self.msg}
        if self.resource_id is not None:
            content["resourceId"] = self.resource_id
        return content


@dataclass
class InputValidationError:
    """The caller sent invalid or incomplete data; no storage call was made."""
    message: str
    errors: List[ValidationErrorEntry] = field(default_factory=list)
    kind: ErrorKind = field(default=ErrorKind.INPUT_VALIDATION, init=False)


@dataclass
class MutationError:
    """
    The store rejected a write.

    ``reason`` separates a plain uniqueness conflict from a foreign-key
    violation on an owner reference, which is reported without confirming
    whether the referenced row exists.
    """
    message: str
    errors: List[MutationErrorEntry] = field(default_factory=list)
    reason: MutationReason = MutationReason.UNIQUE_CONSTRAINT
    kind: ErrorKind = field(default=ErrorKind.MUTATION, init=False)


@dataclass
class NotFoundError:
    message: str
    errors: List[MissingResourceErrorEntry] = field(default_factory=list)
    kind: ErrorKind = field(default=ErrorKind.NOT_FOUND, init=False)


ServiceError = Union[InputValidationError, MutationError, NotFoundError]
