from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Mapping, Optional

# request field name -> storage attribute
USER_INPUT_FIELDS: Dict[str, str] = {
    "fullName": "full_name",
    "email": "email",
    "username": "username",
    "dateOfBirth": "date_of_birth",
}


@dataclass
class CreateUserDTO:
    """
    ユーザー登録用DTO
    """
    full_name: str
    email: str
    username: str
    date_of_birth: date

    @classmethod
    def from_input(cls, data: Mapping[str, Any]) -> "CreateUserDTO":
        return cls(**{attr: data[name] for name, attr in USER_INPUT_FIELDS.items()})


@dataclass
class UpdateUserDTO:
    """
    ユーザー更新用DTO。None のフィールドは変更しない。
    """
    full_name: Optional[str] = None
    email: Optional[str] = None
    username: Optional[str] = None
    date_of_birth: Optional[date] = None

    @classmethod
    def from_input(cls, data: Mapping[str, Any]) -> "UpdateUserDTO":
        return cls(**{attr: data[name] for name, attr in USER_INPUT_FIELDS.items() if name in data})

    def changes(self) -> Dict[str, Any]:
        return {
            attr: getattr(self, attr)
            for attr in USER_INPUT_FIELDS.values()
            if getattr(self, attr) is not None
        }


@dataclass
class UserDTO:
    """
    ユーザー情報DTO
    """
    id: int
    full_name: str
    email: str
    username: str
    date_of_birth: date
    created_at: datetime
    updated_at: datetime
