from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

POST_INPUT_FIELDS: Dict[str, str] = {
    "userId": "user_id",
    "title": "title",
    "description": "description",
}

POST_CONTENT_FIELDS = ("title", "description")


@dataclass
class CreatePostDTO:
    """
    投稿作成用DTO
    """
    user_id: int
    title: str
    description: str

    @classmethod
    def from_input(cls, data: Mapping[str, Any]) -> "CreatePostDTO":
        return cls(**{attr: data[name] for name, attr in POST_INPUT_FIELDS.items()})


@dataclass
class UpdatePostDTO:
    title: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_input(cls, data: Mapping[str, Any]) -> "UpdatePostDTO":
        return cls(**{name: data[name] for name in POST_CONTENT_FIELDS if name in data})

    def changes(self) -> Dict[str, Any]:
        return {
            name: getattr(self, name)
            for name in POST_CONTENT_FIELDS
            if getattr(self, name) is not None
        }


@dataclass
class PostDTO:
    """
    投稿情報DTO
    """
    id: int
    user_id: int
    title: str
    description: str
    created_at: datetime
    updated_at: datetime
