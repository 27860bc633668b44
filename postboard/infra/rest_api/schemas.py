from datetime import date, datetime
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ...port.dto.user_dto import UserDTO
from ...port.dto.post_dto import PostDTO


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserResponse(CamelModel):
    id: int
    full_name: str
    email: str
    username: str
    date_of_birth: date
    created_at: datetime
    updated_at: datetime


class PostResponse(CamelModel):
    id: int
    user_id: int
    title: str
    description: str
    created_at: datetime
    updated_at: datetime


def user_dto_to_response(user_dto: UserDTO) -> UserResponse:
    """UserDTOをレスポンススキーマに変換"""
    return UserResponse(
        id=user_dto.id,
        full_name=user_dto.full_name,
        email=user_dto.email,
        username=user_dto.username,
        date_of_birth=user_dto.date_of_birth,
        created_at=user_dto.created_at,
        updated_at=user_dto.updated_at,
    )


def post_dto_to_response(post_dto: PostDTO) -> PostResponse:
    """PostDTOをレスポンススキーマに変換"""
    return PostResponse(
        id=post_dto.id,
        user_id=post_dto.user_id,
        title=post_dto.title,
        description=post_dto.description,
        created_at=post_dto.created_at,
        updated_at=post_dto.updated_at,
    )


def to_json(model: BaseModel) -> Dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True)
