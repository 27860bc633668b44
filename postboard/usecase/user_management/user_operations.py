from typing import Any, Mapping

from ...port.user_repository import UserRepository
from ...port.dto.user_dto import USER_INPUT_FIELDS, CreateUserDTO, UpdateUserDTO, UserDTO
from ...port.storage_error import StorageError
from ...domain.error.service_errors import (
    InputValidationError,
    MissingResourceErrorEntry,
    NotFoundError,
)
from ...domain.result import Err, Ok, Result
from ..validation.field_presence import require_all, require_at_least_one
from ..validation.storage_error_translator import translate_storage_error

USER_FIELDS = tuple(USER_INPUT_FIELDS)


class UserOperations:
    """
    ユーザーの作成・取得・更新・削除ユースケース

    入力はリクエスト検証済みの dict（キーはリクエストのフィールド名）。
    """
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def create_user(self, data: Mapping[str, Any]) -> Result[UserDTO]:
        missing = require_all(data, USER_FIELDS)
        if missing:
            return Err(InputValidationError("Invalid input", missing))

        try:
            user = await self.user_repository.create(CreateUserDTO.from_input(data))
        except StorageError as e:
            return translate_storage_error(e, "User")
        return Ok(user)

    async def retrieve_user(self, user_id: int) -> Result[UserDTO]:
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            return Err(NotFoundError(
                "User not found",
                [MissingResourceErrorEntry(msg="User does not exist.", resource_id=user_id)],
            ))
        return Ok(user)

    async def update_user(self, user_id: int, data: Mapping[str, Any]) -> Result[UserDTO]:
        missing = require_at_least_one(data, USER_FIELDS)
        if missing:
            return Err(InputValidationError("Invalid input", missing))

        try:
            user = await self.user_repository.update(user_id, UpdateUserDTO.from_input(data))
        except StorageError as e:
            return translate_storage_error(e, "User")
        return Ok(user)

    async def delete_user(self, user_id: int) -> Result[UserDTO]:
        """
        ユーザーを削除する。関連する投稿も同一トランザクションで削除される
        （孤立した投稿を残さず、削除要求に応えるため）。
        """
        try:
            user = await self.user_repository.delete(user_id)
        except StorageError as e:
            return translate_storage_error(e, "User")
        return Ok(user)
