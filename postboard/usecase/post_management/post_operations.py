from typing import Any, Dict, List, Mapping, Union

from ...port.post_repository import PostRepository
from ...port.dto.post_dto import (
    POST_CONTENT_FIELDS,
    POST_INPUT_FIELDS,
    CreatePostDTO,
    PostDTO,
    UpdatePostDTO,
)
from ...port.storage_error import StorageError
from ...domain.error.service_errors import InputValidationError
from ...domain.result import Err, Ok, Result
from ..validation.field_presence import require_all, require_at_least_one
from ..validation.storage_error_translator import translate_storage_error

# returned by retrieve_post when no row matches
EMPTY_POST: Dict[str, Any] = {}


class PostOperations:
    """
    投稿の作成・取得・更新・削除ユースケース
    """
    def __init__(self, post_repository: PostRepository):
        self.post_repository = post_repository

    async def create_post(self, data: Mapping[str, Any]) -> Result[PostDTO]:
        missing = require_all(data, tuple(POST_INPUT_FIELDS))
        if missing:
            return Err(InputValidationError("Invalid Post input.", missing))

        try:
            post = await self.post_repository.create(CreatePostDTO.from_input(data))
        except StorageError as e:
            return translate_storage_error(e, "Post")
        return Ok(post)

    async def list_user_posts(self, user_id: int) -> Result[List[PostDTO]]:
        """存在しないユーザーの場合も空リストを返す"""
        return Ok(await self.post_repository.find_by_user(user_id))

    async def retrieve_post(self, post_id: int) -> Result[Union[PostDTO, Dict[str, Any]]]:
        """投稿が存在しない場合はエラーではなく空オブジェクトを返す"""
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            return Ok(dict(EMPTY_POST))
        return Ok(post)

    async def update_post(self, post_id: int, user_id: int, data: Mapping[str, Any]) -> Result[PostDTO]:
        missing = require_at_least_one(data, POST_CONTENT_FIELDS)
        if missing:
            return Err(InputValidationError("Invalid input", missing))

        try:
            post = await self.post_repository.update(post_id, user_id, UpdatePostDTO.from_input(data))
        except StorageError as e:
            return translate_storage_error(e, "Post")
        return Ok(post)

    async def delete_post(self, post_id: int) -> Result[PostDTO]:
        try:
            post = await self.post_repository.delete(post_id)
        except StorageError as e:
            return translate_storage_error(e, "Post")
        return Ok(post)
