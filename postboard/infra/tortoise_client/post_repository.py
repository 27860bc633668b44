from typing import List, Optional

from tortoise.exceptions import DoesNotExist, IntegrityError
from tortoise.transactions import in_transaction

from ...port.post_repository import PostRepository
from ...port.dto.post_dto import CreatePostDTO, PostDTO, UpdatePostDTO
from ...port.storage_error import StorageError, StorageErrorCode
from .errors import integrity_error_to_storage_error, record_not_found
from .models import Post, User

POST_COLUMNS = {"user_id": "userId", "title": "title", "description": "description"}


def post_to_dto(post: Post) -> PostDTO:
    return PostDTO(
        id=post.id,
        user_id=post.user_id,
        title=post.title,
        description=post.description,
        created_at=post.created_at,
        updated_at=post.updated_at,
    )


class TortoisePostRepository(PostRepository):
    """投稿のTortoise ORMリポジトリ"""

    async def create(self, post_dto: CreatePostDTO) -> PostDTO:
        try:
            async with in_transaction():
                # SQLite may run without foreign key enforcement
                if not await User.filter(id=post_dto.user_id).exists():
                    raise StorageError(
                        f"User {post_dto.user_id} referenced by Post does not exist",
                        StorageErrorCode.FOREIGN_KEY_VIOLATION,
                        {"field_name": "userId"},
                    )
                post = await Post.create(
                    user_id=post_dto.user_id,
                    title=post_dto.title,
                    description=post_dto.description,
                )
        except IntegrityError as e:
            raise integrity_error_to_storage_error(e, Post._meta.db_table, POST_COLUMNS) from e
        return post_to_dto(post)

    async def find_by_id(self, post_id: int) -> Optional[PostDTO]:
        post = await Post.filter(id=post_id).first()
        if not post:
            return None
        return post_to_dto(post)

    async def find_by_user(self, user_id: int) -> List[PostDTO]:
        posts = await Post.filter(user_id=user_id).order_by("id")
        return [post_to_dto(post) for post in posts]

    async def update(self, post_id: int, user_id: int, post_dto: UpdatePostDTO) -> PostDTO:
        try:
            async with in_transaction():
                post = await Post.get(id=post_id, user_id=user_id)
                post.update_from_dict(post_dto.changes())
                await post.save()
        except DoesNotExist as e:
            raise record_not_found("Post", post_id) from e
        except IntegrityError as e:
            raise integrity_error_to_storage_error(e, Post._meta.db_table, POST_COLUMNS) from e
        return post_to_dto(post)

    async def delete(self, post_id: int) -> PostDTO:
        try:
            post = await Post.get(id=post_id)
        except DoesNotExist as e:
            raise record_not_found("Post", post_id) from e
        await post.delete()
        return post_to_dto(post)
