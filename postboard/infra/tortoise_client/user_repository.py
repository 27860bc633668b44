from typing import Optional

from tortoise.exceptions import DoesNotExist, IntegrityError
from tortoise.transactions import in_transaction

from ...port.user_repository import UserRepository
from ...port.dto.user_dto import USER_INPUT_FIELDS, CreateUserDTO, UpdateUserDTO, UserDTO
from .errors import integrity_error_to_storage_error, record_not_found
from .models import Post, User

# column -> request field name
USER_COLUMNS = {column: name for name, column in USER_INPUT_FIELDS.items()}


def user_to_dto(user: User) -> UserDTO:
    return UserDTO(
        id=user.id,
        full_name=user.full_name,
        email=user.email,
        username=user.username,
        date_of_birth=user.date_of_birth,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


class TortoiseUserRepository(UserRepository):
    """
    Tortoise ORM を用いた UserRepository の実装
    """

    async def create(self, user_dto: CreateUserDTO) -> UserDTO:
        try:
            user = await User.create(
                full_name=user_dto.full_name,
                email=user_dto.email,
                username=user_dto.username,
                date_of_birth=user_dto.date_of_birth,
            )
        except IntegrityError as e:
            raise integrity_error_to_storage_error(e, User._meta.db_table, USER_COLUMNS) from e
        return user_to_dto(user)

    async def find_by_id(self, user_id: int) -> Optional[UserDTO]:
        user = await User.filter(id=user_id).first()
        if not user:
            return None
        return user_to_dto(user)

    async def update(self, user_id: int, user_dto: UpdateUserDTO) -> UserDTO:
        try:
            async with in_transaction():
                user = await User.get(id=user_id)
                user.update_from_dict(user_dto.changes())
                await user.save()
        except DoesNotExist as e:
            raise record_not_found("User", user_id) from e
        except IntegrityError as e:
            raise integrity_error_to_storage_error(e, User._meta.db_table, USER_COLUMNS) from e
        return user_to_dto(user)

    async def delete(self, user_id: int) -> UserDTO:
        """投稿を削除してからユーザーを削除する（同一トランザクション）"""
        try:
            async with in_transaction():
                user = await User.get(id=user_id)
                await Post.filter(user_id=user_id).delete()
                await user.delete()
        except DoesNotExist as e:
            raise record_not_found("User", user_id) from e
        return user_to_dto(user)
