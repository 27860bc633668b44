from typing import Protocol, Optional
from ..port.dto.user_dto import CreateUserDTO, UpdateUserDTO, UserDTO

class UserRepository(Protocol):
    """
    ユーザーデータの永続化インターフェース。

    制約違反・対象なしの場合は StorageError を送出する。
    """

    async def create(self, user_dto: CreateUserDTO) -> UserDTO:
        ...

    async def find_by_id(self, user_id: int) -> Optional[UserDTO]:
        ...

    async def update(self, user_id: int, user_dto: UpdateUserDTO) -> UserDTO:
        ...

    async def delete(self, user_id: int) -> UserDTO:
        """所有する投稿も同一トランザクションで削除する"""
        ...
