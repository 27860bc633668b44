from typing import Protocol, Optional, List
from ..port.dto.post_dto import CreatePostDTO, UpdatePostDTO, PostDTO

class PostRepository(Protocol):
    """
    投稿データの永続化インターフェース。
    """

    async def create(self, post_dto: CreatePostDTO) -> PostDTO:
        ...

    async def find_by_id(self, post_id: int) -> Optional[PostDTO]:
        ...

    async def find_by_user(self, user_id: int) -> List[PostDTO]:
        ...

    async def update(self, post_id: int, user_id: int, post_dto: UpdatePostDTO) -> PostDTO:
        """post_id かつ user_id に一致する投稿のみ更新する"""
        ...

    async def delete(self, post_id: int) -> PostDTO:
        ...
