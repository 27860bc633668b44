from typing import Optional
from .tortoise_client.user_repository import TortoiseUserRepository
from .tortoise_client.post_repository import TortoisePostRepository
from ..port.user_repository import UserRepository as UserRepositoryPort
from ..port.post_repository import PostRepository as PostRepositoryPort

class DIContainer:
    """依存性注入コンテナ"""

    def __init__(self):
        self._user_repository: Optional[UserRepositoryPort] = None
        self._post_repository: Optional[PostRepositoryPort] = None

    @property
    def user_repository(self) -> UserRepositoryPort:
        """ユーザーリポジトリのシングルトンインスタンスを取得"""
        if self._user_repository is None:
            self._user_repository = TortoiseUserRepository()
        return self._user_repository

    @property
    def post_repository(self) -> PostRepositoryPort:
        """投稿リポジトリのシングルトンインスタンスを取得"""
        if self._post_repository is None:
            self._post_repository = TortoisePostRepository()
        return self._post_repository

# グローバルDIコンテナインスタンス
_container = DIContainer()

def get_user_repository() -> UserRepositoryPort:
    """ユーザーリポジトリを取得"""
    return _container.user_repository

def get_post_repository() -> PostRepositoryPort:
    """投稿リポジトリを取得"""
    return _container.post_repository