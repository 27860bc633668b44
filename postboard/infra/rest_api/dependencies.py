"""
FastAPI依存性注入の定義

DIコンテナからリポジトリを取得し、エンティティ操作（ユースケース）を
組み立ててエンドポイントへ渡すアダプターレイヤー。テストでは
app.dependency_overrides でリポジトリを差し替える。
"""

from fastapi import Depends
from typing import Annotated

from ..di import get_user_repository, get_post_repository
from ...usecase.user_management.user_operations import UserOperations
from ...usecase.post_management.post_operations import PostOperations
from ...port.user_repository import UserRepository
from ...port.post_repository import PostRepository

def get_user_repository_dependency() -> UserRepository:
    return get_user_repository()

def get_post_repository_dependency() -> PostRepository:
    return get_post_repository()

def get_user_operations(
    user_repo: Annotated[UserRepository, Depends(get_user_repository_dependency)]
) -> UserOperations:
    """
    ユーザー操作ユースケースを取得

    Args:
        user_repo: ユーザーリポジトリインスタンス

    Returns:
        UserOperations: ユーザー操作ユースケースインスタンス
    """
    return UserOperations(user_repo)

def get_post_operations(
    post_repo: Annotated[PostRepository, Depends(get_post_repository_dependency)]
) -> PostOperations:
    """
    投稿操作ユースケースを取得

    Args:
        post_repo: 投稿リポジトリインスタンス

    Returns:
        PostOperations: 投稿操作ユースケースインスタンス
    """
    return PostOperations(post_repo)
