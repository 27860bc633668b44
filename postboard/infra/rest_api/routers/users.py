from fastapi import APIRouter, Depends, Request
from typing import Annotated, List

from ..error_handlers import render_error, render_result
from ..dependencies import get_user_operations, get_post_operations
from ..request_validation import parse_id_parameter, validate_user_request
from ..schemas import post_dto_to_response, to_json, user_dto_to_response
from ....domain.result import Err
from ....port.dto.post_dto import PostDTO
from ....port.dto.user_dto import UserDTO
from ....usecase.user_management.user_operations import UserOperations
from ....usecase.post_management.post_operations import PostOperations

router = APIRouter(
    prefix="/users",
    tags=["users"]
)


def serialize_user(user: UserDTO):
    return to_json(user_dto_to_response(user))


def serialize_posts(posts: List[PostDTO]):
    return [to_json(post_dto_to_response(post)) for post in posts]


@router.post("")
async def create_user(
    request: Request,
    operations: Annotated[UserOperations, Depends(get_user_operations)]
):
    """
    新規ユーザー登録
    """
    body = await validate_user_request(request)
    if isinstance(body, Err):
        return render_error(request, body.error)

    return render_result(request, await operations.create_user(body.value), serialize_user)


@router.get("/{user_id}")
async def retrieve_user(
    user_id: str,
    request: Request,
    operations: Annotated[UserOperations, Depends(get_user_operations)]
):
    parsed_id = parse_id_parameter(user_id)
    if isinstance(parsed_id, Err):
        return render_error(request, parsed_id.error)

    return render_result(request, await operations.retrieve_user(parsed_id.value), serialize_user)


@router.get("/{user_id}/posts")
async def list_user_posts(
    user_id: str,
    request: Request,
    operations: Annotated[PostOperations, Depends(get_post_operations)]
):
    """ユーザーの投稿一覧（ユーザーが存在しなくても 200 + 空リスト）"""
    parsed_id = parse_id_parameter(user_id)
    if isinstance(parsed_id, Err):
        return render_error(request, parsed_id.error)

    return render_result(request, await operations.list_user_posts(parsed_id.value), serialize_posts)


@router.put("/{user_id}")
async def update_user(
    user_id: str,
    request: Request,
    operations: Annotated[UserOperations, Depends(get_user_operations)]
):
    parsed_id = parse_id_parameter(user_id)
    if isinstance(parsed_id, Err):
        return render_error(request, parsed_id.error)

    body = await validate_user_request(request)
    if isinstance(body, Err):
        return render_error(request, body.error)

    return render_result(request, await operations.update_user(parsed_id.value, body.value), serialize_user)


@router.delete("/{user_id}")
async def delete_user(
    user_id: str,
    request: Request,
    operations: Annotated[UserOperations, Depends(get_user_operations)]
):
    """ユーザーを削除（投稿もカスケード削除）"""
    parsed_id = parse_id_parameter(user_id)
    if isinstance(parsed_id, Err):
        return render_error(request, parsed_id.error)

    return render_result(request, await operations.delete_user(parsed_id.value), serialize_user)
