from fastapi import APIRouter, Depends, Request
from typing import Annotated, Any, Dict, Union

from ..error_handlers import render_error, render_result
from ..dependencies import get_post_operations
from ..request_validation import parse_id_parameter, validate_post_request
from ..schemas import post_dto_to_response, to_json
from ....domain.result import Err
from ....port.dto.post_dto import PostDTO
from ....usecase.post_management.post_operations import PostOperations

router = APIRouter(
    prefix="/posts",
    tags=["posts"]
)


def serialize_post(post: Union[PostDTO, Dict[str, Any]]):
    # retrieve_post yields {} for a missing Post
    if isinstance(post, dict):
        return post
    return to_json(post_dto_to_response(post))


@router.post("")
async def create_post(
    request: Request,
    operations: Annotated[PostOperations, Depends(get_post_operations)]
):
    """新しい投稿を作成（存在しないユーザーの場合は 403）"""
    body = await validate_post_request(request)
    if isinstance(body, Err):
        return render_error(request, body.error)

    return render_result(request, await operations.create_post(body.value), serialize_post)


@router.get("/{post_id}")
async def retrieve_post(
    post_id: str,
    request: Request,
    operations: Annotated[PostOperations, Depends(get_post_operations)]
):
    parsed_id = parse_id_parameter(post_id)
    if isinstance(parsed_id, Err):
        return render_error(request, parsed_id.error)

    return render_result(request, await operations.retrieve_post(parsed_id.value), serialize_post)


@router.put("/{post_id}")
async def update_post(
    post_id: str,
    request: Request,
    operations: Annotated[PostOperations, Depends(get_post_operations)]
):
    """userId は必須、title/description のいずれかが必要"""
    parsed_id = parse_id_parameter(post_id)
    if isinstance(parsed_id, Err):
        return render_error(request, parsed_id.error)

    body = await validate_post_request(request)
    if isinstance(body, Err):
        return render_error(request, body.error)

    result = await operations.update_post(parsed_id.value, body.value["userId"], body.value)
    return render_result(request, result, serialize_post)


@router.delete("/{post_id}")
async def delete_post(
    post_id: str,
    request: Request,
    operations: Annotated[PostOperations, Depends(get_post_operations)]
):
    parsed_id = parse_id_parameter(post_id)
    if isinstance(parsed_id, Err):
        return render_error(request, parsed_id.error)

    return render_result(request, await operations.delete_post(parsed_id.value), serialize_post)
