"""
Result/error rendering for the HTTP layer.

Taxonomy errors returned by entity operations become ``{"errors": [...]}``
responses; anything else that escapes a route is logged and rendered as a
generic 500 without internal detail.
"""
from fastapi import Request, status
from fastapi.responses import JSONResponse
from typing import Any, Callable, Dict, List

from postboard.infra.logging_config import get_logger
from ...domain.error.service_errors import ErrorKind, MutationReason, ServiceError
from ...domain.result import Err, Result

logger = get_logger("postboard.errors")

UNEXPECTED_ERROR_MESSAGE = "Encountered an unexpected error while processing the request."

STATUS_CODE_MAP = {
    ErrorKind.INPUT_VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.MUTATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def status_code_for(error: ServiceError) -> int:
    # owner references are reported as forbidden so the row's existence is not confirmed
    if error.kind == ErrorKind.MUTATION and error.reason == MutationReason.FOREIGN_KEY:
        return status.HTTP_403_FORBIDDEN
    return STATUS_CODE_MAP[error.kind]


def create_error_response(errors: List[Dict[str, Any]], status_code: int) -> JSONResponse:
    """統一されたエラーレスポンスを作成"""
    return JSONResponse(status_code=status_code, content={"errors": errors})


def render_error(request: Request, error: ServiceError) -> JSONResponse:
    status_code = status_code_for(error)
    logger.warning(
        f"Request rejected: {error.kind.value}",
        extra={
            "path": request.url.path,
            "method": request.method,
            "status_code": status_code,
            "error": error.message,
        }
    )
    return create_error_response([entry.to_dict() for entry in error.errors], status_code)


def render_result(request: Request, result: Result, serialize: Callable[[Any], Any]) -> JSONResponse:
    """Ok は 200 + シリアライズ結果、Err はエラー種別に応じたステータスで返す"""
    if isinstance(result, Err):
        return render_error(request, result.error)
    return JSONResponse(status_code=status.HTTP_200_OK, content=serialize(result.value))


async def handle_generic_error(request: Request, exc: Exception):
    """その他のエラーのハンドリング"""
    logger.error(
        "Unhandled exception",
        extra={
            "path": request.url.path,
            "method": request.method,
            "error": str(exc),
            "error_type": type(exc).__name__
        },
        exc_info=exc,
    )

    return create_error_response(
        [{"msg": UNEXPECTED_ERROR_MESSAGE}],
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
