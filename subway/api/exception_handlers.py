"""
도메인 예외 → HTTP 에러 응답 변환

예외 종류별 상태 코드는 ERROR_STATUS_CODES 표 하나로 관리하고,
FastAPI 예외 핸들러는 to_error_response()의 결과를 그대로 렌더링한다.
"""

import logging
from typing import Tuple

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from subway.core.config import settings
from subway.core.exceptions import (
    SubwayException,
    DuplicateNameException,
    NotFoundException,
)
from subway.models.responses import ErrorResponse

logger = logging.getLogger(__name__)


# 순서대로 isinstance 검사 (하위 클래스 우선)
ERROR_STATUS_CODES = [
    (DuplicateNameException, status.HTTP_400_BAD_REQUEST),
    (NotFoundException, status.HTTP_404_NOT_FOUND),
    (SubwayException, status.HTTP_400_BAD_REQUEST),
]


def to_error_response(exc: Exception) -> Tuple[int, ErrorResponse]:
    """예외를 (상태 코드, 에러 바디)로 변환"""
    for exc_type, status_code in ERROR_STATUS_CODES:
        if isinstance(exc, exc_type):
            return status_code, ErrorResponse(status=status_code, message=exc.message)

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = str(exc) if settings.DEBUG else "서버 내부 오류가 발생했습니다"
    return status_code, ErrorResponse(status=status_code, message=message)


def _render(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def subway_exception_handler(request: Request, exc: SubwayException):
    status_code, body = to_error_response(exc)
    logger.warning(
        f"요청 실패: {request.method} {request.url.path} "
        f"status={status_code}, code={exc.code}, message={exc.message}"
    )
    return _render(status_code, body)


async def global_exception_handler(request: Request, exc: Exception):
    """
    전역 예외 핸들러

    예상치 못한 오류 처리
    """
    logger.error(f"예상치 못한 오류: {exc}", exc_info=True)

    status_code, body = to_error_response(exc)
    return _render(status_code, body)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SubwayException, subway_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
