"""
노선 관리 REST API 엔드포인트
"""

from fastapi import APIRouter, Depends, Path, Response, status
from typing import List

from subway.api.deps import get_line_service
from subway.models.requests import LineRequest, MAX_ID
from subway.models.responses import LineResponse, ErrorResponse
from subway.services.line_service import LineService

router = APIRouter()


@router.post(
    "",
    response_model=LineResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
def create_line(
    line_request: LineRequest,
    response: Response,
    service: LineService = Depends(get_line_service),
):
    """
    노선 생성

    - **name**: 노선 이름 (중복 불가)
    - **color**: 노선 색상 (선택)

    Example:
        POST /lines {"name": "신분당선", "color": "bg-red-600"}
    """
    line = service.create(line_request.name, line_request.color)
    response.headers["Location"] = f"/lines/{line.id}"
    return LineResponse.of(line)


@router.get("", response_model=List[LineResponse])
def list_lines(service: LineService = Depends(get_line_service)):
    """전체 노선 목록 (생성 순)"""
    return [LineResponse.of(line) for line in service.list()]


@router.get(
    "/{line_id}",
    response_model=LineResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_line(
    line_id: int = Path(..., ge=1, le=MAX_ID),
    service: LineService = Depends(get_line_service),
):
    return LineResponse.of(service.get(line_id))


@router.put(
    "/{line_id}",
    response_model=LineResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def update_line(
    line_request: LineRequest,
    line_id: int = Path(..., ge=1, le=MAX_ID),
    service: LineService = Depends(get_line_service),
):
    """노선 이름/색상 수정 (다른 노선과 이름 중복 불가)"""
    line = service.update(line_id, line_request.name, line_request.color)
    return LineResponse.of(line)


@router.delete(
    "/{line_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
def delete_line(
    line_id: int = Path(..., ge=1, le=MAX_ID),
    service: LineService = Depends(get_line_service),
):
    service.delete(line_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
