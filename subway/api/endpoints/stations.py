"""
역 관리 REST API 엔드포인트
"""

from fastapi import APIRouter, Depends, Path, Response, status
from typing import List

from subway.api.deps import get_station_service
from subway.models.requests import StationRequest, MAX_ID
from subway.models.responses import StationResponse, ErrorResponse
from subway.services.station_service import StationService

router = APIRouter()


@router.post(
    "",
    response_model=StationResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
def create_station(
    station_request: StationRequest,
    response: Response,
    service: StationService = Depends(get_station_service),
):
    """
    역 생성

    - **name**: 역 이름 (중복 불가)

    Example:
        POST /stations {"name": "강남역"}
    """
    station = service.create(station_request.name)
    response.headers["Location"] = f"/stations/{station.id}"
    return StationResponse.of(station)


@router.get("", response_model=List[StationResponse])
def list_stations(service: StationService = Depends(get_station_service)):
    """전체 역 목록 (생성 순)"""
    return [StationResponse.of(station) for station in service.list()]


@router.delete(
    "/{station_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"model": ErrorResponse}},
)
def delete_station(
    station_id: int = Path(..., ge=1, le=MAX_ID),
    service: StationService = Depends(get_station_service),
):
    service.delete(station_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
