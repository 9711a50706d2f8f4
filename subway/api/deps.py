from fastapi import Request

from subway.services.station_service import StationService
from subway.services.line_service import LineService

# lifespan에서 app.state에 등록된 서비스를 꺼내 주입


def get_station_service(request: Request) -> StationService:
    return request.app.state.station_service


def get_line_service(request: Request) -> LineService:
    return request.app.state.line_service
