"""
서비스 레이어 - 역/노선 관리 비즈니스 로직
"""

from subway.services.station_service import StationService
from subway.services.line_service import LineService

__all__ = ["StationService", "LineService"]
