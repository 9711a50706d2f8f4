"""
pydantic models for 요청, 응답, 도메인 객체
"""


from subway.models.requests import StationRequest, LineRequest
from subway.models.responses import (
    StationResponse,
    LineResponse,
    ErrorResponse,
    HealthResponse,
)
from subway.models.domain import Station, Line

__all__ = [
    "StationRequest",
    "LineRequest",
    "StationResponse",
    "LineResponse",
    "ErrorResponse",
    "HealthResponse",
    "Station",
    "Line",
]
