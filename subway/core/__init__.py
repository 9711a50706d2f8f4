"""
Core 설정 및 utilities, 커스텀 예외
"""

from subway.core.config import settings

from subway.core.exceptions import (
    SubwayException,
    DuplicateNameException,
    NotFoundException,
    DuplicateStationNameException,
    DuplicateLineNameException,
    StationNotFoundException,
    LineNotFoundException,
)

__all__ = [
    "settings",
    "SubwayException",
    "DuplicateNameException",
    "NotFoundException",
    "DuplicateStationNameException",
    "DuplicateLineNameException",
    "StationNotFoundException",
    "LineNotFoundException",
]
