"""
저장소 인터페이스 및 구현 (memory / postgres)
"""

from subway.db.repository import StationRepository, LineRepository
from subway.db.memory import InMemoryStationRepository, InMemoryLineRepository

__all__ = [
    "StationRepository",
    "LineRepository",
    "InMemoryStationRepository",
    "InMemoryLineRepository",
]
