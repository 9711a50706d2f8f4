"""
In-memory 저장소 구현

dict의 삽입 순서를 그대로 생성 순서로 사용한다.
ID는 종류별 카운터로 1부터 할당되며 삭제 후에도 재사용하지 않는다.
"""

import itertools
import logging
import threading
from dataclasses import replace
from typing import Dict, List, Optional

from subway.db.repository import StationRepository, LineRepository
from subway.models.domain import Station, Line

logger = logging.getLogger(__name__)


class InMemoryStationRepository(StationRepository):
    def __init__(self):
        self._stations: Dict[int, Station] = {}
        self._ids = itertools.count(1)
        self._lock = threading.RLock()

    def save(self, name: str) -> Station:
        with self._lock:
            station = Station(id=next(self._ids), name=name)
            self._stations[station.id] = station
            logger.debug(f"역 저장: id={station.id}, name={name}")
            return replace(station)

    def find_all(self) -> List[Station]:
        with self._lock:
            return [replace(station) for station in self._stations.values()]

    def exists_by_name(self, name: str) -> bool:
        with self._lock:
            return any(s.name == name for s in self._stations.values())

    def delete_by_id(self, station_id: int) -> bool:
        with self._lock:
            return self._stations.pop(station_id, None) is not None


class InMemoryLineRepository(LineRepository):
    def __init__(self):
        self._lines: Dict[int, Line] = {}
        self._ids = itertools.count(1)
        self._lock = threading.RLock()

    def save(self, name: str, color: Optional[str] = None) -> Line:
        with self._lock:
            line = Line(id=next(self._ids), name=name, color=color)
            self._lines[line.id] = line
            logger.debug(f"노선 저장: id={line.id}, name={name}")
            return replace(line)

    def find_all(self) -> List[Line]:
        with self._lock:
            return [replace(line) for line in self._lines.values()]

    def find_by_id(self, line_id: int) -> Optional[Line]:
        with self._lock:
            line = self._lines.get(line_id)
            return replace(line) if line else None

    def find_by_name(self, name: str) -> Optional[Line]:
        with self._lock:
            for line in self._lines.values():
                if line.name == name:
                    return replace(line)
            return None

    def exists_by_name(self, name: str) -> bool:
        return self.find_by_name(name) is not None

    def update(self, line: Line) -> Optional[Line]:
        with self._lock:
            if line.id not in self._lines:
                return None
            # 기존 위치(생성 순서) 유지
            self._lines[line.id] = replace(line)
            return replace(line)

    def delete_by_id(self, line_id: int) -> bool:
        with self._lock:
            return self._lines.pop(line_id, None) is not None
