import logging
import threading
from typing import List

from subway.core.exceptions import (
    DuplicateStationNameException,
    StationNotFoundException,
)
from subway.db.repository import StationRepository
from subway.models.domain import Station

logger = logging.getLogger(__name__)


class StationService:
    """
    역 관리 서비스

    - 역 이름은 전체 역에서 유일해야 함 (대소문자 구분, 정확 일치)
    - 중복 검사와 저장은 하나의 lock 안에서 수행
    """

    def __init__(self, repository: StationRepository):
        self.repository = repository
        self._lock = threading.Lock()

    def create(self, name: str) -> Station:
        with self._lock:
            if self.repository.exists_by_name(name):
                raise DuplicateStationNameException(name)

            station = self.repository.save(name)

        logger.info(f"역 생성: id={station.id}, name={station.name}")
        return station

    def list(self) -> List[Station]:
        return self.repository.find_all()

    def delete(self, station_id: int) -> None:
        # 없는 ID 삭제는 404로 처리
        if not self.repository.delete_by_id(station_id):
            raise StationNotFoundException(station_id)

        logger.info(f"역 삭제: id={station_id}")
