import logging
import threading
from typing import List, Optional

from subway.core.exceptions import (
    DuplicateLineNameException,
    LineNotFoundException,
)
from subway.db.repository import LineRepository
from subway.models.domain import Line

logger = logging.getLogger(__name__)


class LineService:
    """
    노선 관리 서비스

    - 노선 이름은 전체 노선에서 유일해야 함
    - 생성/수정 시 중복 검사와 저장은 하나의 lock 안에서 수행
    """

    def __init__(self, repository: LineRepository):
        self.repository = repository
        self._lock = threading.Lock()

    def create(self, name: str, color: Optional[str] = None) -> Line:
        with self._lock:
            if self.repository.exists_by_name(name):
                raise DuplicateLineNameException(name)

            line = self.repository.save(name, color)

        logger.info(f"노선 생성: id={line.id}, name={line.name}")
        return line

    def list(self) -> List[Line]:
        return self.repository.find_all()

    def get(self, line_id: int) -> Line:
        line = self.repository.find_by_id(line_id)
        if line is None:
            raise LineNotFoundException(line_id)
        return line

    def update(self, line_id: int, name: str, color: Optional[str] = None) -> Line:
        with self._lock:
            line = self.get(line_id)

            # 자기 자신의 현재 이름으로 변경하는 것은 허용
            owner = self.repository.find_by_name(name)
            if owner is not None and owner.id != line_id:
                raise DuplicateLineNameException(name)

            line.name = name
            line.color = color
            updated = self.repository.update(line)
            if updated is None:
                raise LineNotFoundException(line_id)

        logger.info(f"노선 수정: id={line_id}, name={updated.name}")
        return updated

    def delete(self, line_id: int) -> None:
        # update의 조회-저장 사이에 삭제가 끼어들지 않도록 같은 lock 사용
        with self._lock:
            if not self.repository.delete_by_id(line_id):
                raise LineNotFoundException(line_id)

        logger.info(f"노선 삭제: id={line_id}")
