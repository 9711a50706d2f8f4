"""
저장소 인터페이스

서비스 계층은 이 인터페이스에만 의존하고,
실제 구현(memory/postgres)은 설정에 따라 main의 lifespan에서 주입된다.
이름 유일성 검증은 서비스 계층의 책임이며 저장소는 저장/조회만 담당한다.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from subway.models.domain import Station, Line


class StationRepository(ABC):
    @abstractmethod
    def save(self, name: str) -> Station:
        """새 역 저장 후 ID가 할당된 Station 반환"""

    @abstractmethod
    def find_all(self) -> List[Station]:
        """생성 순서대로 전체 역 조회"""

    @abstractmethod
    def exists_by_name(self, name: str) -> bool:
        ...

    @abstractmethod
    def delete_by_id(self, station_id: int) -> bool:
        """삭제 여부 반환 (없는 ID면 False)"""


class LineRepository(ABC):
    @abstractmethod
    def save(self, name: str, color: Optional[str] = None) -> Line:
        """새 노선 저장 후 ID가 할당된 Line 반환"""

    @abstractmethod
    def find_all(self) -> List[Line]:
        """생성 순서대로 전체 노선 조회"""

    @abstractmethod
    def find_by_id(self, line_id: int) -> Optional[Line]:
        ...

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[Line]:
        ...

    @abstractmethod
    def exists_by_name(self, name: str) -> bool:
        ...

    @abstractmethod
    def update(self, line: Line) -> Optional[Line]:
        """수정된 Line 반환 (없는 ID면 None)"""

    @abstractmethod
    def delete_by_id(self, line_id: int) -> bool:
        """삭제 여부 반환 (없는 ID면 False)"""
