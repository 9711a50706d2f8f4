"""
PostgreSQL 저장소 구현

name 컬럼의 UNIQUE 제약이 다른 프로세스와의 동시 생성을 막는다.
제약 위반은 도메인 예외(이름 중복)로 변환한다.
"""

import logging
from typing import List, Optional

from psycopg2 import errors

from subway.core.exceptions import (
    DuplicateStationNameException,
    DuplicateLineNameException,
)
from subway.db.database import get_db_cursor
from subway.db.repository import StationRepository, LineRepository
from subway.models.domain import Station, Line

logger = logging.getLogger(__name__)


def _to_station(row) -> Station:
    return Station(id=row["id"], name=row["name"])


def _to_line(row) -> Line:
    return Line(id=row["id"], name=row["name"], color=row["color"])


class PostgresStationRepository(StationRepository):
    def save(self, name: str) -> Station:
        query = """
        INSERT INTO station (name)
        VALUES (%(name)s)
        RETURNING id, name
        """

        try:
            with get_db_cursor() as cursor:
                cursor.execute(query, {"name": name})
                return _to_station(cursor.fetchone())
        except errors.UniqueViolation:
            logger.warning(f"역 이름 UNIQUE 제약 위반: {name}")
            raise DuplicateStationNameException(name)

    def find_all(self) -> List[Station]:
        query = """
        SELECT id, name
        FROM station
        ORDER BY id
        """

        with get_db_cursor() as cursor:
            cursor.execute(query)
            return [_to_station(row) for row in cursor.fetchall()]

    def exists_by_name(self, name: str) -> bool:
        with get_db_cursor() as cursor:
            cursor.execute("SELECT 1 FROM station WHERE name = %(name)s", {"name": name})
            return cursor.fetchone() is not None

    def delete_by_id(self, station_id: int) -> bool:
        with get_db_cursor() as cursor:
            cursor.execute("DELETE FROM station WHERE id = %(id)s", {"id": station_id})
            return cursor.rowcount > 0


class PostgresLineRepository(LineRepository):
    def save(self, name: str, color: Optional[str] = None) -> Line:
        query = """
        INSERT INTO line (name, color)
        VALUES (%(name)s, %(color)s)
        RETURNING id, name, color
        """

        try:
            with get_db_cursor() as cursor:
                cursor.execute(query, {"name": name, "color": color})
                return _to_line(cursor.fetchone())
        except errors.UniqueViolation:
            logger.warning(f"노선 이름 UNIQUE 제약 위반: {name}")
            raise DuplicateLineNameException(name)

    def find_all(self) -> List[Line]:
        query = """
        SELECT id, name, color
        FROM line
        ORDER BY id
        """

        with get_db_cursor() as cursor:
            cursor.execute(query)
            return [_to_line(row) for row in cursor.fetchall()]

    def find_by_id(self, line_id: int) -> Optional[Line]:
        query = """
        SELECT id, name, color
        FROM line
        WHERE id = %(id)s
        """

        with get_db_cursor() as cursor:
            cursor.execute(query, {"id": line_id})
            row = cursor.fetchone()
            return _to_line(row) if row else None

    def find_by_name(self, name: str) -> Optional[Line]:
        query = """
        SELECT id, name, color
        FROM line
        WHERE name = %(name)s
        """

        with get_db_cursor() as cursor:
            cursor.execute(query, {"name": name})
            row = cursor.fetchone()
            return _to_line(row) if row else None

    def exists_by_name(self, name: str) -> bool:
        return self.find_by_name(name) is not None

    def update(self, line: Line) -> Optional[Line]:
        query = """
        UPDATE line
        SET name = %(name)s, color = %(color)s
        WHERE id = %(id)s
        RETURNING id, name, color
        """

        try:
            with get_db_cursor() as cursor:
                cursor.execute(
                    query, {"id": line.id, "name": line.name, "color": line.color}
                )
                row = cursor.fetchone()
                return _to_line(row) if row else None
        except errors.UniqueViolation:
            logger.warning(f"노선 이름 UNIQUE 제약 위반: {line.name}")
            raise DuplicateLineNameException(line.name)

    def delete_by_id(self, line_id: int) -> bool:
        with get_db_cursor() as cursor:
            cursor.execute("DELETE FROM line WHERE id = %(id)s", {"id": line_id})
            return cursor.rowcount > 0
