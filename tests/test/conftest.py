"""
Pytest 설정 및 공통 Fixture
"""

import os
import pytest
import sys
from pathlib import Path

# 테스트 환경 변수 설정 (모듈 임포트 전에 설정해야 함)
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["DEBUG"] = "false"

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def client():
    """
    FastAPI TestClient fixture

    with 블록 진입 시 lifespan이 실행되어 매 테스트마다 빈 저장소로 시작
    """
    from fastapi.testclient import TestClient
    from subway.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def station_service():
    """In-memory 저장소 기반 역 서비스"""
    from subway.db.memory import InMemoryStationRepository
    from subway.services.station_service import StationService

    return StationService(InMemoryStationRepository())


@pytest.fixture
def line_service():
    """In-memory 저장소 기반 노선 서비스"""
    from subway.db.memory import InMemoryLineRepository
    from subway.services.line_service import LineService

    return LineService(InMemoryLineRepository())


@pytest.fixture
def sample_station_names():
    """테스트용 샘플 역 이름"""
    return ["강남역", "서울역", "역삼역", "양재역"]


@pytest.fixture
def sample_lines():
    """테스트용 샘플 노선 데이터"""
    return [
        {"name": "신분당선", "color": "bg-red-600"},
        {"name": "2호선", "color": "bg-green-600"},
        {"name": "분당선", "color": "bg-yellow-600"},
    ]


@pytest.fixture
def mock_db_cursor(mocker):
    """
    PostgreSQL 저장소용 Mock 커서

    subway.db.postgres.get_db_cursor를 패치하여 실제 DB 연결 없이
    실행된 쿼리와 반환값을 검증할 수 있게 함
    """
    mock_cursor = mocker.MagicMock()
    mock_cursor.fetchone.return_value = None
    mock_cursor.fetchall.return_value = []
    mock_cursor.rowcount = 0

    mock_get_cursor = mocker.patch("subway.db.postgres.get_db_cursor")
    mock_get_cursor.return_value.__enter__.return_value = mock_cursor
    mock_get_cursor.return_value.__exit__.return_value = False

    return mock_cursor
