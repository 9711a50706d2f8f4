"""
애플리케이션 구성 테스트 (헬스 체크, 저장소 선택, 로깅 미들웨어)
"""

import logging
import pytest
from unittest.mock import MagicMock

from subway.db.memory import InMemoryStationRepository, InMemoryLineRepository
from subway.main import create_repositories


class TestHealth:
    def test_health_check(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["storage"] == "memory"

    def test_process_time_header(self, client):
        response = client.get("/stations")

        assert "x-process-time-ms" in response.headers


class TestCreateRepositories:
    def test_memory_backend(self):
        stations, lines = create_repositories("memory")

        assert isinstance(stations, InMemoryStationRepository)
        assert isinstance(lines, InMemoryLineRepository)

    def test_postgres_backend(self, mocker):
        mock_init = mocker.patch("subway.db.database.initialize_pool")
        mock_schema = mocker.patch("subway.db.database.create_schema")

        stations, lines = create_repositories("postgres")

        mock_init.assert_called_once()
        mock_schema.assert_called_once()
        assert type(stations).__name__ == "PostgresStationRepository"
        assert type(lines).__name__ == "PostgresLineRepository"

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            create_repositories("mysql")

    def test_state_is_reset_per_lifespan(self):
        """lifespan마다 새 저장소로 시작"""
        from fastapi.testclient import TestClient
        from subway.main import app

        with TestClient(app) as client:
            client.post("/stations", json={"name": "강남역"})

        with TestClient(app) as client:
            assert client.get("/stations").json() == []


class TestRequestLogging:
    def test_unhandled_exception_is_logged(self, caplog):
        """처리되지 않은 예외도 소요 시간과 함께 로깅"""
        from fastapi.testclient import TestClient
        from subway.main import app

        with TestClient(app, raise_server_exceptions=False) as client:
            client.app.state.station_service = MagicMock(
                list=MagicMock(side_effect=RuntimeError("boom"))
            )

            with caplog.at_level(logging.ERROR, logger="subway.middleware.request_logging"):
                response = client.get("/stations")

        assert response.status_code == 500
        records = [
            r for r in caplog.records
            if r.name == "subway.middleware.request_logging"
        ]
        assert any("요청 처리 중 예외 발생: GET /stations" in r.getMessage() for r in records)
        assert any(r.exc_info is not None for r in records)


class TestPathIdValidation:
    @pytest.mark.parametrize(
        "method, path",
        [
            ("delete", "/stations/0"),
            ("delete", f"/stations/{2**63}"),
            ("get", "/lines/-1"),
            ("get", f"/lines/{2**63}"),
            ("delete", f"/lines/{2**63}"),
        ],
    )
    def test_out_of_range_id(self, client, method, path):
        """ID 범위(1 ~ BIGINT 최댓값) 밖이면 422"""
        response = getattr(client, method)(path)

        assert response.status_code == 422

    def test_out_of_range_id_on_update(self, client):
        response = client.put(f"/lines/{2**63}", json={"name": "신분당선"})

        assert response.status_code == 422

    def test_max_id_is_accepted(self, client):
        """BIGINT 최댓값은 검증을 통과하고 404"""
        response = client.get(f"/lines/{2**63 - 1}")

        assert response.status_code == 404
