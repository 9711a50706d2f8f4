"""
예외 → HTTP 에러 응답 변환 테스트
"""

import pytest
from unittest.mock import MagicMock

from subway.api.exception_handlers import to_error_response
from subway.core.exceptions import (
    SubwayException,
    DuplicateStationNameException,
    DuplicateLineNameException,
    StationNotFoundException,
    LineNotFoundException,
)


class TestToErrorResponse:
    @pytest.mark.parametrize(
        "exc, expected_status",
        [
            (DuplicateStationNameException("강남역"), 400),
            (DuplicateLineNameException("신분당선"), 400),
            (StationNotFoundException(1), 404),
            (LineNotFoundException(1), 404),
            (SubwayException("알 수 없는 도메인 오류"), 400),
        ],
    )
    def test_domain_exceptions(self, exc, expected_status):
        status_code, body = to_error_response(exc)

        assert status_code == expected_status
        assert body.status == expected_status
        assert body.message == exc.message

    def test_unexpected_exception_hides_detail(self):
        status_code, body = to_error_response(RuntimeError("connection refused"))

        assert status_code == 500
        assert body.status == 500
        assert "connection refused" not in body.message

    def test_unexpected_exception_detail_in_debug(self, mocker):
        mocker.patch("subway.api.exception_handlers.settings.DEBUG", True)

        _, body = to_error_response(RuntimeError("connection refused"))

        assert body.message == "connection refused"


class TestExceptionHandlers:
    def test_unexpected_error_returns_500_body(self):
        """예상치 못한 오류는 500 + 에러 바디"""
        from fastapi.testclient import TestClient
        from subway.main import app

        with TestClient(app, raise_server_exceptions=False) as client:
            client.app.state.station_service = MagicMock(
                list=MagicMock(side_effect=RuntimeError("boom"))
            )

            response = client.get("/stations")

        assert response.status_code == 500
        assert response.json() == {
            "status": 500,
            "message": "서버 내부 오류가 발생했습니다",
        }
