# 요청/응답 로깅 미들웨어

import time
import logging
from typing import Callable
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    요청/응답 로깅 미들웨어

    모든 HTTP 요청과 응답 상태, 소요 시간을 로깅합니다.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """요청/응답 로깅"""

        start_time = time.time()

        # 요청 로깅
        logger.info(
            f"→ {request.method} {request.url.path} "
            f"from {request.client.host if request.client else 'unknown'}"
        )

        # 요청 처리
        try:
            response = await call_next(request)
        except Exception as e:
            # 예외 발생 시에도 소요 시간 측정
            elapsed_time_ms = (time.time() - start_time) * 1000

            logger.error(
                f"요청 처리 중 예외 발생: {request.method} {request.url.path}, "
                f"소요시간={elapsed_time_ms:.2f}ms, 예외={str(e)}",
                exc_info=True,
            )

            raise

        elapsed_time_ms = (time.time() - start_time) * 1000
        response.headers["X-Process-Time-Ms"] = f"{elapsed_time_ms:.2f}"

        # 응답 로깅 (4xx는 WARNING, 5xx는 ERROR)
        if response.status_code >= 500:
            log_level = logging.ERROR
        elif response.status_code >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO
        logger.log(
            log_level,
            f"← {request.method} {request.url.path} "
            f"status={response.status_code}, 소요시간={elapsed_time_ms:.2f}ms",
        )

        return response
