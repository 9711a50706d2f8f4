"""
Subway Admin - FastAPI Application

지하철 역/노선 관리 API
역/노선 이름 중복 검증 및 구조화된 에러 응답
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from subway.core.config import settings, STORAGE_BACKENDS
from subway.api.router import api_router
from subway.api.exception_handlers import register_exception_handlers
from subway.db.memory import InMemoryStationRepository, InMemoryLineRepository
from subway.middleware.request_logging import RequestLoggingMiddleware
from subway.models.responses import HealthResponse
from subway.services.station_service import StationService
from subway.services.line_service import LineService

# 로깅 설정
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def create_repositories(backend: str):
    """설정된 저장소 종류에 맞는 (역 저장소, 노선 저장소) 생성"""
    if backend not in STORAGE_BACKENDS:
        raise ValueError(
            f"지원하지 않는 STORAGE_BACKEND: {backend} (허용: {', '.join(STORAGE_BACKENDS)})"
        )

    if backend == "postgres":
        # psycopg2는 postgres 사용 시에만 필요
        from subway.db.database import initialize_pool, create_schema
        from subway.db.postgres import (
            PostgresStationRepository,
            PostgresLineRepository,
        )

        initialize_pool()
        create_schema()
        return PostgresStationRepository(), PostgresLineRepository()

    return InMemoryStationRepository(), InMemoryLineRepository()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    애플리케이션 생명주기 관리

    서버 시작 시 실행:
    - 저장소 생성 (memory 또는 PostgreSQL 연결 풀 + 스키마)
    - 역/노선 서비스 생성 후 app.state에 등록

    서버 종료 시 실행:
    - PostgreSQL 연결 풀 종료
    """
    # ========== Startup ==========
    logger.info(f"{settings.PROJECT_NAME} 시작 중... (storage={settings.STORAGE_BACKEND})")

    try:
        station_repository, line_repository = create_repositories(
            settings.STORAGE_BACKEND
        )
        app.state.station_service = StationService(station_repository)
        app.state.line_service = LineService(line_repository)

        logger.info(f"{settings.PROJECT_NAME} 시작 완료!")

    except Exception as e:
        logger.error(f"❌ 초기화 실패: {e}", exc_info=True)
        raise

    yield

    # ========== Shutdown ==========
    logger.info(f"{settings.PROJECT_NAME} 종료 중...")

    if settings.STORAGE_BACKEND == "postgres":
        from subway.db.database import close_pool

        try:
            close_pool()
        except Exception as e:
            logger.error(f"❌ 종료 중 오류: {e}", exc_info=True)

    logger.info(f"✓ {settings.PROJECT_NAME} 종료 완료")


# FastAPI 애플리케이션 생성
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="""
    ## 지하철 역/노선 관리 API

    ### 주요 기능
    - 🚉 역 생성/목록/삭제
    - 🚇 노선 생성/목록/조회/수정/삭제
    - 역/노선 이름 중복 검증

    ### 에러 응답
```
    {"status": 400, "message": "이미 등록된 역 이름입니다: 강남역"}
```
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

if settings.ENABLE_REQUEST_LOGGING:
    app.add_middleware(RequestLoggingMiddleware)

register_exception_handlers(app)

# API 라우터 등록
app.include_router(api_router)


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """
    헬스 체크 엔드포인트

    서버 상태 확인용 (로드 밸런서, 모니터링)
    """
    return HealthResponse(
        status="healthy",
        version=settings.VERSION,
        storage=settings.STORAGE_BACKEND,
    )


# ========== Development Server ==========

if __name__ == "__main__":
    import uvicorn

    logger.info("개발 서버 시작...")

    uvicorn.run(
        "subway.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
        access_log=True,
    )
