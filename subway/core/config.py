import os
from typing import Dict, Any
from dotenv import load_dotenv

load_dotenv()  # 환경변수 읽어오기


class Settings:
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Subway Admin")
    VERSION: str = "1.0.0"

    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    PORT: int = int(os.getenv("PORT", 8080))

    # memory | postgres
    STORAGE_BACKEND: str = os.getenv("STORAGE_BACKEND", "memory").lower()

    DB_HOST: str = os.getenv("DB_HOST", "localhost")
    DB_PORT: int = int(os.getenv("DB_PORT", 5432))
    DB_NAME: str = os.getenv("DB_NAME", "subway")
    DB_USER: str = os.getenv("DB_USER", "postgres")
    DB_PASSWORD: str = os.getenv("DB_PASSWORD", "password")
    DB_SSLMODE: str = os.getenv("DB_SSLMODE", "prefer")
    DB_POOL_MIN: int = int(os.getenv("DB_POOL_MIN", 1))
    DB_POOL_MAX: int = int(os.getenv("DB_POOL_MAX", 10))

    # 요청/응답 로깅 미들웨어
    ENABLE_REQUEST_LOGGING: bool = (
        os.getenv("ENABLE_REQUEST_LOGGING", "true").lower() == "true"
    )

    # CORS 설정
    ALLOWED_ORIGINS: list[str] = os.getenv(
        "ALLOWED_ORIGINS",
        "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000",
    ).split(",")

    @property
    def DB_CONFIG(self) -> Dict[str, Any]:
        return {
            "host": self.DB_HOST,
            "port": self.DB_PORT,
            "database": self.DB_NAME,
            "user": self.DB_USER,
            "password": self.DB_PASSWORD,
            "sslmode": self.DB_SSLMODE,
            "connect_timeout": 30,
        }


settings = Settings()  # 모듈화


STORAGE_BACKENDS = ("memory", "postgres")
