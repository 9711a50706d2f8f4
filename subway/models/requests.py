from typing import Optional
from pydantic import BaseModel, Field, field_validator

# service별 requests 구조 정의


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("이름은 공백일 수 없습니다")
    return value


# 역 생성 요청
class StationRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="역 이름")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        return _not_blank(value)


# 노선 생성/수정 요청
class LineRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="노선 이름")
    color: Optional[str] = Field(
        default=None, max_length=50, description="노선 색상 (ex. bg-red-600)"
    )

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        return _not_blank(value)


# 경로 파라미터 ID 범위 (PostgreSQL BIGINT)
MAX_ID = 2**63 - 1
