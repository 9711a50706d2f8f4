from typing import Optional
from pydantic import BaseModel, Field

from subway.models.domain import Station, Line

# service 별 응답 구조 정의


# 역 응답
class StationResponse(BaseModel):
    id: int = Field(..., description="역 ID")
    name: str = Field(..., description="역 이름")

    @classmethod
    def of(cls, station: Station) -> "StationResponse":
        return cls(id=station.id, name=station.name)


# 노선 응답
class LineResponse(BaseModel):
    id: int = Field(..., description="노선 ID")
    name: str = Field(..., description="노선 이름")
    color: Optional[str] = Field(None, description="노선 색상")

    @classmethod
    def of(cls, line: Line) -> "LineResponse":
        return cls(id=line.id, name=line.name, color=line.color)


# 에러 응답 (모든 에러 바디의 단일 형태)
class ErrorResponse(BaseModel):
    status: int = Field(..., description="HTTP 상태 코드")
    message: str = Field(..., description="에러 메시지")


# 헬스 체크 응답
class HealthResponse(BaseModel):
    status: str = Field(..., description="서비스 상태")
    version: str = Field(..., description="서비스 버전")
    storage: str = Field(..., description="저장소 종류 (memory/postgres)")
