from typing import Optional
from dataclasses import dataclass

# domain 정의


@dataclass
class Station:
    id: int  # 생성 시 할당, 변경 불가
    name: str  # 전체 역에서 유일


@dataclass
class Line:
    id: int
    name: str  # 전체 노선에서 유일
    color: Optional[str] = None  # ex) bg-red-600
