# custom exception 정의 및 관리


class SubwayException(Exception):  # 예외 구조 정의
    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


# 이름 중복 (역/노선 공통)
class DuplicateNameException(SubwayException):
    def __init__(self, message: str = "이미 등록된 이름입니다", code: str = "DUPLICATE_NAME"):
        super().__init__(message, code=code)


# 존재하지 않는 리소스 (역/노선 공통)
class NotFoundException(SubwayException):
    def __init__(self, message: str = "대상을 찾을 수 없습니다", code: str = "NOT_FOUND"):
        super().__init__(message, code=code)


class DuplicateStationNameException(DuplicateNameException):
    def __init__(self, name: str):
        super().__init__(
            f"이미 등록된 역 이름입니다: {name}", code="DUPLICATE_STATION_NAME"
        )


class DuplicateLineNameException(DuplicateNameException):
    def __init__(self, name: str):
        super().__init__(
            f"이미 등록된 노선 이름입니다: {name}", code="DUPLICATE_LINE_NAME"
        )


class StationNotFoundException(NotFoundException):
    def __init__(self, station_id: int):
        super().__init__(
            f"역을 찾을 수 없습니다: id={station_id}", code="STATION_NOT_FOUND"
        )


class LineNotFoundException(NotFoundException):
    def __init__(self, line_id: int):
        super().__init__(
            f"노선을 찾을 수 없습니다: id={line_id}", code="LINE_NOT_FOUND"
        )
