# globals/exception/global_exception.py
import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from schedule_api.globals.code.global_accept_code import GlobalAcceptCode

logger = logging.getLogger("global_exception")


# 커스텀 예외 클래스
class GlobalException(Exception):
    def __init__(self, detail: str, code: GlobalAcceptCode = GlobalAcceptCode.SERVER_ERROR):
        super().__init__(detail)
        self.detail = detail
        self.code = code


class InvalidItineraryException(GlobalException):
    def __init__(self, detail: str):
        super().__init__(detail, code=GlobalAcceptCode.BAD_REQUEST)


class PlaceNotFoundException(GlobalException):
    def __init__(self, content_ids):
        ids = ", ".join(str(cid) for cid in content_ids)
        super().__init__(f"장소 정보를 찾을 수 없습니다: {ids}", code=GlobalAcceptCode.NOT_FOUND)
        self.content_ids = list(content_ids)


class TourDataException(GlobalException):
    def __init__(self, detail: str):
        super().__init__(f"장소 데이터를 불러오지 못했습니다: {detail}", code=GlobalAcceptCode.SERVER_ERROR)


# 글로벌 예외 핸들러 함수
async def global_exception_handler(request: Request, exc: GlobalException):
    logger.error(f"{type(exc).__name__} on {request.url.path}: {exc.detail}")
    return JSONResponse(
        status_code=exc.code.value,
        content={
            "code": exc.code.value,
            "message": exc.code.message(),
            "detail": exc.detail,
        },
    )
