# globals/config/response_config.py
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

from schedule_api.globals.code.global_accept_code import GlobalAcceptCode

DataT = TypeVar("DataT")


class APIResponse(BaseModel, Generic[DataT]):
    code: int
    message: str
    data: Optional[DataT] = None


def create_success_response(data: DataT) -> APIResponse:
    return APIResponse(
        code=GlobalAcceptCode.SUCCESS.value,
        message=GlobalAcceptCode.SUCCESS.message(),
        data=data
    )
