# domain/schedule/dto/route_optimizer_response_dto.py
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class OptimizedScheduleItemDTO(BaseModel):
    """최종 순서가 포함된 개별 아이템"""
    model_config = ConfigDict(populate_by_name=True)

    order: int = Field(..., examples=[1])
    content_id: str = Field(..., alias="contentId", examples=["126508"])
    day_number: int = Field(..., alias="dayNumber", examples=[1])


class DailyDistanceDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    day_number: int = Field(..., alias="dayNumber", examples=[1])
    distance: float = Field(..., examples=[12.34])


class RouteOptimizerResponseDTO(BaseModel):
    """
    동선 최적화 응답 DTO
    - schedule_items: (일차, 순서, 장소 ID) 목록
    - daily_distances: 일자별 직선 이동거리 합 (km)
    - overall_distance: 전체 이동거리 (km)
    """
    model_config = ConfigDict(populate_by_name=True)

    schedule_id: str = Field(..., alias="scheduleId")
    schedule_items: List[OptimizedScheduleItemDTO] = Field(default_factory=list, alias="scheduleItems")
    daily_distances: List[DailyDistanceDTO] = Field(default_factory=list, alias="dailyDistances")
    overall_distance: float = Field(0.0, alias="overallDistance", examples=[151.18])
