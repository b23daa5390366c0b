# domain/schedule/dto/route_optimizer_request_dto.py
from datetime import date
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PlaceInfoDTO(BaseModel):
    """
    개별 장소 정보
    - content_id: 장소 식별자 (동일 장소 판정 기준)
    - category: 숙소(ACCOMMODATION) 여부 판정에만 사용
    """
    model_config = ConfigDict(populate_by_name=True)

    content_id: str = Field(..., alias="contentId", examples=["126508"])
    title: str = Field("", examples=["경복궁"])
    latitude: float = Field(..., ge=-90, le=90, allow_inf_nan=False, examples=[37.579617])
    longitude: float = Field(..., ge=-180, le=180, allow_inf_nan=False, examples=[126.977041])
    category: str = Field("ETC", examples=["TOURIST_SPOT"])

    def is_same_place(self, other: "PlaceInfoDTO") -> bool:
        return other is not None and self.content_id == other.content_id


class DailyPlanDTO(BaseModel):
    """날짜별 계획 (방문 순서 없음)"""
    model_config = ConfigDict(populate_by_name=True)

    day_number: int = Field(..., alias="dayNumber", ge=1, examples=[1])
    items: List[PlaceInfoDTO] = Field(default_factory=list)

    @field_validator("items")
    @classmethod
    def check_unique_content_ids(cls, items: List[PlaceInfoDTO]) -> List[PlaceInfoDTO]:
        seen = set()
        for item in items:
            if item.content_id in seen:
                raise ValueError(f"하루 일정에 중복된 장소가 있습니다: {item.content_id}")
            seen.add(item.content_id)
        return items


class RouteOptimizerRequestDTO(BaseModel):
    """
    동선 최적화 요청 DTO
    - schedule_id: 스케줄 ID (응답에 그대로 전달)
    - daily_plans: 날짜별로 그룹화된 장소 목록 (일차 순서)
    - start_place: 1일차 최초 출발지
    """
    model_config = ConfigDict(populate_by_name=True)

    schedule_id: str = Field(..., alias="scheduleId", examples=["123e4567-e89b-12d3-a456-426614174000"])
    daily_plans: List[DailyPlanDTO] = Field(default_factory=list, alias="dailyPlans")
    start_place: PlaceInfoDTO = Field(..., alias="startPlace")

    @field_validator("daily_plans")
    @classmethod
    def check_day_order(cls, daily_plans: List[DailyPlanDTO]) -> List[DailyPlanDTO]:
        day_numbers = [plan.day_number for plan in daily_plans]
        if any(a >= b for a, b in zip(day_numbers, day_numbers[1:])):
            raise ValueError("dayNumber는 중복 없이 오름차순이어야 합니다")
        return daily_plans


class ScheduleOptimizeItemsRequestDTO(BaseModel):
    """
    장소 ID 목록만으로 일정을 구성하는 요청 DTO
    - 여행 기간으로 일차를 나누고(숙소 규칙 적용) 일자별 동선을 최적화한다.
    """
    model_config = ConfigDict(populate_by_name=True)

    schedule_id: str = Field(..., alias="scheduleId", examples=["123e4567-e89b-12d3-a456-426614174000"])
    start_date: date = Field(..., alias="startDate", examples=["2025-07-01"])
    end_date: date = Field(..., alias="endDate", examples=["2025-07-03"])
    start_place: PlaceInfoDTO = Field(..., alias="startPlace")
    content_ids: List[str] = Field(..., alias="contentIds", min_length=1, examples=[["126508", "264337"]])
