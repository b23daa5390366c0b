import pytest

from schedule_api.domain.schedule.dto.route_optimizer_request_dto import DailyPlanDTO, PlaceInfoDTO


def place(content_id: str, latitude: float, longitude: float, category: str = "TOURIST_SPOT") -> PlaceInfoDTO:
    return PlaceInfoDTO(
        content_id=content_id,
        title=f"Place_{content_id}",
        latitude=latitude,
        longitude=longitude,
        category=category,
    )


def day(day_number: int, *items: PlaceInfoDTO) -> DailyPlanDTO:
    return DailyPlanDTO(day_number=day_number, items=list(items))


@pytest.fixture
def start_place() -> PlaceInfoDTO:
    """적도 위 (0, 0) 출발지."""
    return place("START", 0.0, 0.0, "ETC")
