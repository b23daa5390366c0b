import logging
from datetime import date
from typing import Dict, List, Sequence

from schedule_api.domain.schedule.dto.route_optimizer_request_dto import DailyPlanDTO, PlaceInfoDTO
from schedule_api.domain.schedule.service.route_optimizer_service import is_lodging

logger = logging.getLogger(__name__)


def count_days(start_date: date, end_date: date) -> int:
    num_days = (end_date - start_date).days + 1
    return num_days if num_days > 0 else 1


def allocate_days(places: Sequence[PlaceInfoDTO], start_date: date, end_date: date) -> List[DailyPlanDTO]:
    """
    여행 기간에 맞춰 장소들을 일차별로 나눈다.
    - 1일차: 첫 번째 숙소
    - 중간 일차 i: 전날 숙소(acc[i-2]) + 오늘 숙소(acc[i-1])
    - 마지막 날: 전날 숙소(acc[n-2])
    - 숙소가 아닌 장소는 1일차부터 돌아가며 배분
    """
    num_days = count_days(start_date, end_date)
    accommodations = [place for place in places if is_lodging(place)]
    others = [place for place in places if not is_lodging(place)]

    items_by_day: Dict[int, List[PlaceInfoDTO]] = {day: [] for day in range(1, num_days + 1)}

    if accommodations:
        items_by_day[1].append(accommodations[0])
        if num_days > 1 and len(accommodations) > num_days - 2:
            items_by_day[num_days].append(accommodations[num_days - 2])
        for day in range(2, num_days):
            if len(accommodations) > day - 1:
                items_by_day[day].append(accommodations[day - 2])
                items_by_day[day].append(accommodations[day - 1])

    used_lodging_ids = {place.content_id for day_items in items_by_day.values() for place in day_items}
    skipped = [place.content_id for place in accommodations if place.content_id not in used_lodging_ids]
    if skipped:
        logger.warning(f"{num_days}일 일정에 배치하지 못한 숙소: {skipped}")

    day_index = 1
    for place in others:
        items_by_day[day_index].append(place)
        day_index = (day_index % num_days) + 1

    return [
        DailyPlanDTO(day_number=day, items=_dedupe(items))
        for day, items in items_by_day.items()
    ]


def _dedupe(items: List[PlaceInfoDTO]) -> List[PlaceInfoDTO]:
    # 같은 장소 ID가 하루에 두 번 들어가지 않도록
    seen = set()
    unique = []
    for place in items:
        if place.content_id not in seen:
            seen.add(place.content_id)
            unique.append(place)
    return unique
