import logging
from typing import List, NamedTuple, Optional, Sequence, Tuple

from schedule_api.domain.schedule.dto.route_optimizer_request_dto import DailyPlanDTO, PlaceInfoDTO
from schedule_api.domain.schedule.dto.route_optimizer_response_dto import OptimizedScheduleItemDTO
from schedule_api.domain.schedule.service.distance_service import distance_between
from schedule_api.globals.config import settings

logger = logging.getLogger(__name__)


class CarryOver(NamedTuple):
    """
    일차 사이에 넘겨주는 출발지 상태.
    - place: 다음 날 동선의 시작 위치
    - is_origin: 아직 어떤 장소도 방문하지 않은 최초 출발지인지 여부
      (최초 출발지는 방문 장소로 출력하지 않는다)
    """
    place: PlaceInfoDTO
    is_origin: bool


class DayRoute(NamedTuple):
    day_number: int
    places: List[PlaceInfoDTO]
    origin: PlaceInfoDTO


def is_lodging(place: PlaceInfoDTO, lodging_category: Optional[str] = None) -> bool:
    lodging_category = (lodging_category or settings.LODGING_CATEGORY).upper()
    return (place.category or "").upper() == lodging_category


def find_nearest(current: PlaceInfoDTO, candidates: Sequence[PlaceInfoDTO]) -> Optional[PlaceInfoDTO]:
    """현재 위치에서 가장 가까운 장소. 거리가 같으면 먼저 나온 장소."""
    nearest = None
    min_distance = float("inf")
    for candidate in candidates:
        distance = distance_between(current, candidate)
        if distance < min_distance:
            min_distance = distance
            nearest = candidate
    return nearest


def sequence_nearest_neighbor(start: PlaceInfoDTO, places: Sequence[PlaceInfoDTO]) -> List[PlaceInfoDTO]:
    remaining = list(places)
    ordered = []
    current = start
    while remaining:
        nearest = find_nearest(current, remaining)
        if nearest is None:
            # NaN 좌표처럼 비교 불가능한 경우 입력 순서대로 이어 붙임
            nearest = remaining[0]
        ordered.append(nearest)
        remaining = [place for place in remaining if not place.is_same_place(nearest)]
        current = nearest
    return ordered


def extract_pinned_end(
    working_set: List[PlaceInfoDTO],
    current: PlaceInfoDTO,
    day_number: int,
    lodging_category: Optional[str] = None,
) -> Tuple[List[PlaceInfoDTO], Optional[PlaceInfoDTO]]:
    """첫 번째 숙소를 하루의 마지막 방문지로 떼어낸다."""
    lodgings = [
        place for place in working_set
        if is_lodging(place, lodging_category) and not place.is_same_place(current)
    ]
    if not lodgings:
        return working_set, None
    if len(lodgings) > 1:
        logger.warning(
            f"{day_number}일차에 숙소가 {len(lodgings)}곳 있습니다. "
            f"첫 번째 숙소({lodgings[0].title or lodgings[0].content_id})만 마지막 순서로 고정합니다."
        )
    pinned = lodgings[0]
    return [place for place in working_set if not place.is_same_place(pinned)], pinned


def optimize_day(
    daily_plan: DailyPlanDTO,
    carry_over: CarryOver,
    is_last_day: bool,
    lodging_category: Optional[str] = None,
) -> Tuple[DayRoute, CarryOver]:
    """
    하루치 장소들의 방문 순서를 결정하고 다음 날로 넘길 출발지를 반환.
    1) 전날 마지막 장소가 오늘 목록에 있으면 후보에서 제외하고 1번으로 다시 출력
    2) 마지막 날이 아니면 숙소 하나를 마지막 순서로 고정
    3) 나머지는 Nearest Neighbor로 정렬
    """
    current = carry_over.place
    if not daily_plan.items:
        return DayRoute(daily_plan.day_number, [], current), carry_over

    if carry_over.is_origin:
        working_set = list(daily_plan.items)
    else:
        working_set = [place for place in daily_plan.items if not place.is_same_place(current)]

    pinned_end = None
    if not is_last_day:
        working_set, pinned_end = extract_pinned_end(
            working_set, current, daily_plan.day_number, lodging_category
        )

    ordered = sequence_nearest_neighbor(current, working_set)
    if pinned_end is not None:
        ordered.append(pinned_end)
    if not carry_over.is_origin:
        ordered.insert(0, current)

    return DayRoute(daily_plan.day_number, ordered, current), CarryOver(ordered[-1], False)


def optimize_days(
    daily_plans: Sequence[DailyPlanDTO],
    start_place: PlaceInfoDTO,
    lodging_category: Optional[str] = None,
) -> List[DayRoute]:
    """일자별 동선을 차례로 구하며 마지막 방문지를 다음 날 출발지로 넘긴다."""
    carry_over = CarryOver(start_place, True)
    day_routes = []
    last_index = len(daily_plans) - 1
    for index, daily_plan in enumerate(daily_plans):
        logger.info(f"▶️ {daily_plan.day_number}일차 동선 최적화 시작...")
        day_route, carry_over = optimize_day(
            daily_plan, carry_over, is_last_day=index == last_index, lodging_category=lodging_category
        )
        day_routes.append(day_route)
        logger.info(
            f"✅ {daily_plan.day_number}일차 동선 최적화 완료! "
            f"다음 날 시작점: {carry_over.place.title or carry_over.place.content_id}"
        )
    return day_routes


def to_schedule_items(day_routes: Sequence[DayRoute]) -> List[OptimizedScheduleItemDTO]:
    return [
        OptimizedScheduleItemDTO(order=order, content_id=place.content_id, day_number=day_route.day_number)
        for day_route in day_routes
        for order, place in enumerate(day_route.places, start=1)
    ]


def optimize_route(
    daily_plans: Sequence[DailyPlanDTO],
    start_place: PlaceInfoDTO,
    lodging_category: Optional[str] = None,
) -> List[OptimizedScheduleItemDTO]:
    return to_schedule_items(optimize_days(daily_plans, start_place, lodging_category))
