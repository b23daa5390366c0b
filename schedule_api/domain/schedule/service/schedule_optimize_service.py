import logging
from typing import List, Optional

from schedule_api.domain.schedule.dto.route_optimizer_request_dto import (
    RouteOptimizerRequestDTO,
    ScheduleOptimizeItemsRequestDTO,
)
from schedule_api.domain.schedule.dto.route_optimizer_response_dto import RouteOptimizerResponseDTO
from schedule_api.domain.schedule.service.day_allocation_service import allocate_days
from schedule_api.domain.schedule.service.route_map_service import render_route_map
from schedule_api.domain.schedule.service.route_optimizer_service import (
    DayRoute,
    optimize_days,
    to_schedule_items,
)
from schedule_api.domain.schedule.service.route_summary_service import summarize_distances
from schedule_api.domain.tour.repository.tour_repository import (
    TourRepository,
    get_tour_repository,
    resolve_places,
)
from schedule_api.globals.exception.global_exception import (
    InvalidItineraryException,
    PlaceNotFoundException,
)

logger = logging.getLogger(__name__)


def build_response(schedule_id: str, day_routes: List[DayRoute]) -> RouteOptimizerResponseDTO:
    daily_distances, overall_distance = summarize_distances(day_routes)
    return RouteOptimizerResponseDTO(
        schedule_id=schedule_id,
        schedule_items=to_schedule_items(day_routes),
        daily_distances=daily_distances,
        overall_distance=overall_distance,
    )


def optimize_schedule_route(request: RouteOptimizerRequestDTO) -> RouteOptimizerResponseDTO:
    """
    Controller(Router)에서 호출하는 동선 최적화 진입점.
    날짜별로 이미 나뉜 계획을 받아 일자별 방문 순서를 결정한다.
    """
    day_routes = optimize_days(request.daily_plans, request.start_place)
    return build_response(request.schedule_id, day_routes)


def optimize_schedule_items(
    request: ScheduleOptimizeItemsRequestDTO,
    repository: Optional[TourRepository] = None,
) -> RouteOptimizerResponseDTO:
    """
    1) tour 레포지토리에서 장소 위치/카테고리 조회
    2) 여행 기간에 맞춰 일차 배정 (숙소 규칙 적용)
    3) 일자별 동선 최적화
    """
    if request.end_date < request.start_date:
        raise InvalidItineraryException(
            f"종료일({request.end_date})이 시작일({request.start_date})보다 빠릅니다"
        )
    repository = repository or get_tour_repository()
    places = resolve_places(repository, request.content_ids)
    if not places:
        raise PlaceNotFoundException(request.content_ids)

    daily_plans = allocate_days(places, request.start_date, request.end_date)
    logger.info(f"스케줄 {request.schedule_id}: 장소 {len(places)}곳을 {len(daily_plans)}일로 배정")
    day_routes = optimize_days(daily_plans, request.start_place)
    return build_response(request.schedule_id, day_routes)


def render_schedule_map(request: RouteOptimizerRequestDTO) -> str:
    day_routes = optimize_days(request.daily_plans, request.start_place)
    return render_route_map(day_routes).get_root().render()
