from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from schedule_api.domain.schedule.dto.route_optimizer_request_dto import (
    RouteOptimizerRequestDTO,
    ScheduleOptimizeItemsRequestDTO,
)
from schedule_api.domain.schedule.dto.route_optimizer_response_dto import RouteOptimizerResponseDTO
from schedule_api.domain.schedule.service.schedule_optimize_service import (
    optimize_schedule_items,
    optimize_schedule_route,
    render_schedule_map,
)
from schedule_api.globals.config.response_config import APIResponse, create_success_response

router = APIRouter()


@router.post("/optimize", response_model=APIResponse[RouteOptimizerResponseDTO])
async def optimize_route(request: RouteOptimizerRequestDTO):
    """
    날짜별로 그룹화된 장소 목록의 방문 순서를 최적화하는 엔드포인트.
    request DTO:
      - scheduleId: 스케줄 ID
      - dailyPlans: 일차별 장소 목록
      - startPlace: 1일차 출발지
    """
    result = optimize_schedule_route(request)
    return create_success_response(result)


@router.post("/optimize/items", response_model=APIResponse[RouteOptimizerResponseDTO])
def optimize_items(request: ScheduleOptimizeItemsRequestDTO):
    """장소 ID 목록과 여행 기간으로 일차 배정 후 동선을 최적화."""
    result = optimize_schedule_items(request)
    return create_success_response(result)


@router.post("/optimize/map", response_class=HTMLResponse)
async def optimize_route_map(request: RouteOptimizerRequestDTO):
    return HTMLResponse(content=render_schedule_map(request))
