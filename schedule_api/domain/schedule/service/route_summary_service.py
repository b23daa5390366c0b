from typing import List, Sequence, Tuple

from schedule_api.domain.schedule.dto.route_optimizer_response_dto import DailyDistanceDTO
from schedule_api.domain.schedule.service.distance_service import distance_between
from schedule_api.domain.schedule.service.route_optimizer_service import DayRoute


def summarize_distances(day_routes: Sequence[DayRoute]) -> Tuple[List[DailyDistanceDTO], float]:
    """일자별 이동거리 합계. 1일차는 최초 출발지부터 계산한다."""
    daily_distances = []
    overall_distance = 0.0
    for day_route in day_routes:
        if not day_route.places:
            continue
        path = list(day_route.places)
        if not path[0].is_same_place(day_route.origin):
            path.insert(0, day_route.origin)
        day_dist = sum(distance_between(a, b) for a, b in zip(path, path[1:]))
        daily_distances.append(DailyDistanceDTO(day_number=day_route.day_number, distance=round(day_dist, 2)))
        overall_distance += day_dist
    return daily_distances, round(overall_distance, 2)
