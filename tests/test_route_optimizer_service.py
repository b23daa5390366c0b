"""일자별 동선 최적화(Nearest Neighbor + 숙소 고정) 테스트."""

import random
from collections import Counter
from typing import List, Tuple

from schedule_api.domain.schedule.dto.route_optimizer_request_dto import DailyPlanDTO, PlaceInfoDTO
from schedule_api.domain.schedule.service.distance_service import distance_between
from schedule_api.domain.schedule.service.route_optimizer_service import (
    CarryOver,
    find_nearest,
    optimize_day,
    optimize_days,
    optimize_route,
)
from conftest import day, place

ACC = "ACCOMMODATION"


def rows(items) -> List[Tuple[int, int, str]]:
    return [(item.day_number, item.order, item.content_id) for item in items]


def test_single_day_nearest_first(start_place: PlaceInfoDTO) -> None:
    """출발지에서 가까운 순서대로 A, C, B."""
    plan = [day(1, place("A", 0, 1), place("B", 0, 5), place("C", 0, 2))]

    result = optimize_route(plan, start_place)

    assert rows(result) == [(1, 1, "A"), (1, 2, "C"), (1, 3, "B")]


def test_lodging_is_pinned_and_carried_over(start_place: PlaceInfoDTO) -> None:
    plan = [
        day(1, place("A", 0, 1), place("L", 0, 0.5, ACC)),
        day(2, place("B", 0, 3)),
    ]

    result = optimize_route(plan, start_place)

    assert rows(result) == [
        (1, 1, "A"), (1, 2, "L"),
        (2, 1, "L"), (2, 2, "B"),
    ]


def test_empty_day_keeps_carry_over(start_place: PlaceInfoDTO) -> None:
    plan = [
        day(1, place("A", 0, 1), place("C", 0, 2)),
        day(2),
        day(3, place("B", 0, 5), place("D", 0, 1.5)),
    ]

    result = optimize_route(plan, start_place)

    assert [r for r in rows(result) if r[0] == 2] == []
    assert [r for r in rows(result) if r[0] == 3] == [(3, 1, "C"), (3, 2, "D"), (3, 3, "B")]


def test_day_with_only_lodging(start_place: PlaceInfoDTO) -> None:
    plan = [
        day(1, place("A", 0, 1)),
        day(2, place("L", 0, 4, ACC)),
        day(3, place("B", 0, 2)),
    ]

    result = optimize_route(plan, start_place)

    assert rows(result) == [
        (1, 1, "A"),
        (2, 1, "A"), (2, 2, "L"),
        (3, 1, "L"), (3, 2, "B"),
    ]


def test_last_day_lodging_is_not_pinned(start_place: PlaceInfoDTO) -> None:
    plan = [
        day(1, place("A", 0, 1)),
        day(2, place("L", 0, 1.2, ACC), place("B", 0, 3)),
    ]

    result = optimize_route(plan, start_place)

    assert rows(result) == [(1, 1, "A"), (2, 1, "A"), (2, 2, "L"), (2, 3, "B")]


def test_only_first_lodging_is_pinned(start_place: PlaceInfoDTO) -> None:
    plan = [
        day(1, place("L1", 0, 1, ACC), place("L2", 0, 2, ACC), place("A", 0, 3)),
        day(2, place("B", 0, 4)),
    ]

    result = optimize_route(plan, start_place)

    assert [r[2] for r in rows(result) if r[0] == 1] == ["L2", "A", "L1"]


def test_carry_over_place_listed_again_is_not_duplicated(start_place: PlaceInfoDTO) -> None:
    """전날 숙소가 오늘 목록에 있으면 1번으로 한 번만 출력."""
    hotel = place("H", 0, 2, ACC)
    plan = [
        day(1, place("A", 0, 1), hotel),
        day(2, place("H", 0, 2, ACC), place("B", 0, 3)),
    ]

    result = optimize_route(plan, start_place)

    assert rows(result) == [(1, 1, "A"), (1, 2, "H"), (2, 1, "H"), (2, 2, "B")]


def test_empty_first_day_does_not_emit_origin(start_place: PlaceInfoDTO) -> None:
    result = optimize_route([day(1), day(2, place("A", 0, 1))], start_place)

    assert rows(result) == [(2, 1, "A")]


def test_zero_days_returns_empty(start_place: PlaceInfoDTO) -> None:
    assert optimize_route([], start_place) == []


def test_ties_broken_by_input_order(start_place: PlaceInfoDTO) -> None:
    east = place("EAST", 0, 1)
    west = place("WEST", 0, -1)

    assert [r[2] for r in rows(optimize_route([day(1, east, west)], start_place))] == ["EAST", "WEST"]
    assert [r[2] for r in rows(optimize_route([day(1, west, east)], start_place))] == ["WEST", "EAST"]


def test_coincident_points_terminate(start_place: PlaceInfoDTO) -> None:
    plan = [day(1, place("A", 0, 0), place("B", 0, 0), place("C", 0, 0))]

    assert [r[2] for r in rows(optimize_route(plan, start_place))] == ["A", "B", "C"]


def test_optimize_day_returns_new_carry_over(start_place: PlaceInfoDTO) -> None:
    carry_over = CarryOver(start_place, True)

    day_route, next_carry_over = optimize_day(day(1, place("A", 0, 1)), carry_over, is_last_day=False)

    assert [p.content_id for p in day_route.places] == ["A"]
    assert next_carry_over.place.content_id == "A"
    assert next_carry_over.is_origin is False
    assert carry_over.place is start_place


def test_find_nearest_without_candidates(start_place: PlaceInfoDTO) -> None:
    assert find_nearest(start_place, []) is None


def random_plan(seed: int, num_days: int = 3, per_day: int = 6):
    rng = random.Random(seed)
    plans = []
    counter = 0
    for day_number in range(1, num_days + 1):
        items = []
        for i in range(per_day):
            counter += 1
            category = ACC if i == per_day - 2 else "TOURIST_SPOT"
            items.append(place(f"P{counter}", rng.uniform(33, 38), rng.uniform(126, 129), category))
        plans.append(day(day_number, *items))
    return plans


def test_coverage_and_contiguous_orders(start_place: PlaceInfoDTO) -> None:
    plan = random_plan(seed=3)

    result = optimize_route(plan, start_place)

    emitted = Counter(item.content_id for item in result)
    expected = Counter(p.content_id for d in plan for p in d.items)
    # 2일차부터는 전날 마지막 장소가 1번으로 다시 출력됨
    for day_number in (2, 3):
        first = next(item for item in result if item.day_number == day_number and item.order == 1)
        expected[first.content_id] += 1
    assert emitted == expected
    assert "START" not in emitted

    for day_number in (1, 2, 3):
        orders = [item.order for item in result if item.day_number == day_number]
        assert orders == list(range(1, len(orders) + 1))


def test_pinned_lodging_is_last_stop(start_place: PlaceInfoDTO) -> None:
    plan = random_plan(seed=11)

    result = optimize_route(plan, start_place)

    for plan_day in plan[:-1]:
        lodging = next(p for p in plan_day.items if p.category == ACC)
        day_items = [item for item in result if item.day_number == plan_day.day_number]
        assert day_items[-1].content_id == lodging.content_id


def test_deterministic(start_place: PlaceInfoDTO) -> None:
    plan = random_plan(seed=5)

    assert rows(optimize_route(plan, start_place)) == rows(optimize_route(plan, start_place))


def test_greedy_locality_brute_force(start_place: PlaceInfoDTO) -> None:
    rng = random.Random(7)
    items = [place(f"P{i}", rng.uniform(35, 36), rng.uniform(127, 128)) for i in range(10)]
    by_id = {p.content_id: p for p in items}

    day_route = optimize_days([day(1, *items)], start_place)[0]

    current = start_place
    remaining = dict(by_id)
    for chosen in day_route.places:
        best = min(distance_between(current, p) for p in remaining.values())
        assert distance_between(current, chosen) == best
        del remaining[chosen.content_id]
        current = chosen
    assert remaining == {}


def test_lodging_category_override(start_place: PlaceInfoDTO) -> None:
    plan = [
        day(1, place("CAMP", 0, 1, "HEALING"), place("A", 0, 2)),
        day(2, place("B", 0, 3)),
    ]

    result = optimize_route(plan, start_place, lodging_category="HEALING")

    assert [r[2] for r in rows(result) if r[0] == 1] == ["A", "CAMP"]


def test_lodging_category_override_is_case_insensitive(start_place: PlaceInfoDTO) -> None:
    plan = [
        day(1, place("CAMP", 0, 1, "HEALING"), place("A", 0, 2)),
        day(2, place("B", 0, 3)),
    ]

    result = optimize_route(plan, start_place, lodging_category="healing")

    assert [r[2] for r in rows(result) if r[0] == 1] == ["A", "CAMP"]


def test_nan_distances_keep_input_order(start_place: PlaceInfoDTO) -> None:
    # 검증을 거치지 않은 NaN 좌표
    items = [
        PlaceInfoDTO.model_construct(
            content_id=cid, title="", latitude=float("nan"), longitude=0.0, category="TOURIST_SPOT"
        )
        for cid in ("N1", "N2", "N3")
    ]
    plan = [DailyPlanDTO.model_construct(day_number=1, items=items)]

    result = optimize_route(plan, start_place)

    assert rows(result) == [(1, 1, "N1"), (1, 2, "N2"), (1, 3, "N3")]
