from typing import Sequence

import folium

from schedule_api.domain.schedule.service.route_optimizer_service import DayRoute
from schedule_api.globals.code.tour_category import TourCategory

# 색상 리스트 (일차 수가 더 많으면 순환)
COLORS = ["red", "blue", "green", "purple", "orange", "darkred",
          "lightred", "beige", "darkblue", "darkgreen", "cadetblue",
          "darkpurple", "pink", "lightblue", "lightgreen", "gray", "black"]


def render_route_map(day_routes: Sequence[DayRoute], zoom_start: int = 12) -> folium.Map:
    """
    일자별 동선을 서로 다른 색상의 선으로 지도에 표시하고
    각 방문지에 순서/일차 정보를 담은 마커를 추가한다.
    """
    first = next((route for route in day_routes if route.places), None)
    center = first.origin if first else None
    location = [center.latitude, center.longitude] if center else [37.5665, 126.9780]
    m = folium.Map(location=location, zoom_start=zoom_start)

    if first is not None:
        folium.Marker(
            location=[first.origin.latitude, first.origin.longitude],
            popup=f"출발: {first.origin.title or first.origin.content_id}",
            tooltip="출발지",
            icon=folium.Icon(color="black", icon="home"),
        ).add_to(m)

    for day_route in day_routes:
        if not day_route.places:
            continue
        color = COLORS[(day_route.day_number - 1) % len(COLORS)]
        coords = [(place.latitude, place.longitude) for place in day_route.places]
        if len(coords) > 1:
            folium.PolyLine(coords, tooltip=f"Day {day_route.day_number}", color=color, weight=5).add_to(m)

        last = len(day_route.places)
        for order, place in enumerate(day_route.places, start=1):
            name = place.title or place.content_id
            category = TourCategory.from_value(place.category).description()
            if order == last:
                popup_text = f"Day {day_route.day_number} End: {name} ({category})"
            else:
                popup_text = f"Day {day_route.day_number} Stop {order}: {name} ({category})"
            folium.Marker(
                location=[place.latitude, place.longitude],
                popup=popup_text,
                tooltip=popup_text,
                icon=folium.Icon(color=color),
            ).add_to(m)
    return m
