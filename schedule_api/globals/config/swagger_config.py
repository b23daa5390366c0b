# globals/config/swagger_config.py
from fastapi.openapi.utils import get_openapi

TAGS_METADATA = [
    {
        "name": "Schedule",
        "description": "일자별 장소 목록의 방문 순서를 최적화합니다 (Nearest Neighbor + 숙소 고정).",
    },
]


def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
        tags=TAGS_METADATA,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
