import json
import logging
import os
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional, Sequence

import pymysql
import pymysql.cursors
from pydantic import ValidationError

from schedule_api.domain.schedule.dto.route_optimizer_request_dto import PlaceInfoDTO
from schedule_api.globals.code.tour_category import TourCategory
from schedule_api.globals.config import settings
from schedule_api.globals.exception.global_exception import TourDataException

logger = logging.getLogger(__name__)


def to_place_info(row: Dict[str, Any]) -> PlaceInfoDTO:
    return PlaceInfoDTO(
        content_id=str(row["contentId"]),
        title=row.get("title") or f"Place_{row['contentId']}",
        latitude=float(row["latitude"]),
        longitude=float(row["longitude"]),
        category=TourCategory.from_value(row.get("category") or "ETC").value,
    )


def to_place_infos(rows: Iterable[Dict[str, Any]]) -> Dict[str, PlaceInfoDTO]:
    """좌표가 없거나 잘못된 행은 경고 후 제외하고 나머지만 변환."""
    places = {}
    for row in rows:
        content_id = row.get("contentId")
        # 좌표가 없는 장소는 동선 계산에서 제외
        if row.get("latitude") is None or row.get("longitude") is None:
            logger.warning(f"좌표가 없는 장소를 제외합니다: {content_id}")
            continue
        try:
            place = to_place_info(row)
        except (ValidationError, TypeError, ValueError, KeyError) as e:
            logger.warning(f"잘못된 장소 데이터를 제외합니다: {content_id} ({e})")
            continue
        places[place.content_id] = place
    return places


class TourRepository(ABC):
    """content_id로 장소(위치, 제목, 카테고리) 정보를 조회하는 레포지토리 인터페이스."""

    @abstractmethod
    def find_by_content_ids(self, content_ids: Sequence[str]) -> Dict[str, PlaceInfoDTO]:
        ...


class JsonTourRepository(TourRepository):
    """
    JSON 파일(관광지 정보 리스트)을 읽어 장소 정보를 반환하는 레포지토리.
    파일 형식: [{"contentId", "title", "latitude", "longitude", "category"}, ...]
    """

    def __init__(self, data_path: Optional[str] = None):
        """data_path를 지정하지 않으면 설정의 TOUR_DATA_PATH를 사용."""
        self.data_path = os.path.abspath(data_path or settings.TOUR_DATA_PATH)
        self._places: Optional[Dict[str, PlaceInfoDTO]] = None

    def _load(self) -> Dict[str, PlaceInfoDTO]:
        if self._places is None:
            if not os.path.exists(self.data_path):
                raise TourDataException(f"File not found: {self.data_path}")
            try:
                with open(self.data_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, ValueError) as e:
                raise TourDataException(f"{self.data_path} ({e})") from e
            if not isinstance(data, list):
                raise TourDataException(f"{self.data_path} 는 장소 리스트가 아닙니다")
            self._places = to_place_infos(row for row in data if isinstance(row, dict))
        return self._places

    def find_by_content_ids(self, content_ids: Sequence[str]) -> Dict[str, PlaceInfoDTO]:
        places = self._load()
        return {cid: places[cid] for cid in content_ids if cid in places}


class MySqlTourRepository(TourRepository):
    """DB의 tours 테이블에서 장소 정보를 조회."""

    def __init__(self, host: str = None, port: int = None, user: str = None,
                 password: str = None, database: str = None):
        self.host = host or settings.DB_HOST
        self.port = port or settings.DB_PORT
        self.user = user or settings.DB_USER
        self.password = password or settings.DB_PASSWORD
        self.database = database or settings.DB_NAME

    def find_by_content_ids(self, content_ids: Sequence[str]) -> Dict[str, PlaceInfoDTO]:
        if not content_ids:
            return {}
        placeholders = ", ".join(["%s"] * len(content_ids))
        sql = f"""
            SELECT
                content_id AS contentId,
                title,
                latitude,
                longitude,
                category
            FROM tours
            WHERE content_id IN ({placeholders})
        """
        try:
            connection = pymysql.connect(
                host=self.host,
                port=self.port,
                user=self.user,
                password=self.password,
                database=self.database,
                charset="utf8mb4",
                cursorclass=pymysql.cursors.DictCursor,
            )
            try:
                with connection.cursor() as cursor:
                    cursor.execute(sql, [str(cid) for cid in content_ids])
                    rows = cursor.fetchall()
            finally:
                connection.close()
        except pymysql.MySQLError as e:
            raise TourDataException(f"tours 조회 실패 ({e})") from e

        return to_place_infos(rows)


def get_tour_repository() -> TourRepository:
    if settings.TOUR_DATA_SOURCE == "mysql":
        return MySqlTourRepository()
    return JsonTourRepository()


def resolve_places(repository: TourRepository, content_ids: Sequence[str]) -> List[PlaceInfoDTO]:
    """요청 순서대로 장소를 반환. 찾지 못한 ID는 경고 후 제외."""
    unique_ids = list(dict.fromkeys(str(cid) for cid in content_ids))
    found = repository.find_by_content_ids(unique_ids)
    missing = [cid for cid in unique_ids if cid not in found]
    if missing:
        logger.warning(f"위치 정보가 없는 장소를 제외합니다: {missing}")
    return [found[cid] for cid in unique_ids if cid in found]
