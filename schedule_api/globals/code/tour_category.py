from enum import Enum


class TourCategory(Enum):
    TOURIST_SPOT = "TOURIST_SPOT"
    RESTAURANT = "RESTAURANT"
    ACCOMMODATION = "ACCOMMODATION"
    HEALING = "HEALING"
    LEISURE = "LEISURE"
    ETC = "ETC"

    def description(self):
        descriptions = {
            TourCategory.TOURIST_SPOT: "관광지",
            TourCategory.RESTAURANT: "맛집",
            TourCategory.ACCOMMODATION: "숙소",
            TourCategory.HEALING: "힐링",
            TourCategory.LEISURE: "레저",
        }
        return descriptions.get(self, "기타")

    @classmethod
    def from_value(cls, value: str) -> "TourCategory":
        """알 수 없는 카테고리 문자열은 ETC로 취급."""
        try:
            return cls(str(value).upper())
        except ValueError:
            return cls.ETC
