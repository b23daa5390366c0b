# globals/config/settings.py
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

CURRENT_FILE = Path(__file__).resolve()
PROJECT_ROOT = CURRENT_FILE.parents[3]

APP_TITLE = os.getenv("APP_TITLE", "Schedule Route Optimizer")
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# 숙소(마지막 방문지로 고정) 판정에 쓰는 카테고리
LODGING_CATEGORY = os.getenv("LODGING_CATEGORY", "ACCOMMODATION").upper()

# 장소 데이터 소스: json | mysql
TOUR_DATA_SOURCE = os.getenv("TOUR_DATA_SOURCE", "json").lower()
TOUR_DATA_PATH = os.getenv("TOUR_DATA_PATH", str(PROJECT_ROOT / "data" / "tours.json"))

DB_HOST = os.getenv("DB_HOST", "localhost")
DB_PORT = int(os.getenv("DB_PORT", "3306"))
DB_USER = os.getenv("DB_USER")
DB_PASSWORD = os.getenv("DB_PASSWORD")
DB_NAME = os.getenv("DB_NAME")
