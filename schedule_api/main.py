# main.py
import logging

from fastapi import FastAPI

from schedule_api.domain.schedule.controller.schedule_controller import router as schedule_router
from schedule_api.globals.config import settings
from schedule_api.globals.config.swagger_config import custom_openapi
from schedule_api.globals.exception.global_exception import GlobalException, global_exception_handler

# 로거 설정
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_TITLE,
    description="여행 일정 동선 최적화 서버",
    version=settings.APP_VERSION,
)
app.add_exception_handler(GlobalException, global_exception_handler)
app.include_router(schedule_router, prefix="/schedule", tags=["Schedule"])
app.openapi = lambda: custom_openapi(app)


@app.get("/")
async def root():
    return {"message": "Schedule route optimizer is running"}


logger.info("FastAPI 앱이 시작되었습니다.")

if __name__ == "__main__":
    import uvicorn
    # "모듈:변수" 방식으로 지정하여 실행
    uvicorn.run("schedule_api.main:app", host="0.0.0.0", port=8000, reload=True)
