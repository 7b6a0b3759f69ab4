# FastAPI 진입점
# - MongoDB 연결 리소스 생성 및 수명주기 관리 (startup/shutdown)
# - 라우터 라우팅
# - CORS, 로깅 설정

import logging
from datetime import datetime, timezone
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .core.database import create_database
from .api.users import router as users_router
from .api.projects import router as projects_router
from .api.tasks import router as tasks_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# FastAPI 애플리케이션 인스턴스 생성
app = FastAPI(
    title="TAT 프로젝트/작업 관리 API",
    description="사용자, 프로젝트, 작업 관리를 위한 REST API",
    version="1.0.0"
)

# CORS 허용 도메인 세팅
origins = [o.strip() for o in settings.CORS_ALLOW_ORIGINS.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# DB 리소스는 앱 단위로 하나만 만들고, 라우터는 get_database 의존성으로 받아갑니다.
app.state.database = create_database()

@app.on_event("startup")
async def app_init():
    try:
        await app.state.database.connect(max_attempts=settings.DB_CONNECT_RETRIES)
    except Exception as e:
        # 연결 실패 시에도 서버는 시작됩니다. 클라이언트는 유지되므로 DB가 살아나면 라우트도 복구됩니다
        logger.warning(f"[Startup] MongoDB 연결 실패: {e}")
        logger.info(f"[Startup] MongoDB URI를 확인하세요: {settings.MONGODB_URI}")

@app.on_event("shutdown")
async def app_shutdown():
    app.state.database.close()

# 간단한 헬스체크
@app.get("/")
async def root():
    return {"ok": True, "app": settings.APP_NAME, "time": datetime.now(timezone.utc).isoformat()}

@app.get("/health")
async def health_check():
    return {
        "status": "ok",
        "app": settings.APP_NAME,
        "version": "1.0.0",
        "database": "connected" if app.state.database.is_connected else "disconnected",
    }

# 라우터 등록
app.include_router(users_router, prefix="/api")
app.include_router(projects_router, prefix="/api/prjects")
app.include_router(projects_router, prefix="/api/projects", include_in_schema=False)
app.include_router(tasks_router, prefix="/api")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
