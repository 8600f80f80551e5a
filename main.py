from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
import logging

from config.settings import settings
from database.base import StudentStore
from database.db import create_store

# ✅ 로그 설정 (LOG_LEVEL)
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# HTTP 라이브러리 디버그 로그 비활성화
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)

# ✅ 미들웨어 임포트
from middlewares.timing import TimingMiddleware
from middlewares.error_handler import add_error_handlers

# ✅ 라우터 / 세션 임포트
from routers import students
from services.sessions import SessionRegistry


def create_app(store: Optional[StudentStore] = None) -> FastAPI:
    app = FastAPI(
        title=settings.APP_TITLE,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
    )

    # ✅ 학생 테이블 클라이언트 + 브라우저 세션별 화면 상태
    store = store or create_store()
    app.state.sessions = SessionRegistry(store, max_sessions=settings.SESSION_MAX)
    logger.info(f"datastore backend: {type(store).__name__}")

    # ✅ CORS 설정
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ✅ 요청 지연 측정 미들웨어 (응답 헤더 X-Latency-Ms 추가)
    app.add_middleware(TimingMiddleware)

    # ✅ 전역 에러 핸들러 등록 (일관된 JSON 에러 포맷)
    add_error_handlers(app)

    app.include_router(students.router)

    # ✅ 헬스체크 엔드포인트
    @app.get("/health")
    def health_check():
        return {"status": "ok", "message": "API is running"}

    # ✅ 루트 → 학생 관리 화면
    @app.get("/")
    def root():
        return RedirectResponse(url="/students")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info(f"starting on {settings.HOST}:{settings.PORT}")
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT, reload=settings.ENV == "dev")
