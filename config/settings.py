"""
config/settings.py

- .env에 정의한 환경변수를 읽어 애플리케이션 전역 설정으로 제공합니다.
- pydantic v2 / pydantic-settings v2 사용.
- 학생 데이터 저장소는 DATASTORE_BACKEND로 선택합니다.
  supabase: 호스팅 테이블(SUPABASE_URL/SUPABASE_KEY 필요)
  sql: SQLAlchemy 엔진(SQL_DATABASE_URL, 로컬 개발/테스트용)
"""

from typing import List, Literal, Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # =========================
    # 앱/런타임
    # =========================
    ENV: Literal["dev", "stage", "prod"] = "dev"
    APP_TITLE: str = "Student Manager"
    APP_DESCRIPTION: str = "Gestión de Estudiantes: listado, alta, edición y baja"
    APP_VERSION: str = "1.0.0"
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # =========================
    # CORS
    # =========================
    # 콤마(,)로 구분된 문자열 → List[str] 로 파싱
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def _split_origins(cls, v):
        if isinstance(v, str):
            # "a,b , c" → ["a","b","c"]
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    # =========================
    # DataStore
    # =========================
    DATASTORE_BACKEND: Literal["supabase", "sql"] = "supabase"
    STUDENT_TABLE: str = "student"

    # Supabase (호스팅 테이블)
    SUPABASE_URL: Optional[str] = None
    SUPABASE_KEY: Optional[str] = None

    # SQLAlchemy (로컬 개발용)
    SQL_DATABASE_URL: str = "sqlite:///./students.db"

    # =========================
    # Session
    # =========================
    SESSION_COOKIE_NAME: str = "student_session"
    SESSION_MAX: int = 500          # 보관할 최대 세션 수 (오래 안 쓴 세션부터 제거)

    # =========================
    # Logging / Misc
    # =========================
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # =========================
    # BaseSettings Config
    # =========================
    model_config = SettingsConfigDict(
        env_file=".env",               # .env에서 값 로드
        env_file_encoding="utf-8",
        case_sensitive=False,          # 환경변수 대소문자 비구분
        extra="ignore",                # 정의되지 않은 키는 무시
    )


# ✅ settings 객체를 통해 어디서든 접근 가능
settings = Settings()
