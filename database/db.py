from config.settings import Settings, settings           # ✅ 환경변수 설정 파일 불러오기
from database.base import StudentStore


def create_store(cfg: Settings = settings) -> StudentStore:
    """DATASTORE_BACKEND 설정에 맞는 학생 테이블 클라이언트 생성"""
    if cfg.DATASTORE_BACKEND == "sql":
        from database.sql_store import SQLStudentStore
        return SQLStudentStore(cfg.SQL_DATABASE_URL)

    from database.supabase_store import SupabaseStudentStore
    return SupabaseStudentStore(cfg.SUPABASE_URL, cfg.SUPABASE_KEY, table=cfg.STUDENT_TABLE)
