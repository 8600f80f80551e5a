import logging
from typing import List

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool
from starlette.concurrency import run_in_threadpool

from database.base import DataStoreError, StudentStore
from models.students import Base, Student as StudentModel
from schemas.students import StudentDraft, StudentRecord

logger = logging.getLogger(__name__)


def make_engine(url: str):
    """sqlite는 스레드풀에서 접근하므로 check_same_thread 해제, 메모리 DB는 단일 커넥션 공유"""
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in url or url in ("sqlite://", "sqlite+pysqlite://"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)
    return create_engine(url)


def _to_record(row: StudentModel) -> StudentRecord:
    return StudentRecord(
        id=row.id,
        name=row.name,
        address=row.address,
        phone=row.phone,
        note=row.note,
    )


class SQLStudentStore(StudentStore):
    """SQLAlchemy 기반 학생 테이블 (로컬 개발/통합 테스트용)"""

    def __init__(self, url: str):
        self.engine = make_engine(url)
        Base.metadata.create_all(self.engine)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def _run(self, fn):
        db: Session = self.SessionLocal()
        try:
            return fn(db)
        except SQLAlchemyError as e:
            db.rollback()
            raise DataStoreError(str(getattr(e, "orig", None) or e))
        finally:
            db.close()

    # ==========================================================
    # 동기 구현 (스레드풀에서 실행)
    # ==========================================================

    def _list(self, db: Session) -> List[StudentRecord]:
        rows = db.query(StudentModel).order_by(StudentModel.id.asc()).all()
        return [_to_record(r) for r in rows]

    def _create(self, db: Session, draft: StudentDraft) -> StudentRecord:
        row = StudentModel(**draft.model_dump())
        db.add(row)
        db.commit()
        db.refresh(row)
        return _to_record(row)

    def _update(self, db: Session, student_id: int, draft: StudentDraft) -> StudentRecord:
        row = db.query(StudentModel).filter(StudentModel.id == student_id).first()
        if row is None:
            raise DataStoreError(f"Student {student_id} not found")
        for key, value in draft.model_dump().items():
            setattr(row, key, value)
        db.commit()
        db.refresh(row)
        return _to_record(row)

    def _delete(self, db: Session, student_id: int) -> None:
        db.query(StudentModel).filter(StudentModel.id == student_id).delete()
        db.commit()

    # ==========================================================
    # StudentStore
    # ==========================================================

    async def list_students(self) -> List[StudentRecord]:
        return await run_in_threadpool(self._run, self._list)

    async def create_student(self, draft: StudentDraft) -> StudentRecord:
        record = await run_in_threadpool(self._run, lambda db: self._create(db, draft))
        logger.info(f"student created: id={record.id}")
        return record

    async def update_student(self, student_id: int, draft: StudentDraft) -> StudentRecord:
        record = await run_in_threadpool(self._run, lambda db: self._update(db, student_id, draft))
        logger.info(f"student updated: id={student_id}")
        return record

    async def delete_student(self, student_id: int) -> None:
        await run_in_threadpool(self._run, lambda db: self._delete(db, student_id))
        logger.info(f"student deleted: id={student_id}")
