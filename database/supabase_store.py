import logging
from typing import List, Optional

import httpx
from postgrest.exceptions import APIError
from supabase import AsyncClient, acreate_client

from database.base import DataStoreError, StudentStore
from schemas.students import StudentDraft, StudentRecord

logger = logging.getLogger(__name__)


class SupabaseStudentStore(StudentStore):
    """호스팅 Supabase 테이블 클라이언트 (async)"""

    def __init__(
        self,
        url: Optional[str],
        key: Optional[str],
        table: str = "student",
        client: Optional[AsyncClient] = None,
    ):
        self.url = url
        self.key = key
        self.table = table
        self._client = client

    async def _get_client(self) -> AsyncClient:
        if self._client is None:
            if not self.url or not self.key:
                raise DataStoreError("SUPABASE_URL / SUPABASE_KEY no configurados")
            try:
                self._client = await acreate_client(self.url, self.key)
            except Exception as e:
                raise DataStoreError(f"No se pudo conectar con Supabase: {e}")
        return self._client

    async def _execute(self, build):
        """쿼리 빌더 실행 + 예외를 DataStoreError로 통일"""
        client = await self._get_client()
        try:
            response = await build(client.table(self.table)).execute()
        except APIError as e:
            raise DataStoreError(e.message or str(e))
        except httpx.HTTPError as e:
            raise DataStoreError(str(e))
        return response.data or []

    async def list_students(self) -> List[StudentRecord]:
        rows = await self._execute(lambda t: t.select("*").order("id", desc=False))
        return [StudentRecord.model_validate(r) for r in rows]

    async def create_student(self, draft: StudentDraft) -> StudentRecord:
        rows = await self._execute(lambda t: t.insert(draft.to_row()))
        if not rows:
            raise DataStoreError("La inserción no devolvió ninguna fila")
        logger.info(f"student created: id={rows[0].get('id')}")
        return StudentRecord.model_validate(rows[0])

    async def update_student(self, student_id: int, draft: StudentDraft) -> StudentRecord:
        rows = await self._execute(lambda t: t.update(draft.to_row()).eq("id", student_id))
        if not rows:
            raise DataStoreError(f"Student {student_id} not found")
        logger.info(f"student updated: id={student_id}")
        return StudentRecord.model_validate(rows[0])

    async def delete_student(self, student_id: int) -> None:
        await self._execute(lambda t: t.delete().eq("id", student_id))
        logger.info(f"student deleted: id={student_id}")
