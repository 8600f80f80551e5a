from typing import List, Optional

import pytest

from database.base import DataStoreError, StudentStore
from schemas.students import StudentDraft, StudentRecord


class FakeStudentStore(StudentStore):
    """메모리 학생 테이블. fail_with를 지정하면 다음 호출들이 DataStoreError로 실패"""

    def __init__(self, records: Optional[List[StudentRecord]] = None):
        self.rows = {r.id: r for r in records or []}
        self.calls = []
        self.fail_with: Optional[str] = None

    def _check(self, call):
        self.calls.append(call)
        if self.fail_with is not None:
            raise DataStoreError(self.fail_with)

    async def list_students(self) -> List[StudentRecord]:
        self._check(("list",))
        return [self.rows[k] for k in sorted(self.rows)]

    async def create_student(self, draft: StudentDraft) -> StudentRecord:
        self._check(("create", draft))
        new_id = max(self.rows, default=0) + 1
        record = StudentRecord(id=new_id, **draft.model_dump())
        self.rows[new_id] = record
        return record

    async def update_student(self, student_id: int, draft: StudentDraft) -> StudentRecord:
        self._check(("update", student_id, draft))
        if student_id not in self.rows:
            raise DataStoreError(f"Student {student_id} not found")
        record = StudentRecord(id=student_id, **draft.model_dump())
        self.rows[student_id] = record
        return record

    async def delete_student(self, student_id: int) -> None:
        self._check(("delete", student_id))
        self.rows.pop(student_id, None)


def student(id: int, name: str, **fields) -> StudentRecord:
    return StudentRecord(id=id, name=name, **fields)


@pytest.fixture
def fake_store():
    return FakeStudentStore()
