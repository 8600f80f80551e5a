"""
services/student_state.py

학생 관리 화면의 UI 상태 컨테이너.
- 목록 상태(students): DataStore가 돌려준 순서 그대로 유지, 클라이언트에서 재정렬하지 않음
- 폼 상태(draft, editing_id): editing_id가 None이면 생성, 값이 있으면 해당 id 수정
- loading / error: 렌더러가 그대로 사용하는 표시용 값
"""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from schemas.students import DRAFT_FIELDS, StudentDraft, StudentRecord


# =========================================================
# 제출 동작 (생성 | 수정)
# =========================================================

class CreateStudent(BaseModel):
    draft: StudentDraft

    model_config = ConfigDict(frozen=True)


class UpdateStudent(BaseModel):
    student_id: int
    draft: StudentDraft

    model_config = ConfigDict(frozen=True)


Submission = Union[CreateStudent, UpdateStudent]


# =========================================================
# 페이지 상태
# =========================================================

class PageState(BaseModel):
    students: List[StudentRecord] = Field(default_factory=list)
    draft: StudentDraft = Field(default_factory=StudentDraft)
    editing_id: Optional[int] = None
    loading: bool = False
    error: str = ""

    # ----- 목록 상태 -----

    def replace_students(self, records: List[StudentRecord]) -> None:
        self.students = list(records)

    def apply_created(self, record: StudentRecord) -> None:
        # 재정렬 없이 맨 뒤에 추가 (다음 load 전까지 id 순서가 어긋날 수 있음)
        self.students.append(record)

    def apply_updated(self, student_id: int, record: StudentRecord) -> None:
        self.students = [record if s.id == student_id else s for s in self.students]

    def apply_deleted(self, student_id: int) -> None:
        self.students = [s for s in self.students if s.id != student_id]

    def find(self, student_id: int) -> Optional[StudentRecord]:
        return next((s for s in self.students if s.id == student_id), None)

    # ----- 폼 상태 -----

    def set_field(self, name: str, value: str) -> None:
        if name not in DRAFT_FIELDS:
            raise ValueError(f"unknown field: {name}")
        self.draft = self.draft.model_copy(update={name: value})

    def begin_edit(self, record: StudentRecord) -> None:
        self.draft = record.to_draft()
        self.editing_id = record.id

    def reset(self) -> None:
        self.draft = StudentDraft()
        self.editing_id = None

    def submission(self) -> Submission:
        if self.editing_id is None:
            return CreateStudent(draft=self.draft)
        return UpdateStudent(student_id=self.editing_id, draft=self.draft)
