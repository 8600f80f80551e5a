from abc import ABC, abstractmethod
from typing import List

from schemas.students import StudentDraft, StudentRecord


class DataStoreError(Exception):
    """학생 테이블(DataStore) 호출 실패. message는 화면에 그대로 노출됨"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StudentStore(ABC):
    @abstractmethod
    async def list_students(self) -> List[StudentRecord]: ...
    @abstractmethod
    async def create_student(self, draft: StudentDraft) -> StudentRecord: ...
    @abstractmethod
    async def update_student(self, student_id: int, draft: StudentDraft) -> StudentRecord: ...
    @abstractmethod
    async def delete_student(self, student_id: int) -> None: ...
