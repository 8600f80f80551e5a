import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Callable, Dict, Optional

from config import messages
from database.base import DataStoreError, StudentStore
from services.student_state import CreateStudent, PageState, UpdateStudent
from schemas.students import StudentRecord

logger = logging.getLogger(__name__)


class IdLock:
    """id별 Lock + 사용 중(보유/대기)인 요청 수"""

    def __init__(self):
        self.lock = asyncio.Lock()
        self.users = 0


class StudentManager:
    """
    학생 관리 화면 컨트롤러
    - 모든 DataStore 호출 실패는 여기서 잡아 state.error 문자열로 변환 (밖으로 던지지 않음)
    - 같은 id에 대한 수정/삭제는 id별 Lock으로 직렬화 (생성은 id가 없으므로 제외)
      locks를 세션끼리 공유하면 프로세스 전체에서 직렬화됨. 대기자가 없으면 Lock은 제거됨
    """

    def __init__(
        self,
        store: StudentStore,
        state: Optional[PageState] = None,
        locks: Optional[Dict[int, IdLock]] = None,
    ):
        self.store = store
        self.state = state or PageState()
        self._locks = locks if locks is not None else {}
        self.loaded = False

    @asynccontextmanager
    async def _serialized(self, student_id: int):
        entry = self._locks.get(student_id)
        if entry is None:
            entry = self._locks[student_id] = IdLock()
        entry.users += 1
        try:
            async with entry.lock:
                yield
        finally:
            entry.users -= 1
            if entry.users == 0 and self._locks.get(student_id) is entry:
                del self._locks[student_id]

    # ==========================================================
    # 목록 로드
    # ==========================================================

    async def ensure_loaded(self) -> None:
        """세션 첫 표시 때 한 번만 로드 (겹쳐 들어온 요청은 기다리지 않고 loading 화면을 렌더링)"""
        if self.loaded:
            return
        self.loaded = True
        await self.load()

    async def load(self) -> None:
        self.state.loading = True
        try:
            records = await self.store.list_students()
            self.state.replace_students(records)
        except DataStoreError as e:
            logger.error(f"Error fetching students: {e.message}")
            self.state.error = messages.ERROR_LOAD
        finally:
            self.state.loading = False
            self.loaded = True

    # ==========================================================
    # 폼 조작 (네트워크 호출 없음)
    # ==========================================================

    def set_field(self, name: str, value: str) -> None:
        self.state.set_field(name, value)

    def begin_edit(self, record: StudentRecord) -> None:
        self.state.begin_edit(record)

    def cancel(self) -> None:
        self.state.reset()

    # ==========================================================
    # 제출 (생성 | 수정)
    # ==========================================================

    async def submit(self) -> None:
        submission = self.state.submission()
        if isinstance(submission, UpdateStudent):
            await self._update(submission)
        else:
            await self._create(submission)

    async def _create(self, submission: CreateStudent) -> None:
        try:
            record = await self.store.create_student(submission.draft)
        except DataStoreError as e:
            logger.warning(f"create failed: {e.message}")
            self.state.error = messages.ERROR_CREATE + e.message
            return
        self.state.apply_created(record)
        self.state.reset()
        self.state.error = ""

    async def _update(self, submission: UpdateStudent) -> None:
        async with self._serialized(submission.student_id):
            try:
                record = await self.store.update_student(submission.student_id, submission.draft)
            except DataStoreError as e:
                logger.warning(f"update failed: id={submission.student_id} {e.message}")
                self.state.error = messages.ERROR_UPDATE + e.message
                return
        self.state.apply_updated(submission.student_id, record)
        self.state.reset()
        self.state.error = ""

    # ==========================================================
    # 삭제
    # ==========================================================

    async def delete(self, student_id: int, confirm: Callable[[], bool]) -> bool:
        """확인이 거절되면 호출 없이 False 반환"""
        if not confirm():
            return False
        async with self._serialized(student_id):
            try:
                await self.store.delete_student(student_id)
            except DataStoreError as e:
                logger.warning(f"delete failed: id={student_id} {e.message}")
                self.state.error = messages.ERROR_DELETE + e.message
                return True
        self.state.apply_deleted(student_id)
        self.state.error = ""
        return True
