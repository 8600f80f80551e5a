import logging
import secrets
from collections import OrderedDict
from typing import Dict, Optional, Tuple

from database.base import StudentStore
from services.student_manager import IdLock, StudentManager

logger = logging.getLogger(__name__)


class SessionRegistry:
    """
    브라우저 세션(쿠키 토큰) → StudentManager 매핑. 탭 하나당 화면 상태 하나
    - 최대 max_sessions개까지 보관, 넘치면 가장 오래 사용하지 않은 세션부터 제거 (LRU)
    """

    def __init__(self, store: StudentStore, max_sessions: int = 500):
        self.store = store
        self.max_sessions = max_sessions
        self._managers: "OrderedDict[str, StudentManager]" = OrderedDict()
        # id별 Lock은 모든 세션이 공유
        self._locks: Dict[int, IdLock] = {}

    def get(self, token: Optional[str]) -> Tuple[str, StudentManager]:
        """토큰이 없거나 모르는 값(만료 포함)이면 새 세션을 만든다"""
        if token and token in self._managers:
            self._managers.move_to_end(token)
            return token, self._managers[token]
        token = secrets.token_urlsafe(16)
        manager = self._managers[token] = StudentManager(self.store, locks=self._locks)
        while len(self._managers) > self.max_sessions:
            evicted, _ = self._managers.popitem(last=False)
            logger.debug(f"session evicted: {evicted[:6]}…")
        logger.debug(f"new session: {token[:6]}…")
        return token, manager

    def __contains__(self, token: str) -> bool:
        return token in self._managers

    def __len__(self) -> int:
        return len(self._managers)
