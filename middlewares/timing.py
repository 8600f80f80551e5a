import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class TimingMiddleware(BaseHTTPMiddleware):
    """
    요청 단위 추적
    - X-Request-ID: 들어온 값이 있으면 그대로, 없으면 새로 발급해 request.state.request_id에 저장
    - X-Latency-Ms: 처리 시간(ms)
    - 상태 변경(POST) 요청은 INFO, 나머지는 DEBUG 로그
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:12]
        request.state.request_id = request_id

        start = time.perf_counter()
        response = await call_next(request)
        latency_ms = int((time.perf_counter() - start) * 1000)

        response.headers["X-Latency-Ms"] = str(latency_ms)
        response.headers[REQUEST_ID_HEADER] = request_id
        level = logging.INFO if request.method == "POST" else logging.DEBUG
        logger.log(level, f"[{request_id}] {request.method} {request.url.path} → {response.status_code} ({latency_ms}ms)")
        return response
