import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from schemas.common import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)


def add_error_handlers(app: FastAPI):
    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        # TimingMiddleware가 붙인 요청 ID를 trace_id로 사용
        trace_id = getattr(request.state, "request_id", None)
        logger.exception(f"[{trace_id}] unhandled error: {request.method} {request.url.path}")
        body = ErrorResponse(
            error=ErrorDetail(code="INTERNAL_ERROR", message=str(exc)),
            trace_id=trace_id,
        )
        return JSONResponse(status_code=500, content=body.model_dump(mode="json"))
