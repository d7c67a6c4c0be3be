"""
FastAPI 커스텀 미들웨어

요청 로깅과 요청 본문 크기 제한을 위한 미들웨어를 정의합니다.
"""

import time
import logging
import uuid
from datetime import datetime, timezone
from typing import Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from ..utils.logging import clear_log_context, log_performance, set_log_context

logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """요청/응답 로깅 미들웨어"""

    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """요청 처리 및 로깅"""
        start_time = time.time()
        started_at = datetime.now(timezone.utc)
        request_id = str(uuid.uuid4())

        # 요청 로깅
        logger.info(
            "Request started",
            extra={
                "request_id": request_id,
                "method": request.method,
                "url": str(request.url),
                "user_agent": request.headers.get("user-agent"),
                "client_ip": request.client.host if request.client else None
            }
        )

        # 요청 ID를 request state와 로그 컨텍스트에 저장
        request.state.request_id = request_id
        set_log_context(request_id=request_id)

        try:
            response = await call_next(request)
            process_time = time.time() - start_time

            log_performance(
                f"{request.method} {request.url.path}",
                started_at,
                status_code=response.status_code
            )

            # 응답 헤더에 요청 ID와 처리 시간 추가
            response.headers["X-Request-ID"] = request_id
            response.headers["X-Process-Time"] = str(round(process_time, 4))

            return response

        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                "Request failed",
                extra={
                    "request_id": request_id,
                    "error": str(e),
                    "process_time": round(process_time, 4)
                },
                exc_info=True
            )
            raise
        finally:
            clear_log_context()


class BodySizeLimitMiddleware(BaseHTTPMiddleware):
    """Content-Length가 제한을 넘는 요청을 413으로 거절"""

    def __init__(self, app: ASGIApp, max_body_size: int):
        super().__init__(app)
        self.max_body_size = max_body_size

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > self.max_body_size:
            logger.warning(f"Request body too large: {content_length} bytes")
            return JSONResponse(
                status_code=413,
                content={"message": "Request entity too large"}
            )
        return await call_next(request)
