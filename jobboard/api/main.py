"""
FastAPI 메인 애플리케이션

잡보드 백엔드의 FastAPI 애플리케이션을 정의합니다.
채용공고 등록/수정/삭제/조회와 통계, 헬스체크 엔드포인트를 제공합니다.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from config.settings import get_settings
from ..database.connection import close_db_connection, create_tables, init_database
from ..exceptions import (
    NotFoundError,
    PersistenceError,
    ValidationFailed,
    create_error_response,
    format_pydantic_errors,
)
from .routes import jobs, stats, status
from .middleware import BodySizeLimitMiddleware, LoggingMiddleware

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 라이프사이클 관리"""
    # 시작 시 실행
    logger.info("FastAPI 애플리케이션 시작")
    logger.info(f"환경: {settings.environment}")
    logger.info(f"API 서버: {settings.api.host}:{settings.api.port}")
    init_database(settings.database.url)
    create_tables()
    logger.info("데이터베이스 초기화 완료")
    yield

    # 종료 시 실행
    close_db_connection()
    logger.info("FastAPI 애플리케이션 종료")


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 팩토리"""

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        description=settings.description,
        openapi_url="/api/openapi.json" if settings.is_development else None,
        docs_url="/api/docs" if settings.is_development else None,
        redoc_url="/api/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )

    # CORS 미들웨어 설정
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # 커스텀 미들웨어 추가
    app.add_middleware(BodySizeLimitMiddleware, max_body_size=settings.api.request_body_limit)
    app.add_middleware(LoggingMiddleware)

    # 라우터 등록
    app.include_router(status.router, tags=["status"])

    app.include_router(
        jobs.router,
        prefix="/api/jobs",
        tags=["jobs"]
    )

    app.include_router(
        stats.router,
        prefix="/api/stats",
        tags=["stats"]
    )

    # 전역 예외 핸들러 등록
    register_exception_handlers(app)

    return app


def register_exception_handlers(app: FastAPI) -> None:
    """전역 예외 핸들러 등록"""

    @app.exception_handler(ValidationFailed)
    async def validation_failed_handler(request: Request, exc: ValidationFailed):
        """채용공고 입력 검증 실패 핸들러"""
        logger.info(f"Validation failed: {exc.messages}")
        return JSONResponse(status_code=400, content=create_error_response(exc))

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        """존재하지 않는 공고 핸들러"""
        logger.info(f"{exc.resource} not found: {exc.resource_id}")
        return JSONResponse(status_code=404, content=create_error_response(exc))

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(request: Request, exc: PersistenceError):
        """저장소 오류 핸들러"""
        logger.error(f"Persistence error: {exc}", exc_info=exc)
        return JSONResponse(status_code=500, content=create_error_response(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        """요청 형식 오류 핸들러 (JSON 파싱 실패, 쿼리 파라미터 범위 등)"""
        logger.warning(f"Request validation error: {exc.errors()}")
        return JSONResponse(
            status_code=422,
            content={
                "message": "Invalid request",
                "errors": format_pydantic_errors(exc.errors())
            }
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """HTTP 예외 핸들러"""
        if exc.status_code == 404:
            return JSONResponse(status_code=404, content={"message": "Route not found"})

        logger.warning(f"HTTP error: {exc.status_code} - {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """일반 예외 핸들러"""
        logger.exception("Unhandled exception occurred", exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={"message": "Internal server error"}
        )


# 애플리케이션 인스턴스 생성
app = create_app()


def main():
    """메인 실행 함수"""
    uvicorn.run(
        "jobboard.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.reload and settings.is_development,
        workers=1 if settings.is_development else settings.api.workers,
        log_level=settings.logging.level.lower(),
    )


if __name__ == "__main__":
    main()
