"""
中间件模块 - 全局错误处理
统一的错误响应格式: {"error": {"code", "message", "details"}}
"""
from fastapi import Request
from fastapi.responses import JSONResponse

from docsim.core.config import get_settings
from docsim.core.errors import BaseApplicationError
from docsim.core.logging import LogEvent, get_logger

logger = get_logger(__name__)


def _error_response(status_code: int, code: str, message: str, details: dict = None) -> JSONResponse:
    """创建统一的错误响应"""
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "details": details or {},
            }
        },
    )


async def application_error_handler(request: Request, exc: BaseApplicationError) -> JSONResponse:
    """处理自定义应用异常"""
    logger.warning(
        LogEvent.REQUEST_FAILED,
        path=request.url.path,
        error_code=exc.error_code.value,
        error=exc.message,
    )
    return _error_response(exc.status_code, exc.error_code.value, exc.message, exc.details)


async def error_handler(request: Request, exc: Exception) -> JSONResponse:
    """全局错误处理 - 兜底未预期的异常"""
    logger.error(LogEvent.REQUEST_FAILED, path=request.url.path, error=str(exc), exc_info=True)
    development = get_settings().environment == "development"
    message = str(exc) if development else "Internal server error"
    return _error_response(500, "INTERNAL_ERROR", message, {"type": type(exc).__name__})
