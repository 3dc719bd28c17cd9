"""
错误处理模块 - 定义自定义异常类
清晰的错误分类：参数错误、空输入、资源耗尽、文档读取失败
"""
from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """错误代码枚举"""
    # 客户端错误
    INVALID_PARAMETER = "INVALID_PARAMETER"
    EMPTY_INPUT = "EMPTY_INPUT"
    RESOURCE_EXHAUSTED = "RESOURCE_EXHAUSTED"

    # 文档读取错误
    DOCUMENT_LOAD_FAILED = "DOCUMENT_LOAD_FAILED"

    # 服务端错误
    INTERNAL_ERROR = "INTERNAL_ERROR"


class BaseApplicationError(Exception):
    """应用基础异常类"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        super().__init__(message)

    def with_context(self, **context: Any) -> "BaseApplicationError":
        """追加诊断上下文（操作名、文档索引等）并返回自身"""
        self.details.update(context)
        return self

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典格式"""
        return {
            "error_code": self.error_code.value,
            "message": self.message,
            "details": self.details
        }


class InvalidParameterError(BaseApplicationError):
    """参数校验错误 (如 min_length <= 0)"""
    def __init__(self, parameter: str, value: Any, reason: str = "must be a positive integer"):
        super().__init__(
            message=f"Invalid parameter '{parameter}': {reason}",
            error_code=ErrorCode.INVALID_PARAMETER,
            details={"parameter": parameter, "value": value},
            status_code=422
        )


class EmptyInputError(BaseApplicationError):
    """空输入错误 (如文档集合为空)"""
    def __init__(self, message: str, operation: Optional[str] = None):
        details = {}
        if operation:
            details["operation"] = operation

        super().__init__(
            message=message,
            error_code=ErrorCode.EMPTY_INPUT,
            details=details,
            status_code=422
        )


class ResourceExhaustionError(BaseApplicationError):
    """资源耗尽错误 - 平方级子串枚举超出配置上限"""
    def __init__(self, operation: str, length: int, limit: int):
        super().__init__(
            message=(
                f"{operation} refused a text of {length} characters "
                f"(limit {limit}); its cost grows quadratically with text length"
            ),
            error_code=ErrorCode.RESOURCE_EXHAUSTED,
            details={"operation": operation, "length": length, "limit": limit},
            status_code=413
        )


class DocumentLoadError(BaseApplicationError):
    """文档读取错误"""
    def __init__(self, message: str, path: Optional[str] = None):
        details = {}
        if path:
            details["path"] = path

        super().__init__(
            message=f"Document load failed: {message}",
            error_code=ErrorCode.DOCUMENT_LOAD_FAILED,
            details=details,
            status_code=400
        )


def require_positive(parameter: str, value: int) -> int:
    """校验正整数参数，失败时抛出 InvalidParameterError"""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidParameterError(parameter, value)
    return value
