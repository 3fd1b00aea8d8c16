from typing import Any, Optional
from pydantic import BaseModel
from cgpa_api.core.exceptions import CourseRecordError

class ErrorResult(BaseModel):
    """错误响应统一格式：{code, message, data}，data 恒为 null"""
    code: int
    message: str
    data: Optional[Any] = None

    @classmethod
    def of(cls, code: int, message: str) -> "ErrorResult":
        return cls(code=code, message=message)

    @classmethod
    def from_exception(cls, exc: CourseRecordError) -> "ErrorResult":
        return cls.of(exc.status_code, exc.message)
