from pydantic import BaseModel
from typing import Generic, Optional, TypeVar


T = TypeVar('T')


"""
ErrorInfo:
1. kind (str): Error class name (ValidationError, NotFoundError, ...).
2. message (str): Human readable description of what went wrong.
"""
class ErrorInfo(BaseModel):
    kind: str
    message: str


"""
Result:
Tagged outcome of a catalog operation. Exactly one of ok / err is set.
"""
class Result(BaseModel, Generic[T]):
    ok: Optional[T] = None
    err: Optional[ErrorInfo] = None

    @property
    def is_ok(self) -> bool:
        return self.err is None

    @classmethod
    def success(cls, value: T) -> 'Result[T]':
        return cls(ok=value)

    @classmethod
    def failure(cls, kind: str, message: str) -> 'Result[T]':
        return cls(err=ErrorInfo(kind=kind, message=message))
