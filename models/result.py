from pydantic import BaseModel, model_validator
from typing import Generic, Literal, Optional, TypeVar

T = TypeVar("T")

ErrorKind = Literal['invalid-argument', 'internal']

# 呼び出し元に返す固定メッセージ（プロバイダの詳細は含めない）
INTERNAL_ERROR_MESSAGE = "支払いプリファレンスを作成できませんでした。"

ERROR_STATUS_CODES = {
    'invalid-argument': 400,
    'internal': 500,
}


class CallableError(BaseModel):
    kind: ErrorKind
    message: str

    @property
    def status_code(self) -> int:
        return ERROR_STATUS_CODES[self.kind]

    def to_envelope(self):
        return {"error": {"status": self.kind, "message": self.message}}


class Result(BaseModel, Generic[T]):
    """成功値かエラーのどちらか一方だけを持つ結果型"""
    value: Optional[T] = None
    error: Optional[CallableError] = None

    @model_validator(mode="after")
    def check_exclusive(self):
        if (self.value is None) == (self.error is None):
            raise ValueError("valueとerrorはどちらか一方のみ指定してください")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value):
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str):
        return cls(error=CallableError(kind=kind, message=message))

    @classmethod
    def internal(cls):
        return cls.failure('internal', INTERNAL_ERROR_MESSAGE)


class CallableException(Exception):
    """HTTP層でのみ送出し、例外ハンドラでエラーエンベロープに変換する"""

    def __init__(self, error: CallableError):
        super().__init__(error.message)
        self.error = error

    @property
    def status_code(self) -> int:
        return self.error.status_code
