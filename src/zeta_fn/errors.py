"""에러 타입 정의"""
from typing import Any, Union


class InvalidArgumentError(ValueError):
    """호출 가능한 시그니처로 해석할 수 없는 값"""
    code = "INVALID_ARGUMENT"

    def __init__(self, value: Any, reason: str) -> None:
        super().__init__(f"{reason}: {value!r}")
        self.value = value
        self.reason = reason


class CanonicalKeyError(TypeError):
    """캐시 키로 직렬화할 수 없는 인자"""
    code = "CANONICAL_KEY_ERROR"

    def __init__(self, value: Any, reason: str = "Cannot derive a canonical key") -> None:
        super().__init__(f"{reason}: {type(value).__qualname__} {value!r}")
        self.value = value
        self.reason = reason


class TrampolineLimitError(RuntimeError):
    """트램펄린 단계 수 초과"""
    code = "TRAMPOLINE_LIMIT_EXCEEDED"

    def __init__(self, steps: int) -> None:
        super().__init__(f"Trampoline exceeded {steps} steps")
        self.steps = steps


# OR Type: 라이브러리가 직접 발생시키는 에러
FnError = Union[
    InvalidArgumentError,
    CanonicalKeyError,
    TrampolineLimitError,
]


def error_to_dict(error: FnError) -> dict:
    """에러를 딕셔너리로 변환 (CLI 출력용)"""
    match error:
        case InvalidArgumentError(value=value, reason=reason):
            return {"code": error.code, "value": repr(value), "message": reason}
        case CanonicalKeyError(value=value, reason=reason):
            return {"code": error.code, "type": type(value).__qualname__, "message": reason}
        case TrampolineLimitError(steps=steps):
            return {"code": error.code, "steps": steps, "message": str(error)}
        case _:
            return {"code": "UNKNOWN", "message": str(error)}
