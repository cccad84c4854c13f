"""공용 타입 정의 (불변)"""
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar('T')


# ============================================================
# Placeholder (싱글톤 센티널)
# ============================================================

class Placeholder:
    """아직 채워지지 않은 인자 자리 표시"""
    __slots__ = ()
    _instance: 'Placeholder | None' = None

    def __new__(cls) -> 'Placeholder':
        # 최초 접근 시 한 번만 생성
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init_subclass__(cls, **kwargs: Any) -> None:
        raise TypeError("Placeholder cannot be subclassed")

    def __repr__(self) -> str:
        return "_"

    def __reduce__(self) -> tuple:
        return (Placeholder, ())

    def __copy__(self) -> 'Placeholder':
        return self

    def __deepcopy__(self, memo: dict) -> 'Placeholder':
        return self


# ============================================================
# Invokable / Thunk / Done (트램펄린 태그)
# ============================================================

@runtime_checkable
class Invokable(Protocol):
    """인자 없이 호출 가능한 값"""

    def __call__(self) -> Any: ...


@dataclass(frozen=True)
class Thunk:
    """다음 단계 계산 (지연 호출)"""
    func: Callable[..., Any]
    args: tuple = ()
    kwargs: dict = field(default_factory=dict)

    def __call__(self) -> Any:
        return self.func(*self.args, **self.kwargs)


@dataclass(frozen=True)
class Done(Generic[T]):
    """트램펄린 최종값 (호출 가능한 값도 그대로 반환)"""
    value: T


def thunk(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Thunk:
    """Thunk 생성"""
    return Thunk(func, args, kwargs)


def done(value: T) -> Done[T]:
    """Done 생성"""
    return Done(value)


# ============================================================
# Arity (명시적 인자 수 메타데이터)
# ============================================================

@dataclass(frozen=True)
class Arity:
    """필수 인자 수 선언"""
    required: int

    def __post_init__(self) -> None:
        if isinstance(self.required, bool) or not isinstance(self.required, int):
            raise TypeError(f"Arity must be an int, got {type(self.required).__name__}")
        if self.required < 0:
            raise ValueError(f"Arity must be >= 0, got {self.required}")
