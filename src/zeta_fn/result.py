"""Result 타입 (Success / Failure)"""
from dataclasses import dataclass
from typing import TypeVar, Generic, Callable, Union

T = TypeVar('T')
U = TypeVar('U')
E = TypeVar('E', bound=BaseException)


@dataclass(frozen=True)
class Success(Generic[T]):
    """성공 트랙"""
    value: T

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True)
class Failure(Generic[E]):
    """실패 트랙 (예외 인스턴스 보관)"""
    error: E

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


Result = Union[Success[T], Failure[E]]


def map_result(result: Result[T, E], f: Callable[[T], U]) -> Result[U, E]:
    """Success 값에 함수 적용"""
    match result:
        case Success(value):
            return Success(f(value))
        case Failure() as err:
            return err


def unwrap_or(result: Result[T, E], default: T) -> T:
    """값 추출 또는 기본값"""
    match result:
        case Success(value):
            return value
        case Failure():
            return default


def unwrap(result: Result[T, E]) -> T:
    """값 추출, Failure면 보관된 예외 발생"""
    match result:
        case Success(value):
            return value
        case Failure(error):
            raise error
