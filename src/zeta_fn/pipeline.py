"""함수 합성 유틸리티"""
from typing import TypeVar, Callable, Any
from functools import reduce

A = TypeVar('A')


def identity(x: A) -> A:
    """항등 함수"""
    return x


id_ = identity


def compose(*funcs: Callable[..., Any]) -> Callable[..., Any]:
    """
    왼쪽에서 오른쪽으로 함수 합성

    compose(f, g, h)(x) == h(g(f(x)))
    첫 함수만 여러 인자를 받고, 이후 함수는 직전 결과 하나만 받는다.
    """
    if not funcs:
        return identity

    first, rest = funcs[0], funcs[1:]

    def composed(*args: Any, **kwargs: Any) -> Any:
        return reduce(lambda acc, f: f(acc), rest, first(*args, **kwargs))

    # 시그니처는 첫 함수 기준
    composed.__wrapped__ = first  # type: ignore[attr-defined]
    return composed


def pipe(value: Any, *funcs: Callable[[Any], Any]) -> Any:
    """값 하나를 함수들에 차례로 통과"""
    return compose(*funcs)(value)


def flip(f: Callable[..., Any]) -> Callable[..., Any]:
    """위치 인자 순서 뒤집기"""
    def flipped(*args: Any, **kwargs: Any) -> Any:
        return f(*reversed(args), **kwargs)

    flipped.__wrapped__ = f  # type: ignore[attr-defined]
    return flipped
