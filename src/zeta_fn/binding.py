"""Placeholder와 부분 적용 (bind)"""
from typing import Any, Callable

from zeta_fn.types import Placeholder


def placeholder() -> Placeholder:
    """Placeholder 싱글톤 반환 (최초 호출 시 생성)"""
    return Placeholder()


def is_placeholder(value: Any) -> bool:
    """빈 인자 자리인지 확인 (identity 비교)"""
    return value is placeholder()


class Bound:
    """
    인자 일부가 미리 채워진 호출 가능 객체

    호출 시 바인딩된 인자 목록을 복사한 뒤 왼쪽부터 Placeholder 자리를
    호출 인자로 채우고, 남은 호출 인자는 뒤에 붙인다.
    """
    __slots__ = ('func', 'args', 'keywords', '__weakref__')

    def __init__(self, func: Callable[..., Any], args: tuple, keywords: dict) -> None:
        if not callable(func):
            raise TypeError(f"bind() target must be callable, got {type(func).__name__}")
        self.func = func
        self.args = args
        self.keywords = keywords

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        merged = list(self.args)
        rest = list(args)
        for pos, arg in enumerate(merged):
            if not rest:
                break
            if is_placeholder(arg):
                merged[pos] = rest.pop(0)
        merged.extend(rest)
        return self.func(*merged, **{**self.keywords, **kwargs})

    def __repr__(self) -> str:
        name = getattr(self.func, '__qualname__', None) or repr(self.func)
        parts = [repr(a) for a in self.args]
        parts += [f"{k}={v!r}" for k, v in self.keywords.items()]
        return f"bind({name}, {', '.join(parts)})" if parts else f"bind({name})"


def bind(f: Callable[..., Any], *bound: Any, **bound_kwargs: Any) -> Bound:
    """
    부분 적용

    >>> _ = placeholder()
    >>> add3 = lambda a, b, c: a + b + c
    >>> bind(add3, 1, _, 3)(2)
    6
    """
    return Bound(f, bound, bound_kwargs)
