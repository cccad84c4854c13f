"""커링 (Currying)"""
from typing import Any, Callable

from zeta_fn.arity import required_argument_count, resolve_callable
from zeta_fn.binding import bind
from zeta_fn.errors import InvalidArgumentError


def curry(f: Callable[..., Any], n: int | None = None) -> Callable[..., Any]:
    """
    n인자 함수를 단항 함수 체인으로 변환

    curry(f)(1)(2)(3) == f(1, 2, 3)

    n을 생략하면 필수 위치 인자 수를 사용한다. 선택/가변 인자가 있는
    함수는 n을 직접 지정해 앞쪽 인자만 커링할 수 있다.
    n <= 1이면 f를 그대로 반환한다.
    f는 문자열 경로나 (객체, 메서드명) 쌍이어도 되며, 먼저 callable로 해석한다.
    """
    f = resolve_callable(f)
    if n is None:
        n = required_argument_count(f)
    elif isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise InvalidArgumentError(n, "Curry arity must be a non-negative int")

    if n <= 1:
        return f

    def curried(x: Any) -> Callable[..., Any]:
        return curry(bind(f, x), n - 1)

    return curried
