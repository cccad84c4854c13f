"""트램펄린 (thunk 반복 실행)"""
import functools
from typing import Any, Callable

from zeta_fn.config import get_config
from zeta_fn.errors import InvalidArgumentError, TrampolineLimitError
from zeta_fn.types import Done, Invokable

_UNSET: Any = object()


def trampoline(f: Callable[..., Any], *, max_steps: int | None = _UNSET) -> Callable[..., Any]:
    """
    트램펄린 스타일 함수를 반복문으로 실행

    f는 최종값 또는 인자 없는 thunk를 반환한다. 결과가 호출 가능한 동안
    계속 호출하고, 호출 불가능한 값이 나오면 반환한다. 호출 가능한 값을
    최종값으로 돌려주려면 Done으로 감싼다.

    max_steps를 지정하면 그 이상 thunk를 호출할 때 TrampolineLimitError.
    생략하면 설정값(기본: 무제한)을 사용한다.
    """
    if max_steps is _UNSET:
        max_steps = get_config().trampoline.max_steps
    if max_steps is not None and (isinstance(max_steps, bool) or not isinstance(max_steps, int) or max_steps < 1):
        raise InvalidArgumentError(max_steps, "max_steps must be a positive int or None")

    @functools.wraps(f)
    def bounced(*args: Any, **kwargs: Any) -> Any:
        result = f(*args, **kwargs)
        steps = 0
        while isinstance(result, Invokable):
            if max_steps is not None and steps >= max_steps:
                raise TrampolineLimitError(max_steps)
            result = result()
            steps += 1
        if isinstance(result, Done):
            return result.value
        return result

    return bounced
