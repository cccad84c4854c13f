"""필수 인자 수 검사 (Arity Inspection)"""
import functools
import importlib
import inspect
from typing import Any, Callable, TypeVar

from zeta_fn.errors import InvalidArgumentError
from zeta_fn.result import Result, Success, Failure
from zeta_fn.types import Arity

F = TypeVar('F', bound=Callable[..., Any])

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


# ============================================================
# 명시적 arity 선언
# ============================================================

def with_arity(n: int) -> Callable[[F], F]:
    """필수 인자 수를 직접 선언하는 데코레이터 (리플렉션보다 우선)"""
    arity = Arity(n)

    def decorate(f: F) -> F:
        try:
            f.__arity__ = arity  # type: ignore[attr-defined]
            return f
        except (AttributeError, TypeError):
            # builtin 등 속성 설정 불가 → 래핑
            @functools.wraps(f)
            def wrapper(*args: Any, **kwargs: Any) -> Any:
                return f(*args, **kwargs)
            wrapper.__arity__ = arity  # type: ignore[attr-defined]
            return wrapper  # type: ignore[return-value]

    return decorate


def _declared_arity(obj: Any) -> int | None:
    declared = getattr(obj, '__arity__', None)
    match declared:
        case Arity(required):
            return required
        case int() if not isinstance(declared, bool) and declared >= 0:
            return declared
        case _:
            return None


# ============================================================
# 호출 대상 해석
# ============================================================

def _resolve_path(path: str) -> Any:
    """'pkg.mod:Class.method' 또는 'pkg.mod.func' 경로 해석"""
    if ':' in path:
        module_name, _, qualname = path.partition(':')
        if not module_name or not qualname:
            raise InvalidArgumentError(path, "Malformed callable path")
        try:
            obj = importlib.import_module(module_name)
        except ImportError as e:
            raise InvalidArgumentError(path, f"Cannot import module {module_name!r}") from e
        for attr in qualname.split('.'):
            try:
                obj = getattr(obj, attr)
            except AttributeError as e:
                raise InvalidArgumentError(path, f"No attribute {attr!r}") from e
        return obj

    # 가장 긴 import 가능한 모듈 접두어를 찾는다
    parts = path.split('.')
    if not all(parts):
        raise InvalidArgumentError(path, "Malformed callable path")
    for i in range(len(parts) - 1, 0, -1):
        try:
            obj = importlib.import_module('.'.join(parts[:i]))
        except ImportError:
            continue
        try:
            for attr in parts[i:]:
                obj = getattr(obj, attr)
        except AttributeError as e:
            raise InvalidArgumentError(path, f"No attribute {attr!r}") from e
        return obj
    raise InvalidArgumentError(path, "Cannot resolve callable path")


def resolve_callable(target: Any) -> Callable[..., Any]:
    """문자열 경로, (객체, 메서드명) 쌍, 일반 callable을 callable로 해석"""
    match target:
        case str():
            obj = _resolve_path(target)
        case (owner, str() as name):
            try:
                obj = getattr(owner, name)
            except AttributeError as e:
                raise InvalidArgumentError(target, f"No method {name!r}") from e
        case _:
            obj = target

    if not callable(obj):
        raise InvalidArgumentError(target, "Not a callable")
    return obj


# ============================================================
# 필수 인자 수
# ============================================================

def required_argument_count(f: Any) -> int:
    """
    필수 위치 인자 수 반환

    기본값이 있는 인자, *args, **kwargs, 키워드 전용 인자는 세지 않는다.
    __arity__ 선언이 있으면 그 값을 그대로 사용한다.

    바운드 메서드(인스턴스, classmethod)는 self/cls를 세지 않지만,
    클래스에서 꺼낸 일반 메서드((Class, "method") 쌍, "mod:Class.method"
    경로)는 바인딩되지 않은 함수이므로 self도 필수 인자로 센다.
    """
    func = resolve_callable(f)

    declared = _declared_arity(func)
    if declared is not None:
        return declared

    try:
        sig = inspect.signature(func)
    except (ValueError, TypeError) as e:
        raise InvalidArgumentError(f, "No introspectable signature") from e

    return sum(
        1 for p in sig.parameters.values()
        if p.kind in _POSITIONAL and p.default is inspect.Parameter.empty
    )


def inspect_arity(f: Any) -> Result[int, InvalidArgumentError]:
    """required_argument_count의 Result 버전"""
    try:
        return Success(required_argument_count(f))
    except InvalidArgumentError as e:
        return Failure(e)
