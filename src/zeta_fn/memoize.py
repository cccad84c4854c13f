"""메모이제이션 (정규 키 기반 캐시)"""
import contextlib
import dataclasses
import datetime
import decimal
import enum
import fractions
import functools
import hashlib
import io
import pathlib
import threading
import types
import uuid
from typing import Any, Callable, Literal

from pydantic import BaseModel

from zeta_fn.config import FnConfig, get_config
from zeta_fn.errors import CanonicalKeyError
from zeta_fn.types import Placeholder

Digest = Literal["md5", "sha1", "sha256"]

# 캐시 키로 쓸 수 없는 값들
_OPAQUE = (
    io.IOBase,
    types.GeneratorType,
    types.CoroutineType,
    types.ModuleType,
    types.FrameType,
    threading.Lock().__class__,
)

_BASE_TAGS = {
    tuple: "t",
    list: "l",
    dict: "d",
    set: "S",
    frozenset: "F",
}

_DEFAULT_GETSTATE = getattr(object, '__getstate__', None)


# ============================================================
# 정규 직렬화
# ============================================================

def _qualname(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def _tag(value: Any, base: type) -> str:
    """정확한 타입이면 짧은 태그, 하위 클래스면 클래스 이름 포함"""
    cls = type(value)
    return _BASE_TAGS[base] if cls is base else f"{_BASE_TAGS[base]}<{_qualname(cls)}>"


def _encode(value: Any, stack: set[int]) -> str:
    match value:
        case Placeholder():
            return "_"
        case None:
            return "N"
        case bool():
            return f"b:{int(value)}"
        case enum.Enum():
            return f"e<{_qualname(type(value))}>:{value.name}"
        case int():
            return f"i:{int(value)}"
        case float():
            return f"f:{float(value)!r}"
        case complex():
            return f"c:{complex(value)!r}"
        case str():
            return f"s{len(value)}:{value}"
        case bytes():
            return f"y{len(value)}:{bytes(value).hex()}"
        case bytearray():
            return f"Y{len(value)}:{value.hex()}"
        case type():
            return f"T<{_qualname(value)}>"
        case datetime.date() | datetime.time() | datetime.timedelta() | datetime.tzinfo() \
                | decimal.Decimal() | fractions.Fraction() | uuid.UUID() | pathlib.PurePath():
            # repr이 값을 완전히 표현하는 표준 값 타입
            return f"v<{_qualname(type(value))}>:{value!r}"

    if isinstance(value, _OPAQUE) or callable(value):
        raise CanonicalKeyError(value)

    # 순환 구조 검출
    marker = id(value)
    if marker in stack:
        raise CanonicalKeyError(value, "Cyclic structure")
    stack.add(marker)
    try:
        return _encode_compound(value, stack)
    finally:
        stack.discard(marker)


def _encode_compound(value: Any, stack: set[int]) -> str:
    match value:
        case tuple():
            return _tag(value, tuple) + "[" + ",".join(_encode(v, stack) for v in value) + "]"
        case list():
            return _tag(value, list) + "[" + ",".join(_encode(v, stack) for v in value) + "]"
        case dict():
            entries = sorted(f"{_encode(k, stack)}={_encode(v, stack)}" for k, v in value.items())
            return _tag(value, dict) + "{" + ",".join(entries) + "}"
        case frozenset():
            return _tag(value, frozenset) + "{" + ",".join(sorted(_encode(v, stack) for v in value)) + "}"
        case set():
            return _tag(value, set) + "{" + ",".join(sorted(_encode(v, stack) for v in value)) + "}"
        case BaseModel():
            return f"P<{_qualname(type(value))}>" + _encode(value.model_dump(), stack)

    if dataclasses.is_dataclass(value):
        fields = ",".join(
            f"{f.name}={_encode(getattr(value, f.name), stack)}"
            for f in dataclasses.fields(value)
        )
        return f"D<{_qualname(type(value))}>({fields})"

    getstate = getattr(type(value), '__getstate__', None)
    if getstate is not None and getstate is not _DEFAULT_GETSTATE:
        return f"G<{_qualname(type(value))}>" + _encode(value.__getstate__(), stack)

    state = getattr(value, '__dict__', None)
    if isinstance(state, dict):
        return f"O<{_qualname(type(value))}>" + _encode(dict(state), stack)

    raise CanonicalKeyError(value)


def canonical_text(args: tuple, kwargs: dict | None = None) -> str:
    """인자 목록의 정규 직렬화 문자열"""
    stack: set[int] = set()
    text = _encode(tuple(args), stack)
    if kwargs:
        text += "|" + _encode(dict(kwargs), stack)
    return text


def canonical_key(args: tuple, kwargs: dict | None = None, digest: Digest = "sha256") -> str:
    """
    인자 목록의 정규 캐시 키

    값, 타입, 순서가 다르면 다른 키가 되고, 구조적으로 같은 인자 목록은
    항상 같은 키가 된다. 직렬화할 수 없는 값이면 CanonicalKeyError.
    """
    return hashlib.new(digest, canonical_text(args, kwargs).encode("utf-8")).hexdigest()


# ============================================================
# memoize
# ============================================================

def memoize(
    f: Callable[..., Any],
    *,
    key: Callable[..., Any] | None = None,
    config: FnConfig | None = None,
) -> Callable[..., Any]:
    """
    인자 목록별로 결과를 캐시하는 래퍼

    같은 키에 대해 f는 래퍼 수명 동안 최대 한 번만 호출된다.
    f가 예외를 던지면 캐시하지 않는다. 순수 함수에만 사용할 것.
    """
    settings = (config or get_config()).memoize
    cache: dict[Any, Any] = {}
    lock = threading.RLock() if settings.thread_safe else contextlib.nullcontext()

    digest = settings.key_digest
    key_of = key or (lambda *args, **kwargs: canonical_key(args, kwargs, digest))

    @functools.wraps(f)
    def memoized(*args: Any, **kwargs: Any) -> Any:
        k = key_of(*args, **kwargs)
        with lock:
            if k not in cache:
                cache[k] = f(*args, **kwargs)
            return cache[k]

    memoized.cache_size = lambda: len(cache)  # type: ignore[attr-defined]
    return memoized
