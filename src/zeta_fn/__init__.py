"""Zeta Fn - 함수 변환 프리미티브"""
from zeta_fn.types import (
    Placeholder, Invokable, Thunk, Done, Arity,
    thunk, done,
)
from zeta_fn.result import (
    Result, Success, Failure,
    map_result, unwrap, unwrap_or,
)
from zeta_fn.errors import (
    InvalidArgumentError, CanonicalKeyError, TrampolineLimitError,
    FnError, error_to_dict,
)
from zeta_fn.binding import (
    placeholder, is_placeholder, bind, Bound,
)
from zeta_fn.pipeline import (
    identity, id_, compose, pipe, flip,
)
from zeta_fn.arity import (
    required_argument_count, inspect_arity, resolve_callable, with_arity,
)
from zeta_fn.curry import curry
from zeta_fn.memoize import (
    memoize, canonical_key, canonical_text,
)
from zeta_fn.trampoline import trampoline
from zeta_fn.config import (
    MemoizeConfig, TrampolineConfig, FnConfig,
    get_config, set_config,
    load_yaml, parse_config, load_config, merge_config,
)

__version__ = "0.1.0"
