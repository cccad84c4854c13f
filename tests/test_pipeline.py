"""Composition, flip and identity.

Tests cover:
    - compose() with no functions is the identity
    - Left-to-right evaluation order
    - Only the first stage receives multiple arguments
    - Errors halt the pipeline at the failing stage
    - flip reverses positional arguments for any arity
"""

import pytest

from zeta_fn import compose, flip, id_, identity, pipe
from tests.funcs import add3


def test_identity_returns_argument():
    marker = object()
    assert identity(marker) is marker
    assert id_ is identity


def test_empty_compose_is_identity():
    marker = object()
    assert compose()(marker) is marker


def test_single_compose_behaves_as_function():
    def double(x):
        return x * 2

    assert compose(double)(21) == double(21)
    assert compose(identity, double)(4) == double(4)


def test_compose_is_left_to_right():
    def f(x):
        return x + 1

    def g(x):
        return x * 10

    def h(x):
        return f"<{x}>"

    assert compose(f, g, h)(1) == h(g(f(1)))
    assert compose(f, g, h)(1) == "<20>"


def test_compose_first_stage_takes_all_arguments():
    assert compose(add3, str)(1, 2, 3) == "6"


def test_compose_halts_on_error():
    calls = []

    def fail(_):
        raise ValueError("stage 2")

    def record(x):
        calls.append(x)
        return x

    with pytest.raises(ValueError, match="stage 2"):
        compose(record, fail, record)(1)
    assert calls == [1]


def test_pipe_applies_functions_to_value():
    assert pipe(3, lambda x: x + 1, str) == "4"
    assert pipe("x") == "x"


def test_flip_reverses_arguments():
    def collect(*args):
        return args

    assert flip(collect)(1, 2, 3) == (3, 2, 1)
    assert flip(collect)() == ()
    assert flip(lambda a, b: a - b)(1, 3) == 2


def test_flip_passes_keywords_through():
    def kw(a, b, *, sep):
        return f"{a}{sep}{b}"

    assert flip(kw)("x", "y", sep="-") == "y-x"
