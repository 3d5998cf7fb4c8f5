import pytest
from funcplay.functional.composition import (
    Composable,
    add,
    add_curried,
    compose,
    curry,
    uncurry,
)


def test_add_and_curried_add_agree():
    assert add(1, 2) == 3
    assert add_curried(1)(2) == 3
    add_one = add_curried(1)
    assert [add_one(x) for x in range(3)] == [1, 2, 3]


def test_curry_and_uncurry():
    curried = curry(add)
    assert curried(1)(2) == 3
    assert uncurry(curried)(1, 2) == 3
    assert uncurry(add_curried)(4, 5) == 9


def test_curry_keeps_argument_order():
    subtract = curry(lambda x, y: x - y)
    assert subtract(10)(3) == 7


def test_curry_preserves_name():
    assert curry(add).__name__ == "add"


def test_compose_is_left_to_right():
    composed = compose(lambda x: x + 1, lambda x: x * 2)
    assert composed(3) == 8


def test_compose_empty_is_identity():
    sentinel = object()
    assert compose()(sentinel) is sentinel


def test_composable_operator():
    pipeline = Composable(str.strip) >> str.lower >> len
    assert pipeline("  Hello ") == 5
    assert isinstance(pipeline, Composable)


def test_composable_with_plain_callable_on_left():
    pipeline = (lambda x: x + 1) >> Composable(lambda x: x * 3)
    assert pipeline(1) == 6


def test_composable_chain_of_composables():
    increment = Composable(lambda x: x + 1)
    double = Composable(lambda x: x * 2)
    assert (increment >> double)(1) == 4
    assert (double >> increment)(1) == 3


@pytest.mark.parametrize("factory", [curry, uncurry, Composable])
def test_non_callables_are_rejected(factory):
    with pytest.raises(TypeError):
        factory(42)


def test_compose_rejects_non_callables():
    with pytest.raises(TypeError):
        compose(str, 3)
    with pytest.raises(TypeError):
        Composable(str) >> 3
