import math

import pytest

from calculator import ExpressionEvaluator, evaluate_expression
from core import ExpressionError, MalformedExpressionError, UnrecognizedInputError


@pytest.fixture
def evaluator():
    return ExpressionEvaluator(cache_size=4)


@pytest.mark.parametrize("expression, expected", [
    ("1/3", 1 / 3),
    ("(2+3)*(4+5.0)", 45.0),
    ("(2+3)*(4+ 5.0)", 45.0),
    ("3^2", 9.0),
    ("(2*2)^(2*2)", 256.0),
    ("30/(3*2)", 5.0),
    ("5.25-4.50", 0.75),
    ("8-4-2", 2.0),
    ("2*3+4", 10.0),
    ("2+3*4", 14.0),
    ("2^3^2", 64.0),
])
def test_evaluate(evaluator, expression, expected):
    assert evaluator.evaluate(expression) == expected


def test_one_third_value():
    assert evaluate_expression("1/3") == pytest.approx(0.3333333333333333)


@pytest.mark.parametrize("expression", ["(2+3)*(4+ 5.0", "1+2)", "1+", "(1)(2)", "", "()"])
def test_malformed_expressions(evaluator, expression):
    with pytest.raises(MalformedExpressionError):
        evaluator.evaluate(expression)


def test_unrecognized_input(evaluator):
    with pytest.raises(UnrecognizedInputError):
        evaluator.evaluate("1.2.3+1")
    with pytest.raises(UnrecognizedInputError, match="#"):
        evaluator.evaluate("2#3")


def test_whitespace_insensitive(evaluator):
    assert evaluator.evaluate("1 + 2") == evaluator.evaluate("1+2") == 3.0


def test_idempotent_without_cache():
    first = ExpressionEvaluator().evaluate("0.1+0.2*3^0.5")
    second = ExpressionEvaluator().evaluate("0.1+0.2*3^0.5")
    assert first.hex() == second.hex()


def test_division_by_zero_is_not_an_error(evaluator):
    assert evaluator.evaluate("1/0") == math.inf
    assert math.isnan(evaluator.evaluate("0/0"))


def test_cache_hits_and_shared_keys(evaluator):
    evaluator.evaluate("1+2")
    evaluator.evaluate("1 + 2")
    assert evaluator.cache_info == {'hits': 1, 'misses': 1, 'size': 1}


def test_cache_is_bounded(evaluator):
    for i in range(10):
        evaluator.evaluate(f"{i}+1")
    assert evaluator.cache_info['size'] == 4
    evaluator.evaluate("0+1")
    assert evaluator.cache_info['hits'] == 0


def test_errors_are_not_cached(evaluator):
    for _ in range(2):
        with pytest.raises(ExpressionError):
            evaluator.evaluate("2#3")
    assert evaluator.cache_info == {'hits': 0, 'misses': 2, 'size': 0}


def test_clear_cache(evaluator):
    evaluator.evaluate("1+2")
    evaluator.clear_cache()
    assert evaluator.cache_info == {'hits': 0, 'misses': 0, 'size': 0}


def test_try_evaluate(evaluator):
    success = evaluator.try_evaluate("3^2")
    assert success.ok
    assert success.value == 9.0

    failure = evaluator.try_evaluate("2#3")
    assert not failure.ok
    assert failure.value is None
    assert isinstance(failure.error, UnrecognizedInputError)
    assert failure.expression == "2#3"


def test_negative_cache_size_is_rejected():
    with pytest.raises(ValueError, match="non-negative"):
        ExpressionEvaluator(cache_size=-1)


def test_zero_cache_size_disables_caching():
    evaluator = ExpressionEvaluator(cache_size=0)
    assert evaluator.evaluate("1+2") == 3.0
    assert evaluator.evaluate("1+2") == 3.0
    assert evaluator.cache_info == {'hits': 0, 'misses': 2, 'size': 0}
