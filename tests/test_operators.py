import pytest

from core.errors import CalcEvaluationError
from core.operators import (
    Operators, OPERATOR_FUNCTIONS, INT64_MAX, INT64_MIN, in_int64_range, wrap_int64
)
from core.token_system import OperatorType


def test_int64_bounds():
    assert INT64_MAX == 2 ** 63 - 1
    assert INT64_MIN == -2 ** 63
    assert in_int64_range(INT64_MAX)
    assert not in_int64_range(INT64_MAX + 1)


@pytest.mark.parametrize("value, expected", [
    (0, 0),
    (-1, -1),
    (2 ** 63, -2 ** 63),
    (2 ** 64, 0),
    (2 ** 64 + 5, 5),
    (-2 ** 63 - 1, 2 ** 63 - 1),
])
def test_wrap_int64(value, expected):
    assert wrap_int64(value) == expected


def test_fit_int64_policies():
    assert Operators.fit_int64(INT64_MAX, "checked") == INT64_MAX
    assert Operators.fit_int64(INT64_MAX + 1, "wrap") == INT64_MIN
    with pytest.raises(CalcEvaluationError, match="Arithmetic overflow"):
        Operators.fit_int64(INT64_MAX + 1, "checked")


def test_negation_of_int64_min():
    assert Operators.neg(5) == -5
    assert Operators.neg(INT64_MIN, "wrap") == INT64_MIN
    with pytest.raises(CalcEvaluationError, match="Arithmetic overflow"):
        Operators.neg(INT64_MIN, "checked")


def test_division_of_int64_min_by_minus_one():
    assert Operators.div(INT64_MIN, -1, "wrap") == INT64_MIN
    assert Operators.mod(INT64_MIN, -1) == 0
    with pytest.raises(CalcEvaluationError, match="Arithmetic overflow"):
        Operators.div(INT64_MIN, -1, "checked")


def test_zero_divisors():
    with pytest.raises(CalcEvaluationError, match="Division by zero"):
        Operators.div(1, 0)
    with pytest.raises(CalcEvaluationError, match="Modulo by zero"):
        Operators.mod(1, 0)


def test_pow_matches_python_within_range():
    for base in (-3, -2, 0, 1, 2, 7):
        for exp in range(0, 12):
            assert Operators.pow(base, exp) == base ** exp


def test_pow_rejects_overflow_regardless_of_policy():
    with pytest.raises(CalcEvaluationError, match="Invalid or overflow in exponentiation"):
        Operators.pow(3, 40, "wrap")
    with pytest.raises(CalcEvaluationError, match="Invalid or overflow in exponentiation"):
        Operators.pow(2, -3)


def test_every_operator_has_an_implementation():
    assert set(OPERATOR_FUNCTIONS) == set(OperatorType)
