import pytest

from primer.calculator import CalculatorError, calculate


def test_addition_value():
    assert calculate("+", 1.5, 2.5) == pytest.approx(4.0)


@pytest.mark.parametrize("a, b", [(3.0, 4.5), (-2.0, 8.0), (0.0, 1.25), (100.0, -0.5)])
def test_addition_and_subtraction_invert(a, b):
    assert calculate("-", calculate("+", a, b), b) == pytest.approx(a)
    assert calculate("+", a, b) == pytest.approx(calculate("+", b, a))


@pytest.mark.parametrize("a, b", [(3.0, 4.5), (-2.0, 8.0), (7.0, -0.25)])
def test_multiplication_and_division_invert(a, b):
    assert calculate("/", calculate("*", a, b), b) == pytest.approx(a)


def test_result_is_float():
    result = calculate("*", 6, 7)
    assert isinstance(result, float) and result == pytest.approx(6 * 7)


def test_division_by_zero():
    with pytest.raises(CalculatorError, match="Division by zero not allowed"):
        calculate("/", 1.0, 0.0)


@pytest.mark.parametrize("op", ["%", "^", "", "x"])
def test_invalid_operator(op):
    with pytest.raises(CalculatorError, match="Invalid operator"):
        calculate(op, 1.0, 2.0)


def test_error_is_value_error():
    with pytest.raises(ValueError):
        calculate("?", 1.0, 2.0)