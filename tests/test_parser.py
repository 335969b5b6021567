import logging

import pytest

from ratmath import DivisionError, DomainError, ExpressionSyntaxError
from ratmath import Parser, Rational, RationalInterval, evaluate, parse


def test_scenarios():
    assert str(parse("3/4 + 1/4")) == "1"
    assert parse("3/4 + 1/4").ispoint()
    assert str(parse("(-2)^2")) == "4"
    assert str(parse("1:2 * 1:2")) == "1:4"
    assert evaluate("1..1/2") == Rational(3, 2)
    assert str(parse("5:3")) == "3:5"


def test_precedence():
    assert evaluate("1 + 2 * 3") == 7
    assert evaluate("(1 + 2) * 3") == 9
    assert evaluate("8 / 4 / 2") == 1
    assert evaluate("1 - 2 - 3") == -4
    assert evaluate("-2^2") == -4
    assert evaluate("2 * -3") == -6
    assert evaluate("--3") == 3
    assert evaluate("1/2 + 1..1/3") == Rational(11, 6)
    assert evaluate("-1..1/2") == Rational(-3, 2)


def test_slash_without_digit_is_division():
    assert evaluate("1/(2)") == Rational(1, 2)
    assert evaluate("3/(1/2)") == 6
    assert evaluate("1/-2") == Rational(-1, 2)
    assert parse("1/(2:4)") == RationalInterval(Rational(1, 4), Rational(1, 2))


def test_intervals():
    assert parse("1:2 + 3:4") == RationalInterval(4, 6)
    assert parse("1:2 - 3:4") == RationalInterval(-3, -1)
    assert parse("1:-1") == RationalInterval(-1, 1)
    assert parse("(1:2) / (1:2)") == RationalInterval(Rational(1, 2), 2)
    assert parse("-(1:2)") == RationalInterval(-2, -1)
    assert parse(" 1 / 2 : 3 / 4 ") == RationalInterval(Rational(1, 2), Rational(3, 4))


def test_unary_minus_negates_interval():
    assert parse("-1:2") == RationalInterval(-2, -1)
    assert parse("-1:2") == parse("-(1:2)")
    assert parse("2--1:3") == RationalInterval(3, 5)
    assert parse("-1/2:3") == RationalInterval(-3, Rational(-1, 2))
    assert parse("-1..1/2:2") == RationalInterval(-2, Rational(-3, 2))
    assert parse("1:-2") == RationalInterval(-2, 1)


def test_power_operators():
    assert parse("(1:-1)^2") == RationalInterval(0, 1)
    assert parse("(1:-1)**2") == RationalInterval(-1, 1)
    assert parse("1:-1^2") == RationalInterval(0, 1)
    assert parse("(2:-1)**3") == RationalInterval(-4, 8)
    assert parse("-1:2^2") == RationalInterval(-4, -1)
    assert parse("-1:2**3") == RationalInterval(-8, -1)
    assert evaluate("2**3") == 8
    assert evaluate("2^-2") == Rational(1, 4)
    assert evaluate("2**-2") == Rational(1, 4)
    assert evaluate("2*3**2") == 18
    assert evaluate("(1/2)^0") == 1


def test_errors():
    for expression, remainder in [
        ("", ""),
        ("   ", ""),
        ("(1 + 2", ""),
        ("1 + ", ""),
        ("1 2)", ")"),
        ("1.5", ".5"),
        ("1..2", ""),
        ("1../2", "/2"),
        ("1..2/", ""),
        ("1/", ""),
        ("2^", ""),
        ("2^x", "x"),
        ("1:", ""),
        ("x", "x"),
        ("2^2^2", "^2"),
    ]:
        with pytest.raises(ExpressionSyntaxError) as excinfo:
            parse(expression)

        assert excinfo.value.remainder == remainder


def test_arithmetic_errors():
    with pytest.raises(DomainError):
        parse("0^0")

    with pytest.raises(DomainError):
        parse("(1 - 1)^0")

    with pytest.raises(DomainError):
        parse("(1:-1)^0")

    with pytest.raises(DomainError):
        parse("2**0")

    with pytest.raises(DivisionError):
        parse("1/0")

    with pytest.raises(DivisionError):
        parse("1 / (1:-1)")


def test_parser_instance():
    parser = Parser("1 + 1 )")

    with pytest.raises(ExpressionSyntaxError):
        parser.parse()

    assert parser.remainder == ")"

    with pytest.raises(TypeError):
        Parser(3)


def test_logging(caplog):
    with caplog.at_level(logging.DEBUG, logger="ratmath.parser"):
        parse("1 + 1")

        with pytest.raises(ExpressionSyntaxError):
            parse("(")

    assert "evaluated '1 + 1' to 2" in caplog.text
    assert "syntax error in '('" in caplog.text
