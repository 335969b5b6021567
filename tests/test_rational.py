import mpmath
import pytest

from ratmath import DivisionError, DomainError, FormatError, Rational


def test_normalization():
    x = Rational(4, -8)
    assert (x.numerator, x.denominator) == (-1, 2)

    zero = Rational(0, -5)
    assert (zero.numerator, zero.denominator) == (0, 1)

    with pytest.raises(DivisionError):
        Rational(1, 0)


def test_additive_inverse():
    for a, b in [(3, 7), (-5, 2), (0, 9), (12345678901234567890, 3)]:
        total = Rational(a, b) + Rational(-a, b)
        assert total == Rational(0)
        assert total.denominator == 1


def test_fromstr():
    assert Rational("4/8").tostr() == "1/2"
    assert Rational("-6/4").tostr() == "-3/2"
    assert Rational(" 7 ") == 7
    assert Rational("1..1/2") == Rational(3, 2)
    assert Rational("-1..1/2") == Rational(-3, 2)
    assert Rational("-0..1/2") == Rational(-1, 2)
    assert Rational.fromfraction("10/4") == Rational(5, 2)
    assert Rational.frommixed("2..3/4") == Rational(11, 4)

    with pytest.raises(DivisionError):
        Rational("1/0")

    for text in ["", "1/2/3", "a", "1..2", "1..2/3/4", "1.5", "1..-1/2"]:
        with pytest.raises(FormatError):
            Rational(text)

    with pytest.raises(FormatError):
        Rational.frommixed("3/4")


def test_exact_conversion():
    assert Rational(0.375) == Rational(3, 8)
    assert Rational(-2.5, 3) == Rational(-5, 6)
    assert Rational(mpmath.mpf("-2.75")) == Rational(-11, 4)
    assert Rational(mpmath.mpf(3) / 4) == Rational(3, 4)

    with pytest.raises(FormatError):
        Rational(float("nan"))

    with pytest.raises(FormatError):
        Rational(mpmath.inf)

    with pytest.raises(TypeError):
        Rational([1, 2])


def test_arithmetic():
    a = Rational(1, 2)
    b = Rational(-2, 3)
    assert a + b == Rational(-1, 6)
    assert a - b == Rational(7, 6)
    assert a * b == Rational(-1, 3)
    assert a / b == Rational(-3, 4)
    assert 1 - a == a
    assert 2 * a == 1
    assert 1 / b == Rational(-3, 2)
    assert -b == Rational(2, 3)
    assert abs(b) == Rational(2, 3)

    with pytest.raises(DivisionError):
        a / Rational(0)

    with pytest.raises(DivisionError):
        a / 0

    with pytest.raises(DivisionError):
        Rational(0).reciprocal()


def test_pow():
    assert Rational(2, 3).pow(5) == Rational(32, 243)
    assert Rational(-2, 3) ** 3 == Rational(-8, 27)
    assert Rational(2, 3).pow(-2) == Rational(9, 4)
    assert Rational(-7).pow(0) == 1
    assert Rational(0).pow(3) == 0
    assert Rational(10).pow(100).numerator == 10**100

    with pytest.raises(DomainError):
        Rational(0).pow(0)

    with pytest.raises(DomainError):
        Rational(0).pow(-1)


def test_compare():
    a = Rational(1, 3)
    b = Rational(2, 5)
    assert a.compare(b) == -1
    assert b.compare(a) == 1
    assert a.compare(Rational(2, 6)) == 0
    assert a < b <= b and b > a >= a
    assert Rational(-1, 2) < 0 < Rational(1, 10**30)
    assert max(a, b, Rational(-4)) is b


def test_strings():
    assert Rational(7).tostr() == "7"
    assert Rational(-7, 2).tostr() == "-7/2"
    assert Rational(7, 2).tomixedstr() == "3..1/2"
    assert Rational(-7, 2).tomixedstr() == "-3..1/2"
    assert Rational(-1, 3).tomixedstr() == "-0..1/3"
    assert Rational(-4).tomixedstr() == "-4"
    assert Rational(0).tomixedstr() == "0"
    assert Rational(Rational(-7, 2).tomixedstr()) == Rational(-7, 2)
    assert repr(Rational(-7, 2)) == "Rational(-7, 2)"


def test_hash_and_conversion():
    assert hash(Rational(3)) == hash(3)
    assert len({Rational(1, 2), Rational(2, 4), Rational("0..1/2")}) == 1
    assert float(Rational(1, 4)) == 0.25
    assert not Rational(0) and Rational(1, 9)
    assert Rational(6, 3).isinteger() and not Rational(1, 2).isinteger()
    assert Rational.ensure(Rational.ONE) is Rational.ONE
