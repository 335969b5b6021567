import pytest

from ratmath import Context, Rational, RationalInterval
from ratmath import getcontext, localcontext, setcontext


def test_display():
    x = Rational(-7, 2)
    y = RationalInterval("1/2", "9/4")
    assert getcontext().display == "CANONICAL"
    assert str(x) == "-7/2"

    with localcontext(display="MIXED") as ctx:
        assert ctx.display == "MIXED"
        assert str(x) == "-3..1/2"
        assert str(y) == "0..1/2:2..1/4"
        assert x.tostr() == "-7/2"

    assert str(y) == "1/2:9/4"


def test_setcontext():
    previous = getcontext()

    try:
        setcontext(Context("MIXED"))
        assert str(Rational(5, 3)) == "1..2/3"
    finally:
        setcontext(previous)

    assert str(Rational(5, 3)) == "5/3"

    with pytest.raises(ValueError):
        Context("DECIMAL")

    with pytest.raises(TypeError):
        setcontext("MIXED")
