import math
import suite
from seqcur import (
    Iota, Power, Factorial, Choose, Constant, once, take, size, total, Tier
)

# --- setup ---
case = suite.case
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises

# --- progressions ---

@case("iota counts up from its start")
def test_iota():
    assert_equal(Iota(5).to.take(4), [5, 6, 7, 8])
    assert_equal(Iota().to.first(), 0)


@case("iota with a step is an arithmetic progression")
def test_iota_step():
    assert_equal(Iota(1, 3).to.take(4), [1, 4, 7, 10])
    assert_equal(Iota(0.5, -0.5).to.take(3), [0.5, 0.0, -0.5])


@case("power is a geometric progression")
def test_power():
    assert_equal(Power(2).to.take(6), [1, 2, 4, 8, 16, 32])
    assert_equal(Power(3, 2).to.take(3), [2, 6, 18])


@case("factorial yields 1, 1, 2, 6, 24, ...")
def test_factorial():
    assert_equal(Factorial().to.take(7), [1, 1, 2, 6, 24, 120, 720])
    expected = [math.factorial(k) for k in range(20)]
    assert_equal(Factorial().to.take(20), expected, "python ints should not overflow")


@case("generators are infinite and copyable")
def test_generators_infinite():
    for g in (Iota(), Power(2), Factorial()):
        assert_that(g.has_more(), f"{type(g).__name__} should always have more")
        assert_equal(g.tier, Tier.FORWARD)
        copy = g.copy()
        copy.advance()
        assert_that(copy != g, "the copy should move on its own")

# --- binomial coefficients ---

@case("choose(4) yields 1, 4, 6, 4, 1")
def test_choose_four():
    assert_equal(Choose(4).to.list(), [1, 4, 6, 4, 1])
    assert_equal(total(Choose(4)), 16)


@case("choose(n) yields n + 1 coefficients summing to 2^n")
def test_choose_properties():
    for n in range(0, 40):
        row = Choose(n).to.list()
        assert_equal(len(row), n + 1, f"length of choose({n})")
        assert_equal(row, [math.comb(n, k) for k in range(n + 1)], f"coefficients of choose({n})")
        assert_equal(sum(row), 2 ** n, f"sum of choose({n})")


@case("choose end is reached after n + 1 steps")
def test_choose_end():
    c = Choose(3)
    for _ in range(4):
        c.advance()
    assert_that(c == Choose(3).end(), "should sit on the terminal cursor")
    c.advance()
    assert_that(c == Choose(3).end(), "advancing past the end does nothing")
    assert_equal(size(Choose(6)), 7)


@case("choose rejects negative n")
def test_choose_negative():
    assert_raises(ValueError, Choose, -1)

# --- constant ---

@case("constant repeats its value and never moves")
def test_constant():
    c = Constant('x')
    c.advance()
    c.offset(10)
    c.retreat()
    assert_equal(c.current(), 'x')
    assert_equal(c.index(-3), 'x')
    assert_equal(c.distance(Constant('x')), 0)
    assert_equal(c.tier, Tier.RANDOM_ACCESS)


@case("once holds a single value")
def test_once():
    o = once(7)
    assert_equal(o.to.list(), [7])
    assert_equal(size(o), 1)


@case("take of a generator is bounded")
def test_take_generator():
    assert_equal(take(Power(10), 3).to.list(), [1, 10, 100])


if __name__ == "__main__":
    suite.run(title="seqcur numeric generator test suite")
