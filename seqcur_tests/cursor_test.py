import os
import warnings
import seqcur
import numpy as np
import suite
from seqcur import (
    Ptr, empty, array, Iota, Filter, Counted, Interval, make_interval, Tier,
    ExhaustedError, CapabilityError, IncompatibleCursorError,
    Settings, settings, configure, Cursor
)

# --- setup ---
case = suite.case
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises


def unchecked(func):
    """run func with precondition checks switched off"""
    previous = settings.checked
    configure(checked=False)
    try:
        return func()
    finally:
        configure(checked=previous)

# --- capability tiers ---

@case("tiers are ordered from single pass to contiguous")
def test_tier_order():
    assert_that(Tier.INPUT < Tier.FORWARD < Tier.BIDIRECTIONAL < Tier.RANDOM_ACCESS < Tier.CONTIGUOUS,
                "each tier should include the ones below it")
    assert_that(Ptr([1]).supports(Tier.RANDOM_ACCESS), "a pointer is random access")
    assert_that(not Iota().supports(Tier.BIDIRECTIONAL), "iota only moves forward")


@case("adaptors take the tier of what they wrap")
def test_adaptor_tiers():
    assert_equal(array([1, 2]).tier, Tier.CONTIGUOUS, "counted pointer")
    assert_equal(Counted(Iota(), 3).tier, Tier.FORWARD, "counted iota")
    assert_equal(Filter(bool, array([1, 2])).tier, Tier.FORWARD, "filter is capped at forward")


@case("missing capabilities raise CapabilityError")
def test_capability_errors():
    assert_raises(CapabilityError, Iota().retreat)
    assert_raises(CapabilityError, Filter(bool, array([1, 2])).offset, 1)
    assert_raises(CapabilityError, Iota().end)
    assert_raises(CapabilityError, Counted(Iota(), 2).view, 1)
    assert_raises(CapabilityError, array((1, 2)).set_current, 5)

# --- pointer ---

@case("a tier claimed without its hooks fails with a clear message")
def test_missing_tier_hooks():
    class Half(Cursor):
        tier = Tier.RANDOM_ACCESS
        def has_more(self): return True
        def current(self): return 0
        def advance(self): pass
        def equals(self, other): return True

    error = assert_raises(NotImplementedError, Half().offset, 1)
    assert_that("offset" in str(error), "the missing hook is named")
    assert_raises(NotImplementedError, Half().retreat)
    assert_raises(CapabilityError, Half().view, 1)


@case("pointer reads, writes and moves through a list")
def test_ptr_basics():
    data = [10, 20, 30]
    p = Ptr(data)
    assert_equal(p.current(), 10)
    p.advance()
    assert_equal(p.current(), 20)
    p.set_current(25)
    assert_equal(data, [10, 25, 30], "write should reach the list")
    p.retreat()
    assert_equal(p.index(2), 30)
    p.offset(2)
    assert_equal(p.distance(Ptr(data)), 2)


@case("null pointer is the empty sequence")
def test_null_ptr():
    assert_that(not empty().has_more(), "empty() should have no elements")
    assert_that(not Ptr(), "a null pointer is falsy")
    assert_that(Ptr([1]), "a non-null pointer is truthy")


@case("pointer writability follows the buffer")
def test_ptr_writable():
    frozen = np.arange(3)
    frozen.flags.writeable = False
    assert_that(Ptr([1]).writable, "lists are writable")
    assert_that(Ptr(np.zeros(2)).writable, "numpy arrays are writable")
    assert_that(not Ptr((1, 2)).writable, "tuples are read-only")
    assert_that(not Ptr(frozen).writable, "read-only arrays stay read-only")


@case("pointers into different buffers have no distance")
def test_ptr_incompatible():
    assert_raises(IncompatibleCursorError, Ptr([1, 2]).distance, Ptr([1, 2]))


@case("pointer equality is identity of buffer plus position")
def test_ptr_equality():
    data = [1, 2, 3]
    assert_that(Ptr(data, 1) == Ptr(data, 1), "same buffer and position")
    assert_that(Ptr(data, 1) != Ptr(data, 2), "different position")
    assert_that(Ptr(data) != Ptr(list(data)), "equal content in another buffer is not the same position")
    assert_that(Ptr() == Ptr(), "null pointers are equal")

# --- structural equality and copies ---

@case("equality is structural, never element-wise")
def test_structural_equality():
    a, b = array([1, 2, 3]), array([1, 2, 3])
    assert_that(a != b, "same values over different storage are different cursors")
    c = a.copy()
    assert_that(a == c, "a copy sits at the same position")
    c.advance()
    assert_that(a != c, "advancing the copy moves it away")


@case("copies advance independently")
def test_copy_independence():
    a = array([1, 2, 3])
    b = a.copy()
    b.advance()
    b.advance()
    assert_equal(a.current(), 1, "original should not move")
    assert_equal(b.current(), 3, "copy should move")


@case("iteration reads a copy and leaves the cursor in place")
def test_iter_does_not_consume():
    a = make_interval([4, 5, 6])
    assert_equal(list(a), [4, 5, 6])
    assert_equal(list(a), [4, 5, 6], "second pass should see the same elements")
    assert_equal(a.current(), 4)

# --- preconditions and configuration ---

@case("checked reads past the end raise ExhaustedError")
def test_checked_reads():
    assert_raises(ExhaustedError, Counted(Ptr([1, 2]), 0).current)
    assert_raises(ExhaustedError, Ptr([1, 2], 2).current)
    assert_raises(ExhaustedError, Ptr().advance)
    i = make_interval([1])
    i.advance()
    assert_raises(ExhaustedError, i.advance)


@case("exhausted errors are also index errors")
def test_exhausted_is_index_error():
    assert_raises(IndexError, Ptr([1], 5).current)


@case("unchecked reads go straight to storage")
def test_unchecked_reads():
    value = unchecked(lambda: Counted(Ptr([7, 8]), 0).current())
    assert_equal(value, 7, "the exhausted counted cursor still points at the first slot")
    assert_that(settings.checked, "checks should be back on afterwards")


@case("settings load from the environment")
def test_settings_from_env():
    saved = {k: os.environ.get(k) for k in ('SEQCUR_CHECKED', 'SEQCUR_LOG_LEVEL')}
    try:
        os.environ['SEQCUR_CHECKED'] = 'off'
        os.environ['SEQCUR_LOG_LEVEL'] = 'debug'
        loaded = Settings.from_env()
        assert_that(not loaded.checked, "'off' should disable checks")
        assert_equal(loaded.log_level, 'DEBUG')
    finally:
        for k, v in saved.items():
            if v is None: os.environ.pop(k, None)
            else: os.environ[k] = v


@case("configure validates log levels")
def test_configure_log_level():
    import logging
    previous = settings.log_level
    try:
        configure(log_level='debug')
        assert_equal(logging.getLogger('seqcur').level, logging.DEBUG)
        assert_raises(ValueError, configure, log_level='chatty')
    finally:
        configure(log_level=previous)


@case("package source compiles without escape warnings")
def test_package_compiles_cleanly():
    with open(seqcur.__file__, encoding='utf-8') as f:
        source = f.read()
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        compile(source, seqcur.__file__, 'exec')


@case("interval end is reachable from begin")
def test_interval_begin_end():
    i = make_interval([1, 2, 3])
    walker = i.begin()
    for _ in range(3):
        walker.advance()
    assert_that(walker == i.end(), "three steps from begin should reach end")
    assert_that(not i.end().has_more(), "end is always exhausted")
    assert_that(isinstance(i.end(), Interval), "end keeps the interval type")


if __name__ == "__main__":
    suite.run(title="seqcur cursor contract test suite")
