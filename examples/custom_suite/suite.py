"""A user-defined suite, run with ``unitcheck run --source examples/custom_suite/suite.py``."""
import numpy as np

from unitcheck.core import Suite, assert_approx_equal, assert_identical, assert_raises

suite = Suite("rescale", description="Min-max rescaling of a numeric vector")


def rescale(x):
    values = np.asarray(x, dtype=np.float64)
    if values.size == 0:
        return values
    span = values.max() - values.min()
    if span == 0:
        raise ZeroDivisionError("cannot rescale a constant vector")
    return (values - values.min()) / span


@suite.test(tags=("numeric",))
def spans_unit_interval():
    """Smallest value maps to 0 and largest to 1."""
    assert_approx_equal([0.0, 0.5, 1.0], rescale([2, 4, 6]))


@suite.test(tags=("edge-cases",))
def empty_input_stays_empty():
    """Zero-length input gives zero-length output."""
    assert_identical(np.array([], dtype=np.float64), rescale([]))


@suite.test(tags=("edge-cases",))
def constant_input_is_an_error():
    assert_raises(lambda: rescale([3, 3, 3]), ArithmeticError)
