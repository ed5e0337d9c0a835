# linear_perceptron/utils.py
import math

import numpy as np


class DegenerateBoundaryError(ValueError):
    """Raised when a boundary line has no slope/intercept form."""


class BoundaryLine:
    """
    The line p*x + q*y + r = 0, viewed in y = m*x + b form when possible.
    """
    def __init__(self, p, q, r):
        self.p = float(p)
        self.q = float(q)
        self.r = float(r)

    @property
    def is_finite(self):
        return all(math.isfinite(v) for v in (self.p, self.q, self.r))

    @property
    def is_vertical(self):
        return self.is_finite and self.q == 0 and self.p != 0

    @property
    def is_empty(self):
        return not self.is_finite or (self.p == 0 and self.q == 0)

    def _check(self):
        if self.is_empty:
            raise DegenerateBoundaryError("no decision boundary: coefficients are %r" % ((self.p, self.q, self.r),))
        if self.is_vertical:
            raise DegenerateBoundaryError("undefined slope: vertical line x = %.2f" % self.x_intercept)

    def _solve(self, numerator):
        self._check()
        value = -numerator / self.q
        if not math.isfinite(value):
            raise DegenerateBoundaryError("slope/intercept overflow: y coefficient %r is too close to zero" % self.q)
        return value

    @property
    def overflows(self):
        # y coefficient so small that y = m*x + b no longer fits in a float
        if self.is_empty or self.is_vertical:
            return False
        return not (math.isfinite(self.p / self.q) and math.isfinite(self.r / self.q))

    @property
    def slope(self):
        return self._solve(self.p)

    @property
    def intercept(self):
        return self._solve(self.r)

    @property
    def x_intercept(self):
        if self.p == 0 or not self.is_finite:
            raise DegenerateBoundaryError("line never crosses the x axis")
        return -self.r / self.p


def signed(value):
    """
    Split value into a display sign and its magnitude.
    """
    if value < 0:
        return '-', -value
    return '+', abs(value)


def format_slope_intercept(line):
    try:
        sign, magnitude = signed(line.intercept)
        return 'y = %.2fx %s %.2f' % (line.slope + 0.0, sign, magnitude)
    except DegenerateBoundaryError:
        if line.is_vertical:
            return 'undefined slope (vertical line x = %.2f)' % line.x_intercept
        if not line.is_finite:
            return 'undefined (non-finite coefficients)'
        if line.overflows:
            return 'undefined slope (y coefficient %r too close to zero)' % line.q
        return 'undefined (no decision boundary: both coefficients are zero)'


def format_inequality(x_coefficient, y_coefficient, constant_term):
    # the tested expression is a*x + b*y - c > 0
    y_sign, y_value = signed(y_coefficient)
    c_sign, c_value = signed(-constant_term)
    return '%.2fx %s %.2fy %s %.2f > 0' % (x_coefficient, y_sign, y_value, c_sign, c_value)


def parse_coefficients(args):
    """
    Parse exactly three command-line tokens as floats.
    Returns None on a wrong argument count; a non-numeric or non-finite token raises ValueError.
    """
    if len(args) != 3:
        return None
    coefficients = tuple(float(a) for a in args)
    for token, value in zip(args, coefficients):
        if not math.isfinite(value):
            raise ValueError("Coefficient must be a finite number, got %r" % token)
    return coefficients


def accuracy(model, points, labels):
    if len(points) == 0:
        return 0.0
    hits = sum(1 for x, y in zip(points, labels) if model.query(x) == y)
    return hits / float(len(points))


def sample_points(rng, count, low, high):
    return rng.uniform(low, high, size=(int(count), 2))


def label_points(points, x_coefficient, y_coefficient, constant_term):
    pts = np.asarray(points, dtype=float)
    return (x_coefficient * pts[:, 0] + y_coefficient * pts[:, 1] - constant_term > 0).astype(int)
