# linear_perceptron/driver.py
import logging

import numpy as np

from linear_perceptron.perceptron import Perceptron
from linear_perceptron.utils import (BoundaryLine, accuracy, format_inequality, format_slope_intercept,
                                     label_points, sample_points)

logger = logging.getLogger(__name__)

# bias starts near zero; a small learning rate avoids overcorrecting but converges slower
BIAS = 0.01
LEARNING_RATE = 0.0005
ITERATIONS = 10000
# too small or too large a range hurts accuracy
SAMPLE_RANGE = (-10.0, 10.0)
HOLDOUT_SIZE = 1000


def initialize(bias=BIAS, learning_rate=LEARNING_RATE, rng=None):
    """Two-input perceptron with weights drawn uniformly from [0.01, 1.0)."""
    return Perceptron(n_inputs=2, bias=bias, learning_rate=learning_rate, rng=rng)


def target_label(x_coefficient, y_coefficient, constant_term, x, y):
    return 1 if x_coefficient * x + y_coefficient * y - constant_term > 0 else 0


class TrainingReport:
    """
    Outcome of one training run: the trained model, its state before and
    after training, and the true and learned boundaries.
    """
    def __init__(self, x_coefficient, y_coefficient, constant_term, model, before, updates, iterations):
        self.x_coefficient = x_coefficient
        self.y_coefficient = y_coefficient
        self.constant_term = constant_term
        self.model = model
        self.before = before
        self.after = model.state()
        self.updates = updates
        self.iterations = iterations

    def actual_boundary(self):
        return BoundaryLine(self.x_coefficient, self.y_coefficient, -self.constant_term)

    def learned_boundary(self):
        w = self.after['weights']
        return BoundaryLine(w[0], w[1], self.after['bias'])

    def lines(self):
        return [
            'Original inequality: %s' % format_inequality(self.x_coefficient, self.y_coefficient, self.constant_term),
            'The actual slope/intercept form : %s' % format_slope_intercept(self.actual_boundary()),
            'Calculated slope/intercept form : %s' % format_slope_intercept(self.learned_boundary()),
        ]


def run(x_coefficient, y_coefficient, constant_term, iterations=ITERATIONS, sample_range=SAMPLE_RANGE, rng=None):
    """
    Train a fresh perceptron on the inequality
        x_coefficient*x + y_coefficient*y - constant_term > 0
    using `iterations` random points, one update per point, no early stopping.
    """
    if rng is None:
        rng = np.random.default_rng()
    low, high = sample_range

    model = initialize(BIAS, LEARNING_RATE, rng=rng)
    before = model.state()
    logger.debug("Training %r for %d iterations on [%s, %s)", model, iterations, low, high)

    updates = 0
    for _ in range(int(iterations)):
        x, y = rng.uniform(low, high, size=2)
        target = target_label(x_coefficient, y_coefficient, constant_term, x, y)
        if model.train((x, y), target) != target:
            updates += 1

    report = TrainingReport(x_coefficient, y_coefficient, constant_term, model, before, updates, int(iterations))
    if logger.isEnabledFor(logging.INFO):
        pts = sample_points(rng, HOLDOUT_SIZE, low, high)
        labels = label_points(pts, x_coefficient, y_coefficient, constant_term)
        logger.info("Finished %d iterations with %d updates, holdout accuracy %.3f",
                    report.iterations, updates, accuracy(model, pts, labels))
    return report
