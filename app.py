# app.py
import logging
import os
import sys

# Ensure top-level package import works even when running as a script
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import numpy as np

from linear_perceptron.driver import run
from linear_perceptron.utils import parse_coefficients

USAGE = "Usage: linear-perceptron a b c\n       Where a,b,c are all float values\n"


def configure_logging():
    name = os.environ.get('PERCEPTRON_LOG_LEVEL', 'WARNING').upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError("PERCEPTRON_LOG_LEVEL must be a logging level name such as DEBUG or INFO, got %r" % name)
    logging.basicConfig(level=level, stream=sys.stderr,
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')


def make_rng():
    seed = os.environ.get('PERCEPTRON_SEED')
    if seed:
        try:
            seed = int(seed)
        except ValueError:
            raise ValueError("PERCEPTRON_SEED must be an integer, got %r" % seed) from None
        return np.random.default_rng(seed)
    return np.random.default_rng()


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    coefficients = parse_coefficients(argv)
    if coefficients is None:
        print(USAGE)
        return 0
    configure_logging()

    a, b, c = coefficients
    report = run(a, b, c, rng=make_rng())
    print("Initialized, before training Perceptron(bias=%r, learning_rate=%r, weights=%r)" % (
        report.before['bias'], report.before['learning_rate'], report.before['weights']))
    print("After training %r" % report.model)
    for line in report.lines():
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
