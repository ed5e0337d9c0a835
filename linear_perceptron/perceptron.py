# linear_perceptron/perceptron.py
import numpy as np


def sigmoid(z):
    # stable for large negative z
    z = float(z)
    if z >= 0:
        return 1.0 / (1.0 + np.exp(-z))
    e = np.exp(z)
    return e / (1.0 + e)


class Perceptron:
    """
    Single perceptron with a fixed number of inputs.
    - n_inputs: dimensionality of every input vector, fixed at construction
    - bias: offset added to the weighted sum inside the activation
    - learning_rate: step size applied when a prediction is wrong
    - weights: optional initial weights; drawn uniformly from [0.01, 1.0) when omitted
    - rng: numpy Generator used for the random initialization
    """
    def __init__(self, n_inputs=2, bias=0.01, learning_rate=0.0005, weights=None, rng=None):
        self.n_inputs = int(n_inputs)
        if weights is None:
            if rng is None:
                rng = np.random.default_rng()
            self._weights = rng.uniform(0.01, 1.0, size=self.n_inputs)
        else:
            self._weights = np.array(weights, dtype=float)
            if self._weights.shape != (self.n_inputs,):
                raise ValueError("Expected %d weights, got %r" % (self.n_inputs, list(self._weights.ravel())))
        self._bias = float(bias)
        self._learning_rate = float(learning_rate)

    @property
    def weights(self):
        return self._weights.copy()

    @property
    def bias(self):
        return self._bias

    @property
    def learning_rate(self):
        return self._learning_rate

    def _as_inputs(self, inputs):
        x = np.asarray(inputs, dtype=float)
        if x.shape != (self.n_inputs,):
            raise ValueError("Expected %d inputs, got shape %s" % (self.n_inputs, x.shape))
        return x

    def activate(self, value):
        """
        Logistic of (value + bias), thresholded at 0.5.
        The bias is read at call time, so the result depends on the current model.
        """
        return 1 if sigmoid(value + self._bias) >= 0.5 else 0

    def query(self, inputs):
        x = self._as_inputs(inputs)
        return self.activate(float(np.dot(self._weights, x)))

    def train(self, inputs, target):
        """
        Online update for one labeled example.
        Returns the prediction made before any adjustment.
        """
        x = self._as_inputs(inputs)
        result = self.query(x)
        if result != target:
            # plain perceptron rule, the logistic is only used for thresholding
            delta = float(target - result)
            self._weights = self._weights + delta * x * self._learning_rate
            self._bias += delta * self._learning_rate
        return result

    def state(self):
        return {'bias': self._bias, 'learning_rate': self._learning_rate, 'weights': self._weights.tolist()}

    def __repr__(self):
        return 'Perceptron(bias=%r, learning_rate=%r, weights=%r)' % (
            self._bias, self._learning_rate, self._weights.tolist())
