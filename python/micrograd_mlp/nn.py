import logging
import random

from micrograd_mlp.engine import Value

logger = logging.getLogger(__name__)


def _make_rng(rng):
    """Return a ``random.Random`` for ``rng`` (an instance, an int seed or None)."""
    if rng is None:
        return random.Random()
    if isinstance(rng, random.Random):
        return rng
    if isinstance(rng, int) and not isinstance(rng, bool):
        return random.Random(rng)
    raise TypeError(f"rng must be a random.Random, an int seed or None, got {type(rng).__name__}")


def _check_width(name, value):
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")


def _as_values(x, nin):
    x = [xi if isinstance(xi, Value) else Value(xi) for xi in x]
    if len(x) != nin:
        raise ValueError(f"expected an input of length {nin}, got {len(x)}")
    return x


class Module:

    def parameters(self):
        return []


class Neuron(Module):
    """A tanh unit: ``tanh(b + sum(w_i * x_i))``."""

    def __init__(self, nin, rng=None):
        _check_width("nin", nin)
        rng = _make_rng(rng)
        self.w = [Value(rng.uniform(-1, 1), f"w{i}") for i in range(nin)]
        self.b = Value(rng.uniform(-1, 1), "b")

    @property
    def nin(self):
        return len(self.w)

    def __call__(self, x):
        x = _as_values(x, self.nin)
        act = sum((wi * xi for wi, xi in zip(self.w, x)), self.b)
        return Value(act, "act").tanh()

    def parameters(self):
        return self.w + [self.b]

    def __repr__(self):
        return f"TanhNeuron({self.nin})"


class Layer(Module):

    def __init__(self, nin, nout, rng=None):
        _check_width("nout", nout)
        rng = _make_rng(rng)
        self.neurons = [Neuron(nin, rng=rng) for _ in range(nout)]

    @property
    def nin(self):
        return self.neurons[0].nin

    def __call__(self, x):
        x = _as_values(x, self.nin)
        return [n(x) for n in self.neurons]

    def parameters(self):
        return [p for n in self.neurons for p in n.parameters()]

    def __repr__(self):
        return f"Layer of [{', '.join(str(n) for n in self.neurons)}]"


class MLP(Module):
    """Multi-layer perceptron.

    Args:
        nin: Width of the input vector.
        nouts: Width of each layer, in order. The last entry is the output width.
        rng: A ``random.Random`` used to draw every weight and bias, or an int
            seed for a new one. Defaults to a fresh unseeded generator.
    """

    def __init__(self, nin, nouts, rng=None):
        nouts = list(nouts)
        if not nouts:
            raise ValueError("an MLP requires at least one layer")
        _check_width("nin", nin)
        for width in nouts:
            _check_width("layer width", width)
        rng = _make_rng(rng)
        sz = [nin] + nouts
        self.layers = [Layer(sz[i], sz[i + 1], rng=rng) for i in range(len(nouts))]
        logger.debug("Built MLP %s with %d parameters", sz, len(self.parameters()))

    @property
    def nin(self):
        return self.layers[0].nin

    @property
    def sizes(self):
        return [self.nin] + [len(layer.neurons) for layer in self.layers]

    def __call__(self, x):
        for layer in self.layers:
            x = layer(x)
        return x

    def forward_trace(self, x):
        """Run a forward pass and return every layer's output, in layer order."""
        outputs = []
        for layer in self.layers:
            x = layer(x)
            outputs.append(x)
        return outputs

    def parameters(self):
        return [p for layer in self.layers for p in layer.parameters()]

    def __repr__(self):
        return f"MLP of [{', '.join(str(layer) for layer in self.layers)}]"
