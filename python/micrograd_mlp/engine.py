import math


class Value:
    """Stores a single scalar and a label used when drawing the network.

    Values are immutable: every operation returns a new Value.
    """

    __slots__ = ("_data", "_label")

    def __init__(self, data, label=""):
        if isinstance(data, Value):
            data = data.data
        self._data = float(data)
        self._label = label

    @property
    def data(self):
        return self._data

    @property
    def label(self):
        return self._label

    def __add__(self, other):
        other = other if isinstance(other, Value) else Value(other)
        return Value(self.data + other.data)

    def __mul__(self, other):
        other = other if isinstance(other, Value) else Value(other)
        return Value(self.data * other.data)

    def __radd__(self, other):  # other + self
        return self + other

    def __rmul__(self, other):  # other * self
        return self * other

    def tanh(self):
        return Value(math.tanh(self.data), self.label + "_tanh")

    def __eq__(self, other):
        if not isinstance(other, Value):
            return NotImplemented
        return self.data == other.data and self.label == other.label

    def __hash__(self):
        return hash((self.data, self.label))

    def __repr__(self):
        return f"Value(data={self.data}, label={self.label!r})"
