"""
micrograd_mlp - A tiny tanh multi-layer perceptron with DOT graph export

Builds Value/Neuron/Layer/MLP in the style of Andrej Karpathy's micrograd,
runs forward passes and writes the network's connections as a Graphviz graph.
"""

import logging

__version__ = "0.1.0"

from micrograd_mlp.engine import Value
from micrograd_mlp.nn import Neuron, Layer, MLP
from micrograd_mlp.graph import build_graph, visualize_graph

__all__ = ["Value", "Neuron", "Layer", "MLP", "build_graph", "visualize_graph"]

logging.getLogger(__name__).addHandler(logging.NullHandler())
