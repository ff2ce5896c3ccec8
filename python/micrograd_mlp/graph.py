"""
DOT export of an MLP's connections.

Every neuron becomes a ``Neuron`` node and every weight and bias becomes a
labeled edge into the neuron it feeds. The network inputs are drawn as
``Input_k`` nodes so that first-layer edges have a declared source.
"""

import logging
from pathlib import Path

from graphviz import Digraph

logger = logging.getLogger(__name__)


def _neuron_id(layer_idx, neuron_idx):
    return f"L{layer_idx}N{neuron_idx}"


def _fmt(value):
    return f"{value.data:.2f}"


def build_graph(mlp):
    """Build a ``graphviz.Digraph`` describing ``mlp``'s structure and weights."""
    dot = Digraph(name="MLP", graph_attr={"rankdir": "LR"}, node_attr={"shape": "circle"})

    for k in range(mlp.nin):
        dot.node(f"Input_{k}", label=f"Input_{k}", shape="box")

    for layer_idx, layer in enumerate(mlp.layers):
        for neuron_idx, neuron in enumerate(layer.neurons):
            nid = _neuron_id(layer_idx, neuron_idx)
            dot.node(nid, label="Neuron")
            for weight_idx, w in enumerate(neuron.w):
                if layer_idx == 0:
                    src = f"Input_{weight_idx}"
                else:
                    src = _neuron_id(layer_idx - 1, weight_idx)
                dot.edge(src, nid, label=_fmt(w))
            bias_id = f"{nid}_bias"
            dot.node(bias_id, label="bias", shape="point")
            dot.edge(bias_id, nid, label=_fmt(neuron.b))

    return dot


def visualize_graph(mlp, filename="mlp.dot"):
    """
    Write ``mlp`` as a DOT graph to ``filename``.

    The file is created or truncated. Missing parent directories are not
    created; the resulting ``OSError`` is raised to the caller.

    Args:
        mlp: A constructed MLP.
        filename: Destination path.

    Returns:
        The path that was written.
    """
    path = Path(filename)
    source = build_graph(mlp).source
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(source)
    except OSError:
        logger.error("Could not write graph to %s", path)
        raise
    logger.info("Wrote graph of %d layers to %s", len(mlp.layers), path)
    return path
