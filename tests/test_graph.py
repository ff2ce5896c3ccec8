"""
Tests for the DOT export of an MLP.
"""

import re

import pytest

from micrograd_mlp import MLP, build_graph, visualize_graph

NEURON_DECL = re.compile(r"^\s*L\d+N\d+ \[label=Neuron\]$", re.MULTILINE)
EDGE = re.compile(r"^\s*(\S+) -> (\S+) \[label=\"?(-?\d+\.\d+)\"?\]$", re.MULTILINE)
NODE_DECL = re.compile(r"^\s*(\S+) \[", re.MULTILINE)


def test_two_by_two_file(tmp_path):
    """The 2x2 network has 4 neuron nodes and two-decimal edge labels."""
    model = MLP(2, [2, 2], rng=0)
    path = visualize_graph(model, tmp_path / "mlp.dot")
    assert path == tmp_path / "mlp.dot"

    text = path.read_text(encoding="utf-8")
    assert text.startswith("digraph MLP {")
    assert text.rstrip().endswith("}")
    assert "rankdir=LR" in text
    assert "shape=circle" in text

    assert len(NEURON_DECL.findall(text)) == 4

    edges = EDGE.findall(text)
    # 4 neurons x (2 weights + 1 bias)
    assert len(edges) == 12
    for _, _, label in edges:
        assert re.fullmatch(r"-?\d+\.\d{2}", label)


def test_edge_labels_match_parameters(tmp_path):
    """Each edge carries the formatted weight or bias it stands for."""
    model = MLP(3, [2, 1], rng=1)
    text = visualize_graph(model, tmp_path / "g.dot").read_text(encoding="utf-8")
    labels = {(src, dst): label for src, dst, label in EDGE.findall(text)}

    for layer_idx, layer in enumerate(model.layers):
        for neuron_idx, neuron in enumerate(layer.neurons):
            nid = f"L{layer_idx}N{neuron_idx}"
            for k, w in enumerate(neuron.w):
                src = f"Input_{k}" if layer_idx == 0 else f"L{layer_idx - 1}N{k}"
                assert labels[(src, nid)] == f"{w.data:.2f}"
            assert labels[(f"{nid}_bias", nid)] == f"{neuron.b.data:.2f}"


def test_bias_nodes_are_points():
    """Every neuron has its own bias node drawn as a point."""
    model = MLP(2, [3, 2], rng=8)
    source = build_graph(model).source
    bias_decls = re.findall(r"^\s*(L\d+N\d+_bias) \[label=bias shape=point\]$", source, re.MULTILINE)
    expected = [
        f"L{i}N{j}_bias" for i, layer in enumerate(model.layers) for j in range(len(layer.neurons))
    ]
    assert bias_decls == expected
    assert "plaintext" not in source


def test_every_edge_source_is_declared():
    """No edge references an undeclared node, including first-layer inputs."""
    model = MLP(3, [4, 2], rng=2)
    source = build_graph(model).source
    declared = set(NODE_DECL.findall(source))
    for src, dst, _ in EDGE.findall(source):
        assert src in declared
        assert dst in declared
    for k in range(3):
        assert f"Input_{k}" in declared


def test_parameter_count_matches_edges():
    """There is one edge per parameter."""
    model = MLP(4, [3, 5, 2], rng=3)
    assert len(EDGE.findall(build_graph(model).source)) == len(model.parameters())


def test_visualize_is_idempotent(tmp_path):
    """Writing the same network twice produces identical bytes."""
    model = MLP(2, [3, 2], rng=4)
    path = tmp_path / "mlp.dot"
    first = visualize_graph(model, path).read_bytes()
    second = visualize_graph(model, path).read_bytes()
    assert first == second


def test_visualize_truncates_existing_file(tmp_path):
    """Pre-existing content is overwritten."""
    path = tmp_path / "mlp.dot"
    path.write_text("stale content\n" * 1000, encoding="utf-8")
    visualize_graph(MLP(2, [2], rng=5), path)
    text = path.read_text(encoding="utf-8")
    assert "stale" not in text
    assert text.startswith("digraph MLP {")


def test_visualize_accepts_str_path(tmp_path):
    """A plain string path works too."""
    path = visualize_graph(MLP(1, [1], rng=6), str(tmp_path / "tiny.dot"))
    assert path.exists()


def test_unwritable_path_raises_and_creates_nothing(tmp_path):
    """A missing parent directory raises OSError and leaves no file behind."""
    target = tmp_path / "missing" / "mlp.dot"
    with pytest.raises(OSError):
        visualize_graph(MLP(2, [2, 2], rng=7), target)
    assert not target.exists()
    assert not target.parent.exists()
