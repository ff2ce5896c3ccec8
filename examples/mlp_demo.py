#!/usr/bin/env python3
"""
Example walking through micrograd_mlp

This script shows how to:
1. Work with Values
2. Build an MLP from a seeded random source
3. Run a forward pass and inspect each layer's output
4. Export the network as a DOT graph
"""

import random

from micrograd_mlp import MLP, Value, visualize_graph


def demo_values():
    """Demonstrate Value arithmetic and tanh."""
    print("=" * 80)
    print("Value Demo")
    print("=" * 80)

    a = Value(2.0, "a")
    b = Value(-3.0, "b")
    print(f"\n   a = {a}")
    print(f"   b = {b}")

    c = a * b + 1
    print(f"   a * b + 1 = {c}")
    print(f"   tanh(a * b + 1) = {c.tanh()}")


def demo_forward_pass(model):
    """Demonstrate a forward pass through a small network."""
    print("\n" + "=" * 80)
    print("Forward Pass Demo")
    print("=" * 80)

    print(f"\n1. Model: {model}")
    print(f"   Layer sizes: {model.sizes}")
    print(f"   Parameters: {len(model.parameters())}")

    x = [Value(0.5, "x0"), Value(-0.5, "x1")]
    print(f"\n2. Input: {[xi.data for xi in x]}")

    print("\n3. Layer outputs:")
    for i, out in enumerate(model.forward_trace(x)):
        print(f"   Layer {i}: {[round(o.data, 4) for o in out]}")


def demo_graph(model, filename="mlp.dot"):
    """Write the network as DOT."""
    print("\n" + "=" * 80)
    print("Graph Export Demo")
    print("=" * 80)

    path = visualize_graph(model, filename)
    print(f"\n   Wrote {path}")
    print(f"   Render with: dot -Tpng {path} -o mlp.png")


if __name__ == "__main__":
    print("\nmicrograd_mlp Examples")
    print("=" * 80)

    model = MLP(2, [2, 2], rng=random.Random(0))

    demo_values()
    demo_forward_pass(model)
    demo_graph(model)

    print("\n" + "=" * 80)
    print("All demos completed successfully!")
    print("=" * 80 + "\n")
