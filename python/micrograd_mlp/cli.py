import logging

import click

from micrograd_mlp import __version__
from micrograd_mlp.graph import visualize_graph
from micrograd_mlp.log import setup_logging
from micrograd_mlp.nn import MLP


def _parse_ints(ctx, param, value):
    if value is None:
        return None
    try:
        widths = [int(part) for part in value.split(",") if part.strip()]
    except ValueError:
        raise click.BadParameter(f"expected comma-separated integers, got {value!r}")
    if not widths or any(w <= 0 for w in widths):
        raise click.BadParameter("every width must be a positive integer")
    return widths


def _parse_floats(ctx, param, value):
    if value is None:
        return None
    try:
        return [float(part) for part in value.split(",") if part.strip()]
    except ValueError:
        raise click.BadParameter(f"expected comma-separated numbers, got {value!r}")


@click.command()
@click.version_option(version=__version__)
@click.option("--inputs", "-n", type=click.IntRange(min=1), default=2, show_default=True, help="Network input width")
@click.option(
    "--layers",
    "-l",
    default="2,2",
    show_default=True,
    callback=_parse_ints,
    help="Comma-separated layer widths",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default="mlp.dot",
    show_default=True,
    help="Path of the DOT file to write",
)
@click.option("--seed", type=int, default=None, help="Seed for reproducible weights")
@click.option("--predict", callback=_parse_floats, default=None, help="Comma-separated input vector to run forward")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output with detailed logging")
def cli(inputs, layers, output, seed, predict, verbose):
    """Build a randomly initialised MLP and write its graph as DOT."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING)

    model = MLP(inputs, layers, rng=seed)

    if predict is not None:
        if len(predict) != inputs:
            raise click.BadParameter(
                f"expected {inputs} values, got {len(predict)}", param_hint="'--predict'"
            )
        out = model(predict)
        click.echo("Prediction: " + ", ".join(f"{v.data:.4f}" for v in out))

    try:
        path = visualize_graph(model, output)
    except OSError as e:
        raise click.ClickException(f"Could not write {output}: {e.strerror or e}")
    click.echo(f"Wrote {path} ({len(model.parameters())} parameters)")


def main():
    cli()
