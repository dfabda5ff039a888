"""CLI entry point for layered-layout."""

import json
import logging
import sys

import click

from layered_layout.config import LayoutConfig
from layered_layout.errors import GraphValidationError
from layered_layout.layout.engine import layout
from layered_layout.parsers import parse
from layered_layout.types import LayoutDirection

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--direction", "-d", "direction", type=str, default="TB", help="Layout direction (TB, TD, BT, LR, RL)")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--node-gap", "node_gap", type=float, default=50, help="Gap between nodes in the same layer")
@click.option("--rank-gap", "rank_gap", type=float, default=50, help="Gap between layers")
@click.option("--iterations", "-i", "iterations", type=int, default=8, help="Maximum crossing-reduction sweeps")
@click.option("--log-level", "log_level", type=str, default="WARNING", help="Logging level (default: WARNING)")
def main(
    input: str | None,
    direction: str,
    output: str | None,
    node_gap: float,
    rank_gap: float,
    iterations: int,
    log_level: str,
) -> None:
    """Lay out a JSON directed graph and print node positions as JSON."""
    _configure_logging(log_level)

    try:
        layout_direction = LayoutDirection.from_string(direction)
    except ValueError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    config = LayoutConfig(node_gap=node_gap, rank_gap=rank_gap, max_iterations=iterations)
    try:
        config.validate()
    except ValueError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    if input:
        try:
            with open(input) as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    try:
        graph = parse(text)
    except GraphValidationError as e:
        logger.debug("rejected input", exc_info=True)
        click.echo(f"invalid input: {e}", err=True)
        sys.exit(1)

    result = layout(graph, layout_direction, config)
    rendered = json.dumps(result.to_dict(), indent=2) + "\n"

    if output:
        try:
            with open(output, "w") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()
