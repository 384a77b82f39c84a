"""Demo harness: random CRUD operations on a random tree, timed and rendered."""

import dataclasses
import logging
import random
import time
from typing import Callable, Optional

import click

from canopy.generate import count_nodes, random_tree
from canopy.ops import delete, find, insert
from canopy.tree import Tree
from canopy.vis.glyphs import resolve_glyphs
from canopy.vis.render import render

logger = logging.getLogger(__name__)

INSERT_THRESHOLD = 0.33
DELETE_THRESHOLD = 0.66


@dataclasses.dataclass
class DemoConfig:
    """Parameters for one demo run."""

    depth: int = 5
    max_children: int = 3
    operations: int = 100
    value_range: int = 100
    seed: Optional[int] = None
    glyphs: str = "unicode"

    def __post_init__(self):
        if self.depth < 0:
            raise ValueError(f"depth must be non-negative, got {self.depth}")
        if self.max_children < 0:
            raise ValueError(
                f"max_children must be non-negative, got {self.max_children}"
            )
        if self.operations < 0:
            raise ValueError(
                f"operations must be non-negative, got {self.operations}"
            )
        if self.value_range < 1:
            raise ValueError(f"value_range must be at least 1, got {self.value_range}")
        resolve_glyphs(self.glyphs)


@dataclasses.dataclass
class DemoResult:
    """Outcome of a demo run."""

    initial_tree: Tree[int]
    final_tree: Tree[int]
    inserts: int = 0
    deletes: int = 0
    finds: int = 0
    hits: int = 0
    elapsed_ms: float = 0.0


def run_demo(
    config: DemoConfig, echo: Callable[[str], None] = click.echo
) -> DemoResult:
    """
    Build a random tree, apply random operations to it and print both trees.

    Each step draws a value in ``[0, value_range)`` and an operation: insert
    below 0.33, delete below 0.66, find otherwise.

    Args:
        config: Run parameters
        echo: Sink for the printed output

    Returns:
        Operation counts, both trees, and the elapsed wall time
    """
    rng = random.Random(config.seed)
    started = time.perf_counter()

    tree = random_tree(
        config.depth,
        config.max_children,
        lambda: rng.randrange(config.value_range),
        rng=rng,
    )
    nodes, leaves = count_nodes(tree)
    logger.info("Initial tree has %d nodes and %d leaves", nodes, leaves)

    echo("Initial Tree:")
    echo(render(tree, glyphs=config.glyphs))

    result = DemoResult(initial_tree=tree, final_tree=tree)
    current = tree
    for step in range(config.operations):
        operation = rng.random()
        value = rng.randrange(config.value_range)

        if operation < INSERT_THRESHOLD:
            current = insert(current, value)
            result.inserts += 1
            logger.debug("Step %d: insert %d", step, value)
        elif operation < DELETE_THRESHOLD:
            current = delete(current, value)
            result.deletes += 1
            logger.debug("Step %d: delete %d", step, value)
        else:
            found = find(current, value)
            result.finds += 1
            if found is not None:
                result.hits += 1
            logger.debug("Step %d: find %d -> %s", step, value, found)

    echo("Final Tree:")
    echo(render(current, glyphs=config.glyphs))

    result.final_tree = current
    result.elapsed_ms = (time.perf_counter() - started) * 1000.0
    echo(f"Random CRUD operations took {int(result.elapsed_ms)} ms")

    logger.info(
        "Ran %d operations (%d inserts, %d deletes, %d finds, %d hits) in %.2f ms",
        config.operations,
        result.inserts,
        result.deletes,
        result.finds,
        result.hits,
        result.elapsed_ms,
    )
    return result


@click.command()
@click.option("--depth", default=5, show_default=True, help="Depth budget of the random tree")
@click.option(
    "--max-children", default=3, show_default=True, help="Maximum children per node"
)
@click.option(
    "--operations", default=100, show_default=True, help="Number of random operations"
)
@click.option(
    "--value-range",
    default=100,
    show_default=True,
    help="Values are drawn from [0, value-range)",
)
@click.option("--seed", type=int, default=None, help="Seed for reproducible runs")
@click.option(
    "--glyphs",
    default="unicode",
    show_default=True,
    help="Connector glyph set name, checked against the registry at run time",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level",
)
def main(
    depth: int,
    max_children: int,
    operations: int,
    value_range: int,
    seed: Optional[int],
    glyphs: str,
    log_level: str,
) -> int:
    """Run random CRUD operations on a random tree and print it before and after."""
    level = getattr(logging, log_level.upper())
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("canopy").setLevel(level)

    try:
        config = DemoConfig(
            depth=depth,
            max_children=max_children,
            operations=operations,
            value_range=value_range,
            seed=seed,
            glyphs=glyphs,
        )
    except ValueError as e:
        raise click.BadParameter(str(e))

    run_demo(config)
    return 0


if __name__ == "__main__":
    main()
