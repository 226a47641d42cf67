"""
Propose birth and death dates for a set of deceased people.

1) Collect facts: either the built-in example or a facts file.
2) Build the constraint graph over birth/death events.
3) Resolve a topological order, or report the facts as inconsistent.
4) Print one line per person, and optionally plot the graph and timeline.
"""

import argparse
from pathlib import Path
import sys

from graph import build_constraint_graph
from models import FactSet
from parsing import parse_facts_file
from plotting import plot_constraint_graph, plot_timeline
from timeline import check_dates, project_dates, resolve_order

# Built-in example used when no facts file is given
EXAMPLE_FACTS = FactSet(
    n=6,
    died_before=[(1, 2), (3, 4), (4, 6)],
    overlapped=[(2, 3), (5, 6)],
)

EXIT_CONSISTENT = 0
EXIT_INCONSISTENT = 1
EXIT_INVALID = 2


def _parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="lifespan-facts",
        description="Propose birth and death dates consistent with a set of lifespan facts.",
    )
    p.add_argument(
        "facts",
        nargs="?",
        type=Path,
        help="facts file ('people N', 'before A B', 'overlap A B'); "
        "defaults to a built-in example",
    )
    p.add_argument("--graph", type=Path, help="write the constraint graph to this image")
    p.add_argument("--timeline", type=Path, help="write a lifespan timeline to this image")
    return p


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)

    if args.facts is None:
        facts = EXAMPLE_FACTS
    else:
        print(f"Reading facts from: {args.facts}", file=sys.stderr)
        try:
            facts = parse_facts_file(args.facts)
        except (OSError, ValueError) as e:
            print(f"error: {args.facts}: {e}", file=sys.stderr)
            return EXIT_INVALID

    try:
        G = build_constraint_graph(facts.n, facts.died_before, facts.overlapped)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID

    order = resolve_order(G)
    if order is None:
        print("inconsistent dates!")
        return EXIT_INCONSISTENT

    dates = project_dates(G, order)
    for violation in check_dates(dates, facts.died_before, facts.overlapped):
        print(f"warning: {violation}", file=sys.stderr)

    for i in range(1, facts.n + 1):
        print(f"birth {i} = {dates.birth[i - 1]}, death {i} = {dates.death[i - 1]}")

    if args.graph:
        plot_constraint_graph(G, args.graph, dates)
    if args.timeline:
        plot_timeline(dates, args.timeline)

    return EXIT_CONSISTENT


if __name__ == "__main__":
    sys.exit(main())
