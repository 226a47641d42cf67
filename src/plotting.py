"""Visualization functions for constraint graphs and proposed lifespans."""

from pathlib import Path

import networkx as nx
import pydot

from graph import DIED_BEFORE, LIFESPAN, OVERLAPPED, node_event
from models import BIRTH, ProposedDates

EDGE_STYLES = {
    LIFESPAN: {"color": "black", "penwidth": "2"},
    DIED_BEFORE: {"color": "firebrick"},
    OVERLAPPED: {"color": "darkgreen", "style": "dashed"},
}


def build_constraint_dot(
    G: nx.MultiDiGraph, dates: ProposedDates | None = None
) -> pydot.Dot:
    """
    Build a Graphviz digraph of the constraint graph.

    Births are drawn as light blue boxes, deaths as gray boxes. Edges are
    colored by the kind of fact that produced them. If dates are given, each
    event is labelled with its proposed date.
    """
    P = pydot.Dot(graph_type="digraph")
    P.set("rankdir", "LR")  # Earlier events on the left
    P.set("nodesep", "0.3")
    P.set("ranksep", "0.5")

    for node in G.nodes():
        event = node_event(G, node)
        prefix = "B" if event.kind == BIRTH else "D"
        label = f"{prefix}({event.person})"

        if dates is not None:
            slots = dates.birth if event.kind == BIRTH else dates.death
            label += f"\n{slots[event.person - 1]}"

        P.add_node(
            pydot.Node(
                str(node),
                label=label,
                shape="box",
                style="rounded,filled",
                fillcolor="lightblue" if event.kind == BIRTH else "lightgray",
                fontsize="10",
            )
        )

    # One arrow per edge, repeated facts included
    for u, v, _, data in G.edges(keys=True, data=True):
        style = EDGE_STYLES.get(data.get("reason"), {})
        P.add_edge(pydot.Edge(str(u), str(v), **style))

    return P


def plot_constraint_graph(
    G: nx.MultiDiGraph, output_path: Path, dates: ProposedDates | None = None
):
    """
    Render the constraint graph to a png, svg or pdf file (by extension).
    A .dot path writes the Graphviz source without invoking Graphviz.
    """
    P = build_constraint_dot(G, dates)

    ext = output_path.suffix.lower().lstrip(".")
    if ext == "dot":
        ext = "raw"
    elif ext not in ("png", "svg", "pdf"):
        ext = "png"

    P.write(str(output_path), format=ext)
    print(f"Constraint graph saved to {output_path}")


def plot_timeline(dates: ProposedDates, output_path: Path | None = None):
    """
    Plot each person's proposed lifespan as a horizontal bar on the date axis.

    Args:
        dates: Proposed birth and death dates
        output_path: Path to save the figure. If None, displays interactively.
    """
    import matplotlib.pyplot as plt

    n = len(dates.birth)
    fig, ax = plt.subplots(figsize=(10, max(2, 0.5 * n + 1)))

    people = list(range(1, n + 1))
    ax.barh(
        people,
        [d - b for b, d in zip(dates.birth, dates.death)],
        left=dates.birth,
        color="lightblue",
        edgecolor="gray",
    )

    ax.set_yticks(people)
    ax.set_yticklabels([f"Person {i}" for i in people])
    ax.invert_yaxis()  # Person 1 at top
    ax.set_xlim(0, 2 * n + 1)
    ax.set_xlabel("Proposed date")
    ax.set_title(f"Proposed lifespans ({n} people)")
    fig.tight_layout()

    if output_path:
        fig.savefig(output_path, dpi=150, bbox_inches="tight")
        plt.close(fig)
        print(f"Timeline saved to {output_path}")
    else:
        plt.show()
