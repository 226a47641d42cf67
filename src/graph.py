"""NetworkX constraint graph building over birth and death events."""

import networkx as nx

from models import BIRTH, DEATH, Event
from validation import validate_facts

# Edge reasons
LIFESPAN = "LIFESPAN"
DIED_BEFORE = "DIED_BEFORE"
OVERLAPPED = "OVERLAPPED"


def birth_node(i: int, n: int) -> int:
    """Node id of Birth(i). Births occupy ids 0..n-1."""
    return i - 1


def death_node(i: int, n: int) -> int:
    """Node id of Death(i). Deaths occupy ids n..2n-1."""
    return n + i - 1


def build_constraint_graph(n: int, fact_form1, fact_form2) -> nx.MultiDiGraph:
    """
    Build the constraint graph whose edges say "source happens before target".

    Every person i contributes two nodes, Birth(i) and Death(i), labelled with
    `event` and `person` attributes. Edges:
    - Birth(i) -> Death(i) for every person
    - Death(a) -> Birth(b) for every died-before fact (a, b)
    - Birth(a) -> Death(b) and Birth(b) -> Death(a) for every overlap fact (a, b)

    Args:
        n: Number of people
        fact_form1: (a, b) pairs meaning a died before b was born
        fact_form2: (a, b) pairs meaning the lives of a and b overlapped

    Returns:
        A MultiDiGraph with 2n nodes and n + |fact_form1| + 2 * |fact_form2| edges
        (duplicate facts keep their own edges); the facts are consistent iff it is acyclic

    Raises:
        ValueError: if n is negative or a fact refers to a person outside 1..n
    """
    problems = validate_facts(n, fact_form1, fact_form2)
    if problems:
        raise ValueError("; ".join(problems))

    G = nx.MultiDiGraph()

    # Births first, then deaths, so ids match birth_node/death_node
    for i in range(1, n + 1):
        G.add_node(birth_node(i, n), event=BIRTH, person=i)
    for i in range(1, n + 1):
        G.add_node(death_node(i, n), event=DEATH, person=i)

    # Everyone is born before they die
    for i in range(1, n + 1):
        G.add_edge(birth_node(i, n), death_node(i, n), reason=LIFESPAN)

    for a, b in fact_form1:
        G.add_edge(death_node(a, n), birth_node(b, n), reason=DIED_BEFORE)

    # Each must be born before the other dies
    for a, b in fact_form2:
        G.add_edge(birth_node(a, n), death_node(b, n), reason=OVERLAPPED)
        G.add_edge(birth_node(b, n), death_node(a, n), reason=OVERLAPPED)

    return G


def node_event(G: nx.MultiDiGraph, node: int) -> Event:
    """Read the Birth/Death label back off a constraint graph node."""
    data = G.nodes[node]
    return Event(kind=data["event"], person=data["person"])
