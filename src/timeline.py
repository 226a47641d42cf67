"""Consistency resolution: topological order of events and projected dates."""

import networkx as nx

from graph import build_constraint_graph, node_event
from models import BIRTH, ProposedDates


def resolve_order(G: nx.MultiDiGraph) -> list[int] | None:
    """
    Compute a topological order of every event in the constraint graph.

    Returns None if the graph contains a cycle, i.e. the facts contradict
    each other. No partial order is returned in that case.
    """
    try:
        return list(nx.topological_sort(G))
    except nx.NetworkXUnfeasible:
        return None


def is_consistent(G: nx.MultiDiGraph) -> bool:
    return nx.is_directed_acyclic_graph(G)


def project_dates(G: nx.MultiDiGraph, order: list[int]) -> ProposedDates:
    """
    Map a topological order back onto per-person birth and death dates.
    The event at 0-based position p gets date p + 1.
    """
    n = G.number_of_nodes() // 2
    births = [0] * n
    deaths = [0] * n

    for position, node in enumerate(order):
        event = node_event(G, node)
        if event.kind == BIRTH:
            births[event.person - 1] = position + 1
        else:
            deaths[event.person - 1] = position + 1

    return ProposedDates(birth=births, death=deaths)


def proposed_dates(fact_form1, fact_form2, n: int) -> ProposedDates | None:
    """
    Produce birth and death dates for n people such that every fact holds.

    Args:
        fact_form1: (a, b) pairs meaning person a died before person b was born
        fact_form2: (a, b) pairs meaning the lives of a and b overlapped
        n: Number of people, indexed 1..n

    Returns:
        ProposedDates if the facts are consistent, otherwise None

    Raises:
        ValueError: if n is negative or a fact refers to a person outside 1..n
    """
    G = build_constraint_graph(n, fact_form1, fact_form2)

    order = resolve_order(G)
    if order is None:
        return None

    return project_dates(G, order)


def check_dates(dates: ProposedDates, fact_form1, fact_form2) -> list[str]:
    """
    Check proposed dates against the facts they were derived from.

    Returns a list of violation messages (empty when the dates satisfy every
    fact, every person is born before dying, and the dates are exactly 1..2n).
    """
    birth, death = dates.birth, dates.death
    violations: list[str] = []

    if len(birth) != len(death):
        violations.append(f"Mismatched lengths: {len(birth)} births, {len(death)} deaths")
        return violations

    for i, (b, d) in enumerate(zip(birth, death), start=1):
        if not b < d:
            violations.append(f"Person {i} dies ({d}) before being born ({b})")

    for a, b in fact_form1:
        if not death[a - 1] < birth[b - 1]:
            violations.append(f"Person {a} does not die before person {b} is born")

    for a, b in fact_form2:
        if not (birth[a - 1] < death[b - 1] and birth[b - 1] < death[a - 1]):
            violations.append(f"Lives of persons {a} and {b} do not overlap")

    if sorted(birth + death) != list(range(1, 2 * len(birth) + 1)):
        violations.append(f"Dates are not a permutation of 1..{2 * len(birth)}")

    return violations
