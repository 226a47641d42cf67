"""Tests for constraint graph and timeline rendering."""

from __future__ import annotations

from pathlib import Path

from graph import build_constraint_graph
from models import FactSet, ProposedDates
from plotting import build_constraint_dot, plot_constraint_graph, plot_timeline
from timeline import proposed_dates


class TestBuildConstraintDot:
    def test_nodes_and_edges(self, example_facts: FactSet) -> None:
        G = build_constraint_graph(
            example_facts.n, example_facts.died_before, example_facts.overlapped
        )
        P = build_constraint_dot(G)
        assert len(P.get_nodes()) == G.number_of_nodes()
        assert len(P.get_edges()) == G.number_of_edges()

        dot = P.to_string()
        assert "B(1)" in dot
        assert "D(6)" in dot
        assert "firebrick" in dot  # died-before edges
        assert "dashed" in dot  # overlap edges

    def test_labels_carry_dates(self) -> None:
        G = build_constraint_graph(1, [], [])
        P = build_constraint_dot(G, ProposedDates(birth=[1], death=[2]))
        labels = {
            str(node.get_name()).strip('"'): str(node.get("label")).strip('"')
            for node in P.get_nodes()
        }
        # Node 0 is Birth(1), node 1 is Death(1)
        assert labels["0"].startswith("B(1)")
        assert labels["0"].endswith("1")
        assert labels["1"].startswith("D(1)")
        assert labels["1"].endswith("2")

    def test_empty_graph(self) -> None:
        P = build_constraint_dot(build_constraint_graph(0, [], []))
        assert P.get_nodes() == []
        assert P.get_edges() == []

    def test_repeated_facts_get_one_arrow_each(self) -> None:
        G = build_constraint_graph(2, [(1, 2), (1, 2)], [])
        P = build_constraint_dot(G)
        assert len(P.get_edges()) == 4


class TestPlotConstraintGraph:
    def test_writes_dot_source(self, tmp_path: Path, example_facts: FactSet) -> None:
        G = build_constraint_graph(
            example_facts.n, example_facts.died_before, example_facts.overlapped
        )
        output = tmp_path / "constraints.dot"
        plot_constraint_graph(G, output)
        source = output.read_text()
        assert source.lstrip().startswith("digraph")
        assert "B(1)" in source
        assert "D(6)" in source


class TestPlotTimeline:
    def test_writes_image(self, tmp_path: Path, example_facts: FactSet) -> None:
        dates = proposed_dates(
            example_facts.died_before, example_facts.overlapped, example_facts.n
        )
        output = tmp_path / "timeline.png"
        plot_timeline(dates, output)
        assert output.exists()
        assert output.stat().st_size > 0
