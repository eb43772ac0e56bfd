"""Unit tests for the route graph and route queries."""

import math
import random

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from models import CityCapacityError, RouteGraph, UnknownCityError
from routing import cheapest_path, enumerate_simple_paths


def random_graph(seed, num_cities=6, density=0.4):
    """Random graph with integer prices so path costs compare exactly."""
    rng = random.Random(seed)
    graph = RouteGraph()
    names = [f"C{i}" for i in range(num_cities)]
    for name in names:
        graph.register_city(name)
    for a in names:
        for b in names:
            if a != b and rng.random() < density:
                graph.add_route(a, b, rng.randint(1, 20) * 10)
    return graph, names


class TestRouteGraph:
    """Tests for graph construction."""

    def test_register_city_is_idempotent(self):
        graph = RouteGraph()
        assert graph.register_city("Beijing") == 0
        assert graph.register_city("Tokyo") == 1
        assert graph.register_city("Beijing") == 0
        assert graph.num_cities == 2
        assert graph.cities == ["Beijing", "Tokyo"]

    def test_lookup_city(self, triangle_graph):
        assert triangle_graph.lookup_city("C") == 2
        assert triangle_graph.lookup_city("Z") is None
        assert "A" in triangle_graph
        assert "Z" not in triangle_graph

    def test_add_route_registers_cities_in_order(self, triangle_graph):
        assert triangle_graph.cities == ["A", "B", "C"]
        assert triangle_graph.num_routes == 3

    def test_cheapest_price_kept(self):
        graph = RouteGraph()
        graph.add_route("A", "B", 300)
        graph.add_route("A", "B", 100)
        graph.add_route("A", "B", 200)
        assert graph.weight("A", "B") == 100
        assert graph.num_routes == 1

    def test_weights(self, triangle_graph):
        """Test self weight is zero and missing arcs are infinite."""
        assert triangle_graph.weight("A", "A") == 0
        assert triangle_graph.weight("C", "A") == math.inf
        assert triangle_graph.weight("A", "C") == 200

    def test_self_route_only_registers_city(self):
        graph = RouteGraph()
        graph.add_route("A", "A", 50)
        assert graph.cities == ["A"]
        assert graph.num_routes == 0
        assert graph.weight("A", "A") == 0

    def test_negative_price_rejected(self):
        with pytest.raises(ValueError):
            RouteGraph().add_route("A", "B", -5)

    def test_successors_in_index_order(self):
        graph = RouteGraph()
        for name in ["A", "B", "C", "D"]:
            graph.register_city(name)
        graph.add_route("A", "D", 1)
        graph.add_route("A", "B", 2)
        graph.add_route("A", "C", 3)
        assert graph.get_successors(0) == [(1, 2), (2, 3), (3, 1)]

    def test_capacity_enforced(self):
        graph = RouteGraph(max_cities=2)
        graph.register_city("A")
        graph.register_city("B")
        with pytest.raises(CityCapacityError) as exc_info:
            graph.register_city("C")
        assert exc_info.value.capacity == 2
        # Known cities still resolve at full capacity
        assert graph.register_city("A") == 0

    def test_failed_route_leaves_graph_unchanged(self):
        graph = RouteGraph(max_cities=2)
        graph.add_route("A", "B", 10)
        with pytest.raises(CityCapacityError):
            graph.add_route("C", "D", 10)
        assert graph.cities == ["A", "B"]

        graph = RouteGraph(max_cities=3)
        graph.add_route("A", "B", 10)
        with pytest.raises(CityCapacityError):
            graph.add_route("C", "D", 10)
        assert graph.num_cities == 2

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            RouteGraph(max_cities=0)

    def test_add_flights(self, sample_flights):
        graph = RouteGraph()
        graph.add_flights(sample_flights)
        assert graph.num_cities == 14
        assert graph.num_routes == 16


class TestCheapestPath:
    """Tests for the Dijkstra search."""

    def test_two_leg_beats_direct(self, triangle_graph):
        result = triangle_graph.cheapest_path("A", "C")
        assert result.reachable
        assert result.total_cost == 150
        assert result.path == ["A", "B", "C"]

    def test_directed_edges(self, triangle_graph):
        result = triangle_graph.cheapest_path("C", "A")
        assert not result.reachable
        assert result.path == []
        assert result.total_cost is None

    def test_same_city(self, triangle_graph):
        result = triangle_graph.cheapest_path("B", "B")
        assert result.reachable
        assert result.total_cost == 0
        assert result.path == ["B"]

    @pytest.mark.parametrize("start,end", [("A", "Z"), ("Z", "A")])
    def test_unknown_city(self, triangle_graph, start, end):
        with pytest.raises(UnknownCityError) as exc_info:
            triangle_graph.cheapest_path(start, end)
        assert exc_info.value.city == "Z"

    def test_ties_go_to_earliest_city(self):
        """Test equal-cost paths resolve through the lowest city index."""
        graph = RouteGraph()
        graph.add_route("A", "B", 1)
        graph.add_route("A", "C", 1)
        graph.add_route("B", "D", 1)
        graph.add_route("C", "D", 1)
        assert graph.cheapest_path("A", "D").path == ["A", "B", "D"]

        graph = RouteGraph()
        graph.add_route("A", "C", 1)
        graph.add_route("A", "B", 1)
        graph.add_route("B", "D", 1)
        graph.add_route("C", "D", 1)
        assert graph.cheapest_path("A", "D").path == ["A", "C", "D"]

    def test_stops_when_nothing_reachable(self):
        graph = RouteGraph()
        graph.add_route("A", "B", 5)
        graph.add_route("C", "D", 5)
        result = cheapest_path(graph, "A", "D")
        assert not result.reachable
        assert result.cities_settled == 2

    def test_zero_price_route(self):
        graph = RouteGraph()
        graph.add_route("A", "B", 0)
        graph.add_route("B", "C", 0)
        result = graph.cheapest_path("A", "C")
        assert result.total_cost == 0
        assert result.path == ["A", "B", "C"]

    def test_sample_direct_flight_wins(self, sample_catalog):
        result = sample_catalog.routes.cheapest_path("Beijing", "Tokyo")
        assert result.total_cost == 2800
        assert result.path == ["Beijing", "Tokyo"]

    def test_sample_long_route(self, sample_catalog):
        result = sample_catalog.routes.cheapest_path("Tokyo", "Beijing")
        assert result.total_cost == 18400
        assert result.path == [
            "Tokyo", "NewYork", "London", "Paris", "Berlin", "Moscow", "Beijing"
        ]


class TestSimplePaths:
    """Tests for the backtracking enumeration."""

    def test_triangle(self, triangle_graph):
        paths = list(triangle_graph.enumerate_all_simple_paths("A", "C"))
        assert [(p.path, p.total_cost) for p in paths] == [
            (["A", "B", "C"], 150),
            (["A", "C"], 200),
        ]

    def test_unreachable_is_empty(self, triangle_graph):
        assert list(triangle_graph.enumerate_all_simple_paths("C", "A")) == []

    def test_unknown_city_raised_eagerly(self, triangle_graph):
        """Test unknown cities fail on the call, before iteration starts."""
        with pytest.raises(UnknownCityError):
            triangle_graph.enumerate_all_simple_paths("A", "Z")

    def test_same_city(self, triangle_graph):
        paths = list(enumerate_simple_paths(triangle_graph, "A", "A"))
        assert len(paths) == 1
        assert paths[0].path == ["A"]
        assert paths[0].total_cost == 0

    def test_cycles_not_repeated(self):
        graph = RouteGraph()
        graph.add_route("A", "B", 1)
        graph.add_route("B", "A", 1)
        graph.add_route("B", "C", 1)
        graph.add_route("C", "B", 1)
        paths = list(graph.enumerate_all_simple_paths("A", "C"))
        assert [p.path for p in paths] == [["A", "B", "C"]]

    def test_sibling_branches_can_revisit(self):
        """Test a city used in one branch is available again in the next."""
        graph = RouteGraph()
        graph.add_route("A", "B", 1)
        graph.add_route("A", "C", 1)
        graph.add_route("B", "C", 1)
        graph.add_route("C", "B", 1)
        graph.add_route("B", "D", 1)
        graph.add_route("C", "D", 1)
        paths = [p.path for p in graph.enumerate_all_simple_paths("A", "D")]
        assert paths == [
            ["A", "B", "C", "D"],
            ["A", "B", "D"],
            ["A", "C", "B", "D"],
            ["A", "C", "D"],
        ]

    def test_lazy(self, triangle_graph):
        paths = triangle_graph.enumerate_all_simple_paths("A", "C")
        first = next(paths)
        assert first.path == ["A", "B", "C"]

    def test_fresh_state_per_call(self, triangle_graph):
        """Test an abandoned enumeration does not affect the next one."""
        abandoned = triangle_graph.enumerate_all_simple_paths("A", "C")
        next(abandoned)
        assert len(list(triangle_graph.enumerate_all_simple_paths("A", "C"))) == 2
        assert len(list(abandoned)) == 1

    def test_complete_graph_count(self):
        """Test the number of simple paths in a complete graph."""
        graph = RouteGraph()
        names = ["A", "B", "C", "D", "E"]
        for a in names:
            for b in names:
                if a != b:
                    graph.add_route(a, b, 1)
        # Sum over k intermediate cities of 3!/(3-k)!
        assert len(list(graph.enumerate_all_simple_paths("A", "E"))) == 1 + 3 + 6 + 6

    def test_sample_paths(self, sample_catalog):
        paths = list(sample_catalog.routes.enumerate_all_simple_paths("Beijing", "Tokyo"))
        assert [(p.path, p.total_cost) for p in paths] == [
            (["Beijing", "Shanghai", "Tokyo"], 3700),
            (["Beijing", "Tokyo"], 2800),
        ]


class TestQueryConsistency:
    """Cross-checks between the two route queries."""

    @pytest.mark.parametrize("seed", range(15))
    def test_cheapest_is_minimum_simple_path(self, seed):
        graph, names = random_graph(seed)
        for start in names:
            for end in names:
                result = graph.cheapest_path(start, end)
                costs = [p.total_cost for p in graph.enumerate_all_simple_paths(start, end)]

                assert result.reachable == bool(costs)
                if result.reachable:
                    assert result.total_cost == min(costs)
                    assert result.path[0] == start
                    assert result.path[-1] == end

    @pytest.mark.parametrize("seed", range(5))
    def test_cheapest_path_cost_matches_weights(self, seed):
        graph, names = random_graph(seed, num_cities=8, density=0.3)
        result = graph.cheapest_path(names[0], names[-1])
        if result.reachable:
            legs = zip(result.path, result.path[1:])
            assert sum(graph.weight(a, b) for a, b in legs) == result.total_cost
