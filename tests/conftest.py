"""Pytest fixtures for flight ranking and route query tests."""

import pytest
import sys
from pathlib import Path

# Add parent to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from models import FlightRecord, RouteGraph
from data.catalog import FlightCatalog
from data.generators.sample_network import generate_sample_flights


@pytest.fixture
def simple_flights():
    """Four flights with distinct values for every sort key."""
    return [
        FlightRecord("MU505", "Shanghai", "Tokyo", 2500, 180, 0.88),
        FlightRecord("CA101", "Beijing", "Shanghai", 1200, 130, 0.95),
        FlightRecord("JL789", "Tokyo", "NewYork", 8000, 720, 0.92),
        FlightRecord("BA202", "London", "Paris", 800, 90, 0.90),
    ]


@pytest.fixture
def triangle_graph():
    """A->B 100, B->C 50, A->C 200."""
    graph = RouteGraph()
    graph.add_route("A", "B", 100)
    graph.add_route("B", "C", 50)
    graph.add_route("A", "C", 200)
    return graph


@pytest.fixture
def sample_flights():
    """Full sample flight instance."""
    return generate_sample_flights()


@pytest.fixture
def sample_catalog(sample_flights):
    """Catalog loaded with the sample instance."""
    catalog = FlightCatalog()
    catalog.load(sample_flights)
    return catalog
