# tests/conftest.py
from __future__ import annotations

from typing import Dict, List, Set, Tuple

import pytest

from astar_engine.core.generator import PathGenerator
from astar_engine.structures.grid import GridMap


class RecordingStructure(PathGenerator):
    """Wraps a structure and remembers every neighbour pair it produced."""

    def __init__(self, inner: PathGenerator) -> None:
        self.inner = inner
        self.expanded: List[Tuple[int, int]] = []
        self.edges: Set[Tuple[Tuple[int, int], Tuple[int, int]]] = set()

    def generate_paths(self, position):
        self.expanded.append(tuple(position))
        paths = list(self.inner.generate_paths(position))
        for p in paths:
            self.edges.add((tuple(position), tuple(p)))
        return paths

    def calculate_cost(self, from_position, to_position):
        return self.inner.calculate_cost(from_position, to_position)

    def calculate_heuristic_cost(self, position, goal):
        return self.inner.calculate_heuristic_cost(position, goal)


class DeadEnd(PathGenerator):
    """Structure where nothing is reachable from anywhere."""

    def __init__(self) -> None:
        self.calls = 0

    def generate_paths(self, position):
        self.calls += 1
        return set()

    def calculate_cost(self, from_position, to_position):
        return 1

    def calculate_heuristic_cost(self, position, goal):
        return 0


class DictGraph:
    """Duck-typed structure over an explicit weighted adjacency map."""

    def __init__(self, edges: Dict[Tuple[int, int], Dict[Tuple[int, int], int]]) -> None:
        self.edges = edges

    def generate_paths(self, position):
        return list(self.edges.get(tuple(position), {}))

    def calculate_cost(self, from_position, to_position):
        return self.edges[tuple(from_position)][tuple(to_position)]

    def calculate_heuristic_cost(self, position, goal):
        return 0


@pytest.fixture
def open_grid() -> GridMap:
    return GridMap(3, 3)


@pytest.fixture
def recording():
    return RecordingStructure


@pytest.fixture
def dead_end() -> DeadEnd:
    return DeadEnd()


@pytest.fixture
def dict_graph():
    return DictGraph
