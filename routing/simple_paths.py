"""Exhaustive simple-path enumeration over the route graph."""

from typing import Iterator, List, Set, Tuple, TYPE_CHECKING

from models.route import SimplePath

if TYPE_CHECKING:
    from models.network import RouteGraph


def enumerate_simple_paths(
    graph: 'RouteGraph',
    start: str,
    end: str
) -> Iterator[SimplePath]:
    """
    Enumerate every simple path from start to end.

    City names are validated immediately; the traversal itself is lazy.
    Paths come out in depth-first order, exploring successors by city
    index. Worst case is exponential in the number of cities.

    Raises:
        UnknownCityError: If start or end was never registered
    """
    source = graph.require_city(start)
    target = graph.require_city(end)
    return _backtrack(graph, source, target)


def _backtrack(graph: 'RouteGraph', source: int, target: int) -> Iterator[SimplePath]:
    """
    Depth-first backtracking with an explicit stack.

    Each stack frame is an iterator over the successors of the city on
    top of the path. Visited state is local to this generator.
    """
    names = graph.cities

    if source == target:
        yield SimplePath(path=[names[source]], total_cost=0.0)
        return

    path: List[int] = [source]
    costs: List[float] = [0.0]
    visited: Set[int] = {source}
    stack: List[Iterator[Tuple[int, float]]] = [iter(graph.get_successors(source))]

    while stack:
        for v, weight in stack[-1]:
            if v in visited:
                continue

            cost = costs[-1] + weight
            if v == target:
                yield SimplePath(
                    path=[names[i] for i in path] + [names[v]],
                    total_cost=cost
                )
                continue

            visited.add(v)
            path.append(v)
            costs.append(cost)
            stack.append(iter(graph.get_successors(v)))
            break
        else:
            # Successors exhausted: backtrack
            stack.pop()
            visited.discard(path.pop())
            costs.pop()
