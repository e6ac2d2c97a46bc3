"""Pathfinding and route calculation over a hex grid.

This module implements two stateless queries over a :class:`HexGrid` and a
caller-owned mapping of per-cell attributes:

* :func:`shortest_path` - breadth-first search for the fewest-edges route
  under a passability predicate.
* :func:`cheapest_path` - A* search for the lowest-cost route under a
  movement cost function and a heuristic.

Neither function mutates the grid or the attributes. A missing attribute
entry means "no data" and the cell cannot be moved through. When no route
exists both functions return None; that is a normal outcome, not an error.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Mapping, Sequence
from heapq import heappop, heappush
from itertools import count, pairwise
from typing import TypeVar

from honeycomb.domain.grid import HexGrid
from honeycomb.interfaces.pathfinding import Heuristic, MovementCost, PassabilityPredicate
from honeycomb.utils.hex_math import HexCoord, hex_distance

logger = logging.getLogger(__name__)

V = TypeVar("V")

CellAttributes = Mapping[HexCoord, V]


def reconstruct_path(
    came_from: Mapping[HexCoord, HexCoord | None], start: HexCoord, goal: HexCoord
) -> list[HexCoord]:
    """Walk the predecessor map back from ``goal`` and return start-to-goal order.

    Args:
        came_from: Map from each discovered cell to the cell that discovered it
        start: First cell of the path
        goal: Last cell of the path; must be reachable through ``came_from``

    Returns:
        List of cells, index 0 = start, last = goal

    Raises:
        KeyError: If a cell on the chain has no entry in ``came_from``
        ValueError: If the chain ends at a cell other than ``start``
    """
    path = [goal]
    current = goal
    while current != start:
        previous = came_from[current]
        if previous is None:
            msg = f"Predecessor chain from {goal} ends at {current} before reaching {start}"
            raise ValueError(msg)
        path.append(previous)
        current = previous

    path.reverse()
    return path


def shortest_path(
    grid: HexGrid,
    attributes: CellAttributes[V],
    start: HexCoord,
    goal: HexCoord,
    passable: PassabilityPredicate[V],
) -> list[HexCoord] | None:
    """Find the fewest-edges path between two cells using breadth-first search.

    Movement into a cell is allowed only when the cell has an attribute entry
    and ``passable`` returns True for its value. The start cell is never
    checked. The goal is recognised while scanning a cell's neighbours,
    before any passability check, so a goal standing on an obstacle can still
    be reached.

    Neighbours are explored in the fixed direction order, so the result is
    deterministic.

    Args:
        grid: Grid bounding the search
        attributes: Per-cell values consulted by ``passable``
        start: Starting cell
        goal: Destination cell
        passable: Predicate applied to the value of each cell being entered

    Returns:
        Path from start to goal (both inclusive), or None if no path exists
    """
    if start == goal:
        return [start]

    frontier: deque[HexCoord] = deque([start])
    came_from: dict[HexCoord, HexCoord | None] = {start: None}
    expansions = 0

    while frontier:
        current = frontier.popleft()
        expansions += 1

        for neighbor in grid.neighbors_of(current):
            if neighbor == goal:
                came_from[goal] = current
                path = reconstruct_path(came_from, start, goal)
                logger.debug(
                    "shortest_path %s -> %s: %d cells after %d expansions",
                    start,
                    goal,
                    len(path),
                    expansions,
                )
                return path

            if neighbor in came_from:
                continue
            if neighbor not in attributes or not passable(attributes[neighbor]):
                continue

            came_from[neighbor] = current
            frontier.append(neighbor)

    logger.debug(
        "shortest_path %s -> %s: no path after %d expansions", start, goal, expansions
    )
    return None


def cheapest_path(
    grid: HexGrid,
    attributes: CellAttributes[V],
    start: HexCoord,
    goal: HexCoord,
    cost: MovementCost[V],
    heuristic: Heuristic = hex_distance,
) -> list[HexCoord] | None:
    """Find the lowest-cost path between two cells using A*.

    An edge can be crossed only when both of its cells have attribute entries;
    its cost is ``cost(attributes[current], attributes[neighbor])``. Entering
    the goal is charged like any other edge.

    The frontier is ordered by ``g + h`` where ``g`` is the best known cost
    from the start and ``h`` is ``heuristic(cell, goal)``. A cell is relaxed
    again whenever a strictly cheaper route to it turns up, even after it has
    been expanded; outdated frontier entries are skipped when popped.

    The result is only guaranteed to be the cheapest when ``heuristic`` never
    overestimates the remaining cost and ``cost`` is never negative. Neither
    is checked. With an overestimating heuristic the returned path is still
    contiguous and loop-free, but may cost more than necessary.

    Args:
        grid: Grid bounding the search
        attributes: Per-cell values passed to ``cost``
        start: Starting cell
        goal: Destination cell
        cost: Cost of moving between two adjacent cells given their values
        heuristic: Estimate of the remaining cost (defaults to hex distance)

    Returns:
        Path from start to goal (both inclusive), or None if no path exists
    """
    if start == goal:
        return [start]

    # Entries are (priority, insertion order, cost from start, cell)
    tiebreak = count()
    frontier: list[tuple[float, int, float, HexCoord]] = []
    heappush(frontier, (heuristic(start, goal), next(tiebreak), 0, start))

    came_from: dict[HexCoord, HexCoord | None] = {start: None}
    cost_so_far: dict[HexCoord, float] = {start: 0}
    expansions = 0

    while frontier:
        _, _, current_cost, current = heappop(frontier)

        if current_cost > cost_so_far[current]:
            continue

        if current == goal:
            path = reconstruct_path(came_from, start, goal)
            logger.debug(
                "cheapest_path %s -> %s: %d cells, cost %s after %d expansions",
                start,
                goal,
                len(path),
                current_cost,
                expansions,
            )
            return path

        if current not in attributes:
            continue

        expansions += 1
        current_value = attributes[current]

        for neighbor in grid.neighbors_of(current):
            if neighbor not in attributes:
                continue

            new_cost = current_cost + cost(current_value, attributes[neighbor])
            if neighbor not in cost_so_far or new_cost < cost_so_far[neighbor]:
                cost_so_far[neighbor] = new_cost
                came_from[neighbor] = current
                priority = new_cost + heuristic(neighbor, goal)
                heappush(frontier, (priority, next(tiebreak), new_cost, neighbor))

    logger.debug(
        "cheapest_path %s -> %s: no path after %d expansions", start, goal, expansions
    )
    return None


def path_cost(
    path: Sequence[HexCoord], attributes: CellAttributes[V], cost: MovementCost[V]
) -> float:
    """Calculate the total cost of walking a path.

    Args:
        path: Consecutive cells, start first
        attributes: Per-cell values passed to ``cost``
        cost: Cost of moving between two adjacent cells given their values

    Returns:
        Sum of the edge costs; 0 for a path of fewer than two cells

    Raises:
        KeyError: If the path crosses a cell without an attribute entry
    """
    total: float = 0
    for current, neighbor in pairwise(path):
        total += cost(attributes[current], attributes[neighbor])
    return total
