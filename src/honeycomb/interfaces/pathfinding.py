"""Pathfinding Callback Protocol Interfaces.

This module defines the protocols for the caller-supplied functions that
parameterize the pathfinding layer. Any plain function, lambda, closure or
object with a matching ``__call__`` satisfies them.
"""

from typing import Protocol, TypeVar

from honeycomb.utils.hex_math import HexCoord

V_contra = TypeVar("V_contra", contravariant=True)


class PassabilityPredicate(Protocol[V_contra]):
    """Decides whether movement into a cell is permitted.

    Used by breadth-first search. Receives the attribute value of the cell
    being entered.
    """

    def __call__(self, value: V_contra, /) -> bool:
        """Return True if a cell holding ``value`` may be entered."""
        ...


class MovementCost(Protocol[V_contra]):
    """Cost of moving between two adjacent cells.

    Used by A* search. Must return a non-negative number; negative costs are a
    contract violation and are not detected.
    """

    def __call__(self, current: V_contra, neighbor: V_contra, /) -> float:
        """Return the cost of moving from a cell holding ``current`` into a
        cell holding ``neighbor``."""
        ...


class Heuristic(Protocol):
    """Estimate of the remaining cost from a cell to the goal.

    Must be non-negative. A* only guarantees the cheapest path when the
    estimate never exceeds the true remaining cost.
    """

    def __call__(self, cell: HexCoord, goal: HexCoord, /) -> float:
        """Return the estimated cost from ``cell`` to ``goal``."""
        ...
