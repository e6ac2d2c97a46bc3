"""Protocol-based interfaces for Honeycomb callbacks.

This module exports the callback protocols accepted by the pathfinding
functions, providing a clear contract for caller-supplied predicates, cost
functions and heuristics.
"""

from honeycomb.interfaces.pathfinding import Heuristic, MovementCost, PassabilityPredicate

__all__ = [
    "Heuristic",
    "MovementCost",
    "PassabilityPredicate",
]
