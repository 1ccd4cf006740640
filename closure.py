from loguru import logger

from edges import EdgeList
from errors import AllocationError


def close(edges: EdgeList) -> EdgeList:
    """
    Grow edges in place into its transitive closure and return it.

    Each pass composes every pair of edges present when the pass started: (u, v) and (v, w)
    give (u, w). Compositions that would produce a self-loop (u == w) are skipped, and a pair
    already anywhere in the list is never added twice. Passes repeat until one adds nothing.
    """
    passes = 0
    changed = True
    while changed:
        changed = False
        passes += 1
        snapshot = edges.snapshot()
        for first in snapshot:
            u, v = first
            for second in snapshot:
                y, w = second
                if v != y or u == w or first == second:
                    continue
                try:
                    added = edges.add(u, w)
                except MemoryError as e:
                    raise AllocationError(
                        f"Unable to grow the closure beyond {len(edges)} edges"
                    ) from e
                if added:
                    changed = True
        logger.debug(f"Closure pass {passes}: {len(snapshot)} -> {len(edges)} edges")

    logger.debug(f"Closure reached a fixed point after {passes} passes with {len(edges)} edges")
    return edges


def is_closed(edges: EdgeList) -> bool:
    """True if no composition of two edges yields a new (non self-loop) pair."""
    for u, v in edges:
        for w in edges.successors(v):
            if u != w and (u, w) not in edges:
                return False
    return True
