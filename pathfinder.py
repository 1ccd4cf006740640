from typing import List, Optional

from loguru import logger

from edges import EdgeList, Path
from errors import DeadEndError


def is_reachable(closure: EdgeList, start: int, target: int) -> bool:
    return (start, target) in closure


def find_path(closure: EdgeList, base_edges: EdgeList, start: int, target: int) -> Optional[Path]:
    """
    Find one route from start to target.

    The closure only answers whether target is reachable at all. The route itself is walked
    over the base (direct) edges: from the last node of the route so far, the first base edge
    whose destination is not on the route yet is taken. There is no backtracking.

    :return: the Path, or None when the closure has no (start, target) edge
    :raises DeadEndError: the walk got stuck before reaching target
    """
    if not is_reachable(closure, start, target):
        logger.debug(f"No edge {start} -> {target} in the closure")
        return None

    # A direct self-loop is the only way (start, start) gets into the closure
    if start == target:
        return Path([start])

    route: List[int] = [start]
    visited = {start}
    while route[-1] != target:
        current = route[-1]
        step = next((node for node in base_edges.successors(current) if node not in visited), None)
        if step is None:
            logger.warning(f"Greedy walk from {start} to {target} stuck at {current}")
            raise DeadEndError(start, target, route)
        route.append(step)
        visited.add(step)

    logger.debug(f"Walked {len(route) - 1} hops from {start} to {target}")
    return Path(route)
