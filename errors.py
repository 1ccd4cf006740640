from typing import List


class CityLinkError(Exception):
    """Base class for every error raised by citylink."""


class AllocationError(CityLinkError, MemoryError):
    """Storage for an edge list or path could not be grown."""


class MatrixFormatError(CityLinkError, ValueError):
    """The input file does not hold a well-formed N x N matrix of 0/1 values."""


class RouteFormatError(CityLinkError, ValueError):
    """A route token is not of the form '<source>,<destination>'."""


class DeadEndError(CityLinkError):
    """The greedy path walk ran out of unvisited neighbours before reaching the target.

    The walk never backtracks, so a reachable target can still end up here.
    """

    def __init__(self, start: int, target: int, partial_path: List[int]):
        self.start = start
        self.target = target
        self.partial_path = list(partial_path)
        super().__init__(
            f"Dead end at node {self.partial_path[-1]} while walking from {start} to {target} "
            f"(walked {' => '.join(str(n) for n in self.partial_path)})"
        )
