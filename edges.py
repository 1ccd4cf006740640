from typing import Iterable, Iterator, List, NamedTuple, Optional, Set, Tuple


class Edge(NamedTuple):
    source: int
    destination: int

    def __str__(self):
        return f"{self.source} -> {self.destination}"


class EdgeList:
    """Insertion-ordered list of unique directed edges.

    Membership checks go through a set index kept beside the list, so the list order
    (which path reconstruction depends on) is never disturbed.
    """

    def __init__(self, edges: Optional[Iterable[Tuple[int, int]]] = None):
        self._edges: List[Edge] = []
        self._index: Set[Edge] = set()
        if edges is not None:
            for source, destination in edges:
                self.add(source, destination)

    def add(self, source: int, destination: int) -> bool:
        """Append (source, destination) unless it is already present. Returns True if added."""
        edge = Edge(int(source), int(destination))
        if edge in self._index:
            return False
        self._edges.append(edge)
        self._index.add(edge)
        return True

    def snapshot(self) -> Tuple[Edge, ...]:
        return tuple(self._edges)

    def copy(self) -> "EdgeList":
        return EdgeList(self._edges)

    def successors(self, node: int) -> Iterator[int]:
        """Destinations of the edges leaving node, in list order."""
        for edge in self._edges:
            if edge.source == node:
                yield edge.destination

    def as_pairs(self) -> List[Tuple[int, int]]:
        return [tuple(edge) for edge in self._edges]

    def __contains__(self, pair) -> bool:
        try:
            source, destination = pair
        except (TypeError, ValueError):
            return False
        return Edge(source, destination) in self._index

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._edges)

    def __len__(self) -> int:
        return len(self._edges)

    def __getitem__(self, position: int) -> Edge:
        return self._edges[position]

    def __eq__(self, other) -> bool:
        if isinstance(other, EdgeList):
            return self._edges == other._edges
        return NotImplemented

    def __repr__(self):
        return f"EdgeList({self.as_pairs()!r})"


class Path:
    """One concrete route, rendered as 'a => b => c'."""

    def __init__(self, nodes: Iterable[int]):
        self.nodes: Tuple[int, ...] = tuple(int(n) for n in nodes)

    @property
    def start(self) -> int:
        return self.nodes[0]

    @property
    def target(self) -> int:
        return self.nodes[-1]

    def hops(self) -> List[Edge]:
        return [Edge(a, b) for a, b in zip(self.nodes, self.nodes[1:])]

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self):
        return iter(self.nodes)

    def __eq__(self, other) -> bool:
        if isinstance(other, Path):
            return self.nodes == other.nodes
        if isinstance(other, (list, tuple)):
            return list(self.nodes) == list(other)
        return NotImplemented

    def __str__(self):
        return " => ".join(str(n) for n in self.nodes)

    def __repr__(self):
        return f"Path({list(self.nodes)!r})"
