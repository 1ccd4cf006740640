from pathlib import Path as FilePath
from typing import Optional, Tuple, Union

import numpy as np
import scipy.sparse as sparse
from loguru import logger

from edges import EdgeList, Path
from errors import MatrixFormatError, RouteFormatError
from settings import DEFAULT_OUTPUT_PREFIX

CLOSURE_HEADER = "R* Table"
NEIGHBOUR_HEADER = "Neighbor table"
PATH_FOUND = "Yes path exists!"
NO_PATH = "No Path Exists!"


def read_matrix(path: Union[str, FilePath]) -> np.ndarray:
    """
    Read a neighbour table file: the size N, then N rows of N values that are 0 or 1.

    Whitespace between values does not matter.
    """
    path = FilePath(path)
    try:
        text = path.read_text()
    except OSError as e:
        raise MatrixFormatError(f"Input file {path} can not be read: {e}") from e

    tokens = text.split()
    if not tokens:
        raise MatrixFormatError(f"Input file {path} is empty")

    try:
        n = int(tokens[0])
    except ValueError:
        raise MatrixFormatError(f"Matrix size must be an integer, got {tokens[0]!r}") from None
    if n <= 0:
        raise MatrixFormatError(f"Matrix size must be positive, got {n}")

    values = tokens[1:]
    if len(values) != n * n:
        raise MatrixFormatError(f"Expected {n * n} values for a {n}x{n} matrix, found {len(values)}")

    bad = [v for v in values if v not in ("0", "1")]
    if bad:
        raise MatrixFormatError(f"Matrix values must be 0 or 1, found {bad[0]!r}")

    matrix = np.array([int(v) for v in values], dtype=np.int8).reshape(n, n)
    logger.info(f"Read {n}x{n} neighbour table from {path}")
    return matrix


def parse_route(token: str, n: Optional[int] = None) -> Tuple[int, int]:
    """Parse '<source>,<destination>'; with n given, both nodes must lie in [0, n)."""
    parts = token.split(",")
    if len(parts) != 2:
        raise RouteFormatError(f"Route must look like <source>,<destination>, got {token!r}")
    try:
        source, destination = (int(p.strip()) for p in parts)
    except ValueError:
        raise RouteFormatError(f"Route nodes must be integers, got {token!r}") from None
    if n is not None:
        for node in (source, destination):
            if not 0 <= node < n:
                raise RouteFormatError(f"Node {node} is outside the table (0..{n - 1})")
    return source, destination


def format_neighbour_table(matrix) -> str:
    rows = [" ".join(str(int(v)) for v in row) for row in np.asarray(matrix)]
    return "\n".join([NEIGHBOUR_HEADER, *rows]) + "\n"


def format_closure(edges: EdgeList) -> str:
    return "\n".join([CLOSURE_HEADER, *(str(edge) for edge in edges)])


def format_path(path: Optional[Path]) -> str:
    if path is None:
        return NO_PATH
    return f"{PATH_FOUND}\n{path}"


def output_path(input_path: Union[str, FilePath], prefix: str = DEFAULT_OUTPUT_PREFIX,
                suffix: Optional[str] = None) -> FilePath:
    """Sibling of the input file named '<prefix><input name>', optionally with another suffix."""
    input_path = FilePath(input_path)
    name = input_path.name if suffix is None else input_path.stem + suffix
    return input_path.with_name(prefix + name)


def write_closure(edges: EdgeList, input_path: Union[str, FilePath],
                  prefix: str = DEFAULT_OUTPUT_PREFIX) -> FilePath:
    out_file = output_path(input_path, prefix)
    logger.debug(f"Writing {out_file}")
    with open(out_file, "w") as f:
        f.write(format_closure(edges) + "\n\n")
    return out_file


def closure_to_sparse(edges: EdgeList, n: int) -> sparse.csr_matrix:
    """The closure as an n x n 0/1 matrix, cell (u, v) set for every edge u -> v."""
    matrix = sparse.lil_matrix((n, n), dtype=np.int8)
    for source, destination in edges:
        matrix[source, destination] = 1
    return matrix.tocsr()


def write_closure_matrix(edges: EdgeList, n: int, input_path: Union[str, FilePath],
                         prefix: str = DEFAULT_OUTPUT_PREFIX) -> FilePath:
    out_file = output_path(input_path, prefix, suffix=".npz")
    logger.debug(f"Writing {out_file}")
    sparse.save_npz(out_file, closure_to_sparse(edges, n))
    return out_file
