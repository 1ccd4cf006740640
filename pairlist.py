import numpy as np
import scipy.sparse as sparse
from loguru import logger

from edges import EdgeList
from errors import AllocationError


def build(matrix, n: int) -> EdgeList:
    """
    Turn an n x n adjacency matrix into the list of its direct edges.

    Cells are visited row by row, so edge (i, j) comes before (i, j + 1) and before (i + 1, 0).
    Sparse matrices (any scipy.sparse format) are accepted as well as dense ones.
    :param matrix: 0/1 matrix, cell (i, j) == 1 means a direct edge i -> j
    :param n: number of nodes
    :return: EdgeList of every 1-cell, possibly empty
    """
    if sparse.issparse(matrix):
        # CSR with sorted column indices gives the same row-major order as a dense scan
        csr = sparse.csr_matrix(matrix)
        csr.sort_indices()
        if csr.shape != (n, n):
            raise ValueError(f"Expected a {n}x{n} matrix, got {csr.shape[0]}x{csr.shape[1]}")
        cells = [
            (i, int(j))
            for i in range(n)
            for j, value in zip(csr.indices[csr.indptr[i]:csr.indptr[i + 1]],
                                csr.data[csr.indptr[i]:csr.indptr[i + 1]])
            if value == 1
        ]
    else:
        dense = np.asarray(matrix)
        if dense.shape != (n, n):
            raise ValueError(f"Expected a {n}x{n} matrix, got shape {dense.shape}")
        # argwhere returns indices in row-major (C) order
        cells = [(int(i), int(j)) for i, j in np.argwhere(dense == 1)]

    try:
        edges = EdgeList(cells)
    except MemoryError as e:
        raise AllocationError(f"Unable to allocate an edge list for {len(cells)} edges") from e

    logger.debug(f"Built edge list with {len(edges)} edges from a {n}x{n} matrix")
    return edges
