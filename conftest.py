import numpy as np
import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    # CLI runs point loguru at a captured stderr that is closed afterwards
    logger.remove()


@pytest.fixture()
def chain_matrix():
    """0 -> 1 -> 2"""
    return np.array([
        [0, 1, 0],
        [0, 0, 1],
        [0, 0, 0],
    ], dtype=np.int8)


@pytest.fixture()
def write_table(tmp_path):
    """Write a neighbour table file in the citylink input format and return its path."""
    def _write(rows, name="cities.txt"):
        path = tmp_path / name
        lines = [str(len(rows))] + [" ".join(str(v) for v in row) for row in rows]
        path.write_text("\n".join(lines) + "\n")
        return path
    return _write


@pytest.fixture()
def random_matrix():
    """Seeded random 0/1 matrix maker: random_matrix(n, density, seed)."""
    def _make(n, density, seed):
        rng = np.random.default_rng(seed)
        return (rng.random((n, n)) < density).astype(np.int8)
    return _make
