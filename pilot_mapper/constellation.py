# pilot_mapper/constellation.py

import numpy as np

# k = (row + col) % 4
PILOT_CONSTELLATION = np.array([
    1 + 1j, -1 + 1j, -1 - 1j, 1 - 1j
], dtype=complex) / np.sqrt(2)


def pilot_symbol(row: int, col: int) -> complex:
    """Synthetic unit-magnitude pilot value at a grid position, for display only."""
    return complex(PILOT_CONSTELLATION[(row + col) % 4])


def pilot_symbols(rows: np.ndarray, cols: np.ndarray) -> np.ndarray:
    indices = (np.asarray(rows) + np.asarray(cols)) % 4
    return PILOT_CONSTELLATION[indices]
