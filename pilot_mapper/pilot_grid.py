# pilot_mapper/pilot_grid.py

import numpy as np
from typing import Dict, Optional, Tuple

SYMBOLS_PER_SLOT = 14

# port -> ((column, row offset from v_shift, mirror column), ...)
PORT_PLACEMENTS: Dict[int, Tuple[Tuple[int, int, Optional[int]], ...]] = {
    0: ((0, 0, 7), (4, 3, 11)),
    1: ((0, 3, 7), (4, 0, 11)),
    2: ((1, 0, None), (8, 3, None)),
    3: ((1, 3, None), (8, 0, None)),
}


def compute_v_shift(pci: int) -> int:
    return pci % 6


def generate_pilot_matrix(pci: int, antenna_port: int, num_subcarriers: int) -> np.ndarray:
    """
    Build the pilot placement matrix for one slot.

    Rows are subcarriers, columns are the 14 OFDM symbols of the slot. A cell is 1
    where the antenna port carries a reference signal. Ports outside 0..3 have no
    placements and produce an all-zero matrix.

    Args:
        pci: Physical cell ID (any integer, used modulo 6)
        antenna_port: Antenna port index
        num_subcarriers: Number of grid rows

    Returns:
        uint8 array of shape (num_subcarriers, 14)
    """
    matrix = np.zeros((num_subcarriers, SYMBOLS_PER_SLOT), dtype=np.uint8)
    v_shift = compute_v_shift(pci)
    row_phase = np.arange(num_subcarriers) % 6

    for column, offset, mirror in PORT_PLACEMENTS.get(antenna_port, ()):
        rows = row_phase == (v_shift + offset) % 6
        matrix[rows, column] = 1
        if mirror is not None:
            matrix[:, mirror] = matrix[:, column]

    return matrix


def get_pilot_positions(matrix: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    rows, cols = np.nonzero(matrix)
    return rows, cols
