# pilot_mapper/records.py

import numpy as np
from dataclasses import dataclass
from typing import Dict, List, Sequence

from pilot_mapper.constellation import pilot_symbol
from pilot_mapper.pilot_grid import get_pilot_positions

PRIORITY_COLUMNS = (0, 4, 7, 11)
UNRANKED = 99


@dataclass(frozen=True)
class PilotRecord:
    row: int
    col: int
    freq_hz: float
    time_us: float
    symbol: complex

    def as_dict(self) -> Dict:
        return {
            'row': self.row,
            'col': self.col,
            'freq_hz': self.freq_hz,
            'time_us': self.time_us,
            'symbol': self.symbol,
        }


def column_rank(col: int) -> int:
    if col in PRIORITY_COLUMNS:
        return PRIORITY_COLUMNS.index(col)
    return UNRANKED


def record_sort_key(record: PilotRecord):
    return column_rank(record.col), record.row


def assemble_pilot_records(matrix: np.ndarray,
                           center_freq_hz: float,
                           subcarrier_spacing_hz: float,
                           symbol_duration_us: float) -> List[PilotRecord]:
    """
    Convert marked grid cells into pilot records.

    Frequencies are offset from the center by half the grid height, times start at
    the beginning of the slot. Records are ordered by column priority
    (0, 4, 7, 11, then the rest) and by row within a priority. Cells with equal
    keys keep their row-major scan order.

    Args:
        matrix: Pilot placement matrix (subcarriers x symbols)
        center_freq_hz: Carrier center frequency in Hz
        subcarrier_spacing_hz: Subcarrier spacing in Hz
        symbol_duration_us: OFDM symbol duration in microseconds

    Returns:
        Ordered list of PilotRecord
    """
    num_subcarriers = matrix.shape[0]
    rows, cols = get_pilot_positions(matrix)

    records = []
    for row, col in zip(rows.tolist(), cols.tolist()):
        records.append(PilotRecord(
            row=row,
            col=col,
            freq_hz=center_freq_hz + (row - num_subcarriers / 2) * subcarrier_spacing_hz,
            time_us=col * symbol_duration_us,
            symbol=pilot_symbol(row, col),
        ))

    return sorted(records, key=record_sort_key)


def records_to_arrays(records: Sequence[PilotRecord]) -> Dict[str, np.ndarray]:
    return {
        'row': np.array([r.row for r in records], dtype=np.int64),
        'col': np.array([r.col for r in records], dtype=np.int64),
        'freq_hz': np.array([r.freq_hz for r in records], dtype=np.float64),
        'time_us': np.array([r.time_us for r in records], dtype=np.float64),
        'symbol': np.array([r.symbol for r in records], dtype=complex),
    }
