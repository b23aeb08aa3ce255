# pilot_mapper/mapper.py

import numpy as np
from dataclasses import dataclass, replace
from typing import List

from pilot_mapper.bandwidth import BandwidthProfile
from pilot_mapper.config import PilotMapperConfig
from pilot_mapper.pilot_grid import generate_pilot_matrix
from pilot_mapper.records import PilotRecord, assemble_pilot_records


@dataclass
class PilotMap:
    """Placement matrix and ordered pilot records for one configuration."""
    config: PilotMapperConfig
    profile: BandwidthProfile
    matrix: np.ndarray
    records: List[PilotRecord]

    @property
    def num_pilots(self) -> int:
        return len(self.records)

    @property
    def pilot_density(self) -> float:
        return float(np.sum(self.matrix)) / self.matrix.size

    @property
    def pilot_columns(self) -> List[int]:
        return sorted({r.col for r in self.records})


def generate_pilot_map(config: PilotMapperConfig) -> PilotMap:
    """
    Compute the pilot grid for a radio configuration.

    Every call rebuilds the matrix and the records from scratch. The returned map
    holds its own copy of the config, so later changes to the caller's config do
    not reach it.

    Args:
        config: PilotMapperConfig with bandwidth, PCI, antenna port and timing

    Returns:
        PilotMap holding the resolved profile, matrix and ordered records
    """
    config = replace(config, antenna_ports=list(config.antenna_ports))
    profile = config.profile
    matrix = generate_pilot_matrix(config.pci, config.antenna_port, profile.num_subcarriers)
    records = assemble_pilot_records(
        matrix,
        config.center_freq_hz,
        config.subcarrier_spacing_hz,
        config.symbol_duration_us,
    )
    return PilotMap(config=config, profile=profile, matrix=matrix, records=records)
