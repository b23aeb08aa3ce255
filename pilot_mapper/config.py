# pilot_mapper/config.py

from dataclasses import dataclass, field
from typing import List, Optional

from pilot_mapper.bandwidth import BandwidthProfile, resolve_bandwidth
from pilot_mapper.pilot_grid import SYMBOLS_PER_SLOT, compute_v_shift


@dataclass
class PilotMapperConfig:
    center_freq_hz: float = 2.3e9
    subcarrier_spacing_hz: float = 15000.0
    symbol_duration_us: float = 66.67

    pci: int = 0
    antenna_port: int = 0
    bandwidth_mhz: float = 1.4

    pci_start: int = 0
    pci_stop: int = 504
    antenna_ports: List[int] = field(default_factory=lambda: [0, 1, 2, 3])

    dataset_path: str = './datasets'

    @property
    def v_shift(self) -> int:
        return compute_v_shift(self.pci)

    @property
    def profile(self) -> BandwidthProfile:
        return resolve_bandwidth(self.bandwidth_mhz)

    @property
    def num_subcarriers(self) -> int:
        return self.profile.num_subcarriers

    @property
    def fft_size(self) -> int:
        return self.profile.fft_size

    @property
    def symbols_per_slot(self) -> int:
        return SYMBOLS_PER_SLOT

    @property
    def occupied_bandwidth_hz(self) -> float:
        return self.num_subcarriers * self.subcarrier_spacing_hz

    @property
    def slot_duration_us(self) -> float:
        return SYMBOLS_PER_SLOT * self.symbol_duration_us


def load_config(config_path: Optional[str] = None) -> PilotMapperConfig:
    if config_path is None:
        return PilotMapperConfig()

    import yaml
    with open(config_path, 'r') as f:
        config_dict = yaml.safe_load(f) or {}

    return PilotMapperConfig(**config_dict)
