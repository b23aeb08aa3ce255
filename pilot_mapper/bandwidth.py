# pilot_mapper/bandwidth.py

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class BandwidthProfile:
    """
    LTE channel bandwidth and its resource grid dimensions.

    Attributes:
        bandwidth_mhz: Channel bandwidth in MHz
        num_subcarriers: Number of occupied subcarriers (grid rows)
        fft_size: FFT size used for OFDM modulation
    """
    bandwidth_mhz: float
    num_subcarriers: int
    fft_size: int


BANDWIDTH_PROFILES: Dict[float, BandwidthProfile] = {
    1.4: BandwidthProfile(1.4, 72, 128),
    3: BandwidthProfile(3, 180, 256),
    5: BandwidthProfile(5, 300, 512),
    10: BandwidthProfile(10, 600, 1024),
    15: BandwidthProfile(15, 900, 1536),
    20: BandwidthProfile(20, 1200, 2048),
}

DEFAULT_BANDWIDTH_MHZ = 1.4


def is_supported_bandwidth(bandwidth_mhz: float) -> bool:
    return bandwidth_mhz in BANDWIDTH_PROFILES


def resolve_bandwidth(bandwidth_mhz: float) -> BandwidthProfile:
    """
    Look up the grid dimensions for a channel bandwidth.

    Unknown bandwidths resolve to the 1.4 MHz profile without raising.

    Args:
        bandwidth_mhz: One of 1.4, 3, 5, 10, 15, 20

    Returns:
        Matching BandwidthProfile
    """
    return BANDWIDTH_PROFILES.get(bandwidth_mhz, BANDWIDTH_PROFILES[DEFAULT_BANDWIDTH_MHZ])
