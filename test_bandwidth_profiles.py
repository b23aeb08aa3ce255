#!/usr/bin/env python3
"""
Bandwidth profile lookup checks
"""
import sys
from pathlib import Path

project_root = Path(__file__).resolve().parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import pytest
from pilot_mapper.bandwidth import BANDWIDTH_PROFILES, is_supported_bandwidth, resolve_bandwidth


@pytest.mark.parametrize("bandwidth_mhz, num_subcarriers, fft_size", [
    (1.4, 72, 128),
    (3, 180, 256),
    (5, 300, 512),
    (10, 600, 1024),
    (15, 900, 1536),
    (20, 1200, 2048),
])
def test_listed_bandwidths(bandwidth_mhz, num_subcarriers, fft_size):
    profile = resolve_bandwidth(bandwidth_mhz)
    assert profile.bandwidth_mhz == bandwidth_mhz
    assert profile.num_subcarriers == num_subcarriers
    assert profile.fft_size == fft_size


def test_float_and_int_keys_match():
    assert resolve_bandwidth(10.0) == resolve_bandwidth(10)


@pytest.mark.parametrize("bandwidth_mhz", [7, 0, -5, 2.5, 100])
def test_unlisted_bandwidth_falls_back_to_1_4(bandwidth_mhz):
    assert resolve_bandwidth(bandwidth_mhz) == resolve_bandwidth(1.4)
    assert not is_supported_bandwidth(bandwidth_mhz)


def test_table_has_unique_bandwidths():
    bandwidths = [p.bandwidth_mhz for p in BANDWIDTH_PROFILES.values()]
    assert len(bandwidths) == len(set(bandwidths)) == 6


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
