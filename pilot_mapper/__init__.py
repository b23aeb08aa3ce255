from pilot_mapper.bandwidth import BandwidthProfile, BANDWIDTH_PROFILES, resolve_bandwidth
from pilot_mapper.config import PilotMapperConfig, load_config
from pilot_mapper.pilot_grid import PORT_PLACEMENTS, SYMBOLS_PER_SLOT, compute_v_shift, generate_pilot_matrix
from pilot_mapper.constellation import pilot_symbol, pilot_symbols
from pilot_mapper.records import PilotRecord, assemble_pilot_records
from pilot_mapper.mapper import PilotMap, generate_pilot_map

__all__ = [
    'BandwidthProfile',
    'BANDWIDTH_PROFILES',
    'resolve_bandwidth',
    'PilotMapperConfig',
    'load_config',
    'PORT_PLACEMENTS',
    'SYMBOLS_PER_SLOT',
    'compute_v_shift',
    'generate_pilot_matrix',
    'pilot_symbol',
    'pilot_symbols',
    'PilotRecord',
    'assemble_pilot_records',
    'PilotMap',
    'generate_pilot_map',
]
