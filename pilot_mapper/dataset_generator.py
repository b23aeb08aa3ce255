import numpy as np
import os
import h5py
from dataclasses import replace
from typing import Dict, Tuple
from pathlib import Path
from tqdm import tqdm

from pilot_mapper.config import PilotMapperConfig
from pilot_mapper.mapper import generate_pilot_map
from pilot_mapper.records import records_to_arrays


def generate_single_sample(config: PilotMapperConfig, pci: int, antenna_port: int,
                           sample_id: int) -> Dict[str, np.ndarray]:

    sample_config = replace(config, pci=pci, antenna_port=antenna_port)
    pilot_map = generate_pilot_map(sample_config)

    sample = {
        'sample_id': sample_id,
        'pci': pci,
        'antenna_port': antenna_port,
        'v_shift': sample_config.v_shift,
        'num_pilots': pilot_map.num_pilots,
        'pilot_mask': pilot_map.matrix,
    }
    for key, value in records_to_arrays(pilot_map.records).items():
        sample[f'record_{key}'] = value

    return sample


def generate_dataset(config: PilotMapperConfig) -> Dict[str, np.ndarray]:

    combinations = [(pci, port)
                    for pci in range(config.pci_start, config.pci_stop)
                    for port in config.antenna_ports]
    if not combinations:
        raise ValueError(
            f"Empty sweep: pci range [{config.pci_start}, {config.pci_stop}) "
            f"with antenna ports {config.antenna_ports}"
        )

    samples = []
    for i, (pci, port) in enumerate(tqdm(combinations, desc="Generating pilot maps")):
        samples.append(generate_single_sample(config, pci, port, i))

    dataset = {}
    for key in ['sample_id', 'pci', 'antenna_port', 'v_shift', 'num_pilots']:
        dataset[key] = np.array([s[key] for s in samples], dtype=np.int64)

    dataset['pilot_mask'] = np.stack([s['pilot_mask'] for s in samples], axis=0)

    record_keys = [key for key in samples[0].keys() if key.startswith('record_')]
    for key in record_keys:
        dataset[key] = np.concatenate([s[key] for s in samples])
    dataset['record_sample_id'] = np.concatenate([
        np.full(s['num_pilots'], s['sample_id'], dtype=np.int64) for s in samples
    ])

    return dataset


def save_dataset_hdf5(dataset: Dict[str, np.ndarray],
                      filepath: str,
                      config: PilotMapperConfig):

    os.makedirs(os.path.dirname(filepath) or '.', exist_ok=True)

    with h5py.File(filepath, 'w') as f:

        for key, value in dataset.items():
            if np.iscomplexobj(value):
                f.create_dataset(f'{key}/real', data=np.real(value), compression='gzip')
                f.create_dataset(f'{key}/imag', data=np.imag(value), compression='gzip')
            else:
                f.create_dataset(key, data=value, compression='gzip')

        config_group = f.create_group('config')
        config_group.attrs['center_freq_hz'] = config.center_freq_hz
        config_group.attrs['subcarrier_spacing_hz'] = config.subcarrier_spacing_hz
        config_group.attrs['symbol_duration_us'] = config.symbol_duration_us
        config_group.attrs['bandwidth_mhz'] = config.bandwidth_mhz
        config_group.attrs['num_subcarriers'] = config.num_subcarriers
        config_group.attrs['fft_size'] = config.fft_size
        config_group.attrs['symbols_per_slot'] = config.symbols_per_slot
        config_group.attrs['pci_start'] = config.pci_start
        config_group.attrs['pci_stop'] = config.pci_stop
        config_group.attrs['antenna_ports'] = np.array(config.antenna_ports, dtype=np.int64)


def _attr_to_python(value):
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, np.generic):
        return value.item()
    return value


def load_dataset_hdf5(filepath: str) -> Tuple[Dict[str, np.ndarray], Dict]:
    """
    Read a pilot map dataset written by save_dataset_hdf5.

    Complex arrays are rebuilt from their real/imag pairs. Config attributes come
    back as Python scalars and lists.
    """
    with h5py.File(filepath, 'r') as f:
        dataset = {
            key: f[key]['real'][:] + 1j * f[key]['imag'][:]
            if isinstance(f[key], h5py.Group) else f[key][:]
            for key in f.keys() if key != 'config'
        }
        attrs = f['config'].attrs if 'config' in f else {}
        config_dict = {name: _attr_to_python(attrs[name]) for name in attrs}

    return dataset, config_dict


def dataset_filename(config: PilotMapperConfig) -> str:
    ports = ''.join(str(p) for p in config.antenna_ports)
    return (f"pilots_BW{config.bandwidth_mhz}MHz_Nsc{config.num_subcarriers}"
            f"_PCI{config.pci_start}-{config.pci_stop}_ports{ports}.h5")


def generate_and_save(config: PilotMapperConfig) -> str:

    base_path = Path(config.dataset_path)
    base_path.mkdir(parents=True, exist_ok=True)

    num_samples = (config.pci_stop - config.pci_start) * len(config.antenna_ports)
    print(f"Generating pilot map dataset ({num_samples} samples)...")
    dataset = generate_dataset(config)
    path = base_path / dataset_filename(config)
    save_dataset_hdf5(dataset, str(path), config)
    print(f"Saved pilot map dataset to {path}")

    return str(path)


def verify_dataset_shapes(dataset: Dict[str, np.ndarray], config: PilotMapperConfig):

    print("\nDataset Shape Verification:")
    print("=" * 60)

    num_samples = dataset['pilot_mask'].shape[0]
    print(f"Number of samples: {num_samples}")

    print(f"\npilot_mask shape: {dataset['pilot_mask'].shape}")
    print(f"Expected: ({num_samples}, {config.num_subcarriers}, {config.symbols_per_slot})")

    num_records = dataset['record_row'].shape[0]
    print(f"\nTotal pilot records: {num_records}")
    print(f"Sum of num_pilots: {int(np.sum(dataset['num_pilots']))}")

    print(f"\nrecord_symbol is complex: {np.iscomplexobj(dataset['record_symbol'])}")

    print("\n" + "=" * 60)


class PilotMapDataset:

    def __init__(self, filepath: str):
        self.filepath = filepath
        self.dataset, self.config_dict = load_dataset_hdf5(filepath)
        self._offsets = np.concatenate([[0], np.cumsum(self.dataset['num_pilots'])])

    def __len__(self) -> int:
        return self.dataset['pilot_mask'].shape[0]

    def __getitem__(self, idx: int) -> Dict[str, np.ndarray]:
        start, end = self._offsets[idx], self._offsets[idx + 1]
        sample = {
            'pci': int(self.dataset['pci'][idx]),
            'antenna_port': int(self.dataset['antenna_port'][idx]),
            'v_shift': int(self.dataset['v_shift'][idx]),
            'pilot_mask': self.dataset['pilot_mask'][idx],
        }
        for key, value in self.dataset.items():
            if key.startswith('record_') and key != 'record_sample_id':
                sample[key] = value[start:end]
        return sample
