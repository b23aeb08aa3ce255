import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from pilot_mapper.config import PilotMapperConfig, load_config
from pilot_mapper.dataset_generator import generate_and_save, load_dataset_hdf5, verify_dataset_shapes


def main():
    parser = argparse.ArgumentParser(description='Generate pilot map dataset over PCIs and antenna ports')
    parser.add_argument('--config', type=str, default=None,
                       help='Path to configuration YAML file')
    parser.add_argument('--bandwidth_mhz', type=float, default=1.4,
                       help='Channel bandwidth (MHz)')
    parser.add_argument('--center_freq_hz', type=float, default=2.3e9,
                       help='Carrier center frequency (Hz)')
    parser.add_argument('--subcarrier_spacing_hz', type=float, default=15000.0,
                       help='Subcarrier spacing (Hz)')
    parser.add_argument('--symbol_duration_us', type=float, default=66.67,
                       help='OFDM symbol duration (us)')
    parser.add_argument('--pci_start', type=int, default=0,
                       help='First PCI of the sweep')
    parser.add_argument('--pci_stop', type=int, default=504,
                       help='PCI sweep end (exclusive)')
    parser.add_argument('--antenna_ports', type=int, nargs='+', default=[0, 1, 2, 3],
                       help='Antenna ports to include')
    parser.add_argument('--dataset_path', type=str, default='./datasets',
                       help='Path to save datasets')

    args = parser.parse_args()

    if args.config is not None:
        config = load_config(args.config)
    else:
        config = PilotMapperConfig(
            center_freq_hz=args.center_freq_hz,
            subcarrier_spacing_hz=args.subcarrier_spacing_hz,
            symbol_duration_us=args.symbol_duration_us,
            bandwidth_mhz=args.bandwidth_mhz,
            pci_start=args.pci_start,
            pci_stop=args.pci_stop,
            antenna_ports=args.antenna_ports,
            dataset_path=args.dataset_path,
        )

    print("Dataset Generation Configuration:")
    print("=" * 60)
    print(f"Bandwidth: {config.bandwidth_mhz} MHz ({config.num_subcarriers} subcarriers)")
    print(f"Center Frequency: {config.center_freq_hz} Hz")
    print(f"Subcarrier Spacing: {config.subcarrier_spacing_hz} Hz")
    print(f"Symbol Duration: {config.symbol_duration_us} us")
    print(f"PCI range: [{config.pci_start}, {config.pci_stop})")
    print(f"Antenna Ports: {config.antenna_ports}")
    print(f"Dataset Path: {config.dataset_path}")
    print("=" * 60)
    print()

    dataset_path = generate_and_save(config)

    print("\nVerifying dataset...")
    dataset, _ = load_dataset_hdf5(dataset_path)
    verify_dataset_shapes(dataset, config)

    print("\n" + "=" * 60)
    print("Pilot map dataset ready!")
    print("=" * 60)


if __name__ == '__main__':
    main()
