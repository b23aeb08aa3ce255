import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from pilot_mapper.bandwidth import DEFAULT_BANDWIDTH_MHZ, is_supported_bandwidth
from pilot_mapper.config import PilotMapperConfig, load_config
from pilot_mapper.mapper import generate_pilot_map


def format_record(record) -> str:
    symbol = f"{record.symbol.real:.2f} + {record.symbol.imag:.2f}j"
    return f"{record.row:>6} {record.col:>6} {record.freq_hz:>18.2f} {record.time_us:>12.2f}   {symbol}"


def main():
    parser = argparse.ArgumentParser(description='Map LTE cell-specific reference signal positions')
    parser.add_argument('--config', type=str, default=None,
                       help='Path to configuration YAML file')
    parser.add_argument('--center_freq_hz', type=float, default=2.3e9,
                       help='Carrier center frequency (Hz)')
    parser.add_argument('--subcarrier_spacing_hz', type=float, default=15000.0,
                       help='Subcarrier spacing (Hz)')
    parser.add_argument('--symbol_duration_us', type=float, default=66.67,
                       help='OFDM symbol duration (us)')
    parser.add_argument('--pci', type=int, default=0,
                       help='Physical cell ID')
    parser.add_argument('--antenna_port', type=int, default=0,
                       help='Antenna port (0-3)')
    parser.add_argument('--bandwidth_mhz', type=float, default=1.4,
                       help='Channel bandwidth (1.4, 3, 5, 10, 15, 20 MHz)')
    parser.add_argument('--max_rows', type=int, default=20,
                       help='Number of pilot records to print (0 prints all)')

    args = parser.parse_args()

    if args.config is not None:
        config = load_config(args.config)
    else:
        config = PilotMapperConfig(
            center_freq_hz=args.center_freq_hz,
            subcarrier_spacing_hz=args.subcarrier_spacing_hz,
            symbol_duration_us=args.symbol_duration_us,
            pci=args.pci,
            antenna_port=args.antenna_port,
            bandwidth_mhz=args.bandwidth_mhz,
        )

    print("Pilot Mapping Configuration:")
    print("=" * 60)
    print(f"Center Frequency: {config.center_freq_hz} Hz")
    print(f"Subcarrier Spacing: {config.subcarrier_spacing_hz} Hz")
    print(f"Symbol Duration: {config.symbol_duration_us} us")
    print(f"PCI: {config.pci} (v_shift {config.v_shift})")
    print(f"Antenna Port: {config.antenna_port}")
    print(f"Bandwidth: {config.bandwidth_mhz} MHz")
    if not is_supported_bandwidth(config.bandwidth_mhz):
        print(f"  Note: {config.bandwidth_mhz} MHz is not a listed bandwidth, "
              f"using {DEFAULT_BANDWIDTH_MHZ} MHz grid")
    print(f"Subcarriers: {config.num_subcarriers}, FFT size: {config.fft_size}")
    print(f"Occupied Bandwidth: {config.occupied_bandwidth_hz:.0f} Hz")
    print("=" * 60)

    pilot_map = generate_pilot_map(config)

    print(f"\nPilots: {pilot_map.num_pilots}")
    print(f"Pilot density: {pilot_map.pilot_density*100:.2f}%")
    print(f"Pilot symbols: {pilot_map.pilot_columns}")

    if pilot_map.num_pilots == 0:
        print("\nNo pilots for this antenna port.")
        return

    shown = pilot_map.records if args.max_rows <= 0 else pilot_map.records[:args.max_rows]
    print(f"\n{'Row':>6} {'Col':>6} {'Freq (Hz)':>18} {'Time (us)':>12}   Symbol")
    print("-" * 60)
    for record in shown:
        print(format_record(record))
    if len(shown) < pilot_map.num_pilots:
        print(f"... {pilot_map.num_pilots - len(shown)} more")


if __name__ == '__main__':
    main()
