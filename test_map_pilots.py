#!/usr/bin/env python3
"""
Command-line pilot mapping report checks
"""
import sys
from pathlib import Path

project_root = Path(__file__).resolve().parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import pytest
from pilot_mapper.scripts import map_pilots


def run_main(monkeypatch, capsys, *args):
    monkeypatch.setattr(sys, 'argv', ['map_pilots.py', *args])
    map_pilots.main()
    return capsys.readouterr().out


def test_default_report(monkeypatch, capsys):
    out = run_main(monkeypatch, capsys)
    assert "PCI: 0 (v_shift 0)" in out
    assert "Subcarriers: 72, FFT size: 128" in out
    assert "Pilots: 48" in out
    assert "Pilot symbols: [0, 4, 7, 11]" in out
    assert "Note:" not in out
    assert "... 28 more" in out


def test_unlisted_bandwidth_prints_note_and_completes(monkeypatch, capsys):
    out = run_main(monkeypatch, capsys, '--bandwidth_mhz', '7')
    assert "Note: 7.0 MHz is not a listed bandwidth, using 1.4 MHz grid" in out
    assert "Subcarriers: 72, FFT size: 128" in out
    assert "Pilots: 48" in out


def test_invalid_port_reports_no_pilots(monkeypatch, capsys):
    out = run_main(monkeypatch, capsys, '--antenna_port', '5', '--bandwidth_mhz', '20')
    assert "Pilots: 0" in out
    assert "No pilots for this antenna port." in out
    assert "Row" not in out


def test_max_rows_truncates_table(monkeypatch, capsys):
    out = run_main(monkeypatch, capsys, '--max_rows', '2')
    lines = out.splitlines()
    table_start = next(i for i, line in enumerate(lines) if line.startswith("-" * 60))
    assert lines[table_start + 1].split()[:2] == ['0', '0']
    assert lines[table_start + 2].split()[:2] == ['6', '0']
    assert lines[table_start + 3] == "... 46 more"


def test_max_rows_zero_prints_all(monkeypatch, capsys):
    out = run_main(monkeypatch, capsys, '--antenna_port', '2', '--max_rows', '0')
    assert "Pilots: 24" in out
    assert "more" not in out
    assert out.count("0.71") > 0


def test_first_record_formatting(monkeypatch, capsys):
    out = run_main(monkeypatch, capsys, '--max_rows', '1')
    row = next(line for line in out.splitlines() if line.split()[:2] == ['0', '0'])
    assert "2299460000.00" in row
    assert "0.00" in row
    assert "0.71 + 0.71j" in row


def test_config_file_overrides_flags(monkeypatch, capsys):
    out = run_main(monkeypatch, capsys, '--config', str(project_root / 'configs' / 'default.yaml'),
                   '--antenna_port', '3')
    assert "Antenna Port: 0" in out


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
