"""
Unit tests for the bin/tide_report.py script.
"""
import importlib.util
import json
import logging
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parent.parent / 'bin' / 'tide_report.py'


@pytest.fixture
def tide_report(monkeypatch):
    """Load the report script with logging left to the test runner."""
    spec = importlib.util.spec_from_file_location('tide_report', SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    monkeypatch.setattr(
        module, 'setup_logger', lambda: logging.getLogger('tidecast'),
    )
    return module


@pytest.fixture
def station_file(tmp_path):
    path = tmp_path / 'station.json'
    path.write_text(json.dumps({
        'id': 'TEST001',
        'name': 'Test Harbour',
        'latitude': -33.86,
        'longitude': 151.21,
        'constituents': {'M2': {'amplitude': 1.0, 'phase': 0.0}},
    }))
    return path


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / 'tidecast.conf'
    path.write_text(
        '[forecast]\nforecast_hours = 48\n\n'
        '[sampling]\nduration_hours = 2\nstep_minutes = 60\n\n'
        '[tide_state]\nwindow_minutes = 60\nthreshold = 0.01\n'
    )
    return path


class TestTideReport:
    """Tests for the report script's main()."""

    def test_summary(self, tide_report, station_file, config_file, capsys):
        """Current tide, state and next events are printed for the station."""
        status = tide_report.main([
            str(station_file), '--now', '2000-01-01T00:00:00',
            '--config', str(config_file),
        ])
        out = capsys.readouterr().out

        assert status == 0
        assert 'Test Harbour (TEST001)' in out
        assert 'Current: 1.00 m at 2000-01-01 00:00 UTC, outgoing' in out
        assert 'Next high: 1.00 m at 2000-01-01 12:30 UTC' in out
        assert 'Next low: -1.00 m at 2000-01-01 06:10 UTC' in out
        assert '2000-01-01 02:00' not in out

    def test_series_uses_sampling_section(
        self, tide_report, station_file, config_file, capsys,
    ):
        """--series lists samples over the configured window and step."""
        tide_report.main([
            str(station_file), '--now', '2000-01-01T00:00:00',
            '--config', str(config_file), '--series',
        ])
        lines = capsys.readouterr().out.splitlines()
        series = [line for line in lines if line.startswith('2000-01-01 0')]

        assert [line[:16] for line in series] == [
            '2000-01-01 00:00', '2000-01-01 01:00', '2000-01-01 02:00',
        ]
        assert float(series[0].split()[-1]) == pytest.approx(1.0)

    def test_short_forecast_has_no_events(
        self, tide_report, station_file, config_file, capsys,
    ):
        """--forecast-hours overrides the configured window."""
        tide_report.main([
            str(station_file), '--now', '2000-01-01T01:00:00',
            '--config', str(config_file), '--forecast-hours', '2',
        ])
        out = capsys.readouterr().out

        assert 'Next high: none in forecast window' in out
        assert 'Next low: none in forecast window' in out
