"""
Unit tests for tidecast.utils configuration and logging helpers.
"""
import logging

import pytest


class TestConfig:
    """Tests for Utils.read_config_section."""

    def test_repository_config(self, monkeypatch):
        """The shipped config provides the forecast defaults."""
        from tidecast.utils import CONFIG_ENV_VAR, Utils

        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        forecast = Utils().read_config_section('forecast')
        state = Utils().read_config_section('tide_state')

        assert float(forecast['forecast_hours']) == 48.0
        assert float(state['window_minutes']) == 60.0
        assert float(state['threshold']) == pytest.approx(0.01)

    def test_explicit_config_file(self, tmp_path):
        """A config path passed to Utils takes precedence."""
        from tidecast.utils import Utils

        conf = tmp_path / 'custom.conf'
        conf.write_text('[forecast]\nforecast_hours = 72\n')

        utils = Utils(conf)
        assert utils.get_config_file() == str(conf)
        assert utils.read_config_section('forecast') == {'forecast_hours': '72'}

    def test_env_config_file(self, tmp_path, monkeypatch):
        """TIDECAST_CONFIG points at an alternate config file."""
        from tidecast.utils import CONFIG_ENV_VAR, Utils

        conf = tmp_path / 'env.conf'
        conf.write_text('[sampling]\nstep_minutes = 15\n')
        monkeypatch.setenv(CONFIG_ENV_VAR, str(conf))

        section = Utils().read_config_section('sampling')
        assert section['step_minutes'] == '15'

    def test_missing_section_raises(self, tmp_path):
        """A missing section raises KeyError."""
        from tidecast.utils import Utils

        conf = tmp_path / 'empty.conf'
        conf.write_text('[forecast]\nforecast_hours = 48\n')

        with pytest.raises(KeyError, match='urls'):
            Utils(conf).read_config_section('urls')

    def test_missing_file_raises(self, tmp_path):
        """A missing config file raises FileNotFoundError."""
        from tidecast.utils import Utils

        with pytest.raises(FileNotFoundError):
            Utils(tmp_path / 'nope.conf').read_config_section('forecast')


class TestSetupLogger:
    """Tests for setup_logger."""

    def test_existing_logger_returned(self):
        """A provided logger is returned unchanged."""
        from tidecast.utils import setup_logger

        logger = logging.getLogger('custom')
        assert setup_logger(logger) is logger

    def test_fallback_without_log_config(self, tmp_path):
        """Without a log config file a package logger is still returned."""
        from tidecast.utils import setup_logger

        logger = setup_logger(log_config_file=tmp_path / 'missing.conf')
        assert isinstance(logger, logging.Logger)
        assert logger.name == 'tidecast'
