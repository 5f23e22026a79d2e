"""
Configuration and logging helpers shared by the tidecast scripts.

Settings live in an INI file (``conf/tidecast.conf`` at the repository root
by default, or the path in the ``TIDECAST_CONFIG`` environment variable).
Logging is configured from ``conf/logging.conf``.
"""
from __future__ import annotations

import configparser
import logging
import logging.config
import os
from pathlib import Path

_CONF_DIR = Path(__file__).resolve().parent.parent.parent / 'conf'

CONFIG_ENV_VAR = 'TIDECAST_CONFIG'


class Utils:
    """Locate and read the tidecast configuration file."""

    def __init__(self, config_file: str | os.PathLike | None = None):
        self.config_file = config_file

    def get_config_file(self) -> str:
        """Return the path of the active configuration file."""
        if self.config_file is not None:
            return str(self.config_file)
        env_file = os.environ.get(CONFIG_ENV_VAR)
        if env_file:
            return env_file
        return str(_CONF_DIR / 'tidecast.conf')

    def read_config_section(
        self,
        section: str,
        logger: logging.Logger | None = None,
    ) -> dict[str, str]:
        """
        Read one section of the configuration file.

        Parameters
        ----------
        section : str
            Section name, e.g. ``"forecast"``.
        logger : logging.Logger, optional
            Logger instance.

        Returns
        -------
        dict
            Option names mapped to their (string) values.

        Raises
        ------
        FileNotFoundError
            If the configuration file does not exist.
        KeyError
            If the section is not present.
        """
        _log = logger or logging.getLogger(__name__)

        config_file = self.get_config_file()
        if not os.path.isfile(config_file):
            raise FileNotFoundError(f"Config file not found: {config_file}")

        parser = configparser.ConfigParser()
        parser.read(config_file)
        if not parser.has_section(section):
            raise KeyError(
                f"Section '{section}' not found in {config_file}."
            )

        _log.debug('Read section [%s] from %s.', section, config_file)
        return dict(parser.items(section))


def setup_logger(
    logger: logging.Logger | None = None,
    log_config_file: str | os.PathLike | None = None,
) -> logging.Logger:
    """
    Initialize logging if no logger was provided.

    Uses :func:`logging.config.fileConfig` on *log_config_file* (default
    ``conf/logging.conf``), or :func:`logging.basicConfig` when that file
    does not exist.
    """
    if logger is not None:
        return logger

    if log_config_file is None:
        log_config_file = _CONF_DIR / 'logging.conf'

    if os.path.isfile(log_config_file):
        logging.config.fileConfig(
            log_config_file, disable_existing_loggers=False,
        )
        logger = logging.getLogger('tidecast')
        logger.debug('Using log config %s', log_config_file)
    else:
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        )
        logger = logging.getLogger('tidecast')
    return logger
