"""Utilities related to logging."""

import io
import logging

from importlib import resources
from logging.config import dictConfig, fileConfig
from typing import Mapping, Optional

import yaml
from pythonjsonlogger import jsonlogger

from .settings import LOG_CONFIG, LOG_FILE, LOG_JSON, LOG_LEVEL, Settings

DEFAULT_LOGGING_CONFIG_PATH_INI = (
    "presentation_exchange.config:default_logging_config.ini"
)
LOG_FORMAT_JSON = "%(asctime)s %(levelname)s %(name)s %(message)s"


def load_resource(path: str, encoding: str = None):
    """Open a resource file located in a python package or the local filesystem.

    Args:
        path: The resource path in the form of `dir/file` or `package:dir/file`
        encoding: Text encoding; a binary stream is returned when omitted

    Returns:
        A file-like object representing the resource, or `None` if not found
    """
    components = path.rsplit(":", 1)
    try:
        if len(components) == 1:
            # Local filesystem resource
            return open(components[0], encoding=encoding)
        else:
            # Package resource
            package, resource = components
            bstream = resources.files(package).joinpath(resource).open("rb")
            if encoding:
                return io.TextIOWrapper(bstream, encoding=encoding)
            return bstream
    except (IOError, ModuleNotFoundError):
        return None


class LoggingConfigurator:
    """Utility class used to configure logging for the presentation exchange."""

    default_config_path_ini = DEFAULT_LOGGING_CONFIG_PATH_INI

    @classmethod
    def configure(
        cls,
        log_config_path: str = None,
        log_level: str = None,
        log_file: str = None,
        log_json: bool = False,
    ):
        """Configure logger.

        :param log_config_path: str: (Default value = None) Optional path to
            custom logging config, ini or YAML

        :param log_level: str: (Default value = None)

        :param log_file: str: (Default value = None) Optional file name to write logs to

        :param log_json: bool: (Default value = False) Format the log file as JSON
        """
        cls._setup_log_config_file(log_config_path or cls.default_config_path_ini)

        # Set custom file handler
        if log_file:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            if log_json:
                file_handler.setFormatter(jsonlogger.JsonFormatter(LOG_FORMAT_JSON))
            logging.root.handlers.append(file_handler)

        # Set custom log level
        if log_level:
            logging.root.setLevel(log_level.upper())

    @classmethod
    def configure_from_settings(cls, settings: Optional[Mapping] = None):
        """Configure logger from the `log.*` keys of a settings mapping."""
        settings = settings if isinstance(settings, Settings) else Settings(settings)
        cls.configure(
            log_config_path=settings.get_str(LOG_CONFIG),
            log_level=settings.get_str(LOG_LEVEL),
            log_file=settings.get_str(LOG_FILE),
            log_json=settings.get_bool(LOG_JSON, default=False),
        )

    @classmethod
    def _setup_log_config_file(cls, log_config_path):
        log_config, is_dict_config = cls._load_log_config(log_config_path)

        # Setup config
        if not log_config:
            logging.basicConfig(level=logging.WARNING)
            logging.root.warning(f"Logging config file not found: {log_config_path}")
        elif is_dict_config:
            dictConfig(log_config)
        else:
            with log_config:
                fileConfig(log_config, disable_existing_loggers=False)

    @classmethod
    def _load_log_config(cls, log_config_path):
        if ".yml" in log_config_path or ".yaml" in log_config_path:
            try:
                with open(log_config_path, "r") as stream:
                    return yaml.safe_load(stream), True
            except IOError:
                return None, True
        return load_resource(log_config_path, "utf-8"), False
