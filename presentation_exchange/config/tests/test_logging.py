import logging

from tempfile import NamedTemporaryFile
from unittest import TestCase, mock

from pythonjsonlogger import jsonlogger

from .. import logging as test_module
from ..settings import LOG_FILE, LOG_JSON, LOG_LEVEL


class TestLoggingConfigurator(TestCase):
    def setUp(self):
        self.root_handlers = list(logging.root.handlers)
        self.root_level = logging.root.level

    def tearDown(self):
        for handler in logging.root.handlers:
            if handler not in self.root_handlers:
                handler.close()
        logging.root.handlers = self.root_handlers
        logging.root.setLevel(self.root_level)

    @mock.patch.object(test_module, "load_resource", autospec=True)
    @mock.patch.object(test_module, "fileConfig", autospec=True)
    def test_configure_default(self, mock_file_config, mock_load_resource):
        test_module.LoggingConfigurator.configure()

        mock_load_resource.assert_called_once_with(
            test_module.DEFAULT_LOGGING_CONFIG_PATH_INI, "utf-8"
        )
        mock_file_config.assert_called_once_with(
            mock_load_resource.return_value, disable_existing_loggers=False
        )

    @mock.patch.object(test_module, "load_resource", autospec=True)
    @mock.patch.object(test_module, "fileConfig", autospec=True)
    def test_configure_default_with_path(self, mock_file_config, mock_load_resource):
        path = "a path"
        test_module.LoggingConfigurator.configure(path)

        mock_load_resource.assert_called_once_with(path, "utf-8")
        mock_file_config.assert_called_once_with(
            mock_load_resource.return_value, disable_existing_loggers=False
        )

    def test_configure_missing_config_with_log_file_error_level(self):
        log_file = NamedTemporaryFile()
        with mock.patch.object(
            test_module, "load_resource", mock.MagicMock(return_value=None)
        ), mock.patch.object(test_module.logging, "basicConfig") as mock_basic:
            test_module.LoggingConfigurator.configure(
                log_level="ERROR", log_file=log_file.name, log_json=True
            )
            mock_basic.assert_called_once_with(level=logging.WARNING)
        assert logging.root.level == logging.ERROR
        file_handler = logging.root.handlers[-1]
        assert isinstance(file_handler, logging.FileHandler)
        assert isinstance(file_handler.formatter, jsonlogger.JsonFormatter)

    def test_configure_with_yaml_file(self):
        log_config = {"version": 1, "root": {"level": "INFO"}}
        with mock.patch.object(
            test_module.yaml, "safe_load", mock.MagicMock(return_value=log_config)
        ), mock.patch("builtins.open", mock.mock_open(read_data="")), mock.patch.object(
            test_module, "dictConfig", autospec=True
        ) as mock_dict_config:
            test_module.LoggingConfigurator.configure(log_config_path="logging.yml")
        mock_dict_config.assert_called_once_with(log_config)

    @mock.patch.object(test_module.LoggingConfigurator, "configure")
    def test_configure_from_settings(self, mock_configure):
        test_module.LoggingConfigurator.configure_from_settings(
            {LOG_LEVEL: "debug", LOG_FILE: "pres_exch.log", LOG_JSON: "true"}
        )
        mock_configure.assert_called_once_with(
            log_config_path=None,
            log_level="debug",
            log_file="pres_exch.log",
            log_json=True,
        )

    def test_load_resource(self):
        # Testing local file access
        with mock.patch("builtins.open", mock.MagicMock()) as mock_open:
            test_module.load_resource("abc", encoding="utf-8")
            mock_open.side_effect = IOError("insufficient privilege")
            # load_resource should absorb IOError
            assert test_module.load_resource("abc", encoding="utf-8") is None

        # Testing packaged resource access
        with test_module.load_resource(
            test_module.DEFAULT_LOGGING_CONFIG_PATH_INI, "utf-8"
        ) as stream:
            assert "[loggers]" in stream.read()
        with test_module.load_resource(
            test_module.DEFAULT_LOGGING_CONFIG_PATH_INI
        ) as stream:
            assert b"[handlers]" in stream.read()

        assert test_module.load_resource("no_such_package:abc", "utf-8") is None
