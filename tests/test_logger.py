import logging
import os
from pathlib import Path

from generator_panel.logger import GENERATOR_PANEL, LOG_DIR_ENV, Logger
from generator_panel.singleton import Singleton


def test_logger_is_shared():
    assert Logger() is Logger()


def test_singleton_classes_keep_separate_instances():
    class Counter(metaclass=Singleton):
        def __init__(self, start=0):
            self.value = start

    class Other(metaclass=Singleton):
        pass

    first = Counter(5)
    assert Counter(9) is first
    assert first.value == 5
    assert Other() is not first


def test_named_loggers_write_to_the_log_dir():
    log = Logger().setup_logger('Tests')

    assert log.name == GENERATOR_PANEL + ' Tests'
    assert Logger().logging_file_handler in log.handlers
    log_file = Path(Logger().logging_file_handler.baseFilename)
    assert log_file.parent == Path(os.path.abspath(os.environ[LOG_DIR_ENV]))
    assert log_file.name == 'GeneratorPanel.log'


def test_stream_handler_is_opt_in():
    quiet = Logger().setup_logger('Quiet')
    loud = Logger().setup_logger('Loud', enable_stream_handler=True)

    assert Logger().logging_stream_handler not in quiet.handlers
    assert Logger().logging_stream_handler in loud.handlers


def test_set_level_reaches_package_loggers_only():
    ours = Logger().setup_logger('Levels')
    foreign = logging.getLogger('somebody.else')
    foreign.setLevel(logging.WARNING)

    Logger().set_level(logging.DEBUG)
    try:
        assert ours.level == logging.DEBUG
        assert foreign.level == logging.WARNING
    finally:
        Logger().set_level(logging.INFO)
