"""Tests for logging configuration."""

import logging
import os
from pathlib import Path

from fileinfo.logging_config import HomeDirectoryFilter, get_logger, setup_logging


def _record(msg, args=()):
    return logging.LogRecord('test', logging.INFO, __file__, 1, msg, args, None)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_configures_stdout_handler(self):
        logger = setup_logging('fileinfo.test_setup', log_level='DEBUG')

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.propagate is False
        assert any(isinstance(f, HomeDirectoryFilter) for f in logger.handlers[0].filters)

    def test_second_call_adds_no_handler(self):
        setup_logging('fileinfo.test_idempotent')
        logger = setup_logging('fileinfo.test_idempotent')

        assert len(logger.handlers) == 1

    def test_unknown_level_falls_back_to_info(self):
        logger = setup_logging('fileinfo.test_unknown_level', log_level='chatty')

        assert logger.level == logging.INFO

    def test_get_logger(self):
        assert get_logger('fileinfo.test_get') is logging.getLogger('fileinfo.test_get')


class TestHomeDirectoryFilter:
    """Tests for HomeDirectoryFilter."""

    def test_shortens_message(self):
        record = _record('Resolved /home/alex/docs/a.txt')

        assert HomeDirectoryFilter(home='/home/alex').filter(record) is True
        assert record.getMessage() == 'Resolved ~/docs/a.txt'

    def test_shortens_arguments(self):
        record = _record('Resolved %s (%d bytes)', ('/home/alex/a.txt', 5))

        HomeDirectoryFilter(home='/home/alex').filter(record)

        assert record.getMessage() == 'Resolved ~/a.txt (5 bytes)'

    def test_shortens_path_arguments(self):
        home = os.path.join(os.sep, 'home', 'alex')
        record = _record('Resolved %s', (Path(home) / 'a.txt',))

        HomeDirectoryFilter(home=home).filter(record)

        assert record.getMessage() == 'Resolved ' + os.path.join('~', 'a.txt')

    def test_unknown_home_passes_through(self):
        record = _record('Resolved /home/alex/a.txt')

        HomeDirectoryFilter(home='~').filter(record)

        assert record.getMessage() == 'Resolved /home/alex/a.txt'

    def test_sibling_directory_with_home_prefix_is_untouched(self):
        record = _record('Resolved /home/alexandra/a.txt')

        HomeDirectoryFilter(home='/home/alex').filter(record)

        assert record.getMessage() == 'Resolved /home/alexandra/a.txt'

    def test_home_inside_another_path_is_untouched(self):
        record = _record('Resolved %s', ('/srv/home/alex/a.txt',))

        HomeDirectoryFilter(home='/home/alex').filter(record)

        assert record.getMessage() == 'Resolved /srv/home/alex/a.txt'

    def test_bare_home_and_trailing_separator(self):
        record = _record('Home is %s, moved to "/home/alex"', ('/home/alex',))

        HomeDirectoryFilter(home='/home/alex/').filter(record)

        assert record.getMessage() == 'Home is ~, moved to "~"'

    def test_root_home_passes_through(self):
        record = _record('Resolved /etc/hosts')

        HomeDirectoryFilter(home='/').filter(record)

        assert record.getMessage() == 'Resolved /etc/hosts'
