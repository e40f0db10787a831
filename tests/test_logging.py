import logging

from link_validator.core.logging import get_logger


def test_debug_flag_sets_level():
    assert get_logger(True).level == logging.DEBUG
    # no flag keeps the configured level
    assert get_logger().level == logging.DEBUG
    assert get_logger(False).level == logging.INFO
    assert get_logger().level == logging.INFO


def test_logger_has_a_handler():
    assert get_logger().hasHandlers()
