"""Test the centralized logging functionality."""

import logging
from io import StringIO

from ptvnet.logging import (
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


def test_centralized_logging():
    set_global_log_level(logging.INFO)
    logger = get_logger("ptvnet.test")

    log_capture = StringIO()
    handler = logging.StreamHandler(log_capture)
    handler.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(handler)

    logger.info("Test info message")
    assert "Test info message" in log_capture.getvalue()

    log_capture.seek(0)
    log_capture.truncate(0)
    logger.debug("Test debug message")
    assert "Test debug message" not in log_capture.getvalue()

    enable_debug_logging()
    logger.debug("Test debug message after enable")
    assert "Test debug message after enable" in log_capture.getvalue()

    logger.removeHandler(handler)
    set_global_log_level(logging.INFO)


def test_multiple_loggers_inherit_root_level():
    logger1 = get_logger("ptvnet.module1")
    logger2 = get_logger("ptvnet.module2")
    assert logger1 is not logger2

    set_global_log_level(logging.WARNING)
    assert logging.getLogger("ptvnet").level == logging.WARNING
    assert logger1.getEffectiveLevel() == logging.WARNING
    assert logger2.getEffectiveLevel() == logging.WARNING
    set_global_log_level(logging.INFO)


def test_reset_and_custom_handler():
    reset_logging()
    stream = StringIO()
    setup_root_logger(
        handler=logging.StreamHandler(stream), format_string="%(message)s"
    )
    get_logger("ptvnet.reset").warning("after reset")
    assert stream.getvalue() == "after reset\n"

    reset_logging()
    setup_root_logger()


def test_builder_logs_graph_size(caplog, network_factory):
    from ptvnet.graph.builder import build_graph

    set_global_log_level(logging.INFO)
    with caplog.at_level(logging.INFO, logger="ptvnet"):
        build_graph(network_factory([(1, 0, 0), (2, 1, 0)], [(1, 1, 2)]))
    assert "Built graph with 2 vertices and 1 edges" in caplog.text


def test_only_one_package_handler():
    reset_logging()
    setup_root_logger()
    setup_root_logger()
    get_logger("ptvnet.graph.builder")
    package_logger = logging.getLogger("ptvnet")
    assert len(package_logger.handlers) == 1

    set_global_log_level(logging.WARNING)
    assert package_logger.handlers[0].level == logging.WARNING

    reset_logging()
    assert package_logger.handlers == []
    setup_root_logger()
