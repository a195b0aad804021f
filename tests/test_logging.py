from __future__ import annotations

import logging

from rich.logging import RichHandler

from falling_blocks.utils.logging import setup_logger


def test_setup_logger_with_rich_handler() -> None:
    logger = setup_logger(name="falling_blocks.test_rich", level="debug")
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], RichHandler)
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_setup_logger_with_stream_handler() -> None:
    logger = setup_logger(name="falling_blocks.test_plain", use_rich=False, level="warning")
    assert len(logger.handlers) == 1
    assert type(logger.handlers[0]) is logging.StreamHandler
    assert logger.level == logging.WARNING
    assert logger.propagate is False


def test_setup_logger_does_not_stack_handlers() -> None:
    setup_logger(name="falling_blocks.test_repeat")
    logger = setup_logger(name="falling_blocks.test_repeat", use_rich=False)
    assert len(logger.handlers) == 1
    assert type(logger.handlers[0]) is logging.StreamHandler


def test_setup_logger_unknown_level_defaults_to_info() -> None:
    logger = setup_logger(name="falling_blocks.test_level", use_rich=False, level="chatty")
    assert logger.level == logging.INFO
