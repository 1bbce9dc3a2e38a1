import logging

import pytest

from cfgseq.handlers import registry
from cfgseq.section import Section


@pytest.fixture
def pristine_cfgseq_logger(monkeypatch):
    """Run the logging setup again from scratch, then restore the logger."""
    log = logging.getLogger("cfgseq")
    level, handlers = log.level, list(log.handlers)
    log.handlers = []
    log.setLevel(logging.NOTSET)
    monkeypatch.setattr(registry._setup_logging_once, "_inited", False)
    yield log
    log.handlers = handlers
    log.setLevel(level)


def test_debug_switch_installs_one_handler(pristine_cfgseq_logger, monkeypatch):
    monkeypatch.setenv("CFGSEQ_DEBUG", "1")

    registry._setup_logging_once()
    registry._setup_logging_once()

    log = pristine_cfgseq_logger
    assert log.level == logging.DEBUG
    assert len(log.handlers) == 1
    assert isinstance(log.handlers[0], logging.StreamHandler)
    assert log.handlers[0].formatter._fmt == "[%(levelname)s] %(name)s: %(message)s"


def test_no_switch_leaves_logger_alone(pristine_cfgseq_logger, monkeypatch):
    monkeypatch.delenv("CFGSEQ_DEBUG", raising=False)

    registry._setup_logging_once()

    assert pristine_cfgseq_logger.handlers == []
    assert pristine_cfgseq_logger.level == logging.NOTSET


def test_add_value_logs_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="cfgseq")
    section = Section("s", multivalue_names=["tags"])
    section.add_value("tags", "x")
    section.add_value("name", "n")

    records = [r for r in caplog.records if r.name == "cfgseq.section.model"]
    assert [r.levelno for r in records] == [logging.DEBUG, logging.DEBUG]
    assert "tags" in records[0].getMessage()
    assert "name" in records[1].getMessage()
