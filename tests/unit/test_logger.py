from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from dynamic_registry.utils.logger import PACKAGE_LOGGER, configure_logging, get_logger
from tests.factories.registry_factory import CountingPopulator, EmptyRegistry, FailingPopulator


@pytest.fixture
def package_level() -> Iterator[int]:
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logger.level
    handlers = list(logger.handlers)
    yield level
    logger.setLevel(level)
    logger.handlers[:] = handlers


def test_get_logger_leaves_output_and_level_to_host(package_level: int) -> None:
    package = logging.getLogger(PACKAGE_LOGGER)
    package.setLevel(logging.ERROR)

    child = get_logger("dynamic_registry.some.module")
    get_logger("dynamic_registry.other")
    assert child.name == "dynamic_registry.some.module"
    assert package.level == logging.ERROR
    assert any(isinstance(h, logging.NullHandler) for h in package.handlers)


def test_configure_logging_adds_one_stream_handler(package_level: int) -> None:
    configure_logging("INFO")
    configure_logging("DEBUG")
    package = logging.getLogger(PACKAGE_LOGGER)
    streams = [h for h in package.handlers if type(h) is logging.StreamHandler]
    assert len(streams) == 1
    assert package.level == logging.DEBUG


def test_configure_logging_accepts_names(package_level: int) -> None:
    assert configure_logging("debug").level == logging.DEBUG
    assert configure_logging(logging.ERROR).level == logging.ERROR
    with pytest.raises(ValueError):
        configure_logging("chatty")


def test_population_is_logged(package_level: int, caplog: pytest.LogCaptureFixture) -> None:
    configure_logging("DEBUG")
    registry = EmptyRegistry()
    registry.register(CountingPopulator(["a"]))
    with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER):
        registry.populate()
    assert "running populator CountingPopulator" in caplog.text
    assert "Registry 'empty' populated with 1 dynamic values" in caplog.text


def test_failing_populator_is_logged(package_level: int, caplog: pytest.LogCaptureFixture) -> None:
    registry = EmptyRegistry()
    registry.register(FailingPopulator())
    with caplog.at_level(logging.WARNING, logger=PACKAGE_LOGGER):
        with pytest.raises(RuntimeError):
            registry.populate()
    assert "Populator FailingPopulator failed for registry 'empty'" in caplog.text
