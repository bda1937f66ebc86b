"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import logging

import pytest

from complex_reactor import ComplexReactor


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo handlers and levels installed by setup_logging()."""
    pkg_logger = logging.getLogger("complex_reactor")
    handlers, level = list(pkg_logger.handlers), pkg_logger.level
    yield pkg_logger
    pkg_logger.handlers[:] = handlers
    pkg_logger.setLevel(level)


@pytest.fixture
def default_reactor() -> ComplexReactor:
    """Reactor with default parameters (conversion=0.5, single output)."""
    return ComplexReactor()


@pytest.fixture
def split_reactor() -> ComplexReactor:
    """Full-conversion reactor splitting 70/30 between R and S."""
    return ComplexReactor(conversion=1.0, two_outputs=True, split_ratio=0.7)


@pytest.fixture
def reactor_yaml(tmp_path):
    """Write a YAML config and return its path."""

    def _write(content: str):
        p = tmp_path / "reactor.yaml"
        p.write_text(content)
        return p

    return _write
