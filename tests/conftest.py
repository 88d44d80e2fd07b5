"""Shared fixtures for node-ip tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo logging.basicConfig() calls made by the code under test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
