"""Tests for logging configuration."""

import logging

import pytest

from checkout.infrastructure.logging import configure_logging


@pytest.mark.parametrize("name", ["checkout.application.use_cases", "apps.api.v1.endpoints.checkout"])
def test_configured_hierarchies_have_a_handler(name):
    configure_logging("DEBUG")

    logger = logging.getLogger(name)
    top = logging.getLogger(name.split(".")[0])

    assert top.handlers
    assert logger.getEffectiveLevel() == logging.DEBUG


def test_level_is_applied_to_every_hierarchy():
    configure_logging("warning")

    assert logging.getLogger("checkout").level == logging.WARNING
    assert logging.getLogger("apps").level == logging.WARNING

    configure_logging("INFO")
