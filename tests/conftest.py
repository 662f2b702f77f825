"""Test configuration for pytest."""

import logging
import os
import pytest


@pytest.fixture(autouse=True)
def configure_test_logging():
    """Configure logging for tests to be minimal."""
    # Set environment variable to ensure minimal logging during tests
    os.environ['BRANDLENS_LOG_LEVEL'] = 'WARNING'

    # Also configure root logger to be quiet
    logging.getLogger().setLevel(logging.WARNING)

    # Dedup and probe log per image; keep them quiet
    for logger_name in ['brandlens.dedup.cluster', 'brandlens.probe.images']:
        logging.getLogger(logger_name).setLevel(logging.ERROR)
