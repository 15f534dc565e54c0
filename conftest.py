"""
Repository-level pytest configuration.

  - Configures loguru once per run from the `logging` section of
    config/config.yaml (LOG_LEVEL / LOGGING_LEVEL override the level)
  - Exposes the repository root to fixtures

Credentials are never embedded here: UI_USERNAME / UI_PASSWORD override
the account in storefront_suites/ui_testing/data/users.yaml.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from storefront_suites.ui_testing.framework.config_loader import ConfigLoader
from storefront_tools.common import init_logger


def pytest_configure(config):
    """Initialize logging before collection."""
    settings = ConfigLoader()
    init_logger(
        level=os.getenv("LOG_LEVEL") or settings.get("logging.level", "INFO"),
        log_file=settings.get("logging.file"),
        rotation=settings.get("logging.rotation", "10 MB"),
        retention=settings.get("logging.retention", "7 days"),
    )


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent
