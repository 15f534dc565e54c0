"""
================================================================================
Configuration Loader
================================================================================

YAML-based configuration management with environment variable override support.

Features:
    - YAML configuration loading (config/config.yaml)
    - Environment variable override (UI_BASE_URL overrides ui.base_url)
    - Dot notation path access with defaults
    - Typed UI settings snapshot (timeouts, browser, selector dialect)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger

from .selectors import SelectorKind


# Repository-level configuration file
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[3] / "config" / "config.yaml"

DEFAULT_BASE_URL = "https://www.demoblaze.com/"


class ConfigurationError(Exception):
    """Raised when configuration loading or access fails."""
    pass


class ConfigLoader:
    """
    Configuration loader with YAML and environment variable support.

    Configuration hierarchy (highest to lowest priority):
        1. Environment variables (UI_TIMEOUTS_DEFAULT)
        2. YAML configuration file
        3. Default values

    Usage:
        >>> config = ConfigLoader()
        >>> config.get("ui.base_url", "https://www.demoblaze.com/")
        'https://www.demoblaze.com/'

        >>> config.get("ui.timeouts.default", 10000)
        10000

    Environment Variable Mapping:
        - ui.base_url -> UI_BASE_URL
        - ui.headless -> UI_HEADLESS
        - ui.timeouts.default -> UI_TIMEOUTS_DEFAULT
    """

    _instance: Optional["ConfigLoader"] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        """Singleton - configuration is loaded once per process."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize configuration loader.

        Args:
            config_path: Path to YAML configuration file.
                        Uses DEFAULT_CONFIG_PATH if not specified.
        """
        if getattr(self, "_initialized", False):
            return

        self._config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._load_config()
        self._initialized = True

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        if not self._config_path.exists():
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )
            self._config = {}
            return

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                self._config = yaml.safe_load(f) or {}
            logger.debug(f"Loaded configuration from: {self._config_path}")
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}"
            ) from e

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-notation path.

        First checks environment variables, then YAML config, then default.

        Args:
            key: Dot-notation path (e.g., "ui.timeouts.default")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        env_key = key.upper().replace(".", "_")
        env_value = os.environ.get(env_key)
        if env_value is not None:
            return self._convert_type(env_value, default)

        value = self._config
        for part in key.split("."):
            if isinstance(value, dict):
                value = value.get(part)
            else:
                value = None

            if value is None:
                return default

        return value

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()
        logger.info(f"Configuration reloaded from: {self._config_path}")

    def _convert_type(self, value: str, reference: Any) -> Any:
        """Convert an environment string to the type of the default value."""
        if reference is None:
            return value

        if isinstance(reference, bool):
            return value.lower() in ("true", "1", "yes", "on")
        if isinstance(reference, int):
            try:
                return int(value)
            except ValueError:
                return value
        if isinstance(reference, float):
            try:
                return float(value)
            except ValueError:
                return value

        return value

    @classmethod
    def reset(cls) -> None:
        """Reset singleton instance (used by tests)."""
        cls._instance = None
        cls._config = {}


@dataclass(frozen=True)
class UISettings:
    """
    Snapshot of UI settings. All timeouts are in milliseconds.

    Attributes:
        base_url: Storefront entry URL
        browser: chromium, firefox or webkit
        headless: Run browser without a window
        selector_dialect: Preferred selector dialect for locator registries
        default_timeout: Default timeout of the wait primitives
        navigation_timeout: Page load / navigation settle timeout
        login_timeout: Authenticated marker timeout
        dialog_timeout: Native dialog (alert) timeout
        cart_clear_timeout: Overall deadline for clearing the cart
        poll_interval: Interval between checks of polling waits
    """
    base_url: str = DEFAULT_BASE_URL
    browser: str = "chromium"
    headless: bool = True
    selector_dialect: SelectorKind = SelectorKind.SHORT
    default_timeout: int = 10000
    navigation_timeout: int = 30000
    login_timeout: int = 15000
    dialog_timeout: int = 10000
    cart_clear_timeout: int = 60000
    poll_interval: int = 100

    @classmethod
    def from_config(cls, config: Optional[ConfigLoader] = None) -> "UISettings":
        """Build settings from the configuration loader."""
        config = config or ConfigLoader()
        defaults = cls()
        return cls(
            base_url=config.get("ui.base_url", defaults.base_url),
            browser=config.get("ui.browser", defaults.browser),
            headless=config.get("ui.headless", defaults.headless),
            selector_dialect=SelectorKind.parse(
                config.get("ui.selector_dialect", defaults.selector_dialect.name)
            ),
            default_timeout=config.get("ui.timeouts.default", defaults.default_timeout),
            navigation_timeout=config.get(
                "ui.timeouts.navigation", defaults.navigation_timeout
            ),
            login_timeout=config.get("ui.timeouts.login", defaults.login_timeout),
            dialog_timeout=config.get("ui.timeouts.dialog", defaults.dialog_timeout),
            cart_clear_timeout=config.get(
                "ui.timeouts.cart_clear", defaults.cart_clear_timeout
            ),
            poll_interval=config.get("ui.timeouts.poll_interval", defaults.poll_interval),
        )


def get_ui_settings() -> UISettings:
    """Convenience accessor for the current UI settings."""
    return UISettings.from_config()


__all__ = [
    "ConfigLoader",
    "ConfigurationError",
    "UISettings",
    "get_ui_settings",
    "DEFAULT_CONFIG_PATH",
]
