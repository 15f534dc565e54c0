"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based building blocks for the storefront page objects.

Components:
    - selectors: Tagged selector expressions (short CSS / structural XPath)
    - locator_registry: Semantic locator keys per page family
    - waits: Condition-based synchronization primitives
    - text_parsing: Price and order detail extraction
    - page_base: Base page object for common operations
    - steps / soft_assert: Step instrumentation and soft assertions
    - browser_manager: Browser lifecycle management

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_manager import BrowserManager
from .config_loader import ConfigLoader, UISettings, get_ui_settings
from .errors import (
    ConvergenceTimeout,
    LocatorResolutionError,
    ParseExtractionMismatch,
    SessionSetupError,
    StaleSurfaceError,
    StorefrontUIError,
    WaitTimeout,
)
from .locator_registry import LocatorRegistry, LocatorSet, MatchPolicy
from .page_base import PageBase
from .selectors import Selector, SelectorKind
from .soft_assert import SoftAssertions
from .steps import run_step

__all__ = [
    "BrowserManager",
    "ConfigLoader",
    "UISettings",
    "get_ui_settings",
    "ConvergenceTimeout",
    "LocatorResolutionError",
    "ParseExtractionMismatch",
    "SessionSetupError",
    "StaleSurfaceError",
    "StorefrontUIError",
    "WaitTimeout",
    "LocatorRegistry",
    "LocatorSet",
    "MatchPolicy",
    "PageBase",
    "Selector",
    "SelectorKind",
    "SoftAssertions",
    "run_step",
]
