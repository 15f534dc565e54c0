"""
================================================================================
UI Framework Errors
================================================================================

Exception taxonomy shared by the locator, wait and page layers.

    StorefrontUIError
        LocatorResolutionError   - unknown/misused locator key (programming error)
        StaleSurfaceError        - action attempted on a closed page
        ParseExtractionMismatch  - text did not match the expected pattern
        SessionSetupError        - authenticated-session precondition failed
        WaitTimeout              - condition not observed in time
            ConvergenceTimeout   - cart could not be driven to empty

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Optional


class StorefrontUIError(Exception):
    """Base class for all UI framework errors."""
    pass


class LocatorResolutionError(StorefrontUIError):
    """Raised when a locator key cannot be resolved to exactly one selector."""
    pass


class StaleSurfaceError(StorefrontUIError):
    """Raised when a page object is used after its page was closed."""
    pass


class SessionSetupError(StorefrontUIError):
    """Raised when the authenticated-session precondition cannot be met."""
    pass


class ParseExtractionMismatch(StorefrontUIError):
    """
    Raised (strict mode only) when rendered text does not match a pattern.

    Attributes:
        text: The raw text that was parsed
        pattern: Human-readable description of the expected pattern
    """

    def __init__(self, text: str, pattern: str):
        self.text = text
        self.pattern = pattern
        super().__init__(f"Text {text!r} does not match {pattern}")


class WaitTimeout(StorefrontUIError):
    """
    Raised when a synchronization primitive times out.

    Attributes:
        description: What was being waited for (usually the locator)
        timeout: Timeout in milliseconds
        last_observed: Last value seen before giving up (if any)
    """

    def __init__(
        self,
        description: str,
        timeout: float,
        last_observed: Any = None,
    ):
        self.description = description
        self.timeout = timeout
        self.last_observed = last_observed
        message = f"Timed out after {timeout:.0f}ms waiting for: {description}"
        if last_observed is not None:
            message += f" (last observed: {last_observed})"
        super().__init__(message)


class ConvergenceTimeout(WaitTimeout):
    """
    Raised when the cart cannot be driven to the empty state.

    Attributes:
        last_observed: Last observed line item count
        elapsed: Milliseconds spent before giving up
        removed: Number of removals that met their post-condition
    """

    def __init__(
        self,
        description: str,
        timeout: float,
        last_observed: Optional[int],
        elapsed: float,
        removed: int,
    ):
        self.elapsed = elapsed
        self.removed = removed
        super().__init__(description, timeout, last_observed)
        self.args = (
            f"{self.args[0]}; elapsed={elapsed:.0f}ms, removed={removed}",
        )


__all__ = [
    "StorefrontUIError",
    "LocatorResolutionError",
    "StaleSurfaceError",
    "SessionSetupError",
    "ParseExtractionMismatch",
    "WaitTimeout",
    "ConvergenceTimeout",
]
