"""
================================================================================
Soft Assertions
================================================================================

Collects content-verification failures so one mismatch does not hide the
next. Setup problems should still raise; use this for checks on rendered
content (names, prices, totals, confirmation details).

Usage:
    soft = SoftAssertions("TC002 add multiple products")
    soft.equal(await cart_page.total_price(), 1460.0, "cart total")
    soft.contains(await cart_page.item_names(), "MacBook Pro", "cart items")
    soft.assert_all()   # raises AssertionError listing every failure

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List

import allure
from loguru import logger

from storefront_tools.report_tools.allure_utils import attach_text


_MISSING = object()


@dataclass
class SoftFailure:
    """A single recorded verification failure."""
    message: str
    expected: Any = None
    actual: Any = None

    def __str__(self) -> str:
        if self.expected is _MISSING:
            return f"{self.message}: actual={self.actual!r}"
        return f"{self.message}: expected={self.expected!r}, actual={self.actual!r}"


class SoftAssertions:
    """Soft assertion collector for one scenario."""

    def __init__(self, scenario: str = ""):
        self.scenario = scenario
        self.failures: List[SoftFailure] = []
        self.checks = 0

    # =========================================================================
    # Checks (each returns True when it passed)
    # =========================================================================

    def check(
        self,
        condition: bool,
        message: str,
        expected: Any = _MISSING,
        actual: Any = None,
    ) -> bool:
        """Record a failure unless `condition` holds."""
        self.checks += 1
        if condition:
            logger.debug(f"Soft check passed: {message}")
            return True

        failure = SoftFailure(message, expected, actual)
        self.failures.append(failure)
        logger.warning(f"Soft check failed: {failure}")
        return False

    def equal(self, actual: Any, expected: Any, message: str) -> bool:
        return self.check(actual == expected, message, expected, actual)

    def contains(self, container: Iterable[Any], item: Any, message: str) -> bool:
        container = list(container)
        return self.check(item in container, message, f"contains {item!r}", container)

    def not_contains(self, container: Iterable[Any], item: Any, message: str) -> bool:
        container = list(container)
        return self.check(item not in container, message, f"no {item!r}", container)

    def text_contains(self, text: str, fragment: str, message: str) -> bool:
        return self.check(fragment in (text or ""), message, f"contains {fragment!r}", text)

    def truthy(self, value: Any, message: str) -> bool:
        return self.check(bool(value), message, actual=value)

    def greater_than(self, actual: Any, threshold: Any, message: str) -> bool:
        return self.check(actual > threshold, message, f"> {threshold!r}", actual)

    # =========================================================================
    # Reporting
    # =========================================================================

    @property
    def failed(self) -> bool:
        return bool(self.failures)

    def summary(self) -> str:
        header = (
            f"{len(self.failures)} of {self.checks} soft check(s) failed"
            + (f" in '{self.scenario}'" if self.scenario else "")
        )
        return "\n".join([header, *(f"  - {f}" for f in self.failures)])

    def assert_all(self) -> None:
        """Raise one AssertionError listing every recorded failure."""
        if not self.failures:
            return
        summary = self.summary()
        with allure.step("Soft assertion failures"):
            attach_text(summary, name="Soft assertion failures")
        logger.error(summary)
        raise AssertionError(summary)


__all__ = [
    "SoftAssertions",
    "SoftFailure",
]
