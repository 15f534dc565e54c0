# ================================================================================
# Wait Primitives Module
# ================================================================================
#
# Condition-based synchronization for UI workflows.
#
# Key Features:
#   - wait_visible / wait_hidden on top of Playwright's locator.wait_for()
#   - wait_count: poll a locator's match count until a predicate holds
#   - poll_until: bounded polling of any async reader
#   - Cooperative: every wait suspends the asyncio task, never the thread
#   - Timeouts in milliseconds; defaults come from ui.timeouts.*
#
# Usage:
#   await wait_visible(registry.locator("login_modal"), description="login modal")
#   await wait_count(rows, lambda n: n == before - 1, description="cart rows")
#
# ================================================================================

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Optional, TypeVar

from loguru import logger
from playwright.async_api import Locator
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from .config_loader import get_ui_settings
from .errors import WaitTimeout


T = TypeVar("T")


def _default_timeout(timeout: Optional[float]) -> float:
    return get_ui_settings().default_timeout if timeout is None else timeout


def _default_interval(poll_interval: Optional[float]) -> float:
    return get_ui_settings().poll_interval if poll_interval is None else poll_interval


async def _wait_for_state(
    locator: Locator,
    state: str,
    timeout: Optional[float],
    description: Optional[str],
) -> None:
    timeout = _default_timeout(timeout)
    description = description or str(locator)
    try:
        await locator.first.wait_for(state=state, timeout=timeout)
    except PlaywrightTimeoutError as e:
        logger.error(f"{description} did not become {state} within {timeout:.0f}ms")
        raise WaitTimeout(f"{description} to be {state}", timeout) from e
    logger.debug(f"{description} is {state}")


async def wait_visible(
    locator: Locator,
    timeout: Optional[float] = None,
    description: Optional[str] = None,
) -> None:
    """
    Suspend until the (first) matched element is visible.

    Args:
        locator: Playwright locator
        timeout: Timeout in milliseconds (default: ui.timeouts.default)
        description: Text used in logs and in the WaitTimeout message

    Raises:
        WaitTimeout: If the element is not visible in time
    """
    await _wait_for_state(locator, "visible", timeout, description)


async def wait_hidden(
    locator: Locator,
    timeout: Optional[float] = None,
    description: Optional[str] = None,
) -> None:
    """
    Suspend until the (first) matched element is hidden or detached.

    Used after actions that dismiss overlays such as modals.
    """
    await _wait_for_state(locator, "hidden", timeout, description)


async def poll_until(
    read: Callable[[], Awaitable[T]],
    predicate: Callable[[T], bool],
    timeout: Optional[float] = None,
    description: str = "condition",
    poll_interval: Optional[float] = None,
) -> T:
    """
    Poll an async reader until its value satisfies a predicate.

    The reader runs at least once, even with a zero timeout.

    Args:
        read: Async callable producing the observed value
        predicate: Condition on the observed value
        timeout: Timeout in milliseconds
        description: What is being waited for
        poll_interval: Milliseconds between checks

    Returns:
        The first observed value satisfying the predicate

    Raises:
        WaitTimeout: Carrying the last observed value
    """
    timeout = _default_timeout(timeout)
    interval = _default_interval(poll_interval)
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout / 1000
    attempt = 0

    while True:
        attempt += 1
        observed = await read()
        if predicate(observed):
            logger.debug(
                f"Condition met after {attempt} check(s): {description} "
                f"(observed: {observed})"
            )
            return observed

        remaining = deadline - loop.time()
        if remaining <= 0:
            logger.error(
                f"Timeout after {attempt} check(s) waiting for: {description}. "
                f"Last observed: {observed}"
            )
            raise WaitTimeout(description, timeout, last_observed=observed)

        await asyncio.sleep(min(interval / 1000, remaining))


async def wait_count(
    locator: Locator,
    predicate: Callable[[int], bool],
    timeout: Optional[float] = None,
    description: Optional[str] = None,
    poll_interval: Optional[float] = None,
) -> int:
    """
    Suspend until the number of matched elements satisfies a predicate.

    Args:
        locator: Playwright locator matching zero or more elements
        predicate: Condition on the match count
        timeout: Timeout in milliseconds
        description: What is being counted
        poll_interval: Milliseconds between checks

    Returns:
        The satisfying count

    Example:
        before = await rows.count()
        await rows.first.click()
        await wait_count(rows, lambda n: n == before - 1)
    """
    return await poll_until(
        locator.count,
        predicate,
        timeout=timeout,
        description=f"match count of {description or locator}",
        poll_interval=poll_interval,
    )


def count_is(expected: int) -> Callable[[Any], bool]:
    """Predicate: count equals `expected`."""
    def predicate(count: Any) -> bool:
        return count == expected
    predicate.__name__ = f"count_is_{expected}"
    return predicate


__all__ = [
    "wait_visible",
    "wait_hidden",
    "wait_count",
    "poll_until",
    "count_is",
]
