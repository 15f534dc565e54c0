"""
================================================================================
Cart Convergence
================================================================================

Drives a cart to the empty state by repeated first-item removal.

    report = await converge_to_empty(cart_page.line_item_count, click_first_delete)

Algorithm:
    1. Count the line items; zero means done.
    2. Remove the first item.
    3. Poll until the count equals exactly (before - 1).
    4. Repeat.

Guarantees:
    - Returns only after a count observed zero items.
    - Each removal must be confirmed by the count dropping by exactly one;
      a stalled or doubled removal raises ConvergenceTimeout.
    - A removal action that times out (e.g. no delete link) also raises
      ConvergenceTimeout.
    - An overall deadline bounds the loop even if items keep appearing.
    - Duplicate names are irrelevant: removal is positional.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from loguru import logger

from storefront_suites.ui_testing.framework.config_loader import get_ui_settings
from storefront_suites.ui_testing.framework.errors import ConvergenceTimeout, WaitTimeout
from storefront_suites.ui_testing.framework.waits import count_is, poll_until


CountReader = Callable[[], Awaitable[int]]
RemoveAction = Callable[[], Awaitable[None]]


@dataclass(frozen=True)
class ConvergenceReport:
    """Outcome of a successful convergence."""
    removed: int
    elapsed_ms: int


async def converge_to_empty(
    count_items: CountReader,
    remove_first: RemoveAction,
    removal_timeout: Optional[int] = None,
    total_timeout: Optional[int] = None,
    poll_interval: Optional[int] = None,
) -> ConvergenceReport:
    """
    Remove first items until the cart is observed empty.

    Args:
        count_items: Async reader returning the current line item count
        remove_first: Async action removing the first line item (no waiting)
        removal_timeout: Per-removal post-condition timeout in ms
            (default: ui.timeouts.default)
        total_timeout: Overall deadline in ms (default: ui.timeouts.cart_clear)
        poll_interval: Milliseconds between count checks

    Returns:
        ConvergenceReport with the number of confirmed removals

    Raises:
        ConvergenceTimeout: A removal was not confirmed in time, or the
            overall deadline passed before the cart was empty
    """
    settings = get_ui_settings()
    if removal_timeout is None:
        removal_timeout = settings.default_timeout
    if total_timeout is None:
        total_timeout = settings.cart_clear_timeout
    if poll_interval is None:
        poll_interval = settings.poll_interval

    loop = asyncio.get_running_loop()
    started = loop.time()
    deadline = started + total_timeout / 1000
    removed = 0

    def elapsed_ms() -> int:
        return int((loop.time() - started) * 1000)

    while True:
        before = await count_items()
        if before == 0:
            report = ConvergenceReport(removed=removed, elapsed_ms=elapsed_ms())
            logger.info(
                f"Cart empty after {report.removed} removal(s) in {report.elapsed_ms}ms"
            )
            return report

        remaining_ms = (deadline - loop.time()) * 1000
        if remaining_ms <= 0:
            raise ConvergenceTimeout(
                "cart to be empty",
                total_timeout,
                last_observed=before,
                elapsed=elapsed_ms(),
                removed=removed,
            )

        logger.debug(f"Removing first line item ({before} in cart)")
        expected = before - 1
        try:
            await remove_first()
        except WaitTimeout as e:
            raise ConvergenceTimeout(
                f"removal of the first of {before} line item(s): {e.description}",
                e.timeout,
                last_observed=before,
                elapsed=elapsed_ms(),
                removed=removed,
            ) from e

        try:
            await poll_until(
                count_items,
                count_is(expected),
                timeout=min(removal_timeout, remaining_ms),
                description=f"line item count to drop from {before} to {expected}",
                poll_interval=poll_interval,
            )
        except WaitTimeout as e:
            raise ConvergenceTimeout(
                e.description,
                e.timeout,
                last_observed=e.last_observed,
                elapsed=elapsed_ms(),
                removed=removed,
            ) from e

        removed += 1


__all__ = [
    "ConvergenceReport",
    "converge_to_empty",
]
