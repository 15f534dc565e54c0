"""
================================================================================
Step Instrumentation
================================================================================

Explicit step wrapper for workflows and scenarios.

    result = await run_step("Login as autouser", lambda: login_page.login(user))

Each step is reported as an Allure step and logged through loguru with
structured context (`step`, `elapsed_ms`). Errors are logged and re-raised
unchanged; nothing is registered globally.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import inspect
import time
from typing import Awaitable, Callable, TypeVar, Union

import allure
from loguru import logger


T = TypeVar("T")


async def run_step(
    name: str,
    action: Callable[[], Union[Awaitable[T], T]],
) -> T:
    """
    Run an action as a named, logged and reported step.

    Args:
        name: Step name shown in logs and in the Allure report
        action: Zero-argument callable; may return an awaitable

    Returns:
        Whatever the action returns (awaited if needed)
    """
    step_logger = logger.bind(step=name)
    step_logger.info(f"[STEP] {name}")
    started = time.monotonic()

    with allure.step(name):
        try:
            result = action()
            if inspect.isawaitable(result):
                result = await result
        except Exception as e:
            elapsed_ms = int((time.monotonic() - started) * 1000)
            step_logger.bind(elapsed_ms=elapsed_ms).error(
                f"[STEP] {name} failed after {elapsed_ms}ms: "
                f"{type(e).__name__}: {e}"
            )
            raise

    elapsed_ms = int((time.monotonic() - started) * 1000)
    step_logger.bind(elapsed_ms=elapsed_ms).debug(f"[STEP] {name} done in {elapsed_ms}ms")
    return result


__all__ = ["run_step"]
