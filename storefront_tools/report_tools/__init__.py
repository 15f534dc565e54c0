"""Allure reporting helpers."""

from .allure_utils import (
    attach_json,
    attach_png,
    attach_text,
    generate_allure_report,
    summarize_results,
)

__all__ = [
    "attach_json",
    "attach_png",
    "attach_text",
    "generate_allure_report",
    "summarize_results",
]
