"""
================================================================================
Allure Report Utilities
================================================================================

Helpers for enriching Allure reports produced by the storefront suites.

Features:
- Text / JSON / PNG attachment helpers
- Result summary from an allure-results directory
- HTML report generation through the Allure CLI

================================================================================
"""

import json
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

import allure
from loguru import logger


# ================================================================================
# Attachment Helpers
# ================================================================================

def attach_json(data: Any, name: str = "Data") -> None:
    """Attach data to the current Allure step as JSON."""
    allure.attach(
        json.dumps(data, indent=2, default=str),
        name=name,
        attachment_type=allure.attachment_type.JSON,
    )


def attach_text(text: str, name: str = "Text") -> None:
    """Attach plain text to the current Allure step."""
    allure.attach(
        text,
        name=name,
        attachment_type=allure.attachment_type.TEXT,
    )


def attach_png(content: bytes, name: str = "Screenshot") -> None:
    """Attach PNG bytes (e.g. a Playwright screenshot) to the report."""
    allure.attach(
        content,
        name=name,
        attachment_type=allure.attachment_type.PNG,
    )


# ================================================================================
# Report Processing
# ================================================================================

@dataclass
class ResultSummary:
    """Counts of Allure result statuses."""
    total: int = 0
    passed: int = 0
    failed: int = 0
    broken: int = 0
    skipped: int = 0

    @property
    def pass_rate(self) -> float:
        if self.total == 0:
            return 0.0
        return (self.passed / self.total) * 100

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "broken": self.broken,
            "skipped": self.skipped,
            "pass_rate": f"{self.pass_rate:.2f}%",
        }


def load_results(results_dir: Path) -> List[Dict[str, Any]]:
    """Parse every *-result.json file in an allure-results directory."""
    results = []
    for result_file in Path(results_dir).glob("*-result.json"):
        try:
            with open(result_file, encoding="utf-8") as f:
                results.append(json.load(f))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to parse {result_file}: {e}")
    return results


def summarize_results(results_dir: Path) -> ResultSummary:
    """Count result statuses of an allure-results directory."""
    summary = ResultSummary()
    for result in load_results(results_dir):
        summary.total += 1
        status = result.get("status")
        if status in ("passed", "failed", "broken", "skipped"):
            setattr(summary, status, getattr(summary, status) + 1)
    return summary


def generate_allure_report(results_dir: Path, report_dir: Path) -> bool:
    """
    Generate an Allure HTML report with the Allure CLI.

    Args:
        results_dir: allure-results directory written by allure-pytest
        report_dir: Output directory for the HTML report

    Returns:
        True if the report was generated
    """
    cmd = [
        "allure", "generate",
        str(results_dir),
        "-o", str(report_dir),
        "--clean",
    ]
    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except FileNotFoundError:
        logger.warning("Allure CLI not found. Please install Allure to generate reports.")
        return False

    if result.returncode != 0:
        logger.error(f"Report generation failed: {result.stderr}")
        return False

    summary = summarize_results(results_dir)
    logger.info(f"Report generated at {report_dir}: {summary.to_dict()}")
    return True


__all__ = [
    "attach_json",
    "attach_text",
    "attach_png",
    "ResultSummary",
    "load_results",
    "summarize_results",
    "generate_allure_report",
]
