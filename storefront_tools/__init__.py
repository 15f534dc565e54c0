"""
================================================================================
Storefront Tools
================================================================================

Support utilities shared by the storefront suites and the test runner.

Modules:
    - common: Logging setup and filesystem helpers
    - report_tools: Allure attachments, result summaries and HTML reports

Example:
    from storefront_tools.common import init_logger
    from storefront_tools.report_tools import generate_allure_report

    init_logger(level="DEBUG")
    generate_allure_report(Path("reports/allure-results"), Path("reports/allure-report"))

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
