"""
Storefront test suites package.

    ui_testing/  - Playwright framework, page objects, workflows and scenarios
    unit/        - offline tests of the framework layer

Kept importable for IDE navigation and for `run_tests.py`.
"""
