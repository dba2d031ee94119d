"""
Login end-to-end suite package.

Kept importable so that:
  - page objects and framework helpers can be imported from tests
  - `run_tests.py` and CI jobs can resolve test paths

Layout:
  - ui_testing/framework: page handle, fixture registry, browser, config
  - ui_testing/pages: page objects
  - ui_testing/tests: browser-driven specs
  - unit: browser-free tests of the framework
"""

__version__ = "0.1.0"
