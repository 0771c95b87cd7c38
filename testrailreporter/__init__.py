"""Report test results to a TestRail test run."""

__version__ = '0.1.0'
