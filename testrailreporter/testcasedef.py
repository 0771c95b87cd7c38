"""Local test outcome data, as produced by a test harness."""

from dataclasses import dataclass
from enum import IntEnum


class TestResult(IntEnum):
    """Enumeration of the results a local test run can have."""
    __test__ = False

    UNKNOWN = 0     # test result is not known
    PASS = 1        # test succeeded
    FAIL = 2        # test failed an assertion
    SKIP = 3        # test was skipped
    TIMEOUT = 4     # test timed out
    ERROR = 5       # test raised an unexpected exception


# Results reported to TestRail as failures
FAILED = frozenset((TestResult.FAIL, TestResult.ERROR, TestResult.TIMEOUT))


@dataclass
class SingleTestFinding:
    """Class to hold the result of a single run of a single test."""
    __test__ = False

    name: str           # test title
    result: TestResult  # test result
    reason: str         # failure message (if any)
    duration: int       # test duration in milliseconds


TestCases = list[SingleTestFinding]
