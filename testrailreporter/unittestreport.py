"""Report unittest results to TestRail.

Use TestRailTestRunner in place of unittest.TextTestRunner, or run tests with
    python -m testrailreporter.unittestreport [unittest arguments]

A test's title is its ID followed by the first line of its docstring, so a case can be
referenced either in the method name (test_C1234_login) or in the docstring.
"""

import sys
import time
import unittest
from typing import Optional

from testrailreporter import coordinator
from testrailreporter import options
from testrailreporter.reporter import ReporterState, TestRailReporter


def test_title(test: unittest.TestCase) -> str:
    """Return the title used to find case references for a test."""
    desc = test.shortDescription()
    return f'{test.id()} {desc}' if desc else test.id()


def failure_message(err) -> str:
    """Return the message from a sys.exc_info() tuple."""
    exctype, value, _ = err
    return str(value) or exctype.__name__


class TestRailTestResult(unittest.TextTestResult):
    """Text test result that also sends each result to a TestRailReporter."""
    __test__ = False

    reporter = None  # type: Optional[TestRailReporter]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._started = {}  # type: dict[str, float]

    def startTestRun(self):
        super().startTestRun()
        self.reporter.on_run_start()

    def startTest(self, test):
        self._started[test.id()] = time.perf_counter()
        super().startTest(test)

    def _duration(self, test) -> int:
        start = self._started.pop(test.id(), None)
        return 0 if start is None else round((time.perf_counter() - start) * 1000)

    def addSuccess(self, test):
        super().addSuccess(test)
        self.reporter.on_test_pass(test_title(test), self._duration(test))

    def addFailure(self, test, err):
        super().addFailure(test, err)
        self.reporter.on_test_fail(test_title(test), failure_message(err))

    def addError(self, test, err):
        super().addError(test, err)
        # Errors in class and module fixtures aren't associated with a test case
        if isinstance(test, unittest.TestCase):
            self.reporter.on_test_fail(test_title(test), failure_message(err))

    def addUnexpectedSuccess(self, test):
        super().addUnexpectedSuccess(test)
        self.reporter.on_test_fail(test_title(test), 'Unexpected success')

    def addSubTest(self, test, subtest, err):
        super().addSubTest(test, subtest, err)
        if err is not None:
            self.reporter.on_test_fail(test_title(test), failure_message(err))

    def stopTestRun(self):
        super().stopTestRun()
        if self.reporter.on_run_end() and self.reporter.state is ReporterState.PUBLISHED:
            self.stream.writeln(f'Results are published to {self.reporter.client.run_url()}')


class TestRailTestRunner(unittest.TextTestRunner):
    """Text test runner that publishes the results of the run to TestRail."""
    __test__ = False

    resultclass = TestRailTestResult

    def __init__(self, testrail: TestRailReporter, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.testrail = testrail

    def _makeResult(self):
        result = super()._makeResult()
        result.reporter = self.testrail
        return result


def main(argv: Optional[list[str]] = None):
    """Run unittest's command-line interface, reporting to TestRail."""
    testrail = TestRailReporter(options.RunConfiguration.from_config(),
                                coordinator.RunCoordinator())
    unittest.main(module=None, argv=argv if argv is not None else sys.argv,
                  testRunner=TestRailTestRunner(testrail, verbosity=2))


if __name__ == '__main__':
    main()
