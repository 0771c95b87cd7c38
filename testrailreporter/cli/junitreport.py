"""Reports the results in JUnit XML files to a TestRail run.

Each file is reported by its own reporter, but all of them add their results to the same run.
"""

import argparse
import logging
import sys
import xml.etree.ElementTree as ET

from testrailreporter import argparsing
from testrailreporter import junitparse
from testrailreporter import log
from testrailreporter import netreq
from testrailreporter.coordinator import RunCoordinator
from testrailreporter.options import ConfigurationError, RunConfiguration
from testrailreporter.reporter import ReporterState, TestRailReporter
from testrailreporter.testcasedef import FAILED, TestCases, TestResult


def parse_args(args=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description='Report JUnit XML test results to TestRail')
    argparsing.arguments_logging(parser)
    argparsing.arguments_config(parser)
    argparsing.arguments_testrail(parser)
    parser.add_argument(
        '--close',
        action='store_true',
        help='Close the run after all results are published')
    parser.add_argument(
        'files',
        nargs='+',
        help='JUnit XML files to report')
    return parser.parse_args(args=args)


def replay(reporter: TestRailReporter, testcases: TestCases) -> bool:
    """Send the results of one file through a reporter.

    Returns False if publishing failed.
    """
    reporter.on_run_start()
    for test in testcases:
        if test.result == TestResult.PASS:
            reporter.on_test_pass(test.name, test.duration)
        elif test.result in FAILED:
            reporter.on_test_fail(test.name, test.reason)
    return reporter.on_run_end()


def report_files(options: RunConfiguration, filenames: list[str], close: bool = False) -> int:
    coordinator = RunCoordinator()
    status = 0
    last = None
    for fn in filenames:
        logging.info('Reporting %s', fn)
        try:
            testcases = junitparse.parse_junit_file(fn)
        except (OSError, ET.ParseError) as e:
            logging.error('Cannot read JUnit file %s: %s', fn, e)
            status = 1
            continue
        reporter = TestRailReporter(options, coordinator)
        if not replay(reporter, testcases):
            status = 1
        if reporter.state is ReporterState.PUBLISHED:
            last = reporter

    if last is not None:
        print('Results are published to', last.client.run_url())
        if close and not last.client.close_run():
            status = 1
    return status


def main() -> int:
    args = parse_args()
    log.setup(args)

    try:
        options = RunConfiguration.from_config(args)
        # Check now, before any file is read
        options.with_env_password().validate()
    except ConfigurationError as e:
        logging.error('%s', e)
        return 2

    try:
        return report_files(options, args.files, args.close)
    except netreq.RequestException:
        # Already logged; without a run there is nowhere to report to
        return 1


if __name__ == '__main__':
    sys.exit(main())
