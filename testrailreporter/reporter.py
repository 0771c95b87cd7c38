"""Collect test results for TestRail cases and publish them at the end of a run.

A harness creates one TestRailReporter for each batch of tests (typically one test file) and
calls its hooks in order:

    on_run_start()
    on_test_pass(title, duration) / on_test_fail(title, message)   (any number of times)
    on_run_end()

Tests are matched to TestRail cases by references like C1234 in their titles. Tests without any
reference are ignored.
"""

import datetime
import enum
import logging
from typing import Optional

from testrailreporter.casedef import CaseResult, CaseResults, Status
from testrailreporter.caseref import title_to_case_ids
from testrailreporter.coordinator import RunCoordinator
from testrailreporter.options import RunConfiguration
from testrailreporter.testrailapi import TestRailApi


DEFAULT_RUN_NAME = 'Automated test run'
RUN_DESCRIPTION = 'Test results reported automatically by testrailreporter'


class ReporterState(enum.Enum):
    IDLE = enum.auto()
    RUN_STARTING = enum.auto()
    COLLECTING = enum.auto()
    FINALIZING = enum.auto()
    PUBLISHED = enum.auto()
    DISCARDED = enum.auto()


def ordinal(n: int) -> str:
    """Return n with its English ordinal suffix, like 1st or 12th."""
    if 10 <= n % 100 <= 20:
        suffix = 'th'
    else:
        suffix = {1: 'st', 2: 'nd', 3: 'rd'}.get(n % 10, 'th')
    return f'{n}{suffix}'


def format_run_time(when: datetime.datetime) -> str:
    """Format a time stamp for a run name, like: Oct 19th 2026, 14:05 (+02:00)"""
    offset = when.strftime('%z')
    offset = f'{offset[:3]}:{offset[3:]}' if offset else '+00:00'
    return (f'{when.strftime("%b")} {ordinal(when.day)} {when.year}, '
            f'{when.strftime("%H:%M")} ({offset})')


class TestRailReporter:
    """Turns test events into TestRail results for a single batch of tests."""
    __test__ = False

    def __init__(self, options: RunConfiguration, coordinator: RunCoordinator,
                 client: Optional[TestRailApi] = None):
        options = options.with_env_password()
        options.validate()
        self.options = options
        self.coordinator = coordinator
        if client is None:
            client = TestRailApi(options, coordinator.run_id)
        self.client = client
        self.state = ReporterState.IDLE
        self._results = []  # type: CaseResults

    @property
    def results(self) -> tuple[CaseResult, ...]:
        return tuple(self._results)

    def run_name(self, now: Optional[datetime.datetime] = None) -> str:
        if now is None:
            now = datetime.datetime.now().astimezone()
        return f'{self.options.run_name or DEFAULT_RUN_NAME} {format_run_time(now)}'

    def _expect_state(self, state: ReporterState, event: str):
        if self.state != state:
            raise RuntimeError(f'{event} received while reporter is {self.state.name}')

    def on_run_start(self):
        """Make sure a TestRail run exists, creating one if no other reporter has."""
        self._expect_state(ReporterState.IDLE, 'Run start')
        if self.coordinator.has_run():
            logging.info('Using Test Run that already exists (run ID %s)',
                         self.coordinator.run_id)
            self.client.run_id = self.coordinator.run_id
            self.state = ReporterState.COLLECTING
            return

        self.state = ReporterState.RUN_STARTING
        logging.info('Creating a new Test Run')
        try:
            run_id = self.client.create_run(self.run_name(), RUN_DESCRIPTION)
        except Exception:
            self.state = ReporterState.IDLE
            raise
        self.client.run_id = self.coordinator.claim(run_id)
        logging.info('Created Test Run %s', self.client.run_id)
        self.state = ReporterState.COLLECTING

    def _record(self, title: str, status: Status, comment: str):
        self._results.extend(CaseResult(case_id, status, comment)
                             for case_id in title_to_case_ids(title))

    def on_test_pass(self, title: str, duration: int):
        """Record a passed test; duration is in milliseconds."""
        self._expect_state(ReporterState.COLLECTING, 'Test pass')
        self._record(title, Status.PASSED, f'Execution time: {duration}ms')

    def on_test_fail(self, title: str, message: str):
        self._expect_state(ReporterState.COLLECTING, 'Test failure')
        self._record(title, Status.FAILED, str(message))

    def on_run_end(self) -> bool:
        """Publish the collected results, or delete the run if there are none.

        Returns False if publishing failed.
        """
        self._expect_state(ReporterState.COLLECTING, 'Run end')
        self.state = ReporterState.FINALIZING
        if not self._results:
            logging.warning('No test cases were matched. Ensure that your tests are declared '
                            'correctly and match Cxxx')
            self.client.delete_run()
            self.state = ReporterState.DISCARDED
            return True

        published = self.client.publish_results(self._results)
        self.state = ReporterState.PUBLISHED
        return published
