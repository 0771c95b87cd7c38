"""Parses JUnit XML test result files.

These are written by many test harnesses, e.g. pytest --junitxml=FILE or the mocha and Cypress
junit reporters. Both a <testsuites> root and a single <testsuite> root are handled.
"""

import logging
import xml.etree.ElementTree as ET
from typing import BinaryIO, Optional, Union

from testrailreporter.testcasedef import SingleTestFinding, TestCases, TestResult


def _duration_ms(time: Optional[str]) -> int:
    """Convert a JUnit time attribute (in seconds) into milliseconds."""
    if not time:
        return 0
    try:
        return round(float(time.replace(',', '')) * 1000)
    except ValueError:
        logging.debug('Invalid test time %s', time)
        return 0


def _message(elem: ET.Element) -> str:
    """Return the message of a failure or error element.

    This is the message attribute if it exists, otherwise the first line of its text.
    """
    message = elem.get('message')
    if message:
        return message
    text = (elem.text or '').strip()
    return text.splitlines()[0] if text else ''


def parse_testcase(case: ET.Element) -> SingleTestFinding:
    """Convert a single <testcase> element."""
    name = case.get('name', '')
    duration = _duration_ms(case.get('time'))
    if (elem := case.find('failure')) is not None:
        return SingleTestFinding(name, TestResult.FAIL, _message(elem), duration)
    if (elem := case.find('error')) is not None:
        return SingleTestFinding(name, TestResult.ERROR, _message(elem), duration)
    if (elem := case.find('skipped')) is not None:
        return SingleTestFinding(name, TestResult.SKIP, _message(elem), duration)
    return SingleTestFinding(name, TestResult.PASS, '', duration)


def parse_junit_file(f: Union[str, BinaryIO]) -> TestCases:
    """Parse a JUnit file, given its name or an open file object.

    Tests are returned in document order. Raises ET.ParseError on malformed XML.
    """
    root = ET.parse(f).getroot()
    if root.tag not in ('testsuites', 'testsuite'):
        logging.warning('Unexpected JUnit root element <%s>', root.tag)
    testcases = [parse_testcase(case) for case in root.iter('testcase')]
    logging.debug('Found %d tests', len(testcases))
    return testcases
