"""Utility functions used in multiple tests."""

import json
import os
from typing import Any, BinaryIO
from unittest.mock import MagicMock, patch

from testrailreporter import config
from testrailreporter import netreq
from testrailreporter.options import RunConfiguration


# Directory holding test data files
DATADIR = 'data'

DOMAIN = 'example.testrail.io'


def data_file(fn: str) -> str:
    """Return the path to a given test data file."""
    return os.path.join(os.path.dirname(__file__), DATADIR, fn)


def open_data(fn: str) -> BinaryIO:
    """Return an open binary file object for the given test data file."""
    return open(data_file(fn), 'rb')


def patch_config_get(key: str, value):
    """Mock config.get() to return a specific value for a given key.

    All other keys return the originally-configured value.
    """
    def side_effect(k: str):
        return value if k == key else orig_get(k)

    # Use the original (or the previously-patched) get() for unmatched keys
    orig_get = config.get
    return patch('testrailreporter.config.get', side_effect=side_effect)


def make_options(**kwargs) -> RunConfiguration:
    """Return a complete set of options, with any given ones replaced."""
    values = {'domain': DOMAIN,
              'username': 'tester@example.com',
              'password': 'secret',
              'project_id': 1,
              'suite_id': 2,
              }
    values.update(kwargs)
    return RunConfiguration(**values)


def fake_response(data: Any = None, status: int = 200) -> MagicMock:
    """Return a mock requests.Response that can be used in a with statement."""
    resp = MagicMock()
    resp.__enter__.return_value = resp
    resp.status_code = status
    resp.text = json.dumps(data)
    if status >= 400:
        resp.raise_for_status.side_effect = netreq.HTTPError(f'{status} Error')
    return resp
