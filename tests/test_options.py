"""Test options."""

import argparse
import unittest
from unittest.mock import patch

from .context import testrailreporter  # noqa: F401
from .util import make_options

from testrailreporter import options  # noqa: I100


class TestRunConfiguration(unittest.TestCase):
    """Test options.RunConfiguration."""

    def test_validate_complete(self):
        make_options().validate()
        # Optional values may be missing
        make_options(group_id=None, filter=None, run_name=None).validate()

    def test_validate_missing(self):
        for name in options.REQUIRED:
            with self.subTest(name=name):
                opts = make_options(**{name: None})
                with self.assertRaisesRegex(options.ConfigurationError, f'Missing {name} value'):
                    opts.validate()

    def test_from_mapping(self):
        opts = options.RunConfiguration.from_mapping(
            {'domain': 'example.testrail.io', 'suite_id': 3, 'unknown': 'ignored'})
        self.assertEqual('example.testrail.io', opts.domain)
        self.assertEqual(3, opts.suite_id)
        self.assertIsNone(opts.username)

    def test_from_mapping_none(self):
        with self.assertRaisesRegex(options.ConfigurationError, 'Missing TestRail reporter'):
            options.RunConfiguration.from_mapping(None)

    def test_env_password(self):
        opts = make_options(password='configured')
        with self.assertLogs(level='INFO') as logs:
            newopts = opts.with_env_password({'API_KEY': 'from-env'}, 'API_KEY')
        self.assertEqual('from-env', newopts.password)
        self.assertEqual('configured', opts.password)
        # The secret itself must not be logged
        self.assertNotIn('from-env', '\n'.join(logs.output))

    def test_env_password_missing(self):
        opts = make_options(password='configured')
        self.assertIs(opts, opts.with_env_password({}, 'API_KEY'))
        self.assertIs(opts, opts.with_env_password({'API_KEY': ''}, 'API_KEY'))

    def test_env_password_fills_in_missing(self):
        opts = make_options(password=None)
        opts = opts.with_env_password({'API_KEY': 'from-env'}, 'API_KEY')
        opts.validate()
        self.assertEqual('from-env', opts.password)

    def test_env_password_default_variable(self):
        with patch.dict('os.environ', {'TESTRAIL_API_KEY': 'from-env'}):
            self.assertEqual('from-env', make_options().with_env_password().password)

    def test_repr_hides_password(self):
        self.assertNotIn('secret', repr(make_options(password='secret')))

    def test_from_config(self):
        configured = {'domain': 'configured.testrail.io',
                      'username': 'user',
                      'password': 'pass',
                      'project_id': 4,
                      'suite_id': 5,
                      'group_id': None,
                      'filter': None,
                      'run_name': 'Nightly',
                      'include_all_in_test_run': True,
                      'request_timeout': 30,
                      }
        args = argparse.Namespace(domain=None, suite_id=9, include_all_in_test_run=False)
        with patch('testrailreporter.config.get', side_effect=configured.__getitem__):
            opts = options.RunConfiguration.from_config(args)
        self.assertEqual('configured.testrail.io', opts.domain)
        self.assertEqual(9, opts.suite_id)
        self.assertIs(False, opts.include_all_in_test_run)
        self.assertEqual('Nightly', opts.run_name)
        self.assertEqual(30, opts.timeout)
