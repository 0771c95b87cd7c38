"""Functions to set up common argument parsers."""

import argparse
import ast
from typing import Optional

from testrailreporter import config


class StoreMultipleConstAction(argparse.Action):
    """Store the value of the const to multiple attributes.

    const holds the value to store (defaults to True) and attrs is an iterable
    of attribute names to store the value, in addition to dest.
    """

    def __init__(self,
                 option_strings,
                 dest: str,
                 const: bool = True,
                 attrs: Optional[list[str]] = None,
                 default=None,
                 required: bool = False,
                 help=None):     # noqa: A002
        super().__init__(
            option_strings=option_strings,
            dest=dest,
            nargs=0,
            const=const,
            default=default,
            required=required,
            help=help)
        self.attrs = attrs if attrs else []

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, self.const)
        for attr in self.attrs:
            setattr(namespace, attr, self.const)


class OverrideConfigAction(argparse.Action):
    """argparsing action that adds a configuration override."""
    def __init__(self,
                 option_strings,
                 dest: str,
                 default=None,
                 required: bool = False,
                 help=None):     # noqa: A002
        super().__init__(
            option_strings=option_strings,
            dest=dest,
            nargs=1,
            default=default,
            required=required,
            metavar='NAME=VALUE',
            help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        for assignment in values:
            try:
                name, rawval = assignment.split('=', 1)
            except ValueError as e:
                raise argparse.ArgumentTypeError(f'Missing = in {assignment}') from e
            # Let any exceptions through here since they provide detail about the problem
            val = ast.literal_eval(rawval) if rawval else ''
            config.add_override(name, val)


def arguments_config(parser: argparse.ArgumentParser):
    """Add arguments needed for manipulating the configuration."""
    parser.add_argument(
        '--set',
        action=OverrideConfigAction,
        help='Override a config value')


def arguments_logging(parser: argparse.ArgumentParser):
    """Add arguments needed for logging."""
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Show more log messages')
    parser.add_argument(
        '--debug',
        action=StoreMultipleConstAction,
        attrs=['verbose'],
        help='Show debug level log messages')


def arguments_testrail(parser: argparse.ArgumentParser):
    """Add arguments that override the TestRail options in the configuration.

    The password can only be given in the configuration or the environment, never on the
    command line where other users could see it.
    """
    group = parser.add_argument_group('TestRail arguments', 'Where and how to report results')
    group.add_argument(
        '--domain',
        help='TestRail host name')
    group.add_argument(
        '--username',
        help='TestRail user name')
    group.add_argument(
        '--project-id',
        type=int,
        help='TestRail project in which to create the run')
    group.add_argument(
        '--suite-id',
        type=int,
        help='TestRail suite holding the cases')
    group.add_argument(
        '--group-id',
        type=int,
        help='TestRail section to which to restrict the run with --no-include-all')
    group.add_argument(
        '--filter',
        help='Case title filter to restrict the run with --no-include-all')
    group.add_argument(
        '--run-name',
        help='Prefix of the name of a new run')
    group.add_argument(
        '--include-all',
        dest='include_all_in_test_run',
        action=argparse.BooleanOptionalAction,
        default=None,
        help='Whether a new run includes all cases in the suite')
