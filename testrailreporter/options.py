"""Options needed to talk to TestRail on behalf of a reporter."""

import argparse
import dataclasses
import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from testrailreporter import config


# Options that must be set before anything is sent to TestRail
REQUIRED = ('domain', 'username', 'password', 'project_id', 'suite_id')


class ConfigurationError(RuntimeError):
    """A required option is missing."""


@dataclass(frozen=True)
class RunConfiguration:
    """Connection and run settings for one reporter."""

    domain: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    project_id: Optional[int] = None
    suite_id: Optional[int] = None
    group_id: Optional[int] = None
    filter: Optional[str] = None  # noqa: A003
    run_name: Optional[str] = None
    include_all_in_test_run: Optional[bool] = None
    timeout: Optional[float] = None

    def __repr__(self) -> str:
        # Keep the password out of log messages and tracebacks
        shown = dataclasses.replace(self, password='***' if self.password else self.password)
        fields = ', '.join(f'{f.name}={getattr(shown, f.name)!r}'
                           for f in dataclasses.fields(shown))
        return f'{type(self).__name__}({fields})'

    def validate(self):
        """Raise ConfigurationError if a required option is missing."""
        for name in REQUIRED:
            if getattr(self, name) is None:
                raise ConfigurationError(
                    f'Missing {name} value. Please update the TestRail reporter configuration')

    def with_env_password(self, environ: Optional[Mapping[str, str]] = None,
                          env_var: Optional[str] = None) -> 'RunConfiguration':
        """Return a copy using the password from the environment, if one is set there.

        This allows keeping the password or API key out of configuration files.
        """
        if environ is None:
            environ = os.environ
        if env_var is None:
            env_var = config.get('password_env_var')
        if not environ.get(env_var):
            return self
        logging.info('Using token in environment variable %s', env_var)
        return dataclasses.replace(self, password=environ[env_var])

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping[str, Any]]) -> 'RunConfiguration':
        """Build from a dict of option names to values; unknown names are ignored."""
        if mapping is None:
            raise ConfigurationError('Missing TestRail reporter options')
        names = {f.name for f in dataclasses.fields(cls)}
        return cls(**{k: v for k, v in mapping.items() if k in names})

    @classmethod
    def from_config(cls, args: Optional[argparse.Namespace] = None) -> 'RunConfiguration':
        """Build from the configuration file, overridden by any command-line arguments.

        Command-line arguments are those attributes of args with the same names as the options
        that are not None.
        """
        values = {f.name: config.get(f.name) for f in dataclasses.fields(cls)
                  if f.name != 'timeout'}
        values['timeout'] = config.get('request_timeout')
        if args is not None:
            for name in values:
                value = getattr(args, name, None)
                if value is not None:
                    values[name] = value
        return cls.from_mapping(values)
