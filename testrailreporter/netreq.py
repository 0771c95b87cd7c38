"""Network API functions
"""

from typing import Optional

import requests

import testrailreporter


HTTPError = requests.exceptions.HTTPError
RequestException = requests.exceptions.RequestException

# The User-Agent: header to use
USER_AGENT = f'testrailreporter/{testrailreporter.__version__}'

DATA_TYPE = 'application/json'


class Session(requests.Session):
    """Set up a requests session with a standard configuration

    Every request is authenticated with the given credentials and gives up after timeout
    seconds unless the caller supplies its own timeout. Failed requests are not retried.
    """

    def __init__(self, username: str, password: str, timeout: Optional[float] = None):
        super().__init__()
        self.auth = (username, password)
        self.timeout = timeout
        self.headers.update({'Accept': DATA_TYPE,
                             'Content-Type': DATA_TYPE,
                             'User-Agent': USER_AGENT,
                             })

    def request(self, method, url, **kwargs) -> requests.Response:  # noqa: D102
        kwargs.setdefault('timeout', self.timeout)
        return super().request(method, url, **kwargs)
