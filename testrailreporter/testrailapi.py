"""Talk to the TestRail API about a single test run.

See https://support.testrail.com/hc/en-us/articles/7077039051284-Accessing-the-TestRail-API
All calls are authenticated with the user name and password (or API key) in the options.
"""

import json
import logging
from typing import Optional, Sequence

from testrailreporter import netreq
from testrailreporter.casedef import CaseResult
from testrailreporter.options import RunConfiguration


HTTPError = netreq.HTTPError

# TestRail puts the API path in the query string, so extra parameters are joined with &
SITE_URL = 'https://{domain}/index.php?'
BASE_URL = SITE_URL + '/api/v2'
GET_CASES_URL = BASE_URL + '/get_cases/{project_id}'
ADD_RUN_URL = BASE_URL + '/add_run/{project_id}'
ADD_RESULTS_URL = BASE_URL + '/add_results_for_cases/{run_id}'
CLOSE_RUN_URL = BASE_URL + '/close_run/{run_id}'
DELETE_RUN_URL = BASE_URL + '/delete_run/{run_id}'
VIEW_RUN_URL = SITE_URL + '/runs/view/{run_id}'

MAX_RETRIEVED = 100000  # Don't ever retrieve more than this number of cases


class TestRailApi:
    """Create, fill in and dispose of a TestRail run."""
    __test__ = False

    def __init__(self, options: RunConfiguration, run_id: Optional[int] = None,
                 session: Optional[netreq.Session] = None):
        self.options = options
        self.run_id = run_id
        if session is None:
            session = netreq.Session(options.username, options.password, options.timeout)
        self.http = session

    def _url(self, template: str, **kwargs) -> str:
        return template.format(domain=self.options.domain, **kwargs)

    def has_run(self) -> bool:
        """Return True if a run ID is already known."""
        return self.run_id is not None

    def run_url(self) -> str:
        """Return the URL at which a person can view the run."""
        return self._url(VIEW_RUN_URL, run_id=self.run_id)

    def _get_cases(self) -> list[int]:
        url = self._url(GET_CASES_URL, project_id=self.options.project_id)
        params = {'suite_id': self.options.suite_id}
        if self.options.group_id is not None:
            params['section_id'] = self.options.group_id
        if self.options.filter is not None:
            params['filter'] = self.options.filter

        case_ids = []
        while url and len(case_ids) < MAX_RETRIEVED:
            logging.debug('Retrieving cases from %s', url)
            with self.http.get(url, params=params) as resp:
                resp.raise_for_status()
                page = json.loads(resp.text)
            if isinstance(page, list):
                # Versions before 6.7 return all cases at once
                case_ids.extend(case['id'] for case in page)
                break
            case_ids.extend(case['id'] for case in page['cases'])
            # The next link includes all the parameters already
            next_link = (page.get('_links') or {}).get('next')
            url = self._url(SITE_URL) + next_link if next_link else None
            params = None
        return case_ids

    def get_cases(self) -> Optional[list[int]]:
        """Return the IDs of the cases in the configured suite, section and filter.

        Returns None if they could not be retrieved.
        """
        try:
            return self._get_cases()
        except (netreq.RequestException, ValueError, KeyError, TypeError) as e:
            logging.error('Could not retrieve the list of cases: %s', e)
            return None

    def create_run(self, name: str, description: str) -> int:
        """Create a new run and return its ID.

        Raises an exception if the run could not be created.
        """
        include_all = True
        case_ids = []
        if self.options.include_all_in_test_run is False:
            cases = self.get_cases()
            if cases is None:
                logging.warning('Including all cases in the run instead')
            else:
                include_all = False
                case_ids = cases

        url = self._url(ADD_RUN_URL, project_id=self.options.project_id)
        data = {'suite_id': self.options.suite_id,
                'name': name,
                'description': description,
                'include_all': include_all,
                'case_ids': case_ids,
                }
        logging.debug('Creating run at %s', url)
        try:
            with self.http.post(url, data=json.dumps(data)) as resp:
                resp.raise_for_status()
                run = json.loads(resp.text)
            self.run_id = int(run['id'])
        except (netreq.RequestException, ValueError, KeyError, TypeError) as e:
            logging.error('Could not create a test run: %s', e)
            raise
        return self.run_id

    def publish_results(self, results: Sequence[CaseResult]) -> bool:
        """Add all results to the run at once.

        Returns False if the results could not be added. No exception is raised, since the
        tests themselves are already done by now.
        """
        if not self.has_run():
            logging.error('Cannot publish %d results without a test run', len(results))
            return False
        url = self._url(ADD_RESULTS_URL, run_id=self.run_id)
        data = {'results': [result.as_json() for result in results]}
        logging.debug('Adding %d results at %s', len(results), url)
        try:
            with self.http.post(url, data=json.dumps(data)) as resp:
                resp.raise_for_status()
        except netreq.RequestException as e:
            logging.error('Could not publish results to run %s: %s', self.run_id, e)
            return False
        logging.info('Results are published to %s', self.run_url())
        return True

    def _post_run_action(self, template: str, action: str) -> bool:
        if not self.has_run():
            logging.error('Cannot %s a test run without its ID', action)
            return False
        url = self._url(template, run_id=self.run_id)
        logging.debug('Requesting %s of run at %s', action, url)
        try:
            with self.http.post(url) as resp:
                resp.raise_for_status()
        except netreq.RequestException as e:
            logging.error('Could not %s run %s: %s', action, self.run_id, e)
            return False
        return True

    def delete_run(self) -> bool:
        """Delete the run; failures are only logged."""
        if self._post_run_action(DELETE_RUN_URL, 'delete'):
            logging.info('Test run %s deleted', self.run_id)
            return True
        return False

    def close_run(self) -> bool:
        """Close the run so no more results can be added; failures are only logged."""
        if self._post_run_action(CLOSE_RUN_URL, 'close'):
            logging.info('Test run %s closed successfully', self.run_id)
            return True
        return False

