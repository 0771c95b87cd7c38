"""testrailreporter default configuration file

Every configuration element ever used in the program must exist here.
These defaults may be overridden in the user's config file or with --set on the command line.

The variables guaranteed to be available are set in config.environ()
"""


# TestRail host name, e.g. 'example.testrail.io'
domain = None

# TestRail user name (usually an e-mail address)
username = None

# TestRail password or API key. Prefer setting the environment variable named in
# password_env_var over storing a secret here.
password = None

# TestRail project in which to create runs
project_id = None

# TestRail suite from which the run's cases are taken
suite_id = None

# Section to restrict the case listing to, when include_all_in_test_run is False
group_id = None

# Case title filter to restrict the case listing to, when include_all_in_test_run is False
filter = None  # noqa: A001

# Prefix of the name of newly-created runs; a timestamp is appended
run_name = 'Automated test run'

# True to include all cases in the suite in a new run; False to include only the cases listed
# with group_id and filter
include_all_in_test_run = True

# Environment variable which, when set, overrides the configured password
password_env_var = 'TESTRAIL_API_KEY'

# Seconds to wait for a response from TestRail before giving up
request_timeout = 60
