"""Test caseref."""

import unittest

from .context import testrailreporter  # noqa: F401

from testrailreporter import caseref  # noqa: I100


class TestTitleToCaseIds(unittest.TestCase):
    """Test caseref.title_to_case_ids."""

    def test_no_reference(self):
        for title in ['untracked scenario',
                      '',
                      'C',
                      'CC is not a case',
                      'ABC123 is glued to letters',
                      'C12x is glued to a letter',
                      'c12 is lower case',
                      ]:
            with self.subTest(title=title):
                self.assertEqual([], caseref.title_to_case_ids(title))

    def test_references(self):
        for title, case_ids in [
                ('Login works C101', [101]),
                ('C12 and C34', [12, 34]),
                ('before C12, between (C34) after', [12, 34]),
                ('C34 then C12', [34, 12]),
                ('TC55 uses the long form', [55]),
                ('test_C12_login', [12]),
                ('tests.test_login.TestLogin.test_C7', [7]),
                ('C0042 has leading zeros', [42]),
        ]:
            with self.subTest(title=title):
                self.assertEqual(case_ids, caseref.title_to_case_ids(title))

    def test_duplicates(self):
        self.assertEqual([5, 6], caseref.title_to_case_ids('C5 C6 C5 again'))
