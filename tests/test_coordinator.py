"""Test coordinator."""

import unittest

from .context import testrailreporter  # noqa: F401

from testrailreporter import coordinator  # noqa: I100


class TestRunCoordinator(unittest.TestCase):
    """Test coordinator.RunCoordinator."""

    def test_empty(self):
        rc = coordinator.RunCoordinator()
        self.assertFalse(rc.has_run())
        self.assertIsNone(rc.run_id)

    def test_first_claim_wins(self):
        rc = coordinator.RunCoordinator()
        self.assertEqual(10, rc.claim(10))
        self.assertTrue(rc.has_run())
        with self.assertLogs(level='WARNING'):
            self.assertEqual(10, rc.claim(11))
        self.assertEqual(10, rc.run_id)

    def test_same_claim(self):
        rc = coordinator.RunCoordinator()
        rc.claim(10)
        self.assertEqual(10, rc.claim(10))
        self.assertEqual(10, rc.run_id)
