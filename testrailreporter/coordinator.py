"""Share one TestRail run between all reporters in a process."""

import logging
from typing import Optional


class RunCoordinator:
    """Holds the ID of the run that every reporter in this process adds results to.

    Harnesses typically create one reporter per test file, but all of them must report into the
    same run. The first run ID claimed is kept for the life of this object.
    """

    def __init__(self):
        self._run_id = None  # type: Optional[int]

    @property
    def run_id(self) -> Optional[int]:
        return self._run_id

    def has_run(self) -> bool:
        return self._run_id is not None

    def claim(self, run_id: int) -> int:
        """Store a newly-created run ID, unless one is already held.

        Returns the run ID that all reporters must use from now on.
        """
        if self._run_id is None:
            self._run_id = run_id
        elif run_id != self._run_id:
            logging.warning('Ignoring run %s since run %s is already in use', run_id, self._run_id)
        return self._run_id
