"""TestRail result records."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class Status(IntEnum):
    """TestRail's built-in result status IDs.

    Only PASSED and FAILED are produced here; the others are defined by TestRail.
    """
    PASSED = 1
    BLOCKED = 2
    UNTESTED = 3
    RETEST = 4
    FAILED = 5


@dataclass(frozen=True)
class CaseResult:
    """Result of one test for one TestRail case."""

    case_id: int    # TestRail case ID (the number in C1234)
    status: Status  # result status
    comment: str    # execution time on pass, failure message on fail

    def as_json(self) -> dict[str, Any]:
        """Return the record in the form expected by add_results_for_cases."""
        return {'case_id': self.case_id,
                'status_id': int(self.status),
                'comment': self.comment,
                }


CaseResults = list[CaseResult]
