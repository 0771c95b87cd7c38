"""Find TestRail case references in test titles."""

import re


# A case reference looks like C1234 (or TC1234) and must not be glued to other letters or digits.
# Underscores are separators so that Python test names like test_C1234_login work.
CASE_ID_RE = re.compile(r'(?<![A-Za-z0-9])T?C(\d+)(?![A-Za-z0-9])')


def title_to_case_ids(title: str) -> list[int]:
    """Return the distinct case IDs referenced in a test title, in the order found.

    An empty list means the test is not tracked in TestRail.
    """
    case_ids = []
    for match in CASE_ID_RE.finditer(title):
        case_id = int(match.group(1))
        if case_id not in case_ids:
            case_ids.append(case_id)
    return case_ids
