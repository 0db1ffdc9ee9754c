"""
Date pattern rules for assignment extraction.

Each rule pairs a regular expression with the capture group holding the date
and a note on where the label ("due", "deadline", ...) sits relative to it.
The extractor runs every rule, in order, against every line, so rules can be
added or reordered here without touching the scanning code.
"""

import re
from dataclasses import dataclass
from typing import Pattern, Tuple

# Orientation values
LABEL_BEFORE_DATE = "label_before_date"
DATE_BEFORE_LABEL = "date_before_label"
DATE_ONLY = "date_only"

# Building blocks
MONTH = r'(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]*'  # "Sep", "Sept", "September"
NUMERIC_DATE = r'\d{1,2}[/\-]\d{1,2}[/\-]\d{2,4}'                     # "3/15/25", "03-15-2025"
LABEL = r'(?:due|submit|deadline|assignment)'
DEADLINE_LABEL = r'(?:due|submit|deadline)'


@dataclass(frozen=True)
class DatePattern:
    """A single date-matching rule."""
    name: str
    regex: Pattern
    group: int = 1              # Capture group holding the date text
    orientation: str = DATE_ONLY

    def finditer(self, line: str):
        """Yield all non-overlapping matches in a line, left to right."""
        return self.regex.finditer(line)


def _compile(pattern: str) -> Pattern:
    return re.compile(pattern, re.IGNORECASE)


DATE_PATTERNS: Tuple[DatePattern, ...] = (
    # "Assignment 2 due 10/14/2025"
    DatePattern(
        name="label_numeric_date",
        regex=_compile(rf'{LABEL}.*?({NUMERIC_DATE})'),
        orientation=LABEL_BEFORE_DATE,
    ),
    # "10/14/2025 - Lab report due"
    DatePattern(
        name="numeric_date_label",
        regex=_compile(rf'({NUMERIC_DATE}).*?{LABEL}'),
        orientation=DATE_BEFORE_LABEL,
    ),
    # "Oct 14", "October 14, 2025"
    DatePattern(
        name="month_day",
        regex=_compile(rf'({MONTH}\s+\d{{1,2}}(?:,?\s+\d{{4}})?)'),
    ),
    # "14 Oct", "14 October 2025"
    DatePattern(
        name="day_month",
        regex=_compile(rf'(\d{{1,2}}\s+{MONTH}(?:\s+\d{{4}})?)'),
    ),
    # "Final paper due Oct 14"
    DatePattern(
        name="label_month_day",
        regex=_compile(rf'{DEADLINE_LABEL}.*?({MONTH}\s+\d{{1,2}})'),
        orientation=LABEL_BEFORE_DATE,
    ),
)
