"""
Assignment Extraction Module

Turns the raw text layer of a syllabus into assignment records:
1. Candidate Generation (every date pattern against every line)
2. Date Interpretation (year inference and the sanity window)
3. Name Cleanup (strip the date and list markers from the line)

Candidates that fail steps 2 or 3 are skipped and logged; they never stop
the scan of the remaining lines.
"""

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, tzinfo
from functools import lru_cache
from typing import Iterator, List, Optional, Sequence, Tuple, Union

import dateparser
from pytz import timezone

from .config import (
    DEFAULT_COURSE_NAME, DEFAULT_TIMEZONE, EARLIEST_DUE_DATE,
    MAX_NAME_LENGTH, MIN_NAME_LENGTH, NAME_ELLIPSIS, TEXT_SAMPLE_LENGTH
)
from .date_patterns import DATE_PATTERNS, DatePattern
from .models import AssignmentRecord, ExtractionResult

logger = logging.getLogger(__name__)

TimezoneLike = Union[str, tzinfo]

FOUR_DIGIT_YEAR = re.compile(r'\d{4}')
LEADING_MARKERS = re.compile(r'^[-:•\d.\s]+')  # "1.", "- ", "• ", "Week 3:" leftovers
WHITESPACE_RUN = re.compile(r'\s+')

# Shapes of the captured date text. Numeric dates are month first
# ("03/04/2025" is March 4); month words only count by their first 3 letters
# ("Septem", "Marks" and "Decided" read as Sep, Mar and Dec).
NUMERIC_PARTS = re.compile(r'^(\d{1,2})[/\-](\d{1,2})[/\-](\d{2,4})$')
MONTH_FIRST_PARTS = re.compile(r'^([a-z]+)\s+(\d{1,2})(?:,?\s+(\d{4}))?$', re.IGNORECASE)
DAY_FIRST_PARTS = re.compile(r'^(\d{1,2})\s+([a-z]+)(?:\s+(\d{4}))?$', re.IGNORECASE)

# Year assumed while reading a date written without one
BASE_YEAR = 2001

DATEPARSER_SETTINGS = {
    'REQUIRE_PARTS': ['day', 'month', 'year'],
    'RETURN_AS_TIMEZONE_AWARE': False,
}


class InvalidInputError(TypeError):
    """Raised when the text handed to the extractor is not a string."""
    pass


@dataclass
class Candidate:
    """A pattern match inside a line, before its date is checked."""
    line_index: int
    pattern: DatePattern
    match_text: str             # Whole matched substring
    date_text: str              # Captured date substring


def iter_candidates(lines: Sequence[str],
                    patterns: Sequence[DatePattern] = DATE_PATTERNS) -> Iterator[Candidate]:
    """Yield candidates in line order, then pattern order, then match order.

    Patterns never short-circuit each other: a line matched by several
    patterns yields one candidate per match.
    """
    for idx, line in enumerate(lines):
        for pattern in patterns:
            for match in pattern.finditer(line):
                yield Candidate(
                    line_index=idx,
                    pattern=pattern,
                    match_text=match.group(0),
                    date_text=match.group(pattern.group),
                )


def _resolve_timezone(tz: Optional[TimezoneLike]) -> tzinfo:
    if tz is None:
        tz = DEFAULT_TIMEZONE
    if isinstance(tz, str):
        return timezone(tz)
    return tz


def _localize(naive: datetime, tz: tzinfo) -> datetime:
    if hasattr(tz, 'localize'):
        return tz.localize(naive)
    return naive.replace(tzinfo=tz)


def _resolve_now(now: Optional[datetime], tz: tzinfo) -> datetime:
    if now is None:
        return datetime.now(tz)
    if now.tzinfo is None:
        return _localize(now, tz)
    return now


@lru_cache(maxsize=None)
def _month_from_name(prefix: str) -> Optional[int]:
    """Look up the month number for a 3-letter month prefix."""
    parsed = dateparser.parse(f"{prefix} 1 {BASE_YEAR}", languages=['en'], settings=DATEPARSER_SETTINGS)
    return parsed.month if parsed else None


def _expand_year(text: str) -> int:
    year = int(text)
    if len(text) == 2:
        return year + (2000 if year < 50 else 1900)
    return year


def _read_date_parts(date_text: str) -> Optional[Tuple[int, int, int]]:
    """Split a captured date into (month, day, year).

    Dates without a year get BASE_YEAR. Returns None if the month or day is
    out of range.
    """
    match = NUMERIC_PARTS.match(date_text)
    if match:
        month = int(match.group(1))
        day = int(match.group(2))
        year = _expand_year(match.group(3))
    else:
        match = MONTH_FIRST_PARTS.match(date_text)
        if match:
            month_word, day_text = match.group(1), match.group(2)
        else:
            match = DAY_FIRST_PARTS.match(date_text)
            if not match:
                return None
            day_text, month_word = match.group(1), match.group(2)
        month = _month_from_name(month_word[:3].lower())
        day = int(day_text)
        year = int(match.group(3)) if match.group(3) else BASE_YEAR

    if month is None or not 1 <= month <= 12 or not 1 <= day <= 31 or year < 1:
        return None
    return month, day, year


def _roll_date(year: int, month: int, day: int) -> date:
    """Build a date, carrying days past the end of the month into the next
    one ("Feb 30" is Mar 2, "June 31" is Jul 1)."""
    return date(year, month, 1) + timedelta(days=day - 1)


def _midnight(day: date, tz: tzinfo) -> datetime:
    return _localize(datetime.combine(day, time()), tz)


def interpret_date(date_text: str, now: datetime, tz: tzinfo) -> Optional[datetime]:
    """Interpret a captured date string.

    Args:
        date_text: Captured substring such as "Dec 15" or "03/15/2025"
        now: Aware reference instant used for year inference
        tz: Zone in which the date means local midnight

    Returns:
        Aware datetime at midnight of the due day, or None if the text is not
        a date or falls outside the sanity window
    """
    parts = _read_date_parts(date_text)
    if parts is None:
        logger.debug("Skipping %r: not a date", date_text)
        return None

    month, day, year = parts
    due_day = _roll_date(year, month, day)

    if FOUR_DIGIT_YEAR.search(date_text):
        due = _midnight(due_day, tz)
    else:
        # No year given: this year, or next year if that has already passed.
        # A Feb 29 that does not exist in the new year becomes Mar 1.
        this_year = now.astimezone(tz).year
        due_day = _roll_date(this_year, due_day.month, due_day.day)
        due = _midnight(due_day, tz)
        if due < now:
            due = _midnight(_roll_date(this_year + 1, due_day.month, due_day.day), tz)

    if due <= EARLIEST_DUE_DATE:
        logger.debug("Skipping %r: %s is not after %s", date_text, due.date(), EARLIEST_DUE_DATE.date())
        return None

    return due


def clean_assignment_name(line: str, match_text: str) -> Optional[str]:
    """Derive an assignment name from the line a date was found in.

    The matched text is removed, leading numbering/bullets are stripped and
    whitespace is collapsed. Long names are truncated.

    Returns:
        The name, or None if what is left is too short to be a title
    """
    name = line.strip()
    name = name.replace(match_text, '', 1).strip()
    name = LEADING_MARKERS.sub('', name).strip()
    name = WHITESPACE_RUN.sub(' ', name).strip()

    if len(name) > MAX_NAME_LENGTH:
        name = name[:MAX_NAME_LENGTH] + NAME_ELLIPSIS

    if len(name) <= MIN_NAME_LENGTH:
        return None
    return name


def extract_assignments(text: str,
                        course_name: Optional[str] = None,
                        now: Optional[datetime] = None,
                        tz: Optional[TimezoneLike] = None) -> ExtractionResult:
    """Extract assignment records from syllabus text.

    Args:
        text: Full text of one document
        course_name: Label stamped on every record (defaults to
                     "Uploaded Syllabus")
        now: Reference instant for year inference; defaults to the current
             time. Naive values are read in ``tz``.
        tz: Timezone name or tzinfo the document's dates are read in

    Returns:
        ExtractionResult with the records in line order and a text sample

    Raises:
        InvalidInputError: If text is not a string
    """
    if not isinstance(text, str):
        raise InvalidInputError(f"Expected syllabus text as str, got {type(text).__name__}")

    course_name = course_name or DEFAULT_COURSE_NAME
    zone = _resolve_timezone(tz)
    now = _resolve_now(now, zone)

    lines = text.split('\n')
    assignments: List[AssignmentRecord] = []

    for candidate in iter_candidates(lines):
        due = interpret_date(candidate.date_text, now, zone)
        if due is None:
            continue

        name = clean_assignment_name(lines[candidate.line_index], candidate.match_text)
        if name is None:
            logger.debug("Skipping %s match on line %d: name too short",
                         candidate.pattern.name, candidate.line_index)
            continue

        assignments.append(AssignmentRecord(
            name=name,
            course_name=course_name,
            due_date=due,
            source="pdf",
        ))

    logger.info("Found %d potential assignments in %d lines", len(assignments), len(lines))

    return ExtractionResult(
        assignments=assignments,
        text_sample=text[:TEXT_SAMPLE_LENGTH],
    )
