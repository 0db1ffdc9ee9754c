"""Unit tests for the date pattern table."""

from syllabus_extractor.assignment_extractor import iter_candidates
from syllabus_extractor.date_patterns import (
    DATE_PATTERNS, DATE_BEFORE_LABEL, DATE_ONLY, LABEL_BEFORE_DATE
)


def _pattern(name):
    return next(p for p in DATE_PATTERNS if p.name == name)


def _captures(name, line):
    pattern = _pattern(name)
    return [m.group(pattern.group) for m in pattern.finditer(line)]


def test_pattern_order():
    """Test the rules run in a fixed order."""
    assert [p.name for p in DATE_PATTERNS] == [
        "label_numeric_date",
        "numeric_date_label",
        "month_day",
        "day_month",
        "label_month_day",
    ]
    assert [p.orientation for p in DATE_PATTERNS] == [
        LABEL_BEFORE_DATE, DATE_BEFORE_LABEL, DATE_ONLY, DATE_ONLY, LABEL_BEFORE_DATE
    ]


def test_label_numeric_date():
    """Test label-then-numeric-date lines."""
    assert _captures("label_numeric_date", "Assignment 2 due 10/14/2025") == ["10/14/2025"]
    assert _captures("label_numeric_date", "DEADLINE: 3-4-25") == ["3-4-25"]
    assert _captures("label_numeric_date", "10/14/2025 essay") == []


def test_numeric_date_label():
    """Test numeric-date-then-label lines."""
    assert _captures("numeric_date_label", "10/14/2025 - Lab report due") == ["10/14/2025"]
    assert _captures("numeric_date_label", "Lab report due 10/14/2025") == []


def test_month_day():
    """Test month-name dates with an optional year."""
    assert _captures("month_day", "Quiz on Sept 5") == ["Sept 5"]
    assert _captures("month_day", "Final: October 14, 2025") == ["October 14, 2025"]
    assert _captures("month_day", "Oct 1 and nov 2") == ["Oct 1", "nov 2"]


def test_day_month():
    """Test day-first month-name dates."""
    assert _captures("day_month", "Essay 14 Oct") == ["14 Oct"]
    assert _captures("day_month", "Exam 3 March 2025") == ["3 March 2025"]


def test_label_month_day():
    """Test label-then-month-name lines capture only month and day."""
    pattern = _pattern("label_month_day")
    match = next(pattern.finditer("Final paper due Oct 14, 2025"))
    assert match.group(0) == "due Oct 14"
    assert match.group(pattern.group) == "Oct 14"
    # "assignment" is not a label for this rule
    assert _captures("label_month_day", "Assignment Oct 14") == []


def test_candidates_in_line_then_pattern_order():
    """Test candidates come out line by line, in rule order within a line."""
    lines = ["Quiz Oct 1", "Essay due 3/4/2025", "nothing here"]
    candidates = [
        (c.line_index, c.pattern.name, c.date_text)
        for c in iter_candidates(lines)
    ]
    assert candidates == [
        (0, "month_day", "Oct 1"),
        (1, "label_numeric_date", "3/4/2025"),
    ]
