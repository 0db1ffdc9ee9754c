"""
Data models for the syllabus assignment extractor.

This module defines the data structures returned by the extraction engine.
All models use Python dataclasses, which keep the records simple to build,
compare and print.

These models represent:
- Assignment records (one per accepted date match)
- The result of one extraction call (records plus a text sample)
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List

from pytz import utc


@dataclass
class AssignmentRecord:
    """Represents one assignment found in a syllabus.

    The due date is kept as a timezone-aware datetime; it is turned into an
    ISO-8601 UTC string only when the record is serialized.
    """
    name: str                   # Cleaned-up line text (e.g., "Project 1")
    course_name: str            # Course label supplied by the caller
    due_date: datetime          # Midnight of the due day, timezone-aware
    source: str = "pdf"         # Where the record came from

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON shape used at the API boundary."""
        return {
            "name": self.name,
            "courseName": self.course_name,
            "dueDate": serialize_instant(self.due_date),
            "source": self.source,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AssignmentRecord":
        """Build a record from its JSON shape."""
        return cls(
            name=data["name"],
            course_name=data["courseName"],
            due_date=deserialize_instant(data["dueDate"]),
            source=data.get("source", "pdf"),
        )


@dataclass
class ExtractionResult:
    """Container for everything one extraction call produces."""
    assignments: List[AssignmentRecord] = field(default_factory=list)
    text_sample: str = ""       # First characters of the input, for debugging

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON body returned by the parse endpoint."""
        return {
            "assignments": [a.to_dict() for a in self.assignments],
            "text": self.text_sample,
        }


# Serialization helpers for JSON conversion

def serialize_instant(dt: datetime) -> str:
    """Convert an aware datetime to a UTC string like "2025-03-15T04:00:00.000Z"."""
    dt = dt.astimezone(utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S") + f".{dt.microsecond // 1000:03d}Z"


def deserialize_instant(s: str) -> datetime:
    """Convert a UTC string produced by serialize_instant back to a datetime."""
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    return datetime.fromisoformat(s).astimezone(utc)
