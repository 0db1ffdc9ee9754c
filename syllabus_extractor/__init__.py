"""Extract assignment due dates from syllabus text."""

from .assignment_extractor import InvalidInputError, extract_assignments
from .models import AssignmentRecord, ExtractionResult

__version__ = "0.1.0"

__all__ = [
    "AssignmentRecord",
    "ExtractionResult",
    "InvalidInputError",
    "extract_assignments",
]
