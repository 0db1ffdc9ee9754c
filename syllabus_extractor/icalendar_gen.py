"""
iCalendar generation module.

Generates .ics files from extracted assignment records for calendar import.
"""

import uuid
from datetime import timedelta
from typing import List

from icalendar import Calendar, Event
from pytz import timezone

from .config import DEFAULT_TIMEZONE
from .models import AssignmentRecord


class ICalendarGenerator:
    """Generates iCalendar (.ics) files from assignment records."""

    def __init__(self, timezone_str: str = DEFAULT_TIMEZONE):
        """Initialize calendar generator.

        Args:
            timezone_str: Timezone events are written in (default: SYLLABUS_TIMEZONE)
        """
        self.tz = timezone(timezone_str)

    def generate_calendar(self, assignments: List[AssignmentRecord]) -> Calendar:
        """Generate a calendar with one due event per record.

        Records are not merged; two records for the same date give two events.

        Args:
            assignments: Records in the order they were extracted

        Returns:
            Calendar object ready for export
        """
        cal = Calendar()
        cal.add('prodid', '-//Syllabus Assignment Extractor//EN')
        cal.add('version', '2.0')
        cal.add('calscale', 'GREGORIAN')
        cal.add('method', 'PUBLISH')

        for assignment in assignments:
            cal.add_component(self._create_due_event(assignment))

        return cal

    def _create_due_event(self, assignment: AssignmentRecord) -> Event:
        """Create event for an assignment due date."""
        due_dt = assignment.due_date
        if due_dt.tzinfo is None:
            due_dt = self.tz.localize(due_dt)
        else:
            due_dt = due_dt.astimezone(self.tz)

        event = Event()
        event.add('uid', f"{uuid.uuid4()}@syllabus-extractor")
        event.add('dtstart', due_dt)
        event.add('dtend', due_dt + timedelta(minutes=1))
        event.add('summary', f"DUE: {assignment.name}")
        event.add('description', f"Course: {assignment.course_name}\nSource: {assignment.source}")
        event.add('priority', 5)

        return event

    def export_to_file(self, calendar: Calendar, filepath: str):
        """Export calendar to .ics file.

        Args:
            calendar: Calendar object
            filepath: Path to output file
        """
        with open(filepath, 'wb') as f:
            f.write(calendar.to_ical())
