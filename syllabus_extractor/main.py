"""
Main CLI entry point for the syllabus assignment extractor.
"""

import argparse
import json
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from .assignment_extractor import extract_assignments
from .config import DEFAULT_COURSE_NAME, DEFAULT_TIMEZONE, setup_logger
from .icalendar_gen import ICalendarGenerator
from .pdf_extractor import PDFProcessingError, extract_pdf_text


def read_input_text(input_path: Path) -> str:
    """Read syllabus text from a PDF or a plain text file.

    Args:
        input_path: Path to a .pdf file or a UTF-8 text file

    Returns:
        The document text
    """
    if input_path.suffix.lower() == '.pdf':
        return extract_pdf_text(input_path)
    return input_path.read_text(encoding='utf-8')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Extract assignment due dates from a syllabus PDF or text file"
    )
    parser.add_argument('input', type=Path, help="Syllabus PDF or text file")
    parser.add_argument('--course-name', default=DEFAULT_COURSE_NAME,
                        help=f"Course label for every record (default: {DEFAULT_COURSE_NAME!r})")
    parser.add_argument('--now', type=datetime.fromisoformat,
                        help="Reference time for year inference, ISO format (default: current time)")
    parser.add_argument('--timezone', default=DEFAULT_TIMEZONE,
                        help=f"Timezone dates are read in (default: {DEFAULT_TIMEZONE})")
    parser.add_argument('--output', '-o', type=Path,
                        help="Write JSON here instead of stdout")
    parser.add_argument('--ics', type=Path,
                        help="Also write the assignments as an .ics calendar")
    parser.add_argument('--verbose', '-v', action='store_true',
                        help="Log skipped date candidates")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    setup_logger(level="DEBUG" if args.verbose else "INFO")

    if not args.input.exists():
        print(f"Error: input file not found: {args.input}", file=sys.stderr)
        return 1

    try:
        text = read_input_text(args.input)
    except PDFProcessingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    result = extract_assignments(
        text,
        course_name=args.course_name,
        now=args.now,
        tz=args.timezone,
    )

    output = json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
    if args.output:
        args.output.write_text(output + "\n", encoding='utf-8')
        print(f"Saved {len(result.assignments)} assignment(s) to: {args.output}", file=sys.stderr)
    else:
        print(output)

    if args.ics:
        cal_gen = ICalendarGenerator(timezone_str=args.timezone)
        calendar = cal_gen.generate_calendar(result.assignments)
        cal_gen.export_to_file(calendar, str(args.ics))
        print(f"Saved calendar to: {args.ics}", file=sys.stderr)

    return 0


if __name__ == '__main__':
    sys.exit(main())
