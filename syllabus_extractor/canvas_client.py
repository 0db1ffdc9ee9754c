"""
Canvas LMS client.

Forwards requests to a Canvas instance on behalf of the browser and narrows
the course list down to the user's starred courses.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from .config import CANVAS_TIMEOUT

logger = logging.getLogger(__name__)

COURSES_ENDPOINT = '/api/v1/courses'


class CanvasAPIError(Exception):
    """Raised when Canvas answers with a non-success status."""

    def __init__(self, status_code: int, details: str = ""):
        super().__init__(f"Canvas API error: {status_code}")
        self.status_code = status_code
        self.details = details


def is_course_list_endpoint(endpoint: str) -> bool:
    """Check if an endpoint returns the user's course list.

    "/api/v1/courses?per_page=100" is the list; "/api/v1/courses/42" and
    anything under a course are not.
    """
    return (COURSES_ENDPOINT in endpoint
            and '/assignments' not in endpoint
            and '/courses/' not in endpoint)


def filter_starred_courses(courses: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Keep only favorite courses, or all courses if none are starred."""
    logger.info("Total courses returned: %d", len(courses))
    starred = [course for course in courses if course.get('is_favorite') is True]
    logger.info("Filtered to %d starred courses", len(starred))

    if not starred:
        logger.warning("No starred courses found. Showing all courses instead.")
        return courses
    return starred


class CanvasClient:
    """Thin pass-through client for the Canvas REST API."""

    def __init__(self, base_url: str, api_token: str, timeout: Optional[float] = None):
        """Initialize client.

        Args:
            base_url: Canvas instance root, e.g. "https://canvas.example.edu"
            api_token: Personal access token
            timeout: Request timeout in seconds (default: CANVAS_TIMEOUT)
        """
        self.base_url = base_url
        self.timeout = CANVAS_TIMEOUT if timeout is None else timeout
        self.headers = {
            "Authorization": f"Bearer {api_token}",
            "Accept": "application/json",
        }

    def fetch(self, endpoint: str) -> Any:
        """GET an endpoint and return its decoded JSON.

        The course list is filtered to starred courses.

        Raises:
            CanvasAPIError: If Canvas returns a non-success status
            requests.RequestException: On network failures
        """
        url = f"{self.base_url}{endpoint}"
        logger.info("Fetching: %s", url)

        r = requests.get(url, headers=self.headers, timeout=self.timeout)
        if not r.ok:
            raise CanvasAPIError(r.status_code, r.text)

        data = r.json()
        if is_course_list_endpoint(endpoint) and isinstance(data, list):
            return filter_starred_courses(data)
        return data
