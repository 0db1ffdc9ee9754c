"""Shared pytest fixtures."""

from datetime import datetime

import pytest
from pytz import utc


@pytest.fixture
def fixed_now():
    """A reference time early in the spring term."""
    return datetime(2024, 2, 1, tzinfo=utc)


@pytest.fixture
def client():
    """Flask test client."""
    from syllabus_extractor.app import app
    app.config['TESTING'] = True
    with app.test_client() as test_client:
        yield test_client
