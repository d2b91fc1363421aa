"""Pytest configuration and shared fixtures."""
import pytest

from keyscope.config import Settings
from keyscope.frameworks.next_intl import NextIntlFramework


class RecordingReporter:
    """ErrorReporter that keeps every call for assertions."""

    def __init__(self):
        self.calls = []

    def report_error(self, message, notify_user=False):
        self.calls.append((str(message), notify_user))


@pytest.fixture
def settings():
    """Default usage settings, independent of any config.ini on disk."""
    return Settings()


@pytest.fixture
def next_intl():
    return NextIntlFramework()


@pytest.fixture
def reporter():
    return RecordingReporter()
