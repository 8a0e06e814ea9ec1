"""Pytest configuration for conformance tests."""

import pytest
from tests.conformance.runners.front_end_runner import FrontEndRunner


def get_available_runners():
    """Return list of available conformance runners."""
    runners = [FrontEndRunner()]
    return runners


@pytest.fixture(params=get_available_runners(), ids=lambda r: r.name)
def runner(request):
    """Provide conformance runner for testing.

    This fixture is parametrized to run tests against all available runners.
    Currently includes:
    - front_end: rblang Lexer + Parser
    """
    return request.param
