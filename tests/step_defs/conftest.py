"""
Fixtures and shared steps for the BDD suites.
"""

import pytest
from pytest_bdd import parsers, then

from driver import ApiDriver


@pytest.fixture
def api():
    driver = ApiDriver()
    yield driver
    driver.close()


@pytest.fixture
def context() -> dict:
    """Scenario state: last response and ids created along the way."""
    return {}


@then(parsers.parse("the response status should be {status:d}"))
def response_status(context, status):
    assert context["response"].status_code == status, context["response"].text
