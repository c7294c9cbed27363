"""
BDD step definitions for the health feature (pytest-bdd).
"""

from pytest_bdd import parsers, scenarios, then, when

scenarios("../features/health.feature")


@when(parsers.parse('I request "{method}" "{path}"'))
def request_path(api, context, method, path):
    context["response"] = api.request(method, path)


@then(parsers.parse('the response body should have "{key}" equals "{value}"'))
def body_field_equals(context, key, value):
    assert context["response"].json().get(key) == value
