"""
BDD step definitions for the ownership feature (pytest-bdd).
"""

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

scenarios("../features/ownership.feature")


@given(parsers.parse('user "{user}" is registered'))
def registered_user(api, user):
    api.register(user)


@given(parsers.parse('"{user}" creates an inventory named "{name}"'))
@when(parsers.parse('"{user}" creates an inventory named "{name}"'))
def create_inventory(api, context, user, name):
    response = api.request("POST", "/api/inventories", user, json={"name": name})
    context["response"] = response
    if response.status_code == 201:
        context["inventory_id"] = response.json()["id"]


@given(parsers.parse('"{user}" adds an item "{name}" with sku "{sku}", quantity {quantity:d} and price {price:f}'))
def add_item(api, context, user, name, sku, quantity, price):
    response = api.request(
        "POST",
        "/api/items",
        user,
        json={
            "inventoryId": context["inventory_id"],
            "name": name,
            "sku": sku,
            "quantity": quantity,
            "price": price,
        },
    )
    assert response.status_code == 201, response.text
    context["item_id"] = response.json()["id"]


@when(parsers.parse('"{user}" requests that inventory'))
def request_that_inventory(api, context, user):
    context["response"] = api.request("GET", f"/api/inventories/{context['inventory_id']}", user)


@when("an anonymous client requests that inventory")
def anonymous_request(api, context):
    context["response"] = api.request("GET", f"/api/inventories/{context['inventory_id']}")


@when(parsers.parse('"{user}" requests inventory "{inventory_id}"'))
def request_inventory(api, context, user, inventory_id):
    context["response"] = api.request("GET", f"/api/inventories/{inventory_id}", user)


@when(parsers.parse('"{user}" lists the items of that inventory'))
def list_items(api, context, user):
    context["response"] = api.request(
        "GET", "/api/items", user, params={"inventoryId": context["inventory_id"]}
    )


@when(parsers.parse('"{user}" updates that item with quantity {quantity:d}'))
def update_item_quantity(api, context, user, quantity):
    context["response"] = api.request(
        "PUT", f"/api/items/{context['item_id']}", user, json={"quantity": quantity}
    )


@then(parsers.parse('the item has quantity {quantity:d}, name "{name}", sku "{sku}" and price {price:f}'))
def item_fields(context, quantity, name, sku, price):
    data = context["response"].json()
    assert data["quantity"] == quantity
    assert data["name"] == name
    assert data["sku"] == sku
    assert data["price"] == pytest.approx(price)
