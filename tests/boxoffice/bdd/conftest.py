"""Shared BDD fixtures and step definitions for the box office."""

import pytest
from boxoffice.exceptions import ValidationError
from boxoffice.storefront import Storefront
from pytest_bdd import given, parsers, then


@pytest.fixture()
def error():
    """Container for captured validation errors (used by cart tests)."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("a fresh storefront", target_fixture="storefront")
def fresh_storefront(catalog):
    return Storefront(catalog)


@given(parsers.cfparse('{count:d} tickets of "{category_id}" are in the cart'))
def tickets_in_cart(storefront, count, category_id):
    storefront.add_to_cart(category_id, count)


@given(parsers.cfparse('"{category_id}" is sold out'))
def sold_out(storefront, category_id):
    storefront.index.category(category_id).inventory = 0


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the cart holds {count:d} tickets of "{category_id}"'))
def cart_holds(storefront, count, category_id):
    assert storefront.cart.quantity(category_id) == count


@then("the cart is empty")
def cart_is_empty(storefront):
    assert storefront.cart.is_empty


@then(parsers.cfparse("the cart total is {total:d}"))
def cart_total_is(storefront, total):
    assert storefront.cart.cart_total() == total


@then("the cart action fails with a validation error")
def cart_action_fails(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)
