"""BDD tests for checkout."""

import pytest
from boxoffice.exceptions import InventoryExceeded, ValidationError
from pytest_bdd import given, parsers, scenarios, then, when

scenarios("features/checkout.feature")


@pytest.fixture()
def outcome():
    return {"order": None, "exc": None}


def _checkout(storefront, outcome, name, email):
    try:
        outcome["order"] = storefront.checkout(name, email)
    except (ValidationError, InventoryExceeded) as exc:
        outcome["exc"] = exc


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('"{category_id}" has only {count:d} ticket left'))
def inventory_dropped(storefront, category_id, count):
    storefront.index.category(category_id).inventory = count


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('"{name}" checks out with "{email}"'))
def named_checkout(storefront, outcome, name, email):
    _checkout(storefront, outcome, name, email)


@when(parsers.cfparse('an anonymous shopper checks out with "{email}"'))
def anonymous_checkout(storefront, outcome, email):
    _checkout(storefront, outcome, "", email)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("an order totalling {total:d} is placed"))
def order_placed(outcome, total):
    assert outcome["exc"] is None
    assert outcome["order"].total == total


@then(parsers.cfparse('"{category_id}" has {count:d} tickets left'))
def tickets_left(storefront, category_id, count):
    assert storefront.index.category(category_id).inventory == count


@then(parsers.cfparse('"{category_id}" has {count:d} ticket left'))
def ticket_left(storefront, category_id, count):
    assert storefront.index.category(category_id).inventory == count


@then("the checkout is rejected as no longer available")
def rejected_unavailable(outcome):
    assert outcome["order"] is None
    assert isinstance(outcome["exc"], InventoryExceeded)


@then(parsers.cfparse('the checkout fails with a validation error on "{field}"'))
def rejected_invalid(outcome, field):
    assert outcome["order"] is None
    assert isinstance(outcome["exc"], ValidationError)
    assert field in outcome["exc"].messages
