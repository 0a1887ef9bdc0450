"""Tests for the checkout protocol: validation, atomic commit, rejection."""

import pytest
from boxoffice.checkout.coordinator import CheckoutCoordinator, CheckoutState, validate_customer
from boxoffice.checkout.order import CustomerInfo
from boxoffice.exceptions import InventoryExceeded, NotFound, ValidationError

ADA = {"name": "Ada Lovelace", "email": "ada@example.com"}


class TestValidateCustomer:
    def test_valid_customer(self):
        customer = validate_customer(ADA)
        assert customer.name == "Ada Lovelace"
        assert customer.email == "ada@example.com"

    def test_whitespace_is_stripped(self):
        customer = validate_customer({"name": "  Ada  ", "email": " ada@example.com "})
        assert customer.name == "Ada"
        assert customer.email == "ada@example.com"

    def test_missing_fields_are_all_reported(self):
        with pytest.raises(ValidationError) as exc:
            validate_customer({"name": "   ", "email": ""})
        assert set(exc.value.messages) == {"name", "email"}

    def test_email_needs_an_at_sign(self):
        with pytest.raises(ValidationError) as exc:
            validate_customer({"name": "Ada", "email": "ada.example.com"})
        assert "email" in exc.value.messages

    def test_accepts_customer_info(self):
        customer = validate_customer(CustomerInfo(name="Ada", email="ada@example.com"))
        assert customer.name == "Ada"


class TestCommit:
    def test_commit_places_order_and_decrements_inventory(self, cart, catalog, coordinator):
        cart.add_line("tc2", 2)
        order = coordinator.commit(cart, ADA)

        assert order.total == 190
        assert order.customer.email == "ada@example.com"
        assert catalog.category("tc2").inventory == 258
        assert cart.is_empty
        assert coordinator.last_state == CheckoutState.COMMITTED
        assert coordinator.state == CheckoutState.IDLE

    def test_commit_with_several_lines(self, cart, catalog, coordinator):
        cart.add_line("tc1", 2)
        cart.add_line("tc3", 1)
        order = coordinator.commit(cart, ADA)

        assert order.total == 2 * 169 + 65
        assert [(str(i.category_id), i.quantity) for i in order.items] == [("tc1", 2), ("tc3", 1)]
        assert catalog.category("tc1").inventory == 23
        assert catalog.category("tc3").inventory == 179

    def test_commit_records_the_order(self, cart, coordinator):
        cart.add_line("tc5")
        order = coordinator.commit(cart, ADA)

        stored = coordinator.order_book.get_order(str(order.id))
        assert stored.total == 85
        assert stored.customer.name == "Ada Lovelace"

    def test_commit_bumps_catalog_version(self, cart, catalog, coordinator):
        cart.add_line("tc5")
        coordinator.commit(cart, ADA)
        assert catalog.version == 1

    def test_order_keeps_prices_from_commit_time(self, cart, catalog, coordinator):
        cart.add_line("tc2", 2)
        order = coordinator.commit(cart, ADA)
        catalog.category("tc2").price = 500

        stored = coordinator.order_book.get_order(str(order.id))
        assert stored.items[0].unit_price == 95
        assert stored.total == 190


class TestRejection:
    def test_empty_cart(self, cart, coordinator):
        with pytest.raises(ValidationError) as exc:
            coordinator.commit(cart, ADA)
        assert "cart" in exc.value.messages
        assert coordinator.last_state == CheckoutState.REJECTED
        assert coordinator.state == CheckoutState.IDLE

    def test_missing_name_leaves_everything_untouched(self, cart, catalog, coordinator):
        cart.add_line("tc2", 2)
        with pytest.raises(ValidationError) as exc:
            coordinator.commit(cart, {"name": "", "email": "ada@example.com"})

        assert "name" in exc.value.messages
        assert cart.lines() == [("tc2", 2)]
        assert catalog.category("tc2").inventory == 260
        assert coordinator.order_book.list_orders() == []

    def test_inventory_dropped_below_line(self, cart, catalog, coordinator):
        cart.add_line("tc2", 2)
        catalog.category("tc2").inventory = 1

        with pytest.raises(InventoryExceeded) as exc:
            coordinator.commit(cart, ADA)

        assert exc.value.category_id == "tc2"
        assert exc.value.requested == 2
        assert exc.value.available == 1
        assert catalog.category("tc2").inventory == 1
        assert cart.quantity("tc2") == 2
        assert catalog.version == 0

    def test_one_short_line_rejects_the_whole_cart(self, cart, catalog, coordinator):
        cart.add_line("tc1", 2)
        cart.add_line("tc2", 5)
        catalog.category("tc2").inventory = 3

        with pytest.raises(InventoryExceeded):
            coordinator.commit(cart, ADA)

        assert catalog.category("tc1").inventory == 25
        assert catalog.category("tc2").inventory == 3
        assert len(cart) == 2

    def test_reclamp_after_rejection_allows_retry(self, cart, catalog, coordinator):
        cart.add_line("tc2", 2)
        catalog.category("tc2").inventory = 1
        with pytest.raises(InventoryExceeded):
            coordinator.commit(cart, ADA)

        cart.reclamp("tc2")
        order = coordinator.commit(cart, ADA)
        assert order.total == 95
        assert catalog.category("tc2").inventory == 0

    def test_sold_out_before_commit(self, cart, catalog, coordinator):
        cart.add_line("tc1", 1)
        catalog.category("tc1").inventory = 0
        with pytest.raises(InventoryExceeded):
            coordinator.commit(cart, ADA)


class TestCancel:
    def test_cancel_discards_cart_only(self, cart, catalog, coordinator):
        cart.add_line("tc2", 2)
        coordinator.cancel(cart)

        assert cart.is_empty
        assert catalog.category("tc2").inventory == 260
        assert coordinator.order_book.list_orders() == []


class TestOrderBook:
    def test_unknown_order(self, coordinator):
        with pytest.raises(NotFound):
            coordinator.order_book.get_order("missing-order")

    def test_fresh_coordinators_share_the_domain_repository(self, cart):
        cart.add_line("tc2")
        order = CheckoutCoordinator().commit(cart, ADA)
        assert str(CheckoutCoordinator().order_book.get_order(str(order.id)).id) == str(order.id)
