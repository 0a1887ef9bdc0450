"""CheckoutCoordinator: commits a cart into an Order.

The coordinator is the only writer of catalogue inventory. A commit attempt
goes from IDLE to VALIDATING, ends COMMITTED or REJECTED, and returns to IDLE.
Every precondition is checked before anything changes, so a rejected attempt
leaves the cart and the inventory exactly as they were.
"""

from collections.abc import Mapping
from enum import Enum

import structlog

from boxoffice.cart.store import CartStore
from boxoffice.checkout.history import OrderBook
from boxoffice.checkout.order import CustomerInfo, Order
from boxoffice.exceptions import InventoryExceeded, NotFound, ValidationError

logger = structlog.get_logger(__name__)


class CheckoutState(Enum):
    IDLE = "Idle"
    VALIDATING = "Validating"
    COMMITTED = "Committed"
    REJECTED = "Rejected"


def _customer_fields(customer) -> tuple[str, str]:
    if isinstance(customer, Mapping):
        name, email = customer.get("name"), customer.get("email")
    else:
        name, email = getattr(customer, "name", None), getattr(customer, "email", None)
    return (name or "").strip(), (email or "").strip()


def validate_customer(customer) -> CustomerInfo:
    """Presence checks only: a name, and an email containing "@"."""
    name, email = _customer_fields(customer)

    errors = {}
    if not name:
        errors["name"] = ["Name is required"]
    if not email:
        errors["email"] = ["Email is required"]
    elif "@" not in email:
        errors["email"] = ["Email must contain '@'"]
    if errors:
        raise ValidationError(errors)

    return CustomerInfo(name=name, email=email)


class CheckoutCoordinator:
    def __init__(self, order_book: OrderBook | None = None) -> None:
        self.order_book = order_book or OrderBook()
        self.state = CheckoutState.IDLE
        self.last_state: CheckoutState | None = None

    def commit(self, cart: CartStore, customer) -> Order:
        """Commit ``cart`` for ``customer`` (a CustomerInfo or a name/email mapping).

        Raises:
            ValidationError: empty cart, missing name, implausible email.
            InventoryExceeded: a line now asks for more than is left.
            NotFound: a line references a category no longer in the catalogue.
        """
        self.state = CheckoutState.VALIDATING
        try:
            order = self._commit(cart, customer)
        except (ValidationError, InventoryExceeded, NotFound) as exc:
            self.last_state = CheckoutState.REJECTED
            logger.warning("Checkout rejected", reason=type(exc).__name__, error=str(exc))
            raise
        finally:
            self.state = CheckoutState.IDLE

        self.last_state = CheckoutState.COMMITTED
        logger.info(
            "Order placed",
            order_id=str(order.id),
            item_count=len(order.items),
            total=order.total,
        )
        return order

    def cancel(self, cart: CartStore) -> None:
        """Abandon checkout: discard the cart, touch nothing else."""
        cart.clear()
        self.last_state = None
        logger.info("Checkout cancelled")

    # -------------------------------------------------------------------
    # Protocol
    # -------------------------------------------------------------------
    def _commit(self, cart: CartStore, customer) -> Order:
        if cart.is_empty:
            raise ValidationError({"cart": ["empty cart"]})
        customer_info = validate_customer(customer)

        index = cart.index
        lines = cart.lines()
        with index.locks.hold(category_id for category_id, _ in lines):
            # Re-check against current inventory; it may have moved since the lines were added
            categories = {category_id: index.category(category_id) for category_id, _ in lines}
            for category_id, quantity in lines:
                available = categories[category_id].inventory
                if quantity > available:
                    raise InventoryExceeded(category_id, quantity, available)

            order = Order.place(
                customer=customer_info,
                lines=[(category_id, quantity, categories[category_id].price) for category_id, quantity in lines],
                total=cart.cart_total(),
            )
            self.order_book.record(order)

            for category_id, quantity in lines:
                categories[category_id].sell(quantity)
            index.touch()
            cart.clear()

        return order
