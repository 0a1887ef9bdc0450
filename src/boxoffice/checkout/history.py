"""Order book: placed orders, kept in the domain's repository."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from boxoffice.checkout.order import Order
from boxoffice.exceptions import NotFound


class OrderBook:
    def record(self, order: Order) -> None:
        current_domain.repository_for(Order).add(order)

    def get_order(self, order_id: str) -> Order:
        try:
            return current_domain.repository_for(Order).get(order_id)
        except ObjectNotFoundError:
            raise NotFound("order", order_id) from None

    def list_orders(self) -> list[Order]:
        """All placed orders, newest first."""
        orders = current_domain.repository_for(Order)._dao.query.all().items
        return sorted(orders, key=lambda order: order.placed_at, reverse=True)

    def list_customers(self) -> list[dict]:
        """Distinct customers, in the order of their first purchase."""
        customers = {}
        for order in reversed(self.list_orders()):
            key = (order.customer.name, order.customer.email.lower())
            customers.setdefault(key, {"name": order.customer.name, "email": order.customer.email})
        return list(customers.values())
