"""Order aggregate: the immutable record of a committed cart.

Unit prices are captured at commit time and never follow later catalogue
price changes.
"""

import json
from datetime import UTC, datetime

from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, Text, ValueObject

from boxoffice.domain import boxoffice


@boxoffice.value_object(part_of="Order")
class CustomerInfo:
    """Who placed the order, as entered at checkout."""

    name = String(required=True, max_length=255)
    email = String(required=True, max_length=254)


@boxoffice.entity(part_of="Order")
class OrderItem:
    category_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(required=True, min_value=0.0)

    @property
    def line_total(self) -> float:
        return self.quantity * self.unit_price


@boxoffice.event(part_of="Order")
class OrderPlaced:
    """A cart was committed into an order and inventory was decremented."""

    __version__ = 1

    order_id = Identifier(required=True)
    customer_name = String(required=True)
    customer_email = String(required=True)
    items = Text(required=True)  # JSON: list of {category_id, quantity, unit_price}
    total = Float(required=True)
    placed_at = DateTime(required=True)


@boxoffice.aggregate
class Order:
    customer = ValueObject(CustomerInfo, required=True)
    items = HasMany(OrderItem)
    total = Float(required=True, min_value=0.0)
    placed_at = DateTime(required=True)

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, customer, lines, total, placed_at=None):
        """Create an order from committed cart lines.

        Args:
            customer: CustomerInfo of the buyer.
            lines: Iterable of ``(category_id, quantity, unit_price)`` tuples.
            total: Cart total at commit time.
        """
        placed_at = placed_at or datetime.now(UTC)
        order = cls(customer=customer, total=total, placed_at=placed_at)
        for category_id, quantity, unit_price in lines:
            order.add_items(OrderItem(category_id=category_id, quantity=quantity, unit_price=unit_price))

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                customer_name=customer.name,
                customer_email=customer.email,
                items=json.dumps(
                    [
                        {"category_id": str(i.category_id), "quantity": i.quantity, "unit_price": i.unit_price}
                        for i in order.items
                    ]
                ),
                total=total,
                placed_at=placed_at,
            )
        )
        return order

    @property
    def timestamp(self) -> str:
        """ISO-8601 commit time."""
        return self.placed_at.isoformat()
