"""TicketCategory aggregate: A priced, inventory-bounded admission class for one concert."""

from protean.fields import Float, Identifier, Integer, String

from boxoffice.domain import boxoffice
from boxoffice.exceptions import InventoryExceeded, ValidationError


@boxoffice.aggregate
class TicketCategory:
    """Inventory is the live ceiling for every cart line referencing this category.

    Only checkout decrements it, through ``sell``.
    """

    concert_id = Identifier(required=True)
    name = String(required=True, max_length=100)
    price = Float(required=True, min_value=0.0)
    inventory = Integer(required=True, min_value=0)
    row = String(max_length=20)

    @property
    def sold_out(self) -> bool:
        return self.inventory == 0

    def sell(self, quantity: int) -> None:
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be positive"]})
        if quantity > self.inventory:
            raise InventoryExceeded(str(self.id), quantity, self.inventory)

        self.inventory = self.inventory - quantity
