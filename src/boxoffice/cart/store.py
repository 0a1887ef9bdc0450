"""CartStore: pending ticket reservations for one shopper.

Lines are keyed by ticket category id and kept in insertion order. Each line
is bounded by the category's live inventory:

* ``add_line`` clamps silently to the inventory ceiling.
* ``set_quantity`` clamps down to the ceiling but rejects quantities below 1;
  a zero quantity is never treated as a removal.

Prices are never cached; totals are recomputed from the catalogue on each call.
"""

import structlog

from boxoffice.catalog.index import CatalogIndex
from boxoffice.exceptions import NotFound, ValidationError

logger = structlog.get_logger(__name__)


class CartStore:
    def __init__(self, index: CatalogIndex) -> None:
        self._index = index
        self._lines: dict[str, int] = {}

    # -------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._lines)

    def __contains__(self, category_id) -> bool:
        return category_id in self._lines

    @property
    def is_empty(self) -> bool:
        return not self._lines

    @property
    def index(self) -> CatalogIndex:
        return self._index

    def lines(self) -> list[tuple[str, int]]:
        """Snapshot of ``(category_id, quantity)`` pairs in insertion order."""
        return list(self._lines.items())

    def quantity(self, category_id: str) -> int | None:
        return self._lines.get(category_id)

    def line_total(self, category_id: str) -> float:
        """Quantity times the category's current price.

        Raises:
            NotFound: when the category is unknown or not in the cart.
        """
        category = self._index.category(category_id)
        quantity = self._require_line(category_id)
        return quantity * category.price

    def cart_total(self) -> float:
        return sum((self.line_total(category_id) for category_id in self._lines), 0)

    # -------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------
    def add_line(self, category_id: str, delta: int = 1) -> int:
        """Add ``delta`` tickets, clamped to the inventory ceiling.

        Returns the resulting quantity.

        Raises:
            NotFound: for an unknown category.
            ValidationError: when the clamped quantity would be below 1.
        """
        category = self._index.category(category_id)
        with self._index.locks.hold([category_id]):
            current = self._lines.get(category_id, 0)
            quantity = min(current + delta, category.inventory)
            if quantity < 1:
                if category.sold_out:
                    raise ValidationError({"quantity": [f"{category.name} is sold out"]})
                raise ValidationError({"quantity": ["Quantity must be at least 1"]})

            self._lines[category_id] = quantity
            self._check_bounds(category_id)

        logger.debug(
            "Cart line added",
            category_id=category_id,
            delta=delta,
            quantity=quantity,
            clamped=current + delta != quantity,
        )
        return quantity

    def set_quantity(self, category_id: str, quantity: int) -> int:
        """Set an existing line's quantity, clamped down to the inventory ceiling.

        Raises:
            NotFound: for an unknown category, or one not in the cart.
            ValidationError: when ``quantity`` is below 1 or the category sold out.
        """
        category = self._index.category(category_id)
        with self._index.locks.hold([category_id]):
            self._require_line(category_id)
            if quantity < 1:
                raise ValidationError({"quantity": ["Quantity must be at least 1"]})
            if category.sold_out:
                raise ValidationError({"quantity": [f"{category.name} is sold out"]})

            clamped = min(quantity, category.inventory)
            self._lines[category_id] = clamped
            self._check_bounds(category_id)

        logger.debug("Cart quantity set", category_id=category_id, requested=quantity, quantity=clamped)
        return clamped

    def remove_line(self, category_id: str) -> None:
        """Drop a line. Removing an absent line is a no-op."""
        if category_id not in self._lines:
            return

        with self._index.locks.hold([category_id]):
            removed = self._lines.pop(category_id, None)

        if removed is not None:
            logger.debug("Cart line removed", category_id=category_id)

    def reclamp(self, category_id: str) -> int | None:
        """Pull a line back under the current inventory ceiling.

        Used after checkout reports a line as no longer available. A line whose
        category sold out is removed. Returns the new quantity, or None when the
        line is gone.
        """
        category = self._index.category(category_id)
        with self._index.locks.hold([category_id]):
            self._require_line(category_id)
            if category.sold_out:
                del self._lines[category_id]
                quantity = None
            else:
                quantity = self._lines[category_id] = min(self._lines[category_id], category.inventory)
            self._check_bounds(category_id)

        logger.info("Cart line reclamped", category_id=category_id, quantity=quantity)
        return quantity

    def clear(self) -> None:
        with self._index.locks.hold(self._lines):
            self._lines.clear()

    # -------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------
    def _require_line(self, category_id: str) -> int:
        try:
            return self._lines[category_id]
        except KeyError:
            raise NotFound("cart_line", category_id) from None

    def _check_bounds(self, category_id: str) -> None:
        """A line touched by a mutation must satisfy ``1 <= quantity <= inventory``."""
        quantity = self._lines.get(category_id)
        if quantity is None:
            return
        inventory = self._index.category(category_id).inventory
        if not 1 <= quantity <= inventory:
            raise AssertionError(f"cart line {category_id!r} quantity {quantity} outside [1, {inventory}]")
