"""Storefront: one shopper's session over a shared catalogue.

Composes the catalogue index, the shopper's cart and the checkout
coordinator. Presentation state (search box text, open drawers) stays with
the caller and is passed in on each call.
"""

from boxoffice.browsing.cards import concert_card
from boxoffice.browsing.filters import ConcertQuery, evaluate
from boxoffice.cart.store import CartStore
from boxoffice.catalog.concert import Concert
from boxoffice.catalog.index import CatalogIndex
from boxoffice.checkout.coordinator import CheckoutCoordinator
from boxoffice.checkout.order import Order


class Storefront:
    def __init__(self, index: CatalogIndex, coordinator: CheckoutCoordinator | None = None) -> None:
        self.index = index
        self.cart = CartStore(index)
        self.coordinator = coordinator or CheckoutCoordinator()

    # -------------------------------------------------------------------
    # Browsing
    # -------------------------------------------------------------------
    def browse(self, text: str = "", genre_id: str | None = None, venue_id: str | None = None) -> list[Concert]:
        query = ConcertQuery(text=text or None, genre_id=genre_id or "all", venue_id=venue_id or "all")
        return evaluate(self.index.concerts(), query, self.index)

    def cards(self, text: str = "", genre_id: str | None = None, venue_id: str | None = None) -> list[dict]:
        return [concert_card(concert, self.index) for concert in self.browse(text, genre_id, venue_id)]

    # -------------------------------------------------------------------
    # Cart
    # -------------------------------------------------------------------
    def add_to_cart(self, category_id: str, quantity: int = 1) -> int:
        return self.cart.add_line(category_id, quantity)

    def set_quantity(self, category_id: str, quantity: int) -> int:
        return self.cart.set_quantity(category_id, quantity)

    def remove_from_cart(self, category_id: str) -> None:
        self.cart.remove_line(category_id)

    def cart_summary(self) -> dict:
        lines = []
        for category_id, quantity in self.cart.lines():
            category = self.index.category(category_id)
            concert = self.index.concert_for(category)
            lines.append(
                {
                    "category_id": category_id,
                    "category": category.name,
                    "concert_id": str(concert.id),
                    "concert": concert.title,
                    "venue": self.index.by_id("venue", str(concert.venue_id)).name,
                    "unit_price": category.price,
                    "quantity": quantity,
                    "max_quantity": category.inventory,
                    "line_total": self.cart.line_total(category_id),
                }
            )
        return {"lines": lines, "total": self.cart.cart_total()}

    # -------------------------------------------------------------------
    # Checkout
    # -------------------------------------------------------------------
    def checkout(self, name: str, email: str) -> Order:
        return self.coordinator.commit(self.cart, {"name": name, "email": email})

    def cancel_checkout(self) -> None:
        self.coordinator.cancel(self.cart)
