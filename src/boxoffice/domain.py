"""Box office bounded context: concert catalogue, ticket cart and checkout.

Catalogue records are loaded once per session into an in-memory index. Shoppers
browse it through a pure filter, reserve tickets in a cart bounded by live
inventory, and commit the cart into an Order at checkout.
"""

from protean.domain import Domain

from boxoffice.utils.logging import configure_logging

configure_logging()


# Domain Composition Root
boxoffice = Domain(name="boxoffice")
