"""Pydantic request/response schemas for the box office API.

These are external contracts (anti-corruption layer), separate from the
domain's aggregates and value objects.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Catalogue
# ---------------------------------------------------------------------------
class LineupEntrySchema(BaseModel):
    artist_id: str
    artist: str
    role: str
    headliner: bool


class TicketCategorySchema(BaseModel):
    category_id: str
    name: str
    price: float
    inventory: int
    sold_out: bool


class ConcertCardSchema(BaseModel):
    concert_id: str
    title: str
    date: str | None = None
    venue: str
    city: str | None = None
    group: str
    lineup: list[LineupEntrySchema]
    ticket_categories: list[TicketCategorySchema]


class OptionSchema(BaseModel):
    id: str
    name: str


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
class AddCartLineRequest(BaseModel):
    category_id: str
    quantity: int = Field(default=1)


class SetQuantityRequest(BaseModel):
    # Range is enforced by the domain so that 0 is rejected, never treated as removal
    quantity: int


class CartLineSchema(BaseModel):
    category_id: str
    category: str
    concert_id: str
    concert: str
    venue: str
    unit_price: float
    quantity: int
    max_quantity: int
    line_total: float


class CartSchema(BaseModel):
    lines: list[CartLineSchema]
    total: float


# ---------------------------------------------------------------------------
# Checkout
# ---------------------------------------------------------------------------
class CheckoutRequest(BaseModel):
    name: str = ""
    email: str = ""

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Ada Lovelace",
                    "email": "ada@example.com",
                }
            ]
        }
    }


class OrderItemSchema(BaseModel):
    category_id: str
    quantity: int
    unit_price: float


class OrderSchema(BaseModel):
    order_id: str
    name: str
    email: str
    items: list[OrderItemSchema]
    total: float
    placed_at: str


class CustomerSchema(BaseModel):
    name: str
    email: str


class StatusResponse(BaseModel):
    status: str = "ok"
