"""FastAPI routes for the box office: concerts, cart and checkout."""

from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import APIRouter, Depends, HTTPException, Request

from boxoffice.api.schemas import (
    AddCartLineRequest,
    CartSchema,
    CheckoutRequest,
    ConcertCardSchema,
    CustomerSchema,
    OptionSchema,
    OrderItemSchema,
    OrderSchema,
    SetQuantityRequest,
    StatusResponse,
)
from boxoffice.checkout.order import Order
from boxoffice.exceptions import InventoryExceeded, NotFound, ValidationError
from boxoffice.storefront import Storefront


def get_storefront(request: Request) -> Storefront:
    return request.app.state.storefront


@contextmanager
def domain_errors() -> Iterator[None]:
    """Map domain errors onto HTTP status codes."""
    try:
        yield
    except NotFound as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except InventoryExceeded as exc:
        raise HTTPException(
            status_code=409,
            detail={
                "category_id": exc.category_id,
                "requested": exc.requested,
                "available": exc.available,
                "message": "No longer available",
            },
        ) from exc
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=exc.messages) from exc


def _order_schema(order: Order) -> OrderSchema:
    return OrderSchema(
        order_id=str(order.id),
        name=order.customer.name,
        email=order.customer.email,
        items=[
            OrderItemSchema(category_id=str(item.category_id), quantity=item.quantity, unit_price=item.unit_price)
            for item in order.items
        ],
        total=order.total,
        placed_at=order.timestamp,
    )


# ---------------------------------------------------------------------------
# Catalogue Router
# ---------------------------------------------------------------------------
catalog_router = APIRouter(tags=["concerts"])


@catalog_router.get("/concerts", response_model=list[ConcertCardSchema])
async def list_concerts(
    q: str = "",
    genre: str = "all",
    venue: str = "all",
    storefront: Storefront = Depends(get_storefront),
) -> list[ConcertCardSchema]:
    with domain_errors():
        return [ConcertCardSchema(**card) for card in storefront.cards(q, genre, venue)]


@catalog_router.get("/genres", response_model=list[OptionSchema])
async def list_genres(storefront: Storefront = Depends(get_storefront)) -> list[OptionSchema]:
    return [OptionSchema(id=str(g.id), name=g.name) for g in storefront.index.genres()]


@catalog_router.get("/venues", response_model=list[OptionSchema])
async def list_venues(storefront: Storefront = Depends(get_storefront)) -> list[OptionSchema]:
    return [OptionSchema(id=str(v.id), name=v.name) for v in storefront.index.venues()]


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/cart", tags=["cart"])


@cart_router.get("", response_model=CartSchema)
async def get_cart(storefront: Storefront = Depends(get_storefront)) -> CartSchema:
    return CartSchema(**storefront.cart_summary())


@cart_router.post("/lines", response_model=CartSchema)
async def add_cart_line(body: AddCartLineRequest, storefront: Storefront = Depends(get_storefront)) -> CartSchema:
    with domain_errors():
        storefront.add_to_cart(body.category_id, body.quantity)
    return CartSchema(**storefront.cart_summary())


@cart_router.put("/lines/{category_id}", response_model=CartSchema)
async def set_cart_line_quantity(
    category_id: str, body: SetQuantityRequest, storefront: Storefront = Depends(get_storefront)
) -> CartSchema:
    with domain_errors():
        storefront.set_quantity(category_id, body.quantity)
    return CartSchema(**storefront.cart_summary())


@cart_router.delete("/lines/{category_id}", response_model=CartSchema)
async def remove_cart_line(category_id: str, storefront: Storefront = Depends(get_storefront)) -> CartSchema:
    storefront.remove_from_cart(category_id)
    return CartSchema(**storefront.cart_summary())


@cart_router.delete("", response_model=StatusResponse)
async def cancel_checkout(storefront: Storefront = Depends(get_storefront)) -> StatusResponse:
    storefront.cancel_checkout()
    return StatusResponse()


# ---------------------------------------------------------------------------
# Checkout & Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(tags=["orders"])


@order_router.post("/checkout", status_code=201, response_model=OrderSchema)
async def checkout(body: CheckoutRequest, storefront: Storefront = Depends(get_storefront)) -> OrderSchema:
    with domain_errors():
        order = storefront.checkout(body.name, body.email)
    return _order_schema(order)


@order_router.get("/orders", response_model=list[OrderSchema])
async def list_orders(storefront: Storefront = Depends(get_storefront)) -> list[OrderSchema]:
    return [_order_schema(order) for order in storefront.coordinator.order_book.list_orders()]


@order_router.get("/orders/{order_id}", response_model=OrderSchema)
async def get_order(order_id: str, storefront: Storefront = Depends(get_storefront)) -> OrderSchema:
    with domain_errors():
        return _order_schema(storefront.coordinator.order_book.get_order(order_id))


@order_router.get("/customers", response_model=list[CustomerSchema])
async def list_customers(storefront: Storefront = Depends(get_storefront)) -> list[CustomerSchema]:
    return [CustomerSchema(**c) for c in storefront.coordinator.order_book.list_customers()]
