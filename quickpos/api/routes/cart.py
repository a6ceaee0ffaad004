"""
Cart endpoints.

The terminal has one cart; every mutation returns the full cart with its
current price quote.
"""

from fastapi import APIRouter, Depends, status

from quickpos.api.dependencies import get_cart, get_pricing
from quickpos.application.dto.requests import (
    AddCartItemRequest,
    AttachCustomerRequest,
    SetQuantityRequest,
)
from quickpos.application.dto.responses import (
    CartLineResponse,
    CartResponse,
    CustomerResponse,
    QuoteResponse,
)
from quickpos.core.entities import CatalogItem, Customer
from quickpos.core.services import CartLedger, PricingPolicy

router = APIRouter(prefix="/api/cart", tags=["cart"])


def _to_response(cart: CartLedger, pricing: PricingPolicy) -> CartResponse:
    lines = cart.lines
    customer = cart.customer
    return CartResponse(
        lines=[CartLineResponse.model_validate(line) for line in lines],
        customer=CustomerResponse.model_validate(customer) if customer else None,
        subtotal=cart.subtotal,
        item_count=cart.item_count,
        quote=QuoteResponse.model_validate(pricing.quote(lines)),
    )


@router.get("", response_model=CartResponse)
async def get_cart_contents(
    cart: CartLedger = Depends(get_cart),
    pricing: PricingPolicy = Depends(get_pricing),
) -> CartResponse:
    return _to_response(cart, pricing)


@router.post("/items", response_model=CartResponse, status_code=status.HTTP_201_CREATED)
async def add_item(
    request: AddCartItemRequest,
    cart: CartLedger = Depends(get_cart),
    pricing: PricingPolicy = Depends(get_pricing),
) -> CartResponse:
    """Add one unit of a catalog item; repeats increment the quantity."""
    cart.add_item(
        CatalogItem(
            product_id=request.product_id,
            name=request.name,
            unit_price=request.unit_price,
            notes=request.notes,
        )
    )
    return _to_response(cart, pricing)


@router.put("/items/{product_id}", response_model=CartResponse)
async def set_quantity(
    product_id: str,
    request: SetQuantityRequest,
    cart: CartLedger = Depends(get_cart),
    pricing: PricingPolicy = Depends(get_pricing),
) -> CartResponse:
    """Set a line's quantity. Zero or less removes the line."""
    cart.set_quantity(product_id, request.quantity)
    return _to_response(cart, pricing)


@router.delete("/items/{product_id}", response_model=CartResponse)
async def remove_item(
    product_id: str,
    cart: CartLedger = Depends(get_cart),
    pricing: PricingPolicy = Depends(get_pricing),
) -> CartResponse:
    cart.remove_item(product_id)
    return _to_response(cart, pricing)


@router.put("/customer", response_model=CartResponse)
async def attach_customer(
    request: AttachCustomerRequest,
    cart: CartLedger = Depends(get_cart),
    pricing: PricingPolicy = Depends(get_pricing),
) -> CartResponse:
    cart.attach_customer(Customer(id=request.id, name=request.name, phone=request.phone))
    return _to_response(cart, pricing)


@router.delete("/customer", response_model=CartResponse)
async def detach_customer(
    cart: CartLedger = Depends(get_cart),
    pricing: PricingPolicy = Depends(get_pricing),
) -> CartResponse:
    cart.attach_customer(None)
    return _to_response(cart, pricing)


@router.delete("", response_model=CartResponse)
async def clear_cart(
    cart: CartLedger = Depends(get_cart),
    pricing: PricingPolicy = Depends(get_pricing),
) -> CartResponse:
    cart.clear()
    return _to_response(cart, pricing)
