"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.cart import Cart
from storefront.domain.model.product import Product


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the user."""

    id: str
    product_name: str
    size: str | None
    color: str | None
    quantity: int
    unit_price: str  # formatted, e.g. "$15.000"
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    """Output: the whole cart as displayed to the user."""

    items: list[CartLineDTO]
    total: str
    item_count: int
    persistent: bool = True

    @staticmethod
    def from_cart(cart: Cart, locale: str = "es-AR", persistent: bool = True) -> CartDTO:
        return CartDTO(
            items=[
                CartLineDTO(
                    id=item.id,
                    product_name=item.product_name,
                    size=item.size,
                    color=item.color,
                    quantity=item.quantity.value,
                    unit_price=item.unit_price.display(locale),
                    line_total=item.line_total.display(locale),
                )
                for item in cart.items
            ],
            total=cart.total.display(locale),
            item_count=cart.item_count,
            persistent=persistent,
        )


@dataclass(frozen=True)
class CheckoutDTO:
    """Output: the order text and the link that hands it to WhatsApp."""

    message: str
    link: str
    total: str
    item_count: int


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    slug: str
    price: str
    sizes: list[str]
    colors: list[str]
    is_active: bool

    @staticmethod
    def from_product(product: Product, locale: str = "es-AR") -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            slug=product.slug,
            price=product.price.display(locale) if product.price is not None else "-",
            sizes=list(product.sizes),
            colors=list(product.colors),
            is_active=product.is_active,
        )
