"""Domain service: order and inquiry message formatting.

Everything here is a pure function of its arguments. The same lines and
total always produce byte-identical text, which is what the shop sees
when the shopper hands the order over to WhatsApp.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal

from storefront.domain.model.cart import Cart
from storefront.domain.model.value_objects import DEFAULT_LOCALE, Money, format_whole_amount

SEPARATOR = "━" * 16
GREETING = "Hola! 👋 Quiero realizar el siguiente pedido:"
HEADER = "📦 *PEDIDO*"
FAREWELL = "¡Gracias! Quedo a la espera de la confirmación."


@dataclass(frozen=True)
class OrderMessageLine:
    """What the order text needs to know about one cart line."""

    name: str
    quantity: int
    unit_price: Money
    size: str | None = None
    color: str | None = None

    @property
    def subtotal(self) -> Money:
        return self.unit_price * self.quantity


def format_price(amount: Money | Decimal | int, locale: str = DEFAULT_LOCALE) -> str:
    """``format_price(1500)`` -> ``"$1.500"`` (whole units, grouped)."""
    if isinstance(amount, Money):
        amount = amount.amount
    return f"${format_whole_amount(Decimal(amount), locale)}"


def lines_from_cart(cart: Cart) -> list[OrderMessageLine]:
    return [
        OrderMessageLine(
            name=item.product_name,
            quantity=item.quantity.value,
            unit_price=item.unit_price,
            size=item.size,
            color=item.color,
        )
        for item in cart.items
    ]


def build_order_message(
    lines: Sequence[OrderMessageLine],
    total: Money,
    locale: str = DEFAULT_LOCALE,
) -> str:
    """Render the order summary sent to the shop.

    Returns an empty string when there are no lines.
    """
    if not lines:
        return ""

    parts = [
        f"{GREETING}\n\n",
        f"{HEADER}\n",
        f"{SEPARATOR}\n",
    ]
    for line in lines:
        parts.append(f"\n{line.quantity}x {line.name}\n")
        if line.size:
            parts.append(f"   Talle: {line.size}\n")
        if line.color:
            parts.append(f"   Color: {line.color}\n")
        parts.append(f"   Precio: {format_price(line.subtotal, locale)}\n")

    parts.append(f"\n{SEPARATOR}\n")
    parts.append(f"💰 *TOTAL: {format_price(total, locale)}*\n\n")
    parts.append(FAREWELL)
    return "".join(parts)


def build_product_inquiry_message(
    product_name: str,
    product_url: str,
    size: str | None = None,
    color: str | None = None,
) -> str:
    """Message for the "ask about this product" button on a product page."""
    message = f"Hola! Me interesa el producto: {product_name}"
    if color:
        message += f" - Color: {color}"
    if size:
        message += f" - Talle: {size}"
    message += f"\n\nVer en: {product_url}"
    return message
