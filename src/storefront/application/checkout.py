"""Application service: Checkout use case.

Turns the cart into the order text, builds the WhatsApp link that
carries it, and empties the cart. The message is built from a snapshot
taken before the cart is cleared.
"""

from __future__ import annotations

import logging

from storefront.application.cart_store import CartStore
from storefront.application.dto import CheckoutDTO
from storefront.domain.exceptions import ValidationError
from storefront.domain.service.order_message import build_order_message, lines_from_cart
from storefront.domain.service.whatsapp_link import build_whatsapp_link

logger = logging.getLogger(__name__)


class CheckoutHandler:

    def __init__(
        self,
        cart_store: CartStore,
        whatsapp_number: str,
        locale: str = "es-AR",
    ) -> None:
        self._cart_store = cart_store
        self._whatsapp_number = whatsapp_number
        self._locale = locale

    def handle(self, keep_cart: bool = False) -> CheckoutDTO:
        if self._cart_store.is_empty:
            raise ValidationError("Cart is empty")

        snapshot = self._cart_store.snapshot()
        message = build_order_message(lines_from_cart(snapshot), snapshot.total, self._locale)
        link = build_whatsapp_link(self._whatsapp_number, message)

        if not keep_cart:
            self._cart_store.clear()
        logger.info(
            "Checkout of %d unit(s) handed off to WhatsApp (cart kept: %s)",
            snapshot.item_count,
            keep_cart,
        )

        return CheckoutDTO(
            message=message,
            link=link,
            total=snapshot.total.display(self._locale),
            item_count=snapshot.item_count,
        )
