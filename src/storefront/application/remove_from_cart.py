"""Application service: Remove From Cart use case."""

from __future__ import annotations

from storefront.application.cart_store import CartStore
from storefront.application.dto import CartDTO


class RemoveFromCartHandler:

    def __init__(self, cart_store: CartStore, locale: str = "es-AR") -> None:
        self._cart_store = cart_store
        self._locale = locale

    def handle(self, line_id: str) -> CartDTO:
        """Drop a line from the cart. Unknown line ids change nothing."""
        self._cart_store.remove_item(line_id)
        return CartDTO.from_cart(
            self._cart_store.snapshot(), self._locale, self._cart_store.is_persistent
        )
