"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from storefront.application.cart_store import CartStore
from storefront.application.dto import CartDTO


class ShowCartHandler:

    def __init__(self, cart_store: CartStore, locale: str = "es-AR") -> None:
        self._cart_store = cart_store
        self._locale = locale

    def handle(self) -> CartDTO:
        return CartDTO.from_cart(
            self._cart_store.snapshot(), self._locale, self._cart_store.is_persistent
        )
