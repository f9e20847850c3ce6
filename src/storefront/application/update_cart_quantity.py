"""Application service: Update Cart Quantity use case."""

from __future__ import annotations

from storefront.application.cart_store import CartStore
from storefront.application.dto import CartDTO
from storefront.domain.exceptions import EntityNotFoundError


class UpdateCartQuantityHandler:

    def __init__(self, cart_store: CartStore, locale: str = "es-AR") -> None:
        self._cart_store = cart_store
        self._locale = locale

    def handle(self, line_id: str, quantity: int) -> CartDTO:
        """Set a line's quantity; zero or less removes the line."""
        if self._cart_store.get_item(line_id) is None:
            raise EntityNotFoundError(f"Cart line '{line_id}' not found")
        self._cart_store.update_quantity(line_id, quantity)
        return CartDTO.from_cart(
            self._cart_store.snapshot(), self._locale, self._cart_store.is_persistent
        )
