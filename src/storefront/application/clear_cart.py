"""Application service: Clear Cart use case."""

from __future__ import annotations

from storefront.application.cart_store import CartStore


class ClearCartHandler:

    def __init__(self, cart_store: CartStore) -> None:
        self._cart_store = cart_store

    def handle(self) -> int:
        """Empty the cart and return how many units were removed."""
        removed = self._cart_store.get_item_count()
        self._cart_store.clear()
        return removed
