"""Cart Store: the single owner of a session's cart.

The store wraps a ``Cart`` aggregate, persists it after every mutation
and keeps working when the storage does not. It is built by the
composition root and handed to whoever needs it; there is no global
instance.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import StorageError
from storefront.domain.model.cart import Cart, CartItem
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.cart_repository import CartRepository

logger = logging.getLogger(__name__)


class CartStore:

    def __init__(self, cart_repo: CartRepository, session_key: str = "default") -> None:
        self._cart_repo: CartRepository | None = cart_repo
        self._session_key = session_key
        self._cart = self._restore()

    # --- Mutations ------------------------------------------------------------

    def add_item(
        self,
        product: Product,
        size: str | None = None,
        color: str | None = None,
        quantity: int = 1,
    ) -> CartItem:
        item = self._cart.add_item(product, size=size, color=color, quantity=quantity)
        self._persist()
        return item

    def remove_item(self, line_id: str) -> None:
        if self._cart.get_item(line_id) is None:
            return
        self._cart.remove_item(line_id)
        self._persist()

    def update_quantity(self, line_id: str, quantity: int) -> CartItem | None:
        if self._cart.get_item(line_id) is None:
            return None
        item = self._cart.update_quantity(line_id, quantity)
        self._persist()
        return item

    def clear(self) -> None:
        self._cart.clear()
        if self._cart_repo is None:
            return
        try:
            self._cart_repo.delete(self._session_key)
        except StorageError as exc:
            self._switch_to_memory_fallback(exc)

    # --- Queries --------------------------------------------------------------

    @property
    def items(self) -> tuple[CartItem, ...]:
        return self._cart.items

    def get_item(self, line_id: str) -> CartItem | None:
        return self._cart.get_item(line_id)

    @property
    def is_empty(self) -> bool:
        return self._cart.is_empty

    def get_total(self) -> Money:
        return self._cart.total

    def get_item_count(self) -> int:
        return self._cart.item_count

    def snapshot(self) -> Cart:
        """A detached copy of the current cart, safe to hand to formatters."""
        return Cart(list(self._cart.items))

    @property
    def session_key(self) -> str:
        return self._session_key

    @property
    def is_persistent(self) -> bool:
        """False once the store has fallen back to in-memory mode."""
        return self._cart_repo is not None

    # --- Persistence ----------------------------------------------------------

    def _restore(self) -> Cart:
        try:
            cart = self._cart_repo.get(self._session_key)
        except StorageError as exc:
            logger.warning(
                "Could not restore cart %r, starting empty: %s", self._session_key, exc
            )
            return Cart()
        return cart if cart is not None else Cart()

    def _persist(self) -> None:
        if self._cart_repo is None:
            return
        try:
            self._cart_repo.save(self._session_key, self._cart)
        except StorageError as exc:
            self._switch_to_memory_fallback(exc)

    def _switch_to_memory_fallback(self, reason: Exception | str) -> None:
        logger.warning("Cart storage fallback to memory mode: %s", reason)
        self._cart_repo = None
