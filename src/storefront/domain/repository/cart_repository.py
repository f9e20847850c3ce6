"""Abstract repository for the Cart aggregate.

A cart has no identity of its own; it is stored under the key of the
session holding it, the way a browser keeps it in local storage.
Implementations report any read or write failure as ``StorageError``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def get(self, session_key: str) -> Cart | None:
        """Return the cart stored under *session_key*, or None."""

    @abstractmethod
    def save(self, session_key: str, cart: Cart) -> None:
        """Persist *cart* under *session_key*, replacing any previous one."""

    @abstractmethod
    def delete(self, session_key: str) -> None:
        """Forget the cart stored under *session_key* (no-op if absent)."""
