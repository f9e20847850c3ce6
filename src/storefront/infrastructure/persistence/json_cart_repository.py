"""JSON-file-backed implementation of CartRepository.

One document maps session keys to serialized carts, the file-system
counterpart of the browser local-storage entry the storefront used.
Any I/O or decoding problem is reported as ``StorageError``.
"""

from __future__ import annotations

import json
from decimal import Decimal, InvalidOperation
from pathlib import Path

from storefront.domain.exceptions import DomainException, StorageError
from storefront.domain.model.cart import Cart, CartItem
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money, Quantity
from storefront.domain.repository.cart_repository import CartRepository

FORMAT_VERSION = 1


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- CartRepository interface ---------------------------------------------

    def get(self, session_key: str) -> Cart | None:
        raw = self._load_raw().get(session_key)
        if raw is None:
            return None
        try:
            return self._to_domain(raw)
        except (KeyError, TypeError, InvalidOperation, DomainException) as exc:
            raise StorageError(f"Stored cart {session_key!r} is malformed: {exc}") from exc

    def save(self, session_key: str, cart: Cart) -> None:
        carts = self._load_raw(discard_malformed=True)
        carts[session_key] = self._to_raw(cart)
        self._persist_raw(carts)

    def delete(self, session_key: str) -> None:
        carts = self._load_raw(discard_malformed=True)
        if carts.pop(session_key, None) is not None:
            self._persist_raw(carts)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart) -> dict:
        return {
            "version": FORMAT_VERSION,
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "product_slug": item.product_slug,
                    "size": item.size,
                    "color": item.color,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                    "currency": item.unit_price.currency,
                }
                for item in cart.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Cart:
        items = [
            CartItem(
                product_id=i["product_id"],
                product_name=i["product_name"],
                product_slug=i.get("product_slug", ""),
                size=i.get("size") or None,
                color=i.get("color") or None,
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["unit_price"]), i.get("currency", DEFAULT_CURRENCY)),
            )
            for i in raw["items"]
        ]
        return Cart(items)

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self, discard_malformed: bool = False) -> dict[str, dict]:
        """Read the whole document.

        With *discard_malformed* an unreadable document counts as empty so
        the next write replaces it; I/O errors are always raised.
        """
        if not self._file_path.exists():
            return {}
        try:
            text = self._file_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Cannot read {self._file_path}: {exc}") from exc
        try:
            data = json.loads(text)
        except ValueError as exc:
            if discard_malformed:
                return {}
            raise StorageError(f"{self._file_path} is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            if discard_malformed:
                return {}
            raise StorageError(f"{self._file_path} does not hold a cart mapping")
        return data

    def _persist_raw(self, carts: dict[str, dict]) -> None:
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps(carts, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise StorageError(f"Cannot write {self._file_path}: {exc}") from exc
