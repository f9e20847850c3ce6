"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

import json
from decimal import Decimal, InvalidOperation
from pathlib import Path

from storefront.domain.exceptions import DomainException, StorageError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import DEFAULT_CURRENCY, Money
from storefront.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def get_by_slug(self, slug: str) -> Product | None:
        for product in self._load().values():
            if product.slug == slug:
                return product
        return None

    def get_by_name(self, name: str) -> Product | None:
        for product in self._load().values():
            if product.name.lower() == name.lower():
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        products = self._load()
        products[product.id] = product
        self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise StorageError(f"Cannot read {self._file_path}: {exc}") from exc
        except ValueError as exc:
            raise StorageError(f"{self._file_path} is not valid JSON: {exc}") from exc
        try:
            return self._to_domain(raw)
        except (KeyError, TypeError, InvalidOperation, DomainException) as exc:
            raise StorageError(f"{self._file_path} holds a malformed product: {exc}") from exc

    @staticmethod
    def _to_domain(raw: list[dict]) -> dict[str, Product]:
        return {
            item["id"]: Product(
                id=item["id"],
                name=item["name"],
                slug=item.get("slug", ""),
                price=(
                    Money(Decimal(item["price"]), item.get("currency", DEFAULT_CURRENCY))
                    if item.get("price") is not None
                    else None
                ),
                sizes=list(item.get("sizes", [])),
                colors=list(item.get("colors", [])),
                is_active=item.get("is_active", True),
            )
            for item in raw
        }

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [
            {
                "id": p.id,
                "name": p.name,
                "slug": p.slug,
                "price": str(p.price.amount) if p.price is not None else None,
                "currency": p.price.currency if p.price is not None else DEFAULT_CURRENCY,
                "sizes": p.sizes,
                "colors": p.colors,
                "is_active": p.is_active,
            }
            for p in products.values()
        ]
        try:
            self._file_path.write_text(
                json.dumps(raw, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise StorageError(f"Cannot write {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        if self._file_path.exists():
            return
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Cannot create {self._file_path}: {exc}") from exc
