"""Product aggregate.

Products live independently of carts. They have their own lifecycle:
prices change, products are activated and deactivated in the catalog.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass, field

from storefront.domain.exceptions import InvalidProductError, ValidationError
from storefront.domain.model.value_objects import Money

_SLUG_STRIP = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """``"Conjunto Encaje Rosé"`` -> ``"conjunto-encaje-rose"``."""
    normalized = unicodedata.normalize("NFKD", text)
    ascii_text = normalized.encode("ascii", "ignore").decode("ascii").lower()
    return _SLUG_STRIP.sub("-", ascii_text).strip("-")


@dataclass
class Product:
    """A product in the catalog.

    Kept as a mutable dataclass because price updates and activation
    toggles are legitimate mutations on the aggregate. ``price`` may be
    ``None`` when the catalog hands over an incomplete record; such a
    product can be listed but never added to a cart.
    """

    id: str
    name: str
    price: Money | None
    slug: str = ""
    sizes: list[str] = field(default_factory=list)
    colors: list[str] = field(default_factory=list)
    is_active: bool = True

    def __post_init__(self) -> None:
        if not self.slug and self.name:
            self.slug = slugify(self.name)

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect lines already in a cart because cart lines
        capture a price snapshot when they are added.
        """
        if new_price.amount < 0:
            raise ValidationError("Product price cannot be negative")
        self.price = new_price

    def ensure_orderable(self, size: str | None = None, color: str | None = None) -> None:
        """Raise unless this product can go into a cart with *size* / *color*."""
        if not self.id or not str(self.id).strip():
            raise InvalidProductError("Product is missing its id")
        if not self.name or not self.name.strip():
            raise InvalidProductError(f"Product '{self.id}' is missing its name")
        if not isinstance(self.price, Money):
            raise InvalidProductError(f"Product '{self.name}' has no price")
        if not self.is_active:
            raise ValidationError(f"Product '{self.name}' is not available")
        if size is not None and self.sizes and size not in self.sizes:
            raise ValidationError(
                f"Size '{size}' is not offered for '{self.name}' "
                f"(available: {', '.join(self.sizes)})"
            )
        if color is not None and self.colors and color not in self.colors:
            raise ValidationError(
                f"Color '{color}' is not offered for '{self.name}' "
                f"(available: {', '.join(self.colors)})"
            )
