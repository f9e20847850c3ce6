"""Cart aggregate.

The Cart is an aggregate root that owns its line items.
All business invariants are enforced here; totals are always derived
from the current lines so they can never go stale.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money, Quantity

logger = logging.getLogger(__name__)

NO_SIZE = "no-size"
NO_COLOR = "no-color"


def line_key(product_id: str, size: str | None = None, color: str | None = None) -> str:
    """Composite line id, e.g. ``"42-M-negro"`` or ``"42-no-size-no-color"``."""
    return f"{product_id}-{size or NO_SIZE}-{color or NO_COLOR}"


@dataclass(frozen=True)
class CartItem:
    """One distinct product + size + color entry in the cart.

    ``unit_price`` is the product price at the moment the line was
    created; later catalog price changes never reach it.
    """

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money  # locked when the line is created
    size: str | None = None
    color: str | None = None
    product_slug: str = ""

    @property
    def id(self) -> str:
        return line_key(self.product_id, self.size, self.color)

    @property
    def identity(self) -> tuple[str, str | None, str | None]:
        return (self.product_id, self.size, self.color)

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


class Cart:
    """Aggregate root for the shopper's pending order.

    Lines keep insertion order. ``items`` hands out an immutable snapshot;
    the only way to change a line is through the methods below.
    """

    def __init__(self, items: list[CartItem] | None = None) -> None:
        self._items: list[CartItem] = list(items or [])

    # --- Mutations ------------------------------------------------------------

    def add_item(
        self,
        product: Product,
        size: str | None = None,
        color: str | None = None,
        quantity: int = 1,
    ) -> CartItem:
        """Add *quantity* units of *product*, merging into an existing line.

        Raises ``ValidationError`` (or ``InvalidProductError``) and leaves
        the cart untouched when the product or quantity is not acceptable.
        """
        size = size or None
        color = color or None
        qty = Quantity(quantity)
        product.ensure_orderable(size, color)

        identity = (product.id, size, color)
        for index, item in enumerate(self._items):
            if item.identity == identity:
                merged = replace(item, quantity=item.quantity + qty)
                self._items[index] = merged
                logger.debug("Merged %s into line %s (qty=%s)", qty, merged.id, merged.quantity)
                return merged

        new_item = CartItem(
            product_id=product.id,
            product_name=product.name,
            product_slug=product.slug,
            quantity=qty,
            unit_price=product.price,  # <-- price snapshot
            size=size,
            color=color,
        )
        self._items.append(new_item)
        logger.debug("Added line %s (qty=%s)", new_item.id, qty)
        return new_item

    def remove_item(self, line_id: str) -> None:
        """Remove the line with *line_id*; unknown ids are ignored."""
        self._items = [item for item in self._items if item.id != line_id]

    def update_quantity(self, line_id: str, quantity: int) -> CartItem | None:
        """Set a line's quantity.

        ``quantity <= 0`` removes the line and returns ``None``. Unknown
        line ids are ignored.
        """
        if not isinstance(quantity, int) or isinstance(quantity, bool):
            raise ValidationError(
                f"Quantity must be an integer, got {type(quantity).__name__}"
            )
        if quantity <= 0:
            self.remove_item(line_id)
            return None

        for index, item in enumerate(self._items):
            if item.id == line_id:
                updated = replace(item, quantity=Quantity(quantity))
                self._items[index] = updated
                return updated
        return None

    def clear(self) -> None:
        self._items = []

    # --- Queries --------------------------------------------------------------

    @property
    def items(self) -> tuple[CartItem, ...]:
        return tuple(self._items)

    def get_item(self, line_id: str) -> CartItem | None:
        for item in self._items:
            if item.id == line_id:
                return item
        return None

    @property
    def is_empty(self) -> bool:
        return not self._items

    @property
    def total(self) -> Money:
        result = Money.zero()
        for item in self._items:
            result = result + item.line_total
        return result

    @property
    def item_count(self) -> int:
        """Sum of quantities over all lines (the badge number)."""
        return sum(item.quantity.value for item in self._items)

    def get_total(self) -> Money:
        return self.total

    def get_item_count(self) -> int:
        return self.item_count

    def __len__(self) -> int:
        return len(self._items)
