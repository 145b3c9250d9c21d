"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List

from ..exceptions import ValidationError


@dataclass
class OrderItem:
    """Individual line item within an order.

    The item id is only unique inside its parent order.
    """
    id: str
    name: str
    price: Decimal
    product_id: str
    quantity: int

    def __post_init__(self):
        # Convert to Decimal if needed
        if not isinstance(self.price, Decimal):
            self.price = Decimal(str(self.price))
        self.validate()

    def validate(self) -> None:
        if not self.id:
            raise ValidationError("Item id is required")
        if not self.name:
            raise ValidationError("Item name is required")
        if not self.product_id:
            raise ValidationError("Item product id is required")
        if self.price < 0:
            raise ValidationError(f"Item price must be >= 0, got: {self.price}")
        if not isinstance(self.quantity, int) or self.quantity < 0:
            raise ValidationError(f"Item quantity must be an integer >= 0, got: {self.quantity}")

    def total(self) -> Decimal:
        """Line total: price times quantity."""
        return self.price * self.quantity


@dataclass
class Order:
    """
    Order aggregate root.

    Owns an ordered list of items; the order total is always derived
    from them and never stored on the aggregate.
    """
    id: str
    customer_id: str
    items: List[OrderItem] = field(default_factory=list)

    def __post_init__(self):
        self.items = list(self.items)
        self.validate()

    def validate(self) -> None:
        """
        Check aggregate invariants.

        Raises:
            ValidationError: If ids are missing, there are no items,
                or two items share an id
        """
        if not self.id:
            raise ValidationError("Order id is required")
        if not self.customer_id:
            raise ValidationError("Customer id is required")
        if not self.items:
            raise ValidationError("Order must have at least one item")

        seen = set()
        for item in self.items:
            if item.id in seen:
                raise ValidationError(
                    f"Duplicate item id {item.id} in order {self.id}"
                )
            seen.add(item.id)

    def change_items(self, items: List[OrderItem]) -> None:
        """Replace the item list and re-check invariants."""
        previous = self.items
        self.items = list(items)
        try:
            self.validate()
        except ValidationError:
            self.items = previous
            raise

    def total(self) -> Decimal:
        """Sum of price * quantity over all items."""
        return sum((item.total() for item in self.items), Decimal("0"))
