"""Product aggregate."""

from dataclasses import dataclass
from decimal import Decimal

from ..exceptions import ValidationError


@dataclass
class Product:
    """Catalog product referenced by order items."""
    id: str
    name: str
    price: Decimal

    def __post_init__(self):
        if not isinstance(self.price, Decimal):
            self.price = Decimal(str(self.price))
        self.validate()

    def validate(self) -> None:
        if not self.id:
            raise ValidationError("Product id is required")
        if not self.name:
            raise ValidationError("Product name is required")
        if self.price < 0:
            raise ValidationError(f"Product price must be >= 0, got: {self.price}")

    def change_name(self, name: str) -> None:
        if not name:
            raise ValidationError("Product name is required")
        self.name = name

    def change_price(self, price: Decimal) -> None:
        price = price if isinstance(price, Decimal) else Decimal(str(price))
        if price < 0:
            raise ValidationError(f"Product price must be >= 0, got: {price}")
        self.price = price
