"""Customer aggregate."""

from dataclasses import dataclass
from typing import Optional

from ..exceptions import ValidationError
from ..value_objects.address import Address


@dataclass
class Customer:
    """
    Customer referenced by orders.

    A customer can only be activated once it has an address.
    """
    id: str
    name: str
    address: Optional[Address] = None
    active: bool = False
    reward_points: int = 0

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        if not self.id:
            raise ValidationError("Customer id is required")
        if not self.name:
            raise ValidationError("Customer name is required")
        if self.reward_points < 0:
            raise ValidationError("Reward points must be >= 0")

    def change_name(self, name: str) -> None:
        if not name:
            raise ValidationError("Customer name is required")
        self.name = name

    def change_address(self, address: Address) -> None:
        self.address = address

    def activate(self) -> None:
        """Business rule: an active customer must have an address."""
        if self.address is None:
            raise ValidationError("Address is mandatory to activate a customer")
        self.active = True

    def deactivate(self) -> None:
        self.active = False

    def add_reward_points(self, points: int) -> None:
        if points < 0:
            raise ValidationError(f"Reward points to add must be >= 0, got: {points}")
        self.reward_points += points
