"""Domain value objects."""

from .address import Address

__all__ = ["Address"]
