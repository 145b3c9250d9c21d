"""
Tests for the Order aggregate.

Validates totals and the invariants enforced at the aggregate boundary.
"""
from decimal import Decimal

import pytest

from core.domain.entities import Order, OrderItem
from core.domain.exceptions import ValidationError


def make_item(item_id="1", price="10.00", quantity=2, **overrides) -> OrderItem:
    fields = dict(id=item_id, name=f"Item {item_id}", price=price, product_id="p1", quantity=quantity)
    fields.update(overrides)
    return OrderItem(**fields)


class TestOrderItem:
    """Test OrderItem value handling."""

    def test_price_is_coerced_to_decimal(self):
        item = make_item(price=12.5)

        assert isinstance(item.price, Decimal)
        assert item.price == Decimal("12.5")

    def test_item_total(self):
        assert make_item(price="3.25", quantity=4).total() == Decimal("13.00")

    def test_zero_quantity_is_allowed(self):
        assert make_item(quantity=0).total() == Decimal("0")

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError):
            make_item(quantity=-1)

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            make_item(price="-0.01")

    @pytest.mark.parametrize("field_name", ["id", "name", "product_id"])
    def test_required_fields(self, field_name):
        with pytest.raises(ValidationError):
            make_item(**{field_name: ""})


class TestOrder:
    """Test Order aggregate invariants."""

    def test_total_sums_price_times_quantity(self):
        order = Order(
            id="o1",
            customer_id="c1",
            items=[make_item("1", "10.00", 2), make_item("2", "2.50", 3)],
        )

        assert order.total() == Decimal("27.50")

    def test_order_requires_items(self):
        with pytest.raises(ValidationError, match="at least one item"):
            Order(id="o1", customer_id="c1", items=[])

    def test_order_requires_ids(self):
        with pytest.raises(ValidationError):
            Order(id="", customer_id="c1", items=[make_item()])
        with pytest.raises(ValidationError):
            Order(id="o1", customer_id="", items=[make_item()])

    def test_duplicate_item_ids_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate item id 1"):
            Order(id="o1", customer_id="c1", items=[make_item("1"), make_item("1")])

    def test_change_items_replaces_list(self):
        order = Order(id="o1", customer_id="c1", items=[make_item("1")])

        order.change_items([make_item("1", "25", 3)])

        assert len(order.items) == 1
        assert order.total() == Decimal("75")

    def test_change_items_keeps_previous_on_invalid_input(self):
        original = [make_item("1")]
        order = Order(id="o1", customer_id="c1", items=original)

        with pytest.raises(ValidationError):
            order.change_items([])

        assert order.items == original

    def test_equality_by_value(self):
        a = Order(id="o1", customer_id="c1", items=[make_item(price="10")])
        b = Order(id="o1", customer_id="c1", items=[make_item(price="10.00")])

        assert a == b

    def test_order_copies_item_list(self):
        items = [make_item("1")]
        order = Order(id="o1", customer_id="c1", items=items)

        items.append(make_item("2"))

        assert len(order.items) == 1
