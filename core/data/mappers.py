"""Static mappers for domain entities ↔ database models."""

from core.domain.entities import Customer, Order, OrderItem, Product
from core.domain.value_objects import Address

from .models import CustomerModel, OrderItemModel, OrderModel, ProductModel


class OrderItemMapper:
    """Static mapper for OrderItem ↔ OrderItemModel transformation."""

    @staticmethod
    def to_domain(model: OrderItemModel) -> OrderItem:
        """Convert ORM model to domain entity.

        Args:
            model: OrderItemModel instance

        Returns:
            OrderItem domain entity
        """
        return OrderItem(
            id=model.id,
            name=model.name,
            price=model.price,
            product_id=model.product_id,
            quantity=model.quantity,
        )

    @staticmethod
    def to_persistence(entity: OrderItem, order_id: str, position: int) -> OrderItemModel:
        """Convert domain entity to ORM model.

        Args:
            entity: OrderItem domain entity
            order_id: Parent order id
            position: Index of the item inside the aggregate

        Returns:
            OrderItemModel instance
        """
        return OrderItemModel(
            order_id=order_id,
            id=entity.id,
            name=entity.name,
            price=entity.price,
            quantity=entity.quantity,
            product_id=entity.product_id,
            position=position,
        )

    @staticmethod
    def update_persistence(entity: OrderItem, model: OrderItemModel, position: int) -> OrderItemModel:
        """Copy item fields onto an existing row. The parent order is left alone."""
        model.name = entity.name
        model.price = entity.price
        model.quantity = entity.quantity
        model.product_id = entity.product_id
        model.position = position
        return model


class OrderMapper:
    """Static mapper for Order ↔ OrderModel transformation with nested items."""

    @staticmethod
    def to_domain(model: OrderModel) -> Order:
        """Convert ORM model to domain aggregate (with nested items).

        Args:
            model: OrderModel instance with items loaded

        Returns:
            Order domain aggregate
        """
        items = [OrderItemMapper.to_domain(item_model) for item_model in model.items]

        return Order(id=model.id, customer_id=model.customer_id, items=items)

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert domain aggregate to ORM model (with nested items).

        Args:
            entity: Order domain aggregate

        Returns:
            OrderModel instance
        """
        order_model = OrderModel(
            id=entity.id,
            customer_id=entity.customer_id,
            total=entity.total(),
        )

        order_model.items = [
            OrderItemMapper.to_persistence(item, entity.id, position)
            for position, item in enumerate(entity.items)
        ]

        return order_model


class CustomerMapper:
    """Static mapper for Customer ↔ CustomerModel transformation."""

    @staticmethod
    def to_domain(model: CustomerModel) -> Customer:
        address = None
        if model.street is not None:
            address = Address(
                street=model.street,
                number=model.number,
                zipcode=model.zipcode,
                city=model.city,
            )

        return Customer(
            id=model.id,
            name=model.name,
            address=address,
            active=model.active,
            reward_points=model.reward_points,
        )

    @staticmethod
    def to_persistence(entity: Customer) -> CustomerModel:
        return CustomerMapper.update_persistence(entity, CustomerModel(id=entity.id))

    @staticmethod
    def update_persistence(entity: Customer, model: CustomerModel) -> CustomerModel:
        model.name = entity.name
        model.active = entity.active
        model.reward_points = entity.reward_points

        address = entity.address
        model.street = address.street if address else None
        model.number = address.number if address else None
        model.zipcode = address.zipcode if address else None
        model.city = address.city if address else None

        return model


class ProductMapper:
    """Static mapper for Product ↔ ProductModel transformation."""

    @staticmethod
    def to_domain(model: ProductModel) -> Product:
        return Product(
            id=model.id,
            name=model.name,
            price=model.price,
        )

    @staticmethod
    def to_persistence(entity: Product) -> ProductModel:
        return ProductModel(id=entity.id, name=entity.name, price=entity.price)

    @staticmethod
    def update_persistence(entity: Product, model: ProductModel) -> ProductModel:
        model.name = entity.name
        model.price = entity.price
        return model
