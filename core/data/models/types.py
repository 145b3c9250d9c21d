"""Column types shared by the ORM models."""

from decimal import Decimal

from sqlalchemy import Numeric
from sqlalchemy.types import TypeDecorator


class ExactNumeric(TypeDecorator):
    """
    NUMERIC column that gives back the Decimal that was written.

    No fixed scale, so nothing is rounded. SQLite stores NUMERIC as
    REAL/INTEGER; the float is read as-is and rebuilt from its shortest
    repr, which restores any value with up to 15 significant digits
    (and every float-derived value) exactly. Other backends use their
    native arbitrary-precision NUMERIC.
    """

    impl = Numeric
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "sqlite":
            return dialect.type_descriptor(Numeric(asdecimal=False))
        return dialect.type_descriptor(Numeric(asdecimal=True))

    def process_bind_param(self, value, dialect):
        return value

    def process_result_value(self, value, dialect):
        if value is None or isinstance(value, Decimal):
            return value
        return Decimal(repr(value))
