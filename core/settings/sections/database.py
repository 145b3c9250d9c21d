from pydantic import Field

from core.settings.base import OrderStoreBaseSettings


class DatabaseSettings(OrderStoreBaseSettings):
    """
    Database connection settings.
    Loaded automatically from .env with prefix DB_*
    """

    url: str = "sqlite+aiosqlite:///./orders.db"

    # Connection pool settings (ignored for SQLite)
    pool_size: int = Field(default=10, ge=1)
    max_overflow: int = Field(default=20, ge=0)
    pool_timeout: int = Field(default=30, ge=1)
    pool_recycle: int = 3600  # 1 hour

    # Echo SQL (for debugging)
    echo_sql: bool = False

    # SQLite only enforces FOREIGN KEY constraints when asked to
    sqlite_foreign_keys: bool = True

    model_config = {
        **OrderStoreBaseSettings.model_config,
        "env_prefix": "DB_",
    }

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @property
    def is_memory(self) -> bool:
        return self.is_sqlite and ":memory:" in self.url
