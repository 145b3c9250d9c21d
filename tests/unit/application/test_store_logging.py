"""Store modules must not read settings when they are imported."""
import importlib
import logging

import pytest

from core.application.services import customer_store, order_store, product_store
from core.infrastructure.database import config
from core.settings import DatabaseSettings, get_app_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_app_settings.cache_clear()
    yield
    get_app_settings.cache_clear()


@pytest.mark.parametrize("module", [order_store, customer_store, product_store])
def test_import_does_not_load_settings(monkeypatch, module):
    # Would fail validation if settings were built during import
    monkeypatch.setenv("DB_POOL_SIZE", "0")

    reloaded = importlib.reload(module)

    assert get_app_settings.cache_info().currsize == 0
    assert reloaded.logger.name == module.__name__
    assert reloaded.logger.handlers == []


@pytest.mark.asyncio
async def test_init_database_applies_log_level_at_bootstrap(monkeypatch):
    package_logger = logging.getLogger("core")
    monkeypatch.setattr(package_logger, "handlers", [])
    monkeypatch.setattr(package_logger, "level", logging.NOTSET)
    monkeypatch.setenv("LOG_LEVEL", "warning")

    engine = config.create_engine(DatabaseSettings(url="sqlite+aiosqlite:///:memory:"))
    try:
        await config.init_database(engine)
    finally:
        await engine.dispose()

    assert package_logger.level == logging.WARNING
    assert len(package_logger.handlers) == 1
    assert logging.getLogger(order_store.__name__).getEffectiveLevel() == logging.WARNING
