from pydantic import field_validator

from core.settings.base import OrderStoreBaseSettings


class LoggingSettings(OrderStoreBaseSettings):
    """
    Logging settings.
    Loaded automatically from .env with prefix LOG_*
    """

    level: str = "INFO"
    format: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    model_config = {
        **OrderStoreBaseSettings.model_config,
        "env_prefix": "LOG_",
    }

    @field_validator("level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level
