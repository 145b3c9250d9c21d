# Settings sections
from .database import DatabaseSettings
from .logging import LoggingSettings

__all__ = ["DatabaseSettings", "LoggingSettings"]
