from .config import Settings, get_settings
from .database import Base, build_engine, build_session_factory, init_database
from .error_handlers import register_exception_handlers
from .logging_config import configure_logging

__all__ = [
    "Base",
    "Settings",
    "build_engine",
    "build_session_factory",
    "configure_logging",
    "get_settings",
    "init_database",
    "register_exception_handlers",
]
