from .log_config import configure_logging
from .settings import Settings, settings

__all__ = ["Settings", "settings", "configure_logging"]
