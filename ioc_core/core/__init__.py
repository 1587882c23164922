# Container configuration and logging setup

from ioc_core.core.config import Settings, get_settings
from ioc_core.core.logging import build_processors, configure_logging

__all__ = [
    "Settings",
    "get_settings",
    "build_processors",
    "configure_logging",
]
