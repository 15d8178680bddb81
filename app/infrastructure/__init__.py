"""Infrastructure modules for the translation toolkit.

Centralized infrastructure components:
- configuration: Settings management (settings, I18nSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Module translation splitting and loading
"""

# Configuration
from infrastructure.configuration import settings

# Logging
from infrastructure.logging import configure_logging, get_module_logger

__all__ = [
    # Configuration
    "settings",
    # Logging
    "configure_logging",
    "get_module_logger",
]
