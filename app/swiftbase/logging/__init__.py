"""Structured logging infrastructure.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module
    - render_message_keys: Processor logging MessageKey values by identifier

Example:
    from swiftbase.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("module_initialized")
"""

from swiftbase.logging.setup import (
    configure_logging,
    get_module_logger,
    render_message_keys,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
    "render_message_keys",
]
