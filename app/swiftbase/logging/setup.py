"""Structlog configuration and logger setup.

Usage:
    from swiftbase.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.warning("missing_translation_key", key=Welcome(), language="fr")

Message keys passed as event values are rendered as their raw identifier,
so ``key=Welcome()`` and ``key="welcome"`` produce the same output.

With ``I18N_DEBUG`` enabled and no explicit level, the log level drops to
DEBUG so per-key discovery and pack mapping events are emitted.

Dependencies:
    - swiftbase.configuration.settings
"""

import inspect
import logging
import sys
from typing import Any, List, MutableMapping, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from swiftbase.configuration import settings


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def render_message_keys(
    _logger: Any, _method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Structlog processor replacing MessageKey values by their identifier."""
    # Imported here: swiftbase.i18n logs through this module.
    from swiftbase.i18n.keys import MessageKey

    for name, value in event_dict.items():
        if isinstance(value, MessageKey):
            event_dict[name] = value.raw()
    return event_dict


def _effective_level(log_level: Optional[str]) -> int:
    if log_level:
        name = log_level
    elif settings.i18n.debug:
        name = "DEBUG"
    else:
        name = settings.LOG_LEVEL
    return getattr(logging, name.upper(), logging.INFO)


def _build_processors(prod_mode: bool) -> List[Processor]:
    processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        render_message_keys,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if prod_mode:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging.

    Args:
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
            Defaults to DEBUG when i18n debug mode is on, else settings.LOG_LEVEL.
        is_production: Optional override for production mode. Defaults to
            settings.is_production. Controls JSON vs console output.

    Returns:
        Configured logger instance
    """
    if _is_test_environment():
        # Nothing is emitted at CRITICAL + 1; the pipeline only has to run.
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                render_message_keys,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(
            format="%(message)s",
            level=logging.CRITICAL + 1,
            force=True,
        )
        return structlog.stdlib.get_logger()

    prod_mode = is_production if is_production is not None else settings.is_production

    structlog.configure(
        processors=_build_processors(prod_mode),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=_effective_level(log_level))

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module.

    Binds ``component`` (last dotted part) and ``module_path`` of the
    calling module.

    Example:
        # In swiftbase/i18n/registry.py
        logger = get_module_logger()
        # context: {"component": "registry", "module_path": "swiftbase.i18n.registry"}
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return logger.bind(component="unknown")

    module_name = module.__name__
    return logger.bind(
        component=module_name.rsplit(".", 1)[-1],
        module_path=module_name,
    )
