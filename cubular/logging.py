import logging
import sys
from typing import Optional

import structlog

from cubular.config import settings

# Processor chain applied to every cubular logger. Wrapped per logger so the
# global structlog configuration of a host application is left alone.
PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
    structlog.processors.JSONRenderer()
]

# Silent until the host opts in
logging.getLogger("cubular").addHandler(logging.NullHandler())


def configure_logging(level: Optional[str] = None):
    """Send cubular log records to stdout (console only, no file logging)"""
    level = (level or settings.log_level).upper()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))

    package_logger = logging.getLogger("cubular")
    package_logger.handlers = [handler]
    package_logger.setLevel(getattr(logging, level))


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance"""
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )
