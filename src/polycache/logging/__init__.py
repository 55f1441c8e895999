"""polycache logging: logging port and structlog adapter."""

from polycache.logging.port import LoggingPort
from polycache.logging.structlog_adapter import StructlogAdapter

__all__ = ["LoggingPort", "StructlogAdapter"]
