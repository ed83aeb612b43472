"""Core utilities: errors and logging."""

from aligo_sms.core.exceptions import AligoSMSError, ConfigError
from aligo_sms.core.log import get_logger, setup_logging

__all__ = [
    "AligoSMSError",
    "ConfigError",
    "get_logger",
    "setup_logging",
]
