"""Shared utility functions.

This subpackage provides common utility functions used across
the application with no dependencies on other subpackages.

Key modules:
    - files: Timestamped backups and tee writes
    - logging: Logging configuration
    - protocols: Protocol definitions for dependency injection
"""

from .files import backup_file, backup_path, tee_to_file
from .logging import configure_logging, get_logger
from .protocols import ChatClientProtocol, FrontMatterDecoder

__all__ = [
    # files
    "backup_file",
    "backup_path",
    "tee_to_file",
    # logging
    "configure_logging",
    "get_logger",
    # protocols
    "ChatClientProtocol",
    "FrontMatterDecoder",
]
