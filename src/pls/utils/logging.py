"""
Logging configuration module.

Provides centralized logging setup for the application with
configurable log levels and consistent formatting.
"""

from __future__ import annotations

import logging
import re

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# OpenAI-style secret keys (sk-..., sk-proj-...) and bearer tokens
_SECRET_RE = re.compile(r"\bsk-[A-Za-z0-9_-]{8,}")
_BEARER_RE = re.compile(r"(Bearer\s+)[A-Za-z0-9._~+/=-]+", re.IGNORECASE)


def sanitize_text(text: str) -> str:
	"""Mask API keys and bearer tokens in text.

	Parameters:
		text: Raw text that may contain credentials.

	Returns:
		Text with credentials replaced by ``***``.
	"""
	text = _SECRET_RE.sub("sk-***", text)
	return _BEARER_RE.sub(r"\1***", text)


class SecretSanitizingFilter(logging.Filter):
	"""Logging filter that redacts credentials from log records.

	Applied to the root logger so every handler benefits from
	masking without call-site awareness.
	"""

	def filter(self, record: logging.LogRecord) -> bool:
		"""Sanitize the log record message and args."""
		if isinstance(record.msg, str):
			record.msg = sanitize_text(record.msg)
		if record.args:
			if isinstance(record.args, dict):
				record.args = {
				    k: sanitize_text(v) if isinstance(v, str) else v
				    for k, v in record.args.items()
				}
			elif isinstance(record.args, tuple):
				record.args = tuple(
				    sanitize_text(a) if isinstance(a, str) else a
				    for a in record.args)
		return True


def configure_logging(level: str = "warning") -> None:
	"""
	Configure basic logging with level, format, and secret sanitization.

	Parameters:
		level: Log level string (e.g., "info", "debug", "warning").
	"""
	lvl = logging.getLevelName(level.upper())
	if not isinstance(lvl, int):
		lvl = logging.WARNING
	logging.basicConfig(level=lvl, format=LOG_FORMAT)
	root = logging.getLogger()
	root.setLevel(lvl)
	# Records from child loggers skip root filters, so handlers get one too
	for target in (root, *root.handlers):
		if not any(
		    isinstance(f, SecretSanitizingFilter) for f in target.filters):
			target.addFilter(SecretSanitizingFilter())


def get_logger(name: str) -> logging.Logger:
	"""
	Get a logger for the specified module.

	Parameters:
		name: The logger name, typically __name__.

	Returns:
		Configured logger instance.
	"""
	return logging.getLogger(name)


__all__ = [
    "configure_logging",
    "get_logger",
    "sanitize_text",
    "SecretSanitizingFilter",
]
