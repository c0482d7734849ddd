"""Logging configuration helpers."""

import logging
from typing import Optional


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO", name: Optional[str] = None) -> logging.Logger:
	"""Attach a single stream handler to the service logger and set its level."""
	logger = logging.getLogger(name or "spelling_report")
	if not logger.handlers:
		handler = logging.StreamHandler()
		handler.setFormatter(logging.Formatter(LOG_FORMAT))
		logger.addHandler(handler)
	logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
	return logger
