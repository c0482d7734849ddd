from __future__ import annotations
from typing import Optional


class ReportError(Exception):
	"""Base class for failures while producing a spelling report."""


class ConfigurationError(ReportError):
	"""The provider credential (or other required setting) is missing."""


class ValidationError(ReportError):
	"""The request body is missing required fields or carries malformed ones."""

	def __init__(self, message: str, details: Optional[str] = None) -> None:
		super().__init__(message)
		self.message = message
		self.details = details


class GenerationError(ReportError):
	"""A call to the text-generation service failed, timed out or returned garbage."""
