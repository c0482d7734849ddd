from __future__ import annotations
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt
from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationError

MISSING_FIELDS_MESSAGE = "Missing required fields in request body."
INVALID_FIELDS_MESSAGE = "Invalid fields in request body."


class IncorrectWord(BaseModel):
	correct: str
	attempt: str


class ReportRequest(BaseModel):
	model_config = ConfigDict(populate_by_name=True)

	student_name: str = Field(validation_alias="studentName", serialization_alias="studentName")
	grade: Union[StrictInt, float, str]
	score: int = Field(ge=0)
	total_items: int = Field(ge=0, validation_alias="totalItems", serialization_alias="totalItems")
	incorrect_words: List[IncorrectWord] = Field(
		default_factory=list, validation_alias="incorrectWords", serialization_alias="incorrectWords"
	)

	@classmethod
	def from_payload(cls, payload: Any) -> "ReportRequest":
		"""Validate a decoded JSON body the way the web client expects.

		``studentName``, ``grade`` and ``totalItems`` must be truthy, ``score`` only has
		to be present (0 is a valid score) and ``incorrectWords`` must not be null; an
		empty list is fine.
		"""
		if not isinstance(payload, dict):
			raise ValidationError(MISSING_FIELDS_MESSAGE)
		if (
			not payload.get("studentName")
			or not _present(payload.get("grade"))
			or payload.get("score") is None
			or not _present(payload.get("totalItems"))
			or payload.get("incorrectWords") is None
		):
			raise ValidationError(MISSING_FIELDS_MESSAGE)
		try:
			return cls.model_validate(payload)
		except PydanticValidationError as e:
			raise ValidationError(INVALID_FIELDS_MESSAGE, details=_summarise(e)) from e


class ReportResponse(BaseModel):
	report: str


class ErrorResponse(BaseModel):
	error: str
	details: Optional[str] = None


def _present(value: Any) -> bool:
	# Mirrors JavaScript truthiness for the scalar fields: 0, "" and null are missing
	if isinstance(value, bool):
		return value
	return value not in (None, "", 0)


def _summarise(err: PydanticValidationError) -> str:
	parts: List[str] = []
	for item in err.errors():
		loc = ".".join(str(p) for p in item.get("loc", ()))
		parts.append(f"{loc}: {item.get('msg')}" if loc else str(item.get("msg")))
	return "; ".join(parts)
