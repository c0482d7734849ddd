from __future__ import annotations
import asyncio
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Union

from .errors import GenerationError
from .prompts import build_analyst_prompt, build_reporter_prompt
from .schemas import IncorrectWord, ReportRequest

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
	async def generate(self, prompt: str) -> str: ...


@dataclass
class PipelineState:
	"""Request-local accumulator threaded through the analyst and reporter stages."""

	student_name: str
	grade: Union[int, float, str]
	score: int
	total_items: int
	incorrect_words: List[IncorrectWord] = field(default_factory=list)
	analysis: str = ""
	report: str = ""

	@classmethod
	def from_request(cls, request: ReportRequest) -> "PipelineState":
		return cls(
			student_name=request.student_name,
			grade=request.grade,
			score=request.score,
			total_items=request.total_items,
			incorrect_words=list(request.incorrect_words),
		)


class ReportPipeline:
	"""Analyst stage followed by reporter stage; the reporter sees the analyst's text verbatim."""

	def __init__(self, generator: TextGenerator, *, stage_timeout: Optional[float] = None) -> None:
		self.generator = generator
		self.stage_timeout = stage_timeout

	async def run(self, request: ReportRequest) -> str:
		_check_required(request)
		state = PipelineState.from_request(request)
		state.analysis = await self._run_stage("analyst", build_analyst_prompt(state))
		state.report = await self._run_stage("reporter", build_reporter_prompt(state))
		return state.report

	async def _run_stage(self, name: str, prompt: str) -> str:
		logger.info("Running %s stage", name)
		try:
			if self.stage_timeout is None:
				text = await self.generator.generate(prompt)
			else:
				text = await asyncio.wait_for(self.generator.generate(prompt), timeout=self.stage_timeout)
		except GenerationError:
			raise
		except asyncio.TimeoutError as e:
			if self.stage_timeout is not None:
				raise GenerationError(f"{name} stage timed out after {self.stage_timeout:g}s") from e
			raise GenerationError(str(e) or e.__class__.__name__) from e
		except Exception as e:
			raise GenerationError(str(e) or e.__class__.__name__) from e
		logger.info("%s stage complete (%d chars)", name.capitalize(), len(text or ""))
		return text


def _check_required(request: ReportRequest) -> None:
	missing = [
		name
		for name, ok in (
			("studentName", bool(request.student_name)),
			("grade", request.grade not in (None, "", 0)),
			("score", request.score is not None),
			("totalItems", bool(request.total_items)),
			("incorrectWords", request.incorrect_words is not None),
		)
		if not ok
	]
	if missing:
		raise GenerationError(f"Missing required fields: {', '.join(missing)}")
