from __future__ import annotations
import logging
from typing import AsyncIterator

from fastapi import APIRouter, Depends, Request

from ..errors import ValidationError
from ..gemini_client import GeminiClient
from ..pipeline import ReportPipeline, TextGenerator
from ..schemas import MISSING_FIELDS_MESSAGE, ErrorResponse, ReportRequest, ReportResponse
from ..settings import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["report"])


async def get_generator(settings: Settings = Depends(get_settings)) -> AsyncIterator[TextGenerator]:
	# Raises ConfigurationError before any stage runs when the key is absent
	client = GeminiClient(settings)
	try:
		yield client
	finally:
		await client.aclose()


def get_pipeline(
	generator: TextGenerator = Depends(get_generator),
	settings: Settings = Depends(get_settings),
) -> ReportPipeline:
	return ReportPipeline(generator, stage_timeout=settings.stage_timeout)


@router.post(
	"/generate-report",
	response_model=ReportResponse,
	responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_report(request: Request, pipeline: ReportPipeline = Depends(get_pipeline)):
	logger.info("Received request to /api/generate-report")
	try:
		payload = await request.json()
	except ValueError:
		raise ValidationError(MISSING_FIELDS_MESSAGE)
	report_request = ReportRequest.from_payload(payload)
	report = await pipeline.run(report_request)
	logger.info("Report generated (%d chars)", len(report))
	return ReportResponse(report=report)
