from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from ..settings import Settings, get_settings

router = APIRouter(tags=["health"])

HEALTH_MESSAGE = "Spelling App Backend is running!"


@router.get("/", response_class=PlainTextResponse)
def health() -> str:
	return HEALTH_MESSAGE


@router.get("/info")
def info(settings: Settings = Depends(get_settings)):
	return {
		"status": "ok",
		"gemini_configured": bool(settings.gemini_api_key),
		"model": settings.gemini_model,
	}
