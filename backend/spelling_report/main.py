import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .errors import ConfigurationError, GenerationError, ValidationError
from .logging_utils import configure_logging
from .settings import get_settings
from .routers import health, report

INTERNAL_ERROR_MESSAGE = "An internal error occurred while generating the report."

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Spelling Report API")

app.add_middleware(
	CORSMiddleware,
	allow_origins=settings.cors_origins,
	allow_methods=["*"],
	allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(report.router)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
	logger.info("Rejected %s: %s", request.url.path, exc.message)
	body = {"error": exc.message}
	if exc.details:
		body["details"] = exc.details
	return JSONResponse(status_code=400, content=body)


@app.exception_handler(ConfigurationError)
@app.exception_handler(GenerationError)
async def report_error_handler(request: Request, exc: Exception):
	logger.error("Error generating report: %s", exc)
	return JSONResponse(
		status_code=500,
		content={"error": INTERNAL_ERROR_MESSAGE, "details": str(exc)},
	)


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
	logger.exception("Unexpected error handling %s", request.url.path)
	return JSONResponse(
		status_code=500,
		content={"error": INTERNAL_ERROR_MESSAGE, "details": str(exc) or exc.__class__.__name__},
	)


def run() -> None:
	import uvicorn

	uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
