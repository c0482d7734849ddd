from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
	gemini_api_key: str | None = Field(default=None, validation_alias="GEMINI_API_KEY")
	# Provider can be "vertex" (Vertex AI Express) or "ai_studio" (Generative Language API)
	gemini_provider: str = Field(default="ai_studio", validation_alias="GEMINI_PROVIDER")
	gemini_model: str = Field(default="gemini-2.0-flash", validation_alias="GEMINI_MODEL")
	gemini_temperature: float | None = Field(default=None, validation_alias="GEMINI_TEMPERATURE")
	# Vertex configuration
	vertex_region: str = Field(default="us-central1", validation_alias="GEMINI_VERTEX_REGION")
	vertex_project: str | None = Field(default=None, validation_alias="GEMINI_VERTEX_PROJECT")

	# Timeouts: the HTTP client bound applies per request, the stage bound wraps a whole pipeline stage
	http_timeout_seconds: float = Field(default=30.0, validation_alias="GEMINI_HTTP_TIMEOUT")
	# <= 0 disables the per-stage bound
	stage_timeout_seconds: float = Field(default=60.0, validation_alias="REPORT_STAGE_TIMEOUT")

	# Comma separated list, "*" allows any origin
	cors_allow_origins: str = Field(default="*", validation_alias="CORS_ALLOW_ORIGINS")

	host: str = Field(default="0.0.0.0", validation_alias="HOST")
	port: int = Field(default=8080, validation_alias="PORT")
	log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

	# pydantic-settings v2 style config
	model_config = SettingsConfigDict(env_file=".env", extra="ignore")

	@property
	def cors_origins(self) -> List[str]:
		return [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]

	@property
	def stage_timeout(self) -> float | None:
		return self.stage_timeout_seconds if self.stage_timeout_seconds > 0 else None


@lru_cache
def get_settings() -> Settings:
	return Settings()
