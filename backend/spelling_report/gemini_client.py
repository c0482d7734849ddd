from __future__ import annotations
import httpx
from typing import Any, Dict, Optional
from .errors import ConfigurationError, GenerationError
from .settings import Settings

class GeminiClient:
	def __init__(
		self,
		settings: Settings,
		*,
		model: Optional[str] = None,
		base_url: Optional[str] = None,
		http_client: Optional[httpx.AsyncClient] = None,
	) -> None:
		self.api_key = settings.gemini_api_key
		if not self.api_key:
			raise ConfigurationError("GEMINI_API_KEY environment variable not set.")
		self.model = model or settings.gemini_model
		self.provider = settings.gemini_provider
		self.temperature = settings.gemini_temperature
		if self.provider == "vertex":
			region = settings.vertex_region
			project = settings.vertex_project or "placeholder-project"
			# Vertex AI Generative REST endpoint (API key via header)
			self.base_url = base_url or (
				f"https://{region}-aiplatform.googleapis.com/v1/projects/{project}/locations/{region}/publishers/google/models/{self.model}:generateContent"
			)
			self._auth_in_query = False
		else:
			# Google AI Studio (Generative Language API)
			self.base_url = base_url or f"https://generativelanguage.googleapis.com/v1beta/models/{self.model}:generateContent"
			self._auth_in_query = True
		self._owns_client = http_client is None
		self._client = http_client or httpx.AsyncClient(timeout=settings.http_timeout_seconds)

	async def generate(self, prompt: str) -> str:
		payload: Dict[str, Any] = {"contents": [{"parts": [{"text": prompt}]}]}
		if self.temperature is not None:
			payload["generationConfig"] = {"temperature": self.temperature}
		return await self._post_payload(payload)

	async def _post_payload(self, payload: Dict[str, Any]) -> str:
		params: Dict[str, Any] = {}
		headers: Dict[str, str] = {}
		if self._auth_in_query:
			params["key"] = self.api_key
		else:
			headers["x-goog-api-key"] = self.api_key
		try:
			r = await self._client.post(self.base_url, params=params, headers=headers, json=payload)
			r.raise_for_status()
		except httpx.HTTPStatusError as http_err:
			raise GenerationError(
				f"Gemini request failed with status {http_err.response.status_code}: {_error_message(http_err.response)}"
			) from http_err
		except httpx.RequestError as net_err:
			raise GenerationError(f"Gemini request failed: {net_err!r}") from net_err
		try:
			data = r.json()
			parts = data["candidates"][0]["content"]["parts"]
			text = "".join(str(p.get("text", "")) for p in parts)
		except (ValueError, KeyError, IndexError, TypeError, AttributeError) as err:
			raise GenerationError(f"Unexpected Gemini response: {r.text}") from err
		return text

	async def aclose(self) -> None:
		if self._owns_client:
			await self._client.aclose()


def _error_message(response: httpx.Response) -> str:
	try:
		return str(response.json()["error"]["message"])
	except (ValueError, KeyError, TypeError):
		return response.text
