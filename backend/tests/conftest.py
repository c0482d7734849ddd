"""Pytest configuration and fixtures."""
from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from spelling_report.main import app
from spelling_report.routers.report import get_generator
from spelling_report.settings import Settings, get_settings


class FakeGenerator:
	"""Stands in for the Gemini client: replays canned replies and records prompts."""

	def __init__(self, replies: Optional[List] = None) -> None:
		self.replies = list(replies or ["- analysis", "<p>report</p>"])
		self.prompts: List[str] = []

	async def generate(self, prompt: str) -> str:
		self.prompts.append(prompt)
		reply = self.replies[min(len(self.prompts), len(self.replies)) - 1]
		if isinstance(reply, Exception):
			raise reply
		return reply


@pytest.fixture
def alex_payload() -> Dict:
	return {
		"studentName": "Alex",
		"grade": 3,
		"score": 7,
		"totalItems": 10,
		"incorrectWords": [{"correct": "friend", "attempt": "freind"}],
	}


@pytest.fixture
def test_settings() -> Settings:
	return Settings(_env_file=None, GEMINI_API_KEY="test-key", REPORT_STAGE_TIMEOUT=5)


@pytest.fixture
def fake_generator() -> FakeGenerator:
	return FakeGenerator(["- vowel swap pattern", "<p>Great job, Alex!</p><ul><li>Practice 'friend'</li></ul>"])


@pytest.fixture
def client(test_settings, fake_generator):
	"""Test client whose generation capability is the fake generator."""
	app.dependency_overrides[get_settings] = lambda: test_settings
	app.dependency_overrides[get_generator] = lambda: fake_generator
	try:
		yield TestClient(app)
	finally:
		app.dependency_overrides.clear()
