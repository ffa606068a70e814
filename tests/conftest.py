from __future__ import annotations

import json

import pytest

import llm_agent as llm_agent_module

VALID_ANALYSIS = {
    "overallScore": 85,
    "skillsMatch": 90,
    "experienceMatch": 80,
    "qualificationsMatch": 75,
    "strengths": ["Strong Python background"],
    "gaps": ["No AWS cloud certification"],
    "recommendation": "Good fit overall.",
}


class FakeResponse:
    def __init__(self, status_code: int = 200, payload=None, text: str | None = None) -> None:
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self):
        if self._payload is None:
            return json.loads(self.text)
        return self._payload


def gemini_payload(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


class RecordingPost:
    """Stands in for ``requests.post`` and keeps every call it receives."""

    def __init__(self, response: FakeResponse) -> None:
        self.response = response
        self.calls: list[dict] = []

    def __call__(self, url, **kwargs):  # type: ignore[no-untyped-def]
        self.calls.append({"url": url, **kwargs})
        return self.response


@pytest.fixture
def fake_post(monkeypatch):
    def _install(response: FakeResponse) -> RecordingPost:
        recorder = RecordingPost(response)
        monkeypatch.setattr(llm_agent_module.requests, "post", recorder)
        return recorder

    return _install


@pytest.fixture
def success_response() -> FakeResponse:
    return FakeResponse(200, gemini_payload(json.dumps(VALID_ANALYSIS)))


@pytest.fixture
def config() -> dict:
    return {
        "gemini": {
            "base_url": "https://example.test/v1beta",
            "model": "gemini-test",
            "api_key_env": "GEMINI_API_KEY",
            "request_timeout": None,
        },
        "logging": {},
    }
