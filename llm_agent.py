import json
import logging
import re
from typing import Dict, Optional
from urllib.parse import quote

import requests
from pydantic import ValidationError

from exceptions import DecodeError, MissingCredentialError, ProtocolError, TransportError
from models import AnalysisResult

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-flash-latest"

ANALYZE_PROMPT = """You are a semantic resume analyzer. Analyze the match between this resume and job description.

Resume:
{resume_text}

Job Description:
{job_description}

Output strictly valid JSON matching this schema:
{
  "overallScore": number (0-100),
  "skillsMatch": number (0-100),
  "experienceMatch": number (0-100),
  "qualificationsMatch": number (0-100),
  "strengths": string[],
  "gaps": string[],
  "recommendation": string
}"""

PLACEHOLDER_RE = re.compile(r"\{(resume_text|job_description)\}")


def build_prompt(resume_text: str, job_description: str) -> str:
    # Single pass so placeholder text inside the inputs is left untouched
    values = {"resume_text": resume_text, "job_description": job_description}
    return PLACEHOLDER_RE.sub(lambda m: values[m.group(1)], ANALYZE_PROMPT)


def build_request_body(prompt: str) -> Dict:
    return {
        "contents": [{
            "parts": [{"text": prompt}]
        }],
        "generationConfig": {
            "response_mime_type": "application/json"
        }
    }


def extract_candidate_text(data: Dict) -> str:
    """Pull ``candidates[0].content.parts[0].text`` out of a generateContent response."""
    candidates = data.get("candidates") if isinstance(data, dict) else None
    if not candidates:
        raise ProtocolError("No response from API")

    try:
        text = candidates[0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        raise ProtocolError(f"Malformed candidate in API response: {e!r}") from e

    if not isinstance(text, str):
        raise ProtocolError("Malformed candidate in API response: text is not a string")
    return text


def parse_analysis(text: str) -> AnalysisResult:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(str(e)) from e

    try:
        return AnalysisResult.model_validate(payload)
    except ValidationError as e:
        raise DecodeError(f"Response does not match the analysis schema: {e}") from e


class GeminiMatchAgent:
    def __init__(self, api_key: str, model_config: Optional[Dict] = None):
        if not api_key:
            raise MissingCredentialError("API key not found.")
        model_config = model_config or {}
        self.api_key = api_key
        self.base_url = (model_config.get("base_url") or DEFAULT_BASE_URL).rstrip("/")
        self.model_name = model_config.get("model") or DEFAULT_MODEL
        self.timeout = model_config.get("request_timeout")

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model_name}:generateContent"

    def _redact(self, text: str) -> str:
        for secret in {self.api_key, quote(self.api_key, safe="")}:
            text = text.replace(secret, "***")
        return text

    def analyze_match(self, resume_text: str, job_description: str) -> AnalysisResult:
        """Send one generateContent request and decode the score it returns."""
        body = build_request_body(build_prompt(resume_text, job_description))
        logger.info(
            "Requesting match analysis from %s (resume=%d chars, jd=%d chars)",
            self.model_name, len(resume_text), len(job_description),
        )

        try:
            response = requests.post(
                self.endpoint,
                params={"key": self.api_key},
                headers={"Content-Type": "application/json"},
                json=body,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            # The key travels in the query string, which requests echoes into its errors
            raise TransportError(f"Request to API failed: {self._redact(str(e))}") from None

        if not response.ok:
            raise TransportError(
                f"API returned {response.status_code}: {response.text}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ProtocolError(f"API response is not JSON: {e}") from e

        result = parse_analysis(extract_candidate_text(data))
        logger.info("Match analysis received, overall score %d", result.overall_score)
        return result
