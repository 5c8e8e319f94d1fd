"""
Gemini (Google) vision classifier.
Calls the generateContent REST endpoint with the fixed system instruction and
one inline image. Requires GEMINI_API_KEY.

No SDK needed, plain httpx like the other HTTP adapters.
"""
import httpx

from sightmint.adapters.classifier.base import ClassifierAdapter, SYSTEM_INSTRUCTION, USER_PROMPT
from sightmint.orchestrator.contracts import CapturedImage
from sightmint.orchestrator.errors import ClassificationServiceError

GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
GEMINI_MODEL = "gemini-1.5-flash"


class GeminiClassifier(ClassifierAdapter):
    def __init__(self, status_store, api_key: str | None, model: str = GEMINI_MODEL,
                 client: httpx.Client | None = None, timeout: float = 30.0):
        self.status = status_store
        self._api_key = api_key
        self.model = model
        self._http = client or httpx.Client(timeout=timeout)
        if self._api_key:
            self.status.log(f"gemini_classifier: ready (model={self.model})")
        else:
            self.status.log("gemini_classifier: GEMINI_API_KEY not set")

    @property
    def url(self) -> str:
        return f"{GEMINI_API_BASE}/models/{self.model}:generateContent"

    def classify(self, image: CapturedImage) -> str:
        if not self._api_key:
            raise ClassificationServiceError("GEMINI_API_KEY not set")

        payload = {
            "system_instruction": {"parts": [{"text": SYSTEM_INSTRUCTION}]},
            "contents": [
                {
                    "role": "user",
                    "parts": [
                        {"text": USER_PROMPT},
                        {"inline_data": {"mime_type": image.mime_type, "data": image.b64()}},
                    ],
                }
            ],
        }
        headers = {"x-goog-api-key": self._api_key, "Content-Type": "application/json"}

        self.status.log(f"gemini_classifier: POST {self.model}:generateContent ({len(image.data)} bytes)")
        try:
            resp = self._http.post(self.url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            self.status.log(f"gemini_classifier: transport error: {e}")
            raise ClassificationServiceError(str(e) or type(e).__name__) from e

        if not resp.is_success:
            message = _error_message(resp)
            self.status.log(f"gemini_classifier: HTTP {resp.status_code}: {message}")
            raise ClassificationServiceError(f"HTTP {resp.status_code}: {message}")

        try:
            parts = resp.json()["candidates"][0]["content"]["parts"]
            text = "".join(p.get("text", "") for p in parts)
        except (ValueError, KeyError, IndexError, TypeError) as e:
            self.status.log(f"gemini_classifier: unexpected response {resp.text[:300]}")
            raise ClassificationServiceError("unexpected response from classifier") from e

        self.status.log(f"gemini_classifier: raw={text.strip()!r}")
        return text


def _error_message(resp: httpx.Response) -> str:
    try:
        return resp.json()["error"]["message"]
    except (ValueError, KeyError, TypeError):
        return resp.text[:300] or resp.reason_phrase
