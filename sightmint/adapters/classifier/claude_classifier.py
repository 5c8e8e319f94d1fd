"""
Claude vision classifier.

Sends the photo to Claude via the Anthropic Messages API with the same
"Animal: / Description:" instruction the Gemini adapter uses.

Requires ANTHROPIC_API_KEY in environment (.env or system env).
"""
import anthropic

from sightmint.adapters.classifier.base import ClassifierAdapter, SYSTEM_INSTRUCTION, USER_PROMPT
from sightmint.orchestrator.contracts import CapturedImage
from sightmint.orchestrator.errors import ClassificationServiceError

CLAUDE_MODEL = "claude-haiku-4-5-20251001"


class ClaudeClassifier(ClassifierAdapter):
    def __init__(self, status_store, api_key: str | None, model: str = CLAUDE_MODEL,
                 client: anthropic.Anthropic | None = None):
        self.status = status_store
        self.model = model
        self._client = client
        if self._client is None and api_key:
            self._client = anthropic.Anthropic(api_key=api_key)
        if self._client is not None:
            self.status.log(f"claude_classifier: ready ({self.model})")
        else:
            self.status.log("claude_classifier: ANTHROPIC_API_KEY not set")

    def classify(self, image: CapturedImage) -> str:
        if self._client is None:
            raise ClassificationServiceError("ANTHROPIC_API_KEY not set")

        self.status.log(f"claude_classifier: messages.create ({len(image.data)} bytes)")
        try:
            message = self._client.messages.create(
                model=self.model,
                max_tokens=512,
                system=SYSTEM_INSTRUCTION,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {
                                "type": "image",
                                "source": {
                                    "type": "base64",
                                    "media_type": image.mime_type,
                                    "data": image.b64(),
                                },
                            },
                            {"type": "text", "text": USER_PROMPT},
                        ],
                    }
                ],
            )
        except anthropic.APIError as e:
            self.status.log(f"claude_classifier: API error: {e}")
            raise ClassificationServiceError(str(e)) from e

        text = "".join(block.text for block in message.content if getattr(block, "type", None) == "text")
        self.status.log(f"claude_classifier: raw={text.strip()!r}")
        return text
