import os
from dataclasses import dataclass

from sightmint.adapters.classifier.claude_classifier import CLAUDE_MODEL
from sightmint.adapters.classifier.gemini_classifier import GEMINI_MODEL
from sightmint.adapters.mint.crossmint_mint import CROSSMINT_API_VERSION, CROSSMINT_ENV
from sightmint.orchestrator.mint_request import CHAIN, PLACEHOLDER_IMAGE_URL


def _flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    # camera: cv2 | mock
    camera_adapter: str = "cv2"
    camera_index: int = 0
    mock_camera_dir: str | None = None

    # classifier: gemini | claude | mock
    classifier_adapter: str = "gemini"
    gemini_api_key: str | None = None
    gemini_model: str = GEMINI_MODEL
    anthropic_api_key: str | None = None
    claude_model: str = CLAUDE_MODEL

    # minting: crossmint (in-process) | http (remote /mint) | mock
    mint_adapter: str = "crossmint"
    mint_service_url: str = "http://127.0.0.1:8000"
    crossmint_api_key: str | None = None
    crossmint_env: str = CROSSMINT_ENV
    crossmint_api_version: str = CROSSMINT_API_VERSION
    crossmint_base_url: str | None = None
    chain: str = CHAIN
    mint_image_url: str = PLACEHOLDER_IMAGE_URL
    mint_use_captured_image: bool = False

    http_timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            camera_adapter=os.getenv("CAMERA_ADAPTER", "cv2").lower(),
            camera_index=int(os.getenv("CAMERA_INDEX", "0")),
            mock_camera_dir=os.getenv("MOCK_CAMERA_DIR") or None,
            classifier_adapter=os.getenv("CLASSIFIER_ADAPTER", "gemini").lower(),
            gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
            gemini_model=os.getenv("GEMINI_MODEL", GEMINI_MODEL),
            anthropic_api_key=os.getenv("ANTHROPIC_API_KEY") or None,
            claude_model=os.getenv("CLAUDE_MODEL", CLAUDE_MODEL),
            mint_adapter=os.getenv("MINT_ADAPTER", "crossmint").lower(),
            mint_service_url=os.getenv("MINT_SERVICE_URL", "http://127.0.0.1:8000"),
            crossmint_api_key=os.getenv("CROSSMINT_API_KEY") or None,
            crossmint_env=os.getenv("CROSSMINT_ENV", CROSSMINT_ENV),
            crossmint_api_version=os.getenv("CROSSMINT_API_VERSION", CROSSMINT_API_VERSION),
            crossmint_base_url=os.getenv("CROSSMINT_BASE_URL") or None,
            chain=os.getenv("MINT_CHAIN", CHAIN),
            mint_image_url=os.getenv("MINT_IMAGE_URL", PLACEHOLDER_IMAGE_URL),
            mint_use_captured_image=_flag("MINT_USE_CAPTURED_IMAGE"),
            http_timeout=float(os.getenv("HTTP_TIMEOUT", "30")),
        )
