import base64
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, List

from sightmint.orchestrator.states import PipelineState


def iso_timestamp(dt: datetime) -> str:
    """UTC ISO-8601 with millisecond precision, e.g. 2024-09-26T22:00:54.123Z"""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class CapturedImage:
    data: bytes
    mime_type: str = "image/jpeg"
    captured_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def b64(self) -> str:
        return base64.standard_b64encode(self.data).decode("utf-8")

    def to_data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.b64()}"


@dataclass(frozen=True)
class ClassificationResult:
    species: str               # e.g. "Red Fox" | "Unknown"
    description: str
    is_animal: bool


@dataclass(frozen=True)
class MintAttribute:
    trait_type: str
    value: str


@dataclass(frozen=True)
class MintRequest:
    recipient_address: str     # "<chain>:<address>"
    name: str
    image: str
    description: str
    attributes: List[MintAttribute]

    def to_payload(self) -> dict:
        return {
            "recipient": self.recipient_address,
            "metadata": {
                "name": self.name,
                "image": self.image,
                "description": self.description,
                "attributes": [
                    {"trait_type": a.trait_type, "value": a.value} for a in self.attributes
                ],
            },
        }


@dataclass
class MintResult:
    payload: dict              # provider response, forwarded as-is

    @property
    def explorer_url(self) -> Optional[str]:
        url = self.payload.get("explorerUrl")
        if url:
            return url
        on_chain = self.payload.get("onChain")
        if isinstance(on_chain, dict):
            return on_chain.get("explorerLink")
        return None


@dataclass
class PipelineRun:
    ok: bool
    state: PipelineState
    duration_ms: int
    error_code: Optional[str] = None
    error: Optional[str] = None
    result: Optional[ClassificationResult] = None
    mint_result: Optional[MintResult] = None
